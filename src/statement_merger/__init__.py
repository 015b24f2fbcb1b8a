"""Merge bank statement CSV exports into a single ordered CSV file."""

__version__ = "0.1.0"
