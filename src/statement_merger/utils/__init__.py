"""Utility functions and helpers"""

from .account_resolver import resolve_account
from .error_handler import (
    ErrorHandler,
    ErrorCategory,
    ErrorSeverity,
    StatementMergerError,
    MalformedRecordError,
    ConfigurationError,
    handle_file_error,
)
from .file_scanner import FileScanner, read_source_file
from .csv_writer import CSVExporter
from .config_manager import ConfigManager
from .merge_engine import MergeEngine, merge_transactions

__all__ = [
    'resolve_account',
    'ErrorHandler',
    'ErrorCategory',
    'ErrorSeverity',
    'StatementMergerError',
    'MalformedRecordError',
    'ConfigurationError',
    'handle_file_error',
    'FileScanner',
    'read_source_file',
    'CSVExporter',
    'ConfigManager',
    'MergeEngine',
    'merge_transactions',
]
