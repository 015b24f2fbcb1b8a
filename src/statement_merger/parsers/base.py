"""Abstract parser interface and field normalization helpers."""

import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..models.core import Transaction, MergerConfig


# Amount columns probed in priority order; the source places the amount in
# one of these depending on transaction subtype.
AMOUNT_COLUMNS = (6, 5)

_INTERIOR_WHITESPACE = re.compile(r'\s{2,}')


class FileParser(ABC):
    """Abstract base class for statement file parsers"""

    def __init__(self, config: MergerConfig):
        self.config = config

    @abstractmethod
    def parse_content(self, content: str, filename: Optional[str] = None) -> List[Transaction]:
        """Parse raw file text and return list of transactions"""
        pass

    @abstractmethod
    def get_supported_extensions(self) -> List[str]:
        """Return list of supported file extensions"""
        pass


def clean_description(description: str) -> str:
    """Strip trailing whitespace and collapse interior whitespace runs.

    Single interior spaces are kept as-is and leading whitespace is not
    stripped on its own; a leading run of two or more characters collapses
    to one space like any other run.

    Examples:
        >>> clean_description("Grocery   Store   ")
        'Grocery Store'
        >>> clean_description("ATM\\t\\tWITHDRAWAL")
        'ATM WITHDRAWAL'
    """
    if not description:
        return ""
    return _INTERIOR_WHITESPACE.sub(' ', description.rstrip())


def clean_amount(amount: str) -> str:
    """Trim surrounding whitespace, keeping sign and separators verbatim"""
    if not amount:
        return ""
    return amount.strip()


def resolve_amount(fields: Sequence[str]) -> str:
    """Pick the amount text from a split record line.

    Precedence:
    1. field[6] when present and non-empty
    2. field[5] when present and non-empty
    3. empty string

    Emptiness is decided on the raw field, so a whitespace-only field[6]
    still wins and trims to "".

    Args:
        fields: Comma-separated fields of a candidate record

    Returns:
        Trimmed raw amount text

    Examples:
        >>> resolve_amount(['CHK_SAV_LOC_IRA', '01/02/2024', '', '', 'Fee', '', '-5.00'])
        '-5.00'
        >>> resolve_amount(['CHK_SAV_LOC_IRA', '01/02/2024', '', '', 'Deposit', '100.00'])
        '100.00'
    """
    for index in AMOUNT_COLUMNS:
        if index < len(fields) and fields[index] != "":
            return clean_amount(fields[index])
    return ""


def parse_date(date_str: str, formats: Sequence[str]) -> Optional[datetime]:
    """Parse a raw date token against a list of formats.

    ISO-8601 timestamps the formats miss, such as ones carrying a "Z" or
    "+HH:MM" offset, are tried last. Offset-aware values are converted to
    naive UTC so they compare with every other parsed date.

    Returns:
        Parsed datetime or None if nothing matches
    """
    if not date_str or not date_str.strip():
        return None

    date_str = date_str.strip()
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    return _parse_iso_timestamp(date_str)


def _parse_iso_timestamp(date_str: str) -> Optional[datetime]:
    if date_str.endswith(('Z', 'z')):
        date_str = date_str[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(date_str)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
