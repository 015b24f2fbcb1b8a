"""Statement parsers and field normalization"""

from .base import FileParser, clean_description, clean_amount, resolve_amount, parse_date
from .statement_parser import StatementParser, extract_records, RECORD_TYPE

__all__ = [
    'FileParser',
    'StatementParser',
    'extract_records',
    'clean_description',
    'clean_amount',
    'resolve_amount',
    'parse_date',
    'RECORD_TYPE',
]
