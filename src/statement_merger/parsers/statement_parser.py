"""Parser for bank statement exports carrying CHK_SAV_LOC_IRA records."""

import logging
from typing import List, Optional

from .base import FileParser, clean_description, resolve_amount
from ..models.core import AccountInfo, Transaction, MergerConfig
from ..utils.account_resolver import resolve_account
from ..utils.error_handler import MalformedRecordError


logger = logging.getLogger(__name__)

RECORD_TYPE = 'CHK_SAV_LOC_IRA'

DATE_COLUMN = 1
DESCRIPTION_COLUMN = 4

BYTE_ORDER_MARK = '\ufeff'


def extract_records(content: str, filename: Optional[str] = None) -> List[Transaction]:
    """Extract transactions from raw statement text.

    Lines are split on newlines, trimmed, and empty lines dropped. Only lines
    whose first comma-separated field is the CHK_SAV_LOC_IRA record type are
    kept; headers and other statement sections are ignored. A leading
    byte-order mark is dropped. Fields are split on bare commas with no
    quoting support.

    Args:
        content: Full text of one statement file
        filename: Source filename used to resolve the account; when omitted
                  the name and last4 fields are left empty

    Returns:
        Transactions in source line order

    Raises:
        MalformedRecordError: If a candidate line has too few fields. The
            whole file is rejected, no partial result is returned.
    """
    account = resolve_account(filename) if filename else AccountInfo()
    if content.startswith(BYTE_ORDER_MARK):
        content = content[len(BYTE_ORDER_MARK):]
    transactions = []
    skipped = 0

    lines = [line.strip() for line in content.split('\n')]
    for line_number, line in enumerate(lines, 1):
        if not line:
            continue

        fields = line.split(',')
        if fields[0] != RECORD_TYPE:
            skipped += 1
            continue

        if len(fields) <= DESCRIPTION_COLUMN:
            raise MalformedRecordError(
                f"Malformed {RECORD_TYPE} record on line {line_number} of "
                f"{filename or '<input>'}: expected at least {DESCRIPTION_COLUMN + 1} "
                f"fields, got {len(fields)}",
                file_path=filename,
                line_number=line_number,
                raw_line=line
            )

        transactions.append(Transaction(
            name=account.name,
            last4=account.last4,
            date=fields[DATE_COLUMN],
            description=clean_description(fields[DESCRIPTION_COLUMN]),
            amount=resolve_amount(fields)
        ))

    logger.debug(
        f"Extracted {len(transactions)} records from {filename or '<input>'}, "
        f"ignored {skipped} other lines"
    )
    return transactions


class StatementParser(FileParser):
    """Parser for CHK_SAV_LOC_IRA statement CSV exports"""

    def __init__(self, config: MergerConfig):
        super().__init__(config)
        self.supported_extensions = ['.csv']

    def get_supported_extensions(self) -> List[str]:
        """Return list of supported file extensions"""
        return self.supported_extensions

    def parse_content(self, content: str, filename: Optional[str] = None) -> List[Transaction]:
        """Parse one statement's text into transactions"""
        return extract_records(content, filename)
