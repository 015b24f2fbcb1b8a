"""Merge per-file transaction lists into one deterministically ordered list."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.core import Transaction, MergerConfig
from ..parsers.base import parse_date


logger = logging.getLogger(__name__)

# Sort-key rank for values that parse; missing or invalid values rank after
_VALID = 0
_INVALID = 1


class MergeEngine:
    """Concatenates transactions from many files and orders them.

    Ordering:
    1. last4 as an integer, ascending; empty or non-numeric last4 sorts last
    2. date ascending; unparseable dates sort last within an account

    Records tied on both keys keep their insertion order (file order, then
    line order). No deduplication is performed.
    """

    def __init__(self, config: Optional[MergerConfig] = None):
        self.config = config or MergerConfig()

    def account_key(self, transaction: Transaction) -> Tuple[int, int]:
        last4 = transaction.last4.strip()
        if last4.isdecimal():
            return (_VALID, int(last4))
        return (_INVALID, 0)

    def date_key(self, transaction: Transaction) -> Tuple[int, datetime]:
        parsed = parse_date(transaction.date, self.config.date_formats)
        if parsed is None:
            logger.debug(f"Unparseable date '{transaction.date}', sorting to end of account")
            return (_INVALID, datetime.min)
        return (_VALID, parsed)

    def sort_key(self, transaction: Transaction):
        return (self.account_key(transaction), self.date_key(transaction))

    def sort(self, transactions: Iterable[Transaction]) -> List[Transaction]:
        """Return a new list ordered by account then date (stable)"""
        return sorted(transactions, key=self.sort_key)

    def merge(self, batches: Iterable[Sequence[Transaction]]) -> List[Transaction]:
        """Concatenate per-file batches in order and sort the result.

        Args:
            batches: Transaction lists, one per file, in file selection order

        Returns:
            Globally ordered list of all transactions
        """
        combined: List[Transaction] = []
        for batch in batches:
            combined.extend(batch)

        merged = self.sort(combined)
        logger.debug(f"Merged {len(merged)} transactions")
        return merged


def merge_transactions(batches: Iterable[Sequence[Transaction]],
                       config: Optional[MergerConfig] = None) -> List[Transaction]:
    """Merge per-file transaction lists with the default ordering"""
    return MergeEngine(config).merge(batches)
