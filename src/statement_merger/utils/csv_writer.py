"""CSV export of merged transactions."""

import logging
import os
from datetime import date
from typing import List, Optional, Sequence

from ..models.core import Transaction, MergerConfig


logger = logging.getLogger(__name__)


class CSVExporter:
    """Serializes merged transactions to CSV text and files.

    The description column is always wrapped in double quotes since
    descriptions may contain commas. No other column is quoted and quote
    characters inside a description are written as-is.
    """

    ACCOUNT_HEADERS = ['Name', 'Last 4']
    STANDARD_HEADERS = ['Date', 'Description', 'Amount']

    def __init__(self, config: Optional[MergerConfig] = None):
        self.config = config or MergerConfig()

    @property
    def headers(self) -> List[str]:
        if self.config.include_account_columns:
            return self.ACCOUNT_HEADERS + self.STANDARD_HEADERS
        return list(self.STANDARD_HEADERS)

    def format_row(self, transaction: Transaction) -> str:
        """Format a single transaction as a CSV line"""
        fields = [transaction.date, f'"{transaction.description}"', transaction.amount]
        if self.config.include_account_columns:
            fields = [transaction.name, transaction.last4] + fields
        return ','.join(fields)

    def to_csv_text(self, transactions: Sequence[Transaction]) -> str:
        """
        Build CSV text for the given transactions

        Args:
            transactions: Ordered transactions to serialize

        Returns:
            Header row followed by one row per transaction, newline separated
        """
        lines = [','.join(self.headers)]
        lines.extend(self.format_row(transaction) for transaction in transactions)
        return '\n'.join(lines)

    def generate_output_filename(self, today: Optional[date] = None) -> str:
        """
        Generate the dated export filename

        Args:
            today: Date to embed, defaults to the current date

        Returns:
            Filename like combined_statements_2024-03-01.csv
        """
        today = today or date.today()
        return f"{self.config.output_prefix}_{today.strftime('%Y-%m-%d')}.csv"

    def export(self,
               transactions: Sequence[Transaction],
               output_directory: Optional[str] = None,
               today: Optional[date] = None) -> Optional[str]:
        """
        Write transactions to a dated CSV file

        Args:
            transactions: Ordered transactions to write
            output_directory: Target directory, defaults to the configured one
            today: Date to embed in the filename

        Returns:
            Path of the written file, or None if there was nothing to export
        """
        if not transactions:
            logger.info("No transactions to export")
            return None

        directory = output_directory or self.config.output_directory
        os.makedirs(directory, exist_ok=True)
        output_path = os.path.join(directory, self.generate_output_filename(today))

        with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
            csvfile.write(self.to_csv_text(transactions))

        logger.info(f"Wrote {len(transactions)} transactions to {output_path}")
        return output_path
