"""Tests for CSV export."""

import io
import os
import shutil
import tempfile
from datetime import date

import pandas as pd

from statement_merger.models.core import MergerConfig, Transaction
from statement_merger.utils.csv_writer import CSVExporter


TRANSACTIONS = [
    Transaction(name="Checking", last4="1234", date="01/05/2024",
                description="Grocery Store", amount="-54.20"),
    Transaction(name="Checking", last4="1234", date="01/09/2024",
                description="ACME, INC PAYMENT", amount="2500.00"),
]


class TestCSVExporter:
    """Test cases for CSVExporter"""

    def setup_method(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.exporter = CSVExporter(MergerConfig(output_directory=self.temp_dir))

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_csv_text(self):
        text = self.exporter.to_csv_text(TRANSACTIONS)
        assert text.split('\n') == [
            'Name,Last 4,Date,Description,Amount',
            'Checking,1234,01/05/2024,"Grocery Store",-54.20',
            'Checking,1234,01/09/2024,"ACME, INC PAYMENT",2500.00',
        ]

    def test_description_always_quoted(self):
        row = self.exporter.format_row(TRANSACTIONS[0])
        assert '"Grocery Store"' in row
        assert '"Checking"' not in row

    def test_embedded_quotes_not_escaped(self):
        txn = Transaction(name="A", last4="0001", date="d", description='Say "hi"', amount="1")
        assert self.exporter.format_row(txn) == 'A,0001,d,"Say "hi"",1'

    def test_header_only_for_empty_list(self):
        assert self.exporter.to_csv_text([]) == 'Name,Last 4,Date,Description,Amount'

    def test_plain_variant_headers(self):
        exporter = CSVExporter(MergerConfig(include_account_columns=False))
        text = exporter.to_csv_text(TRANSACTIONS[:1])
        assert text == 'Date,Description,Amount\n01/05/2024,"Grocery Store",-54.20'

    def test_output_filename(self):
        assert self.exporter.generate_output_filename(date(2024, 3, 1)) == \
            'combined_statements_2024-03-01.csv'

    def test_output_filename_defaults_to_today(self):
        expected = f"combined_statements_{date.today().strftime('%Y-%m-%d')}.csv"
        assert self.exporter.generate_output_filename() == expected

    def test_export_writes_file(self):
        path = self.exporter.export(TRANSACTIONS, today=date(2024, 3, 1))

        assert path == os.path.join(self.temp_dir, 'combined_statements_2024-03-01.csv')
        with open(path, 'r', encoding='utf-8') as f:
            assert f.read() == self.exporter.to_csv_text(TRANSACTIONS)

    def test_export_to_explicit_directory(self):
        target = os.path.join(self.temp_dir, 'nested', 'out')
        path = self.exporter.export(TRANSACTIONS, output_directory=target)
        assert os.path.dirname(path) == target
        assert os.path.exists(path)

    def test_export_empty_is_noop(self):
        assert self.exporter.export([]) is None
        assert os.listdir(self.temp_dir) == []

    def test_exported_csv_reads_back(self):
        """Test that exported values survive a CSV reader round trip"""
        text = self.exporter.to_csv_text(TRANSACTIONS)
        frame = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)

        assert list(frame.columns) == ['Name', 'Last 4', 'Date', 'Description', 'Amount']
        assert frame['Description'].tolist() == [t.description for t in TRANSACTIONS]
        assert frame['Last 4'].tolist() == ['1234', '1234']
        assert frame['Amount'].tolist() == ['-54.20', '2500.00']
