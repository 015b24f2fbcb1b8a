"""Tests for source file selection."""

import os
import shutil
import tempfile

import pytest

from statement_merger.utils.file_scanner import FileScanner, read_source_file


class TestFileScanner:
    """Test cases for FileScanner"""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.scanner = FileScanner()
        for name in ["b_Savings0002.csv", "a_Checking0001.csv", "notes.txt"]:
            with open(os.path.join(self.temp_dir, name), 'w', encoding='utf-8') as f:
                f.write("CHK_SAV_LOC_IRA,01/01/2024,,,x,1.00\n")
        os.makedirs(os.path.join(self.temp_dir, "nested"))
        with open(os.path.join(self.temp_dir, "nested", "c_Card0003.csv"), 'w') as f:
            f.write("")

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_scan_directory_sorted_csv_only(self):
        found = self.scanner.scan_directory(self.temp_dir)
        assert [os.path.basename(p) for p in found] == ["a_Checking0001.csv", "b_Savings0002.csv"]

    def test_scan_directory_recursive(self):
        found = self.scanner.scan_directory(self.temp_dir, recursive=True)
        assert "c_Card0003.csv" in [os.path.basename(p) for p in found]

    def test_scan_missing_directory(self):
        with pytest.raises(FileNotFoundError):
            self.scanner.scan_directory(os.path.join(self.temp_dir, "missing"))

    def test_collect_keeps_explicit_order_and_dedupes(self):
        explicit = os.path.join(self.temp_dir, "b_Savings0002.csv")
        selected = self.scanner.collect([explicit], [self.temp_dir])
        assert [os.path.basename(p) for p in selected] == ["b_Savings0002.csv", "a_Checking0001.csv"]

    def test_read_source_file(self):
        source = read_source_file(os.path.join(self.temp_dir, "a_Checking0001.csv"))
        assert source.filename == "a_Checking0001.csv"
        assert source.content.startswith("CHK_SAV_LOC_IRA")

    def test_read_source_file_drops_byte_order_mark(self):
        path = os.path.join(self.temp_dir, "d_Home0042.csv")
        with open(path, 'wb') as f:
            f.write(b"\xef\xbb\xbfCHK_SAV_LOC_IRA,01/05/2024,,,Rent,,-900.00\n")

        source = read_source_file(path)
        assert source.content.startswith("CHK_SAV_LOC_IRA")
