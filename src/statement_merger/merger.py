"""Top-level orchestration: parse every selected file, merge, and export."""

import logging
from typing import Iterable, List, Optional

from .models.core import MergeResult, MergerConfig, SourceFile, Transaction
from .parsers.statement_parser import StatementParser
from .utils.csv_writer import CSVExporter
from .utils.error_handler import ErrorCategory, ErrorHandler, handle_file_error
from .utils.file_scanner import read_source_file
from .utils.merge_engine import MergeEngine


logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error processing files: "


class StatementMerger:
    """Merges a batch of statement files into one ordered transaction list.

    Files are processed one at a time in selection order. By default any
    file failure discards the whole batch and the result carries a single
    error message. With ``isolate_failures`` enabled, failing files are
    skipped and reported while successfully parsed files are kept.
    """

    def __init__(self,
                 config: Optional[MergerConfig] = None,
                 error_handler: Optional[ErrorHandler] = None):
        self.config = config or MergerConfig()
        self.error_handler = error_handler or ErrorHandler(self.config.log_directory)
        self.parser = StatementParser(self.config)
        self.engine = MergeEngine(self.config)
        self.exporter = CSVExporter(self.config)

    def merge(self, sources: Iterable[SourceFile]) -> MergeResult:
        """Merge already-loaded source files"""
        return self._merge_files((source.filename, lambda source=source: source) for source in sources)

    def merge_paths(self, file_paths: Iterable[str]) -> MergeResult:
        """Read each path fully, in order, and merge the contents"""
        return self._merge_files(
            (path, lambda path=path: read_source_file(path, self.config.encoding))
            for path in file_paths
        )

    def _merge_files(self, loaders) -> MergeResult:
        result = MergeResult()
        batches: List[List[Transaction]] = []

        for label, load in loaders:
            try:
                source = load()
                batch = self.parser.parse_content(source.content, source.filename)
            except Exception as e:
                handle_file_error(self.error_handler, label, e)
                if not self.config.isolate_failures:
                    return MergeResult(error=f"{ERROR_PREFIX}{e}")
                result.failed_files.append(label)
                continue

            if not batch:
                self.error_handler.log_warning(
                    f"No statement records found in {label}",
                    "NO_RECORDS",
                    ErrorCategory.FILE_FORMAT,
                    file_path=label
                )

            batches.append(batch)
            result.files_processed += 1
            self.error_handler.log_info(f"Parsed {len(batch)} transactions from {label}")

        result.transactions = self.engine.merge(batches)

        if result.failed_files:
            result.error = f"{ERROR_PREFIX}failed to process {', '.join(result.failed_files)}"

        logger.info(
            f"Merged {len(result.transactions)} transactions from "
            f"{result.files_processed} file(s)"
        )
        return result

    def export(self, result: MergeResult, output_directory: Optional[str] = None) -> Optional[str]:
        """Write the merged transactions, no-op when there are none"""
        return self.exporter.export(result.transactions, output_directory)
