"""Core data models for the statement merger."""

from dataclasses import dataclass, field
from typing import List, Dict, Optional


@dataclass(frozen=True)
class AccountInfo:
    """Account identity derived from a statement filename.

    Attributes:
        name: Textual account label (e.g., "Checking")
        last4: Trailing 4-digit account identifier, empty if absent
    """
    name: str = ""
    last4: str = ""


@dataclass(frozen=True)
class Transaction:
    """Unified transaction data structure"""
    name: str
    last4: str
    date: str
    description: str
    amount: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'name': self.name,
            'last4': self.last4,
            'date': self.date,
            'description': self.description,
            'amount': self.amount,
        }


@dataclass(frozen=True)
class SourceFile:
    """A selected input file with its full text content"""
    filename: str
    content: str


@dataclass
class MergeResult:
    """Result of a merge operation over a batch of source files.

    Attributes:
        transactions: Merged, ordered transactions
        files_processed: Number of files successfully parsed
        error: Single user-visible error message, None on success
        failed_files: Files skipped in isolation mode
    """
    transactions: List[Transaction] = field(default_factory=list)
    files_processed: int = 0
    error: Optional[str] = None
    failed_files: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class MergerConfig:
    """Configuration for merge and export behavior"""
    output_directory: str = "."
    output_prefix: str = "combined_statements"
    include_account_columns: bool = True
    isolate_failures: bool = False
    date_formats: Optional[List[str]] = None
    encoding: str = "utf-8-sig"
    log_directory: Optional[str] = None

    def __post_init__(self):
        if self.date_formats is None:
            self.date_formats = [
                "%m/%d/%Y", "%Y-%m-%d", "%m/%d/%y",
                "%Y/%m/%d", "%m-%d-%Y", "%Y-%m-%dT%H:%M:%S",
                "%m/%d/%Y %H:%M:%S", "%b %d, %Y", "%B %d, %Y"
            ]
