"""Data models and structures"""

from .core import (
    AccountInfo,
    MergeResult,
    MergerConfig,
    SourceFile,
    Transaction,
)

__all__ = [
    'AccountInfo',
    'MergeResult',
    'MergerConfig',
    'SourceFile',
    'Transaction',
]
