"""Source file selection and loading."""

import logging
import os
from typing import Iterable, List, Optional

from ..models.core import SourceFile


logger = logging.getLogger(__name__)


class FileScanner:
    """Collects statement CSV files from explicit paths and directories"""

    def __init__(self):
        self.supported_extensions = {'.csv'}

    def scan_directory(self, directory: str, recursive: bool = False) -> List[str]:
        """
        Scan directory for statement files

        Args:
            directory: Directory path to scan
            recursive: Whether to scan subdirectories recursively

        Returns:
            Sorted list of matching file paths
        """
        if not os.path.exists(directory):
            raise FileNotFoundError(f"Directory not found: {directory}")

        if not os.path.isdir(directory):
            raise ValueError(f"Path is not a directory: {directory}")

        found_files = []

        if recursive:
            for root, dirs, files in os.walk(directory):
                for file in files:
                    file_path = os.path.join(root, file)
                    if self._is_supported_file(file_path):
                        found_files.append(file_path)
        else:
            for item in os.listdir(directory):
                item_path = os.path.join(directory, item)
                if os.path.isfile(item_path) and self._is_supported_file(item_path):
                    found_files.append(item_path)

        return sorted(found_files)

    def collect(self,
                file_paths: Optional[Iterable[str]] = None,
                directories: Optional[Iterable[str]] = None,
                recursive: bool = False) -> List[str]:
        """
        Build the ordered selection of files to merge

        Explicit paths come first in the order given, then directory matches.
        A path selected twice is kept once, at its first position.
        """
        selected: List[str] = []
        seen = set()

        candidates = list(file_paths or [])
        for directory in directories or []:
            candidates.extend(self.scan_directory(directory, recursive))

        for path in candidates:
            key = os.path.abspath(path)
            if key in seen:
                continue
            seen.add(key)
            selected.append(path)

        return selected

    def _is_supported_file(self, file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in self.supported_extensions


def read_source_file(path: str, encoding: str = 'utf-8-sig') -> SourceFile:
    """
    Read one file fully into memory

    The default codec drops a leading UTF-8 byte-order mark.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid in the given encoding
    """
    with open(path, 'r', encoding=encoding, newline='') as f:
        content = f.read()
    logger.debug(f"Read {len(content)} characters from {path}")
    return SourceFile(filename=os.path.basename(path), content=content)
