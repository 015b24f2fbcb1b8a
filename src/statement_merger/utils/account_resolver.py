"""Derive account identity from statement filenames."""

import logging
import os
import re

from ..models.core import AccountInfo


logger = logging.getLogger(__name__)

# Last underscore-delimited segment before a literal ".csv" suffix
_SEGMENT_PATTERN = re.compile(r'_([^_]+)\.csv$')
_LAST4_PATTERN = re.compile(r'(\d{4})$')


def resolve_account(filename: str) -> AccountInfo:
    """Extract account name and last 4 digits from a statement filename.

    Looks for patterns like:
    - statement_Checking1234.csv -> ("Checking", "1234")
    - export_Savings.csv -> ("Savings", "")
    - statement.csv -> ("", "")

    Only the first occurrence of the digit run is removed from the segment,
    so "x_1234Check1234.csv" resolves to ("Check1234", "1234").

    Args:
        filename: CSV filename or path

    Returns:
        AccountInfo, with empty fields when nothing can be extracted
    """
    if not filename:
        return AccountInfo()

    basename = os.path.basename(filename)
    match = _SEGMENT_PATTERN.search(basename)
    if not match:
        logger.debug(f"No account segment found in filename: {basename}")
        return AccountInfo()

    segment = match.group(1)
    digits = _LAST4_PATTERN.search(segment)
    if not digits:
        return AccountInfo(name=segment.strip(), last4="")

    last4 = digits.group(1)
    name = segment.replace(last4, '', 1).strip()
    return AccountInfo(name=name, last4=last4)
