"""Display helpers for merged transactions."""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Sequence

import pandas as pd

from ..models.core import Transaction


DISPLAY_COLUMNS = {
    'name': 'Name',
    'last4': 'Last 4',
    'date': 'Date',
    'description': 'Description',
    'amount': 'Amount',
}


def _to_decimal(amount: str) -> Optional[Decimal]:
    if not amount or not amount.strip():
        return None
    try:
        value = Decimal(amount.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def format_amount(amount: str) -> str:
    """Format raw amount text as US currency.

    Examples:
        >>> format_amount("-1234.5")
        '-$1,234.50'
        >>> format_amount("")
        ''
    """
    value = _to_decimal(amount)
    if value is None:
        return ""
    sign = '-' if value < 0 else ''
    return f"{sign}${abs(value):,.2f}"


def is_negative(amount: str) -> bool:
    """True when the amount parses to a value below zero"""
    value = _to_decimal(amount)
    return value is not None and value < 0


def transactions_to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction, in list order"""
    frame = pd.DataFrame(
        [transaction.to_dict() for transaction in transactions],
        columns=list(DISPLAY_COLUMNS)
    )
    return frame.rename(columns=DISPLAY_COLUMNS)


def render_table(transactions: Sequence[Transaction],
                 highlight_debit: Optional[Callable[[str], str]] = None) -> str:
    """Render transactions as a text table with formatted amounts

    Args:
        transactions: Rows to render, in list order
        highlight_debit: Applied to the rendered line of every row whose
                         amount is negative
    """
    if not transactions:
        return "No transactions to display"

    frame = transactions_to_frame(transactions)
    frame['Amount'] = frame['Amount'].map(format_amount)
    header, *rows = frame.to_string(index=False).split('\n')

    if highlight_debit is not None:
        rows = [
            highlight_debit(row) if is_negative(transaction.amount) else row
            for row, transaction in zip(rows, transactions)
        ]

    table = '\n'.join([header] + rows)
    return f"Showing {len(transactions)} transactions\n{table}"
