"""Mini README: Human readable rendering of ledger data.

The currency glyph is a display parameter passed in by the caller; the
ledger itself only knows bare amounts.
"""

from __future__ import annotations

from typing import List

from ..finance import Expense, ExpenseRows


def format_amount(amount: float, currency_symbol: str) -> str:
    """Render ``amount`` with two decimals behind the currency glyph."""

    return f"{currency_symbol}{amount:.2f}"


def format_row(row_number: int, expense: Expense, currency_symbol: str) -> str:
    """Render one listing line for ``expense``."""

    return (
        f"{row_number}. Date: {expense.date.isoformat()}, "
        f"Category: {expense.category}, "
        f"Amount: {format_amount(expense.amount, currency_symbol)}, "
        f"Description: {expense.description}"
    )


def format_rows(rows: ExpenseRows, currency_symbol: str) -> List[str]:
    return [format_row(row_number, expense, currency_symbol) for row_number, expense in rows]
