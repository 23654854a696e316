"""Mini README: Expense bookkeeping for the command line tracker.

This package holds the ledger itself, its JSON store and the typed errors
both raise. Callers load a ledger, apply at most one mutation, save it back
and exit; nothing here keeps state between invocations.
"""

from .errors import (
    CorruptStoreError,
    InvalidExpenseError,
    LedgerError,
    RowOutOfRangeError,
    StoreAccessError,
)
from .ledger import Expense, ExpenseLedger, ExpenseRows, parse_date
from .storage import load_ledger, save_ledger

__all__ = [
    "CorruptStoreError",
    "Expense",
    "ExpenseLedger",
    "ExpenseRows",
    "InvalidExpenseError",
    "LedgerError",
    "RowOutOfRangeError",
    "StoreAccessError",
    "load_ledger",
    "save_ledger",
    "parse_date",
]
