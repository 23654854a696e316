"""Domain-specific exceptions raised by the ledger and its store."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for every failure the ledger reports to its callers."""


class CorruptStoreError(LedgerError):
    """Raised when a store file exists but does not hold a valid ledger."""


class StoreAccessError(LedgerError, OSError):
    """Raised when the store cannot be read or written."""


class InvalidExpenseError(LedgerError, ValueError):
    """Raised when expense fields or query arguments are malformed."""


class RowOutOfRangeError(LedgerError, IndexError):
    """Raised when a row number does not address an existing expense."""

    def __init__(self, row_number: int, length: int) -> None:
        super().__init__(f"Row number should be between 1 and {length}, got {row_number}.")
        self.row_number = row_number
        self.length = length
