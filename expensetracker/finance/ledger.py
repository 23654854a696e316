"""Mini README: Ordered expense ledger with summary queries.

Structure:
    * Expense - dataclass storing one dated, categorised amount.
    * ExpenseRows - restartable view of ``(row_number, expense)`` pairs.
    * ExpenseLedger - insertion-ordered collection with add, delete and totals.

Row numbers are 1-based positions in the current ordering and shift when an
earlier expense is deleted. Translating a row number into a list index is
done in exactly one place, ``ExpenseLedger._resolve_row``, so the query
helpers never depend on how rows are addressed.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger
from .errors import InvalidExpenseError, RowOutOfRangeError

LOGGER = get_logger(__name__)

_ISO_DAY = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects into a calendar date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        message = f"Dates must be formatted as YYYY-MM-DD (for example, 2025-12-31), got {value!r}."
        if not _ISO_DAY.fullmatch(value):
            raise InvalidExpenseError(message)
        try:
            return date.fromisoformat(value)
        except ValueError as error:
            raise InvalidExpenseError(message) from error
    raise InvalidExpenseError("Dates must be provided as ISO strings or date/datetime instances.")


def _coerce_amount(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidExpenseError(f"Amount must be a number, got {value!r}.")
    try:
        amount = float(value)
    except OverflowError as error:
        raise InvalidExpenseError("Amount is too large to store.") from error
    if not math.isfinite(amount):
        raise InvalidExpenseError(f"Amount must be a finite number, got {value!r}.")
    return amount


def _require_utf8(field_name: str, value: str) -> None:
    """Reject lone surrogates, which cannot be written to the UTF-8 store."""

    try:
        value.encode("utf-8")
    except UnicodeEncodeError as error:
        raise InvalidExpenseError(f"{field_name} contains characters that are not valid UTF-8.") from error


@dataclass(slots=True)
class Expense:
    """Represent a single expense entry."""

    date: date
    category: str
    amount: float
    description: str

    def __post_init__(self) -> None:
        self.date = parse_date(self.date)
        if not isinstance(self.category, str) or not self.category:
            raise InvalidExpenseError("Category must be a non-empty string.")
        if not isinstance(self.description, str):
            raise InvalidExpenseError("Description must be a string.")
        _require_utf8("Category", self.category)
        _require_utf8("Description", self.description)
        self.amount = _coerce_amount(self.amount)

    @classmethod
    def create(
        cls,
        *,
        category: str,
        amount: float,
        description: str,
        on: Optional[object] = None,
    ) -> "Expense":
        """Build an expense, defaulting the date to today when omitted."""

        return cls(
            date=date.today() if on is None else parse_date(on),
            category=category,
            amount=amount,
            description=description,
        )

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "Expense":
        """Rebuild an expense from its serialised form."""

        missing = [key for key in ("date", "category", "amount", "description") if key not in payload]
        if missing:
            raise InvalidExpenseError(f"Expense record is missing fields: {', '.join(missing)}.")
        return cls(
            date=payload["date"],
            category=payload["category"],
            amount=payload["amount"],
            description=payload["description"],
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values in a stable key order."""

        return {
            "date": self.date.isoformat(),
            "category": self.category,
            "amount": self.amount,
            "description": self.description,
        }


class ExpenseRows:
    """Lazy view over the ledger pairing each expense with its row number.

    Iterating the view twice yields the same rows as long as the ledger was
    not mutated in between.
    """

    def __init__(self, expenses: List[Expense]) -> None:
        self._expenses = expenses

    def __iter__(self) -> Iterator[Tuple[int, Expense]]:
        return enumerate(self._expenses, start=1)

    def __len__(self) -> int:
        return len(self._expenses)


class ExpenseLedger:
    """Manage an insertion-ordered collection of expenses."""

    def __init__(self, expenses: Optional[Iterable[Expense]] = None) -> None:
        self._expenses: List[Expense] = list(expenses or [])
        LOGGER.debug("Expense ledger initialised with %s expenses", len(self._expenses))

    def __len__(self) -> int:
        return len(self._expenses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpenseLedger):
            return NotImplemented
        return self._expenses == other._expenses

    def __repr__(self) -> str:
        return f"ExpenseLedger(expenses={self._expenses!r})"

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        """Snapshot of the expenses in ledger order."""

        return tuple(self._expenses)

    def is_empty(self) -> bool:
        return not self._expenses

    def add(self, expense: Expense) -> int:
        """Append an expense and return the row number it was given."""

        self._expenses.append(expense)
        LOGGER.info(
            "Added expense row=%s date=%s category=%s amount=%.2f",
            len(self._expenses),
            expense.date.isoformat(),
            expense.category,
            expense.amount,
        )
        return len(self._expenses)

    def _resolve_row(self, row_number: int) -> int:
        """Translate a 1-based row number into a list index."""

        if isinstance(row_number, bool) or not isinstance(row_number, int):
            raise InvalidExpenseError(f"Row number must be an integer, got {row_number!r}.")
        if row_number < 1 or row_number > len(self._expenses):
            raise RowOutOfRangeError(row_number, len(self._expenses))
        return row_number - 1

    def delete(self, row_number: int) -> Optional[Expense]:
        """Remove the expense at ``row_number``.

        Returns the removed expense, or ``None`` when the ledger is empty and
        there is nothing to remove. Raises ``RowOutOfRangeError`` before
        touching the collection when the row does not exist.
        """

        if not self._expenses:
            LOGGER.warning("Delete of row %s requested on an empty ledger", row_number)
            return None
        index = self._resolve_row(row_number)
        removed = self._expenses.pop(index)
        LOGGER.info("Deleted expense row=%s category=%s", row_number, removed.category)
        return removed

    def rows(self) -> ExpenseRows:
        """Return ``(row_number, expense)`` pairs in ledger order."""

        return ExpenseRows(self._expenses)

    def categories(self) -> List[str]:
        """Distinct categories in the order they first appear."""

        return list(dict.fromkeys(expense.category for expense in self._expenses))

    def summarize_all(self) -> float:
        """Sum every amount in the ledger."""

        return math.fsum(expense.amount for expense in self._expenses)

    def summarize_by_category(self, label: str) -> float:
        """Sum amounts whose category matches ``label`` exactly."""

        return math.fsum(expense.amount for expense in self._expenses if expense.category == label)

    def summarize_by_date(self, on: object) -> float:
        """Sum amounts recorded on the given calendar date."""

        target = parse_date(on)
        return math.fsum(expense.amount for expense in self._expenses if expense.date == target)

    def summarize_by_month(self, month: int) -> float:
        """Sum amounts recorded in ``month`` (1-12) of any year."""

        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise InvalidExpenseError(f"Month must be an integer between 1 and 12, got {month!r}.")
        return math.fsum(expense.amount for expense in self._expenses if expense.date.month == month)

    def as_dict(self) -> Dict[str, List[Dict[str, object]]]:
        """Export the ledger in its persisted shape."""

        return {"expenses": [expense.as_dict() for expense in self._expenses]}
