"""Mini README: Summary filter selection for the ``summary`` command.

Structure:
    * SummaryRequest - the filter values a caller supplied.
    * SummaryFilter - one named query with its output label.
    * SUMMARY_PRECEDENCE - filters in the order they are tried.
    * select_filter / run_summary - pick and evaluate exactly one filter.

When several filters are supplied at once the first entry of
``SUMMARY_PRECEDENCE`` that applies wins: category, then date, then month,
then ``--all``. Keeping the order in a tuple lets it be tested without going
through argument parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from ..finance import ExpenseLedger


@dataclass(frozen=True)
class SummaryRequest:
    """Filter values collected from the command line."""

    category: Optional[str] = None
    on: Optional[date] = None
    month: Optional[int] = None
    all: bool = False


@dataclass(frozen=True)
class SummaryFilter:
    """A single summary query and how to label its result."""

    name: str
    label: str
    applies: Callable[[SummaryRequest], bool]
    compute: Callable[[ExpenseLedger, SummaryRequest], float]


SUMMARY_PRECEDENCE: Tuple[SummaryFilter, ...] = (
    SummaryFilter(
        name="category",
        label="Total expenses",
        applies=lambda request: request.category is not None,
        compute=lambda ledger, request: ledger.summarize_by_category(request.category),
    ),
    SummaryFilter(
        name="date",
        label="Expenses by date",
        applies=lambda request: request.on is not None,
        compute=lambda ledger, request: ledger.summarize_by_date(request.on),
    ),
    SummaryFilter(
        name="month",
        label="Expenses by month",
        applies=lambda request: request.month is not None,
        compute=lambda ledger, request: ledger.summarize_by_month(request.month),
    ),
    SummaryFilter(
        name="all",
        label="Total expenses",
        applies=lambda request: request.all,
        compute=lambda ledger, request: ledger.summarize_all(),
    ),
)


def select_filter(request: SummaryRequest) -> Optional[SummaryFilter]:
    """Return the highest priority filter present in ``request``."""

    return next((summary for summary in SUMMARY_PRECEDENCE if summary.applies(request)), None)


def run_summary(ledger: ExpenseLedger, request: SummaryRequest) -> Optional[Tuple[SummaryFilter, float]]:
    """Evaluate the selected filter, or return ``None`` if none was given."""

    selected = select_filter(request)
    if selected is None:
        return None
    return selected, selected.compute(ledger, request)
