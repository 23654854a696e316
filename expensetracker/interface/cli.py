"""Mini README: Typer command line interface for the expense tracker.

Structure:
    * cli - Typer application with add, delete, summary and list commands.
    * main - global options (store path, verbosity, version).

Every invocation loads the ledger from its store, applies at most one
mutation, writes the store back only when something changed, and prints the
result. Ledger failures are echoed to stderr and end the process with a
non-zero status; malformed arguments are rejected by Typer before the ledger
is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

from pydantic import ValidationError
import typer

from .. import __version__
from ..configuration import get_settings
from ..finance import (
    Expense,
    ExpenseLedger,
    InvalidExpenseError,
    LedgerError,
    RowOutOfRangeError,
    load_ledger,
    parse_date,
    save_ledger,
)
from ..logging_utils import get_logger, set_log_level
from .formatting import format_amount, format_rows
from .summary_filters import SummaryRequest, run_summary

LOGGER = get_logger(__name__)

DATE_HELP = "YYYY-MM-DD, for example 2025-12-31"
SUMMARY_HINT = (
    "Please provide a valid option for summary (e.g., --all, --category <name>, "
    "--date <YYYY-MM-DD>, --month <number>)."
)

cli = typer.Typer(help="Keeps track of your expenses.", add_completion=False)


@dataclass(slots=True)
class RunState:
    """Per-invocation options shared with the subcommands."""

    store_path: Path
    currency_symbol: str


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _load(state: RunState) -> ExpenseLedger:
    try:
        return load_ledger(state.store_path)
    except LedgerError as error:
        _fail(f"Error loading data: {error}")


def _save(ledger: ExpenseLedger, state: RunState) -> None:
    try:
        save_ledger(ledger, state.store_path)
    except LedgerError as error:
        _fail(f"Error saving data: {error}")


def _print_listing(ledger: ExpenseLedger, state: RunState) -> None:
    if ledger.is_empty():
        typer.echo("No expenses found.")
        return
    for line in format_rows(ledger.rows(), state.currency_symbol):
        typer.echo(line)


def _require_text(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("must not be empty")
    return value


def _require_day(value: Optional[str]) -> Optional[str]:
    if value is not None:
        try:
            parse_date(value)
        except InvalidExpenseError as error:
            raise typer.BadParameter(str(error)) from error
    return value


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Expense Tracker CLI {__version__}")
        raise typer.Exit()


@cli.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    store: Optional[Path] = typer.Option(
        None, "--store", help="Ledger JSON file (defaults to EXPENSE_TRACKER_STORE_PATH or expenses.json)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debugging details to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Keeps track of your expenses."""

    try:
        settings = get_settings()
    except ValidationError as error:
        _fail(f"Invalid configuration: {error}")
    set_log_level("DEBUG" if verbose else settings.log_level)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=2)
    ctx.obj = RunState(
        store_path=store.expanduser() if store else settings.store_path,
        currency_symbol=settings.currency_symbol,
    )
    LOGGER.debug("Using store %s", ctx.obj.store_path)


@cli.command("add")
def add(
    ctx: typer.Context,
    category: str = typer.Option(
        ..., "--category", "-c", callback=_require_text, help="The category of the expense."
    ),
    amount: float = typer.Option(..., "--amount", "-a", help="The expense amount."),
    description: str = typer.Option(..., "--description", "-d", help="A description for the expense."),
    when: Optional[str] = typer.Option(
        None,
        "--when",
        "-w",
        "--date",
        callback=_require_day,
        help=f"The date of expense ({DATE_HELP}). Defaults to today.",
    ),
) -> None:
    """Add a new expense. (alias: a)"""

    state: RunState = ctx.obj
    try:
        expense = Expense.create(
            category=category,
            amount=amount,
            description=description,
            on=when,
        )
    except InvalidExpenseError as error:
        raise typer.BadParameter(str(error)) from error

    ledger = _load(state)
    ledger.add(expense)
    _save(ledger, state)

    typer.echo("Expense added successfully!\n")
    _print_listing(ledger, state)


@cli.command("delete")
def delete(
    ctx: typer.Context,
    row_number: int = typer.Argument(..., help="Row number shown by the list command."),
) -> None:
    """Delete an expense by row number. (alias: d)"""

    state: RunState = ctx.obj
    ledger = _load(state)
    if ledger.is_empty():
        typer.echo("No expenses found.")
        return

    try:
        removed = ledger.delete(row_number)
    except RowOutOfRangeError as error:
        _fail(str(error))
    _save(ledger, state)

    typer.echo(
        f"Deleted expense {row_number}: {removed.category} "
        f"{format_amount(removed.amount, state.currency_symbol)} ({removed.description})"
    )


@cli.command("summary")
def summary(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Filter by category."),
    on: Optional[str] = typer.Option(
        None, "--date", "-d", callback=_require_day, help=f"Filter by exact date ({DATE_HELP})."
    ),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12, help="Filter by month (1-12)."),
    all_expenses: bool = typer.Option(False, "--all", "-a", help="Total of every expense."),
) -> None:
    """Summarize expenses by category, date, month or overall. (aliases: s, total)"""

    state: RunState = ctx.obj
    request = SummaryRequest(
        category=category,
        on=parse_date(on) if on else None,
        month=month,
        all=all_expenses,
    )
    ledger = _load(state)
    result = run_summary(ledger, request)
    if result is None:
        _fail(SUMMARY_HINT)

    selected, total = result
    LOGGER.debug("Summary filter %s selected", selected.name)
    typer.echo(f"{selected.label}: {format_amount(total, state.currency_symbol)}")


@cli.command("list")
def list_expenses(ctx: typer.Context) -> None:
    """List all expenses. (alias: l)"""

    _print_listing(_load(ctx.obj), ctx.obj)


for _alias, _command in (
    ("a", add),
    ("d", delete),
    ("s", summary),
    ("total", summary),
    ("l", list_expenses),
):
    cli.command(_alias, hidden=True)(_command)
