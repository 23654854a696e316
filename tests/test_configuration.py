"""Mini README: Tests for environment driven settings and the summary precedence table."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from expensetracker.configuration import ExpenseTrackerSettings
from expensetracker.interface.summary_filters import (
    SUMMARY_PRECEDENCE,
    SummaryRequest,
    select_filter,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = ExpenseTrackerSettings()
    assert settings.store_path == Path("expenses.json")
    assert settings.currency_symbol == "₹"
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("EXPENSE_TRACKER_STORE_PATH", "~/ledgers/mine.json")
    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "debug")

    settings = ExpenseTrackerSettings()

    assert settings.store_path == tmp_path / "ledgers" / "mine.json"
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        ExpenseTrackerSettings()


def test_precedence_order_is_category_date_month_all() -> None:
    assert [summary.name for summary in SUMMARY_PRECEDENCE] == ["category", "date", "month", "all"]


def test_select_filter_picks_first_present() -> None:
    everything = SummaryRequest(category="food", on=date(2025, 1, 1), month=1, all=True)
    assert select_filter(everything).name == "category"
    assert select_filter(SummaryRequest(month=2, all=True)).name == "month"
    assert select_filter(SummaryRequest(all=True)).name == "all"
    assert select_filter(SummaryRequest()) is None
