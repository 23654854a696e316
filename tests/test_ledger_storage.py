"""Mini README: Tests for the JSON ledger store.

These tests confirm that a saved ledger loads back field for field, that a
missing store means an empty ledger, and that truncated or malformed stores
are reported as corrupt rather than partially loaded.
"""

from __future__ import annotations

import json
import stat
from datetime import date
from pathlib import Path

import pytest

from expensetracker.finance import (
    CorruptStoreError,
    Expense,
    ExpenseLedger,
    StoreAccessError,
    load_ledger,
    save_ledger,
)


def _sample_ledger() -> ExpenseLedger:
    return ExpenseLedger(
        [
            Expense(date=date(2025, 1, 10), category="food", amount=12.5, description="lunch"),
            Expense(date=date(2024, 12, 31), category="fête", amount=-0.1, description="refund ✓"),
            Expense(date=date(2025, 1, 11), category="food", amount=7.25, description=""),
        ]
    )


def test_save_then_load_preserves_records_and_order(tmp_path: Path) -> None:
    store = tmp_path / "expenses.json"
    ledger = _sample_ledger()

    save_ledger(ledger, store)

    assert load_ledger(store) == ledger


def test_missing_store_loads_empty_ledger(tmp_path: Path) -> None:
    ledger = load_ledger(tmp_path / "absent.json")
    assert ledger.is_empty()
    assert not (tmp_path / "absent.json").exists()


def test_saved_document_shape_and_key_order(tmp_path: Path) -> None:
    store = tmp_path / "expenses.json"
    save_ledger(_sample_ledger(), store)

    payload = json.loads(store.read_text(encoding="utf-8"))

    assert list(payload) == ["expenses"]
    assert list(payload["expenses"][0]) == ["date", "category", "amount", "description"]
    assert payload["expenses"][0] == {
        "date": "2025-01-10",
        "category": "food",
        "amount": 12.5,
        "description": "lunch",
    }


def test_save_replaces_previous_contents(tmp_path: Path) -> None:
    store = tmp_path / "expenses.json"
    ledger = _sample_ledger()
    save_ledger(ledger, store)
    ledger.delete(1)
    save_ledger(ledger, store)

    assert len(load_ledger(store)) == 2
    assert [path.name for path in tmp_path.iterdir()] == ["expenses.json"]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        '{"expenses": [{"date": "2025-01-10", "category": "food"',
        "[]",
        '{"records": []}',
        '{"expenses": {}}',
        '{"expenses": [42]}',
        '{"expenses": [{"date": "2025-01-10", "category": "food", "amount": 1.0}]}',
        '{"expenses": [{"date": "10/01/2025", "category": "food", "amount": 1.0, "description": "x"}]}',
        '{"expenses": [{"date": "2025-01-10", "category": "food", "amount": "1.0", "description": "x"}]}',
        '{"expenses": [{"date": "20250110", "category": "food", "amount": 1.0, "description": "x"}]}',
        '{"expenses": [{"date": "2025-01-10", "category": "\\udcff", "amount": 1.0, "description": "x"}]}',
        '{"expenses": [{"date": "2025-01-10", "category": "food", "amount": 1' + "0" * 400 + ', "description": "x"}]}',
        '{"expenses": [{"date": "2025-01-10", "category": "food", "amount": 1' + "0" * 5000 + ', "description": "x"}]}',
        "[" * 100000,
    ],
)
def test_malformed_store_is_corrupt(tmp_path: Path, content: str) -> None:
    store = tmp_path / "expenses.json"
    store.write_text(content, encoding="utf-8")

    with pytest.raises(CorruptStoreError):
        load_ledger(store)


def test_unreadable_store_path_is_access_error(tmp_path: Path) -> None:
    """A directory sitting at the store path cannot be read as a ledger."""

    store = tmp_path / "expenses.json"
    store.mkdir()

    with pytest.raises(StoreAccessError):
        load_ledger(store)


def test_save_into_missing_directory_is_access_error(tmp_path: Path) -> None:
    store = tmp_path / "missing" / "expenses.json"

    with pytest.raises(StoreAccessError):
        save_ledger(_sample_ledger(), store)

    assert not store.exists()


def test_failed_write_removes_temporary_file(tmp_path: Path) -> None:
    """Text that cannot be encoded must not leave a half-written file behind."""

    store = tmp_path / "expenses.json"
    ledger = _sample_ledger()
    ledger.expenses[0].category = "caf\udce9"

    with pytest.raises(StoreAccessError):
        save_ledger(ledger, store)

    assert list(tmp_path.iterdir()) == []


def test_save_keeps_existing_store_permissions(tmp_path: Path) -> None:
    store = tmp_path / "expenses.json"
    save_ledger(_sample_ledger(), store)
    store.chmod(0o640)

    save_ledger(ExpenseLedger(), store)

    assert stat.S_IMODE(store.stat().st_mode) == 0o640
    assert load_ledger(store).is_empty()
