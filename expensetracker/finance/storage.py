"""Mini README: Whole-file JSON persistence for the expense ledger.

Structure:
    * load_ledger - read a store file, returning an empty ledger on first run.
    * save_ledger - atomically replace the store file with the full ledger.

The store holds a single object ``{"expenses": [...]}``. Saving writes a
temporary file beside the target and renames it into place, so a crash
leaves either the previous store or the new one. Loading refuses anything
that is not a complete ledger instead of returning a partial one.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from ..logging_utils import get_logger
from .errors import CorruptStoreError, InvalidExpenseError, StoreAccessError
from .ledger import Expense, ExpenseLedger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


def load_ledger(path: PathLike) -> ExpenseLedger:
    """Load the ledger stored at ``path``, or an empty one if the file is absent."""

    store = Path(path)
    if not store.exists():
        LOGGER.info("No store at %s, starting with an empty ledger", store)
        return ExpenseLedger()

    try:
        raw = store.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise CorruptStoreError(f"Store {store} is not valid UTF-8 text.") from error
    except OSError as error:
        raise StoreAccessError(f"Could not read store {store}: {error}") from error

    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as error:
        raise CorruptStoreError(f"Store {store} is not valid JSON: {error}") from error

    if not isinstance(payload, dict) or not isinstance(payload.get("expenses"), list):
        raise CorruptStoreError(f"Store {store} does not contain an 'expenses' list.")

    expenses = []
    for position, record in enumerate(payload["expenses"], start=1):
        if not isinstance(record, dict):
            raise CorruptStoreError(f"Store {store} record {position} is not an object.")
        try:
            expenses.append(Expense.from_dict(record))
        except InvalidExpenseError as error:
            raise CorruptStoreError(f"Store {store} record {position} is invalid: {error}") from error

    LOGGER.debug("Loaded %s expenses from %s", len(expenses), store)
    return ExpenseLedger(expenses)


def _store_mode(store: Path) -> int:
    """Permission bits for the replacement file: the existing store's, or the umask default."""

    try:
        return stat.S_IMODE(store.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_ledger(ledger: ExpenseLedger, path: PathLike) -> None:
    """Replace the store at ``path`` with the full contents of ``ledger``."""

    store = Path(path)
    document = json.dumps(ledger.as_dict(), indent=2, ensure_ascii=False) + "\n"
    directory = store.parent

    try:
        handle, temp_name = tempfile.mkstemp(prefix=f".{store.name}.", suffix=".tmp", dir=directory)
    except OSError as error:
        raise StoreAccessError(f"Could not write store {store}: {error}") from error

    replaced = False
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as stream:
            stream.write(document)
            stream.flush()
            os.fsync(stream.fileno())
        os.chmod(temp_name, _store_mode(store))
        os.replace(temp_name, store)
        replaced = True
    except (OSError, UnicodeError) as error:
        raise StoreAccessError(f"Could not write store {store}: {error}") from error
    finally:
        if not replaced:
            Path(temp_name).unlink(missing_ok=True)

    LOGGER.info("Saved %s expenses to %s", len(ledger), store)
