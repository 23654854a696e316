"""Mini README: Centralised configuration model for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to resolve where the ledger store lives, which
    currency glyph is used when printing amounts, and how chatty logging is.
    Every field can be overridden with an ``EXPENSE_TRACKER_`` prefixed
    environment variable or a ``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    store_path: Path = Field(
        Path("expenses.json"),
        description="JSON file holding the persisted ledger.",
    )
    currency_symbol: str = Field(
        "₹",
        description="Glyph printed in front of amounts. Display only, never stored.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logger level name (DEBUG, INFO, WARNING, ERROR).",
    )

    class Config:
        env_prefix = "EXPENSE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("store_path", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand ``~`` so stores can live in the user's home directory."""

        return Path(value).expanduser()

    @validator("log_level")
    def _check_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
