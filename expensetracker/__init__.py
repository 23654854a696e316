"""Mini README: Core package initializer for the expense tracker.

This module exposes convenience imports so callers can reach the logging
helpers and package version without knowing the exact module structure. It
stays lightweight so importing the package never touches the ledger store.
"""

from .logging_utils import get_logger

__version__ = "0.3.0"

__all__ = ["__version__", "get_logger"]
