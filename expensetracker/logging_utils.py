"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * get_logger - factory that configures structured logging for modules.
    * configure_root_logger - one-time root logger setup on stderr.
    * set_log_level - adjust verbosity after the root logger exists.

Usage:
    Modules import ``get_logger`` to create contextual loggers that include
    module names. The root logger is configured exactly once, and its level
    defaults to WARNING so command output on stdout is not interleaved with
    diagnostics unless the operator asks for them.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.WARNING) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def set_log_level(level: Union[int, str]) -> None:
    """Change the root logger level, accepting names such as ``"DEBUG"``."""

    configure_root_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
