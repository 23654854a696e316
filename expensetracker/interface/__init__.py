"""Mini README: Interactive interfaces for the expense tracker.

Exports the Typer application that powers the command line. Rendering and
summary filter selection live in sibling modules so they can be exercised
without parsing arguments.
"""

from .cli import cli

__all__ = ["cli"]
