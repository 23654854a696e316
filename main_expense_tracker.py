"""Mini README: Entry point script for the expense tracker CLI.

Running ``python main_expense_tracker.py --help`` is equivalent to the
installed ``expense-tracker`` console script.
"""

from __future__ import annotations

from expensetracker.interface import cli

if __name__ == "__main__":
    cli()
