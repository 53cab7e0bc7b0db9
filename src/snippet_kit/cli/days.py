"""``snippet-kit days`` / ``snippet-kit day <name>`` — day classification.

``days`` renders a Rich table of the whole week on the stderr console;
``day`` prints a single classification to stdout.
"""

from __future__ import annotations

import sys

from snippet_kit.cli import exit_codes
from snippet_kit.cli.console import console, output
from snippet_kit.core.days import WEEKEND, get_day_type
from snippet_kit.core.models import Day


def _week_rows() -> list[tuple[str, str]]:
    """Return ``(day, classification)`` rows for Monday..Sunday."""
    return [(day.value, get_day_type(day)) for day in Day]


def _print_plain_days_table(rows: list[tuple[str, str]]) -> None:
    """Render the week table without Rich."""
    print("\nsnippet-kit days", file=sys.stderr)
    print("=" * 24, file=sys.stderr)
    print(f"{'Day':<12} {'Type':<10}", file=sys.stderr)
    print("-" * 24, file=sys.stderr)
    for name, day_type in rows:
        print(f"{name:<12} {day_type:<10}", file=sys.stderr)
    print(file=sys.stderr)


def run_days_table() -> int:
    """Render the classification of every day of the week."""
    rows = _week_rows()

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_days_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="snippet-kit days",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Day", style="bold", min_width=10)
    table.add_column("Type", justify="center", min_width=8)
    for name, day_type in rows:
        style = "yellow" if day_type == WEEKEND else "green"
        table.add_row(name, f"[{style}]{day_type}[/{style}]")

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS


def run_day(name: str) -> int:
    """Print the classification of the day called *name*.

    Raises
    ------
    InvalidDayError
        When *name* is not a day of the week.
    """
    output.line(get_day_type(Day.parse(name)))
    return exit_codes.SUCCESS
