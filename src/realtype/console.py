"""Rich console utilities for the realtype command line."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from realtype.classifiers import get_real_type, get_type
from realtype.domain.models import TypeCount


def make_consoles(color: bool = True) -> tuple[Console, Console]:
    """Build the (stdout, stderr) console pair."""
    return Console(no_color=not color), Console(stderr=True, no_color=not color)


def print_error(console: Console, message: str, hint: str | None = None) -> None:
    """Print formatted error message."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    console.print(Panel(content, title="Error", border_style="red"))


def print_types_table(console: Console, values: Sequence[Any]) -> None:
    """Print a value / shallow type / real type table."""
    table = Table(show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Value")
    table.add_column("Type", style="cyan")
    table.add_column("Real type", style="magenta")

    for i, value in enumerate(values, 1):
        table.add_row(str(i), Pretty(value), get_type(value), get_real_type(value))

    console.print(table)


def print_counts_table(console: Console, counts: Sequence[TypeCount]) -> None:
    """Print real type counts, one row per tag."""
    table = Table(show_header=True)
    table.add_column("Real type", style="magenta")
    table.add_column("Count", justify="right")

    for tag, count in counts:
        table.add_row(tag, str(count))

    console.print(table)
