"""CLI utilities and shared helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from statewalk.settings import get_rich_override

console = Console()


def should_use_rich() -> bool:
    """Determine whether to use rich styling for answers and tables.

    Detection priority:
    1. ``STATEWALK_RICH`` env var / ``[tool.statewalk].rich``
    2. ``NO_COLOR`` env var
    3. ``CI`` env var
    4. ``stdout.isatty()``
    """
    override = get_rich_override()
    if override is not None:
        return override
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def validate_file(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> Path | None:
    """Validate that a path is a file."""
    if value is None:
        return None
    path = Path(value)
    if not path.is_file():
        raise click.BadParameter(f"File not found: {value}")
    return path


def output_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[Any]],
) -> None:
    """Output data as a rich table, or plain lines without rich.

    Args:
        title: Table title
        columns: List of (name, style) tuples
        rows: List of row data
    """
    if not should_use_rich():
        for row in rows:
            click.echo("  ".join(str(cell) for cell in row))
        return

    from rich.table import Table

    table = Table(title=title)
    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)


def format_duration(seconds: float) -> str:
    """Format duration in seconds as human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m {secs:.0f}s"
