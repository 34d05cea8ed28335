"""Aligned environment table."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from gitlabctl.models.drift import EnvironmentRow, ProjectGroup
from gitlabctl.output.themes import group_color

HEADERS: tuple[str, ...] = ("PROJECT", "ENVIRONMENT", "DEPLOYMENT", "COMMIT", "UPDATED")
SEPARATOR = "  "
EMPTY_MESSAGE = "There is nothing to show"


def column_widths(rows: list[EnvironmentRow]) -> list[int]:
    """Widest cell per column, never narrower than the header."""
    widths = [len(h) for h in HEADERS]
    for row in rows:
        for i, cell in enumerate(row.cells()):
            widths[i] = max(widths[i], len(cell))
    return widths


def format_line(cells: tuple[str, ...], widths: list[int]) -> str:
    return SEPARATOR.join(cell.ljust(width) for cell, width in zip(cells, widths))


def render_table(groups: list[ProjectGroup], console: Console) -> None:
    rows = [r for g in groups for r in g.rows]
    if not rows:
        console.print(EMPTY_MESSAGE, highlight=False)
        return

    widths = column_widths(rows)
    console.print(Text(format_line(HEADERS, widths)), soft_wrap=True)
    for group in groups:
        color = group_color(group)
        for row in group.rows:
            console.print(Text(format_line(row.cells(), widths), style=color), soft_wrap=True)
