"""Output formatting utilities for CLI."""

from typing import List, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: Sequence[str], rows: Sequence[Sequence[str]], max_width: int = 40
) -> str:
    """Format data as a plain-text grid.

    Args:
        headers: Column headers
        rows: Data rows; short rows are padded with empty cells
        max_width: Maximum width of a column, longer cells are truncated

    Returns:
        The table as a multi-line string, or "" without headers
    """
    if not headers:
        return ""

    column_count = len(headers)
    padded_rows = [
        [str(cell) for cell in row][:column_count]
        + [""] * (column_count - len(row))
        for row in rows
    ]

    widths = [
        min(max(len(str(cell)) for cell in column), max_width)
        for column in zip(headers, *padded_rows)
    ]

    def render_line(cells: Sequence[str]) -> str:
        return "|" + "|".join(
            f" {str(cell)[:width]:<{width}} " for cell, width in zip(cells, widths)
        ) + "|"

    separator = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    lines: List[str] = [separator, render_line(headers), separator]
    if padded_rows:
        lines.extend(render_line(row) for row in padded_rows)
        lines.append(separator)
    return "\n".join(lines)
