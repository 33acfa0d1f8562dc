"""Column-aligned markdown tables."""

from __future__ import annotations

from typing import List, Sequence


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub-flavored table; each column is as wide as its widest cell."""
    widths = [len(header) for header in headers]
    for row in rows:
        if len(row) != len(headers):
            raise ValueError(f"Expected {len(headers)} cells, got {len(row)}")
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    lines: List[str] = [
        _render_row(headers, widths),
        _render_row(["-" * width for width in widths], widths),
    ]
    lines.extend(_render_row(row, widths) for row in rows)
    return "".join(f"{line}\n" for line in lines)


def _render_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    padded = (cell.ljust(width) for cell, width in zip(cells, widths))
    return "| " + " | ".join(padded) + " |"


__all__ = ["render_table"]
