"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import Sequence

from ..core.constants import BLOCK_CHAR


def format_grid(rows: Sequence[str]) -> str:
    """Render grid rows with column/row headers, blocks as ``X``."""

    width = len(rows[0]) if rows else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(rows):
        row_render = " ".join(f"{'X' if symbol == BLOCK_CHAR else symbol:>2}" for symbol in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid_text: str, *, label: str | None = None, stream=None) -> None:
    """Print a grid text in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid_text.split("\n")), file=stream)
