"""Textual grid format: comma separated cells, semicolon separated rows.

Unset cells are written as ``-`` (``0`` is accepted on input), e.g.
``5,3,-,-,7,-,-,-,-;6,-,-,1,9,5,-,-,-;...``.
"""

from __future__ import annotations

import re

from .errors import GridFormatError
from .grid import SIZE, Grid

_SEPARATORS = re.compile(r"[,;\n]")


def parse_grid(text: str) -> Grid:
    """Parse 81 cells from ``text``; whitespace and empty tokens are ignored."""
    values: list[int] = []
    for token in _SEPARATORS.split(text):
        token = token.strip()
        if not token:
            continue
        if token == "-":
            values.append(0)
        elif len(token) == 1 and token.isdigit():
            values.append(int(token))
        else:
            raise GridFormatError(f"Please input only digits or '-', got {token!r}")

    if len(values) != SIZE * SIZE:
        raise GridFormatError(f"Expected 81 cells, got {len(values)}")

    return Grid([values[row * SIZE:(row + 1) * SIZE] for row in range(SIZE)])


def format_one_liner(grid: Grid) -> str:
    return ";".join(
        ",".join(str(value) if value else "-" for value in row) for row in grid
    )


def format_pretty(grid: Grid) -> str:
    """Block layout with the 3x3 boxes separated by spaces and blank lines."""
    lines = []
    for row_index, row in enumerate(grid):
        chunks = ["".join(str(v) for v in row[i:i + 3]) for i in range(0, SIZE, 3)]
        lines.append(" ".join(chunks))
        if row_index % 3 == 2 and row_index < SIZE - 1:
            lines.append("")
    return "\n".join(lines)
