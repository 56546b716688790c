"""Human readable trace of the solver's search tree.

Every line starts with a marker:

- ``O`` the grid a node starts from
- ``L`` the grid after sole candidates were propagated
- ``F`` the node failed
- ``S`` the node is a solution
- ``B`` the cell the node branches on and its candidates
- ``G`` the value guessed for the following sub tree

Sub trees are indented by two spaces per level.
"""

from __future__ import annotations

from typing import Iterator

from ..errors import UnsolvableSudoku
from ..grid import Grid
from ..textio import format_one_liner
from .backtracking import Solver


def explain_solution(grid: Grid, solver: Solver | None = None) -> Iterator[str]:
    """Yield the trace of solving ``grid`` line by line."""
    yield from _explain(grid, solver or Solver(), 0)


def _explain(grid: Grid, solver: Solver, depth: int) -> Iterator[str]:
    indent = "  " * depth
    yield f"{indent}O {format_one_liner(grid)}"

    try:
        expansion = solver.expand(grid)
    except UnsolvableSudoku:
        yield f"{indent}F Contradicts."
        return

    yield f"{indent}L {format_one_liner(expansion.propagated)}"

    if expansion.empty_cell is not None:
        row, column = expansion.empty_cell
        yield f"{indent}F Cell ({row + 1},{column + 1}) has no possible values."
        return
    if expansion.solution is not None:
        yield f"{indent}S Solved."
        return
    if expansion.branch_cell is None:
        yield f"{indent}F Contradicts."
        return

    row, column = expansion.branch_cell
    values = ", ".join(str(v) for v in expansion.branch_values)
    yield f"{indent}B ({row + 1},{column + 1}): [{values}]"
    for value, child in zip(expansion.branch_values, expansion.branches()):
        yield f"{indent}G {value}:"
        yield from _explain(child, solver, depth + 1)

    yield f"{indent}Tree Done"
