"""Sudoku solver using constraint propagation and backtracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..errors import UnsolvableSudoku
from ..grid import Grid
from .canvas import Canvas, Cell


@dataclass(frozen=True)
class Expansion:
    """Outcome of propagating one search node.

    Exactly one of ``solution``, ``empty_cell`` or ``branch_cell`` is set,
    unless the node ran into a contradiction, in which case all are None.
    """

    propagated: Grid
    solution: Optional[Grid] = None
    empty_cell: Optional[tuple[int, int]] = None
    branch_cell: Optional[tuple[int, int]] = None
    branch_values: tuple[int, ...] = ()

    @property
    def is_dead_end(self) -> bool:
        return self.solution is None and self.branch_cell is None

    def branches(self) -> Iterator[Grid]:
        """Child grids, one per candidate of the branch cell, lowest value first."""
        if self.branch_cell is None:
            return
        row, column = self.branch_cell
        for value in self.branch_values:
            yield self.propagated.with_value(row, column, value)


class Solver:
    """Enumerates every solution of a Sudoku lazily."""

    def solve(self, grid: Grid) -> Iterator[Grid]:
        """
        Start a depth-first search over all completions of ``grid``.

        Args:
            grid: Puzzle to solve

        Returns:
            Iterator of solved grids; nothing is computed until it is consumed

        Raises:
            UnsolvableSudoku: the prefilled values already contradict each other
        """
        if grid.contains_contradictions:
            raise UnsolvableSudoku("Contains contradicting prefilled values.")
        return self._search(grid)

    def _search(self, root: Grid) -> Iterator[Grid]:
        # each frame iterates the sibling branches of one search node
        stack: list[Iterator[Grid]] = [iter((root,))]
        while stack:
            grid = next(stack[-1], None)
            if grid is None:
                stack.pop()
                continue
            try:
                expansion = self.expand(grid)
            except UnsolvableSudoku:
                continue
            if expansion.solution is not None:
                yield expansion.solution
            elif expansion.branch_cell is not None:
                stack.append(expansion.branches())

    def expand(self, grid: Grid) -> Expansion:
        """Propagate sole candidates of ``grid`` and decide how to continue."""
        if grid.contains_contradictions:
            raise UnsolvableSudoku("Contains contradicting prefilled values.")

        canvas = Canvas(grid)
        unset, empty_cell, _ = _propagate(canvas)
        propagated = canvas.to_grid()

        if empty_cell is not None:
            return Expansion(propagated, empty_cell=empty_cell.position)
        if propagated.contains_contradictions:
            return Expansion(propagated)
        if not unset:
            if propagated.is_complete:
                return Expansion(propagated, solution=propagated)
            return Expansion(propagated)

        cell = min(unset, key=lambda c: (c.row, c.column))
        return Expansion(
            propagated,
            branch_cell=cell.position,
            branch_values=tuple(cell.candidates),
        )


def _propagate(canvas: Canvas) -> tuple[list[Cell], Optional[Cell], int]:
    """Fill cells with exactly one candidate until a pass assigns nothing.

    Returns the remaining unset cells, the first cell found without any
    candidate (if any) and the number of cells assigned.
    """
    unset = canvas.unset_cells()
    assigned = 0
    while unset:
        found = False
        for cell in unset:
            if cell.candidates.has_none:
                return unset, cell, assigned
            if cell.candidates.has_exactly_one:
                cell.set(cell.candidates.first)
                assigned += 1
                found = True

        if not found:
            break

        canvas.recalculate()
        unset = canvas.unset_cells()
    return unset, None, assigned


def deduce_singles(grid: Grid) -> tuple[Grid, int]:
    """Apply only forced (single candidate) assignments, without guessing.

    Returns the deduced grid and the number of cells that were filled.
    """
    if grid.contains_contradictions:
        raise UnsolvableSudoku("Contains contradicting prefilled values.")
    canvas = Canvas(grid)
    _, _, assigned = _propagate(canvas)
    return canvas.to_grid(), assigned

