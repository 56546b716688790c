"""Immutable 9x9 Sudoku grid."""

from __future__ import annotations

from functools import cached_property
from typing import Iterator, Sequence

import numpy as np

from .errors import InvalidState
from .sequences import CachedSequence, DeferredCount, cached

UNSET = 0
SIZE = 9

_INDEX_BOARD = np.arange(SIZE * SIZE).reshape(SIZE, SIZE)

# flat cell indices of the 27 units: rows, then columns, then boxes
UNIT_INDICES = np.concatenate(
    [
        _INDEX_BOARD,
        _INDEX_BOARD.T,
        _INDEX_BOARD.reshape(3, 3, 3, 3).swapaxes(1, 2).reshape(SIZE, SIZE),
    ]
)

_SYMBOLS = np.arange(1, SIZE + 1)


class Grid:
    """Symbol assignment for all 81 cells; ``0`` marks an unset cell.

    Grids never change after construction. Equality and hashing use the full
    content, so grids can be used as dict keys and set members.
    """

    def __init__(self, values: Sequence[Sequence[int]] | np.ndarray):
        try:
            source = np.asarray(values)
        except (TypeError, ValueError) as exc:
            raise InvalidState(f"Grid source is not a 9x9 matrix: {exc}") from exc
        if source.shape != (SIZE, SIZE):
            raise InvalidState(f"Grid must be 9x9, got shape {source.shape}")
        if source.dtype.kind not in "iu":
            raise InvalidState(f"Grid values must be integers, got {source.dtype}")
        if source.min() < 0 or source.max() > SIZE:
            raise InvalidState("Grid values must be between 0 and 9")
        array = source.astype(np.int8)
        array.setflags(write=False)
        self._values = array
        self._hash = hash(array.tobytes())

    @classmethod
    def empty(cls) -> Grid:
        return cls(np.zeros((SIZE, SIZE), dtype=np.int8))

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, column = position
        return int(self._values[row, column])

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying matrix."""
        return self._values

    def to_rows(self) -> list[list[int]]:
        return self._values.tolist()

    def with_value(self, row: int, column: int, value: int) -> Grid:
        """Copy of this grid with a single cell replaced."""
        values = self._values.copy()
        values[row, column] = value
        return Grid(values)

    @property
    def prefilled_count(self) -> int:
        return int(np.count_nonzero(self._values))

    def _units(self) -> np.ndarray:
        return self._values.reshape(-1)[UNIT_INDICES]

    @cached_property
    def contains_contradictions(self) -> bool:
        """True if a nonzero symbol repeats within a row, column or box.

        ``False`` only means nothing obviously renders the grid unsolvable.
        """
        counts = (self._units()[:, :, None] == _SYMBOLS).sum(axis=1)
        return bool((counts > 1).any())

    @cached_property
    def is_complete(self) -> bool:
        """True if every unit holds all nine symbols."""
        units = np.sort(self._units(), axis=1)
        return bool((units == _SYMBOLS).all())

    @cached_property
    def solutions(self) -> CachedSequence[Grid]:
        """Lazily enumerated, memoized completions of this grid.

        Raises UnsolvableSudoku when the grid contradicts itself.
        """
        from .solver.backtracking import Solver

        return cached(Solver().solve(self))

    @cached_property
    def solution_count(self) -> DeferredCount:
        """Number of solutions, computed only as far as comparisons need."""
        if self.contains_contradictions:
            return DeferredCount(())
        return DeferredCount(self.solutions)

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self.to_rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._hash == other._hash and np.array_equal(
            self._values, other._values
        )

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        rows = ";".join(
            ",".join(str(v) if v else "-" for v in row) for row in self.to_rows()
        )
        return f"Grid({rows})"
