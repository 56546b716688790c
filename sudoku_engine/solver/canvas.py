"""Mutable solving workspace built from an immutable Grid."""

from __future__ import annotations

from ..errors import InvalidState
from ..grid import SIZE, UNSET, Grid
from .candidates import ALL_MASK, SYMBOLS, CandidateSet


class Unit:
    """Read-only view over the nine cells of a row, column or 3x3 box."""

    __slots__ = ("_canvas", "positions", "name")

    def __init__(self, canvas: Canvas, positions: list[tuple[int, int]], name: str):
        if len(positions) != SIZE:
            raise ValueError(f"A unit spans exactly 9 cells, got {len(positions)}")
        self._canvas = canvas
        self.positions = positions
        self.name = name

    @classmethod
    def row(cls, canvas: Canvas, row: int) -> Unit:
        if not 0 <= row < SIZE:
            raise ValueError("Row index out of range")
        return cls(canvas, [(row, col) for col in range(SIZE)], f"row {row + 1}")

    @classmethod
    def column(cls, canvas: Canvas, column: int) -> Unit:
        if not 0 <= column < SIZE:
            raise ValueError("Column index out of range")
        return cls(canvas, [(row, column) for row in range(SIZE)], f"column {column + 1}")

    @classmethod
    def box(cls, canvas: Canvas, row: int, column: int) -> Unit:
        """Box containing the cell at (row, column)."""
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise ValueError("Cell index out of range")
        top, left = (row // 3) * 3, (column // 3) * 3
        positions = [(top + r, left + c) for r in range(3) for c in range(3)]
        return cls(canvas, positions, f"box {top // 3 * 3 + left // 3 + 1}")

    def __contains__(self, value: int) -> bool:
        values = self._canvas._values
        return any(values[r][c] == value for r, c in self.positions)

    def present(self) -> CandidateSet:
        """Symbols already assigned somewhere in this unit."""
        values = self._canvas._values
        mask = 0
        for r, c in self.positions:
            mask |= 1 << values[r][c]
        return CandidateSet.from_mask(mask)

    @property
    def is_complete(self) -> bool:
        return all(value in self for value in SYMBOLS)

    def __repr__(self) -> str:
        return f"Unit({self.name})"


class Cell:
    """One position on a Canvas together with its candidate set."""

    __slots__ = ("_canvas", "row", "column", "candidates", "_units")

    def __init__(self, canvas: Canvas, row: int, column: int):
        self._canvas = canvas
        self.row = row
        self.column = column
        self.candidates = CandidateSet()
        self._units: tuple[Unit, Unit, Unit] | None = None

    @property
    def value(self) -> int:
        return self._canvas._values[self.row][self.column]

    @property
    def has_been_set(self) -> bool:
        return self.value != UNSET

    @property
    def units(self) -> tuple[Unit, Unit, Unit]:
        """Row, column and box of this cell."""
        if self._units is None:
            self._units = (
                self._canvas.rows[self.row],
                self._canvas.columns[self.column],
                self._canvas.boxes[(self.row // 3) * 3 + self.column // 3],
            )
        return self._units

    def recalculate(self) -> None:
        """Recompute candidates from the row, column and box of this cell."""
        taken = 0
        for unit in self.units:
            taken |= unit.present().mask
        self.candidates = CandidateSet.from_mask(ALL_MASK & ~taken)

    def set(self, value: int) -> None:
        self._canvas.set_cell_value(self.row, self.column, value)

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.column

    def __repr__(self) -> str:
        return f"({self.row + 1},{self.column + 1})"


class Canvas:
    """Solution workspace seeded from one Grid snapshot.

    Cells may be written once. Candidate sets are only refreshed by an
    explicit ``recalculate()``; read them only after recalculating. A canvas
    belongs to a single solve or generation attempt and is never shared.
    """

    def __init__(self, grid: Grid):
        self._values: list[list[int]] = grid.to_rows()
        self.rows = [Unit.row(self, r) for r in range(SIZE)]
        self.columns = [Unit.column(self, c) for c in range(SIZE)]
        self.boxes = [Unit.box(self, (b // 3) * 3, (b % 3) * 3) for b in range(SIZE)]
        self._cells = [[Cell(self, r, c) for c in range(SIZE)] for r in range(SIZE)]
        self.recalculate()

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, column = position
        return self._cells[row][column]

    def set_cell_value(self, row: int, column: int, value: int) -> None:
        if value == UNSET:
            raise InvalidState("Cannot assign the unset value to a cell")
        if value not in SYMBOLS:
            raise InvalidState(f"Not a Sudoku symbol: {value}")
        if self._values[row][column] != UNSET:
            raise InvalidState(f"Cell ({row + 1},{column + 1}) already set")
        self._values[row][column] = value

    def recalculate(self) -> None:
        """Refresh the candidate set of every cell."""
        row_masks = [unit.present().mask for unit in self.rows]
        column_masks = [unit.present().mask for unit in self.columns]
        box_masks = [unit.present().mask for unit in self.boxes]
        for r, cells in enumerate(self._cells):
            for c, cell in enumerate(cells):
                taken = row_masks[r] | column_masks[c] | box_masks[(r // 3) * 3 + c // 3]
                cell.candidates = CandidateSet.from_mask(ALL_MASK & ~taken)

    def unset_cells(self) -> list[Cell]:
        """Cells without a value; sort by (row, column) when order matters."""
        return [
            cell
            for r, cells in enumerate(self._cells)
            for c, cell in enumerate(cells)
            if self._values[r][c] == UNSET
        ]

    def to_grid(self) -> Grid:
        return Grid(self._values)

    def render_candidates(self) -> str:
        """One-line rendering with ``1#2#`` style candidate lists for unset cells."""
        rows = []
        for r, cells in enumerate(self._cells):
            tokens = []
            for cell in cells:
                if cell.has_been_set:
                    tokens.append(str(cell.value))
                else:
                    tokens.append("".join(f"{value}#" for value in cell.candidates))
            rows.append(",".join(tokens))
        return ";".join(rows)
