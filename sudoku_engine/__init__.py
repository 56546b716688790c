"""Solve and generate 9x9 Sudoku puzzles."""

from .config import GeneratorConfig
from .errors import (
    GenerationExhausted,
    GridFormatError,
    InvalidState,
    SudokuError,
    UnsolvableSudoku,
)
from .generation import Generator
from .grid import Grid
from .solver import Solver
from .textio import format_one_liner, format_pretty, parse_grid

__all__ = [
    "GenerationExhausted",
    "Generator",
    "GeneratorConfig",
    "Grid",
    "GridFormatError",
    "InvalidState",
    "Solver",
    "SudokuError",
    "UnsolvableSudoku",
    "format_one_liner",
    "format_pretty",
    "parse_grid",
]
