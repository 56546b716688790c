"""Exception types raised by the Sudoku engine."""


class SudokuError(Exception):
    """Base class for all engine errors."""


class UnsolvableSudoku(SudokuError):
    """The starting grid contradicts itself before any search happens."""


class InvalidState(SudokuError):
    """An operation would break an invariant of a grid, canvas or generator."""


class GridFormatError(SudokuError, ValueError):
    """Textual grid input could not be parsed."""


class GenerationExhausted(SudokuError):
    """The generator hit its configured attempt limit without a unique puzzle."""
