"""Shared grids for the test suite."""

import pytest

from sudoku_engine.grid import Grid

CLASSIC_PUZZLE_TEXT = (
    "5,3,-,-,7,-,-,-,-;6,-,-,1,9,5,-,-,-;-,9,8,-,-,-,-,6,-;"
    "8,-,-,-,6,-,-,-,3;4,-,-,8,-,3,-,-,1;7,-,-,-,2,-,-,-,6;"
    "-,6,-,-,-,-,2,8,-;-,-,-,4,1,9,-,-,5;-,-,-,-,8,-,-,7,9"
)

CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# row 1 holds 1-8, but the 9 it needs is already in the last column
DEAD_END_PUZZLE = [
    [1, 2, 3, 4, 5, 6, 7, 8, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 9],
] + [[0] * 9 for _ in range(7)]


def assert_sound(solution: Grid, puzzle: Grid) -> None:
    assert solution.is_complete
    assert not solution.contains_contradictions
    for row in range(9):
        for col in range(9):
            if puzzle[row, col]:
                assert solution[row, col] == puzzle[row, col]


@pytest.fixture
def classic_puzzle() -> Grid:
    return Grid(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution() -> Grid:
    return Grid(CLASSIC_SOLUTION)


@pytest.fixture
def duplicate_five_grid() -> Grid:
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = 5
    rows[0][6] = 5
    return Grid(rows)
