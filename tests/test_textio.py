"""Tests for the textual grid format."""

import pytest

from conftest import CLASSIC_PUZZLE_TEXT
from sudoku_engine.errors import GridFormatError
from sudoku_engine.textio import format_one_liner, format_pretty, parse_grid


def test_parse_classic_puzzle(classic_puzzle):
    assert parse_grid(CLASSIC_PUZZLE_TEXT) == classic_puzzle


def test_one_liner_matches_input(classic_puzzle):
    assert format_one_liner(classic_puzzle) == CLASSIC_PUZZLE_TEXT


def test_parse_accepts_zero_whitespace_and_newlines(classic_puzzle):
    text = CLASSIC_PUZZLE_TEXT.replace("-", "0").replace(";", ";\n ")
    assert parse_grid(text) == classic_puzzle


def test_parse_rejects_bad_characters():
    with pytest.raises(GridFormatError):
        parse_grid(CLASSIC_PUZZLE_TEXT.replace("5", "x", 1))


def test_parse_rejects_wrong_cell_count():
    with pytest.raises(GridFormatError):
        parse_grid(CLASSIC_PUZZLE_TEXT + ",1")
    with pytest.raises(GridFormatError):
        parse_grid("1,2,3")


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_grid("")


def test_pretty_layout(classic_solution):
    lines = format_pretty(classic_solution).split("\n")
    assert lines[0] == "534 678 912"
    assert lines[3] == ""
    assert lines[4] == "859 761 423"
    assert len(lines) == 11
