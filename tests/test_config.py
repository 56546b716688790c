"""Tests for environment driven configuration."""

import pytest

from sudoku_engine.config import (
    GeneratorConfig,
    _env,
    api_max_attempts_from_env,
    config_from_env,
    max_solutions_from_env,
)
from sudoku_engine.errors import InvalidState


def test_env_falls_back_on_missing_or_bad_values(monkeypatch):
    monkeypatch.delenv("SUDOKU_TEST_VALUE", raising=False)
    assert _env("SUDOKU_TEST_VALUE", 3) == 3

    monkeypatch.setenv("SUDOKU_TEST_VALUE", "not-a-number")
    assert _env("SUDOKU_TEST_VALUE", 3) == 3

    monkeypatch.setenv("SUDOKU_TEST_VALUE", "12")
    assert _env("SUDOKU_TEST_VALUE", 3) == 12


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SUDOKU_MIN_PREFILLED", "30")
    monkeypatch.setenv("SUDOKU_MAX_PREFILLED", "45")
    monkeypatch.setenv("SUDOKU_MAX_ATTEMPTS", "5")

    config = config_from_env()
    assert config.min_prefilled == 30
    assert config.max_prefilled == 45
    assert config.max_attempts == 5
    assert config.solution_ceiling == 64


def test_zero_attempts_means_unbounded(monkeypatch):
    monkeypatch.setenv("SUDOKU_MAX_ATTEMPTS", "0")
    assert config_from_env().max_attempts is None


def test_max_solutions_is_at_least_one(monkeypatch):
    monkeypatch.setenv("SUDOKU_MAX_SOLUTIONS", "-4")
    assert max_solutions_from_env() == 1


def test_validate():
    GeneratorConfig(min_prefilled=0, max_prefilled=81).validate()
    with pytest.raises(InvalidState):
        GeneratorConfig(min_prefilled=10, max_prefilled=5).validate()
    with pytest.raises(InvalidState):
        GeneratorConfig(seed=-3).validate()


def test_merged_skips_unset_overrides():
    base = GeneratorConfig(min_prefilled=20, max_prefilled=40, max_attempts=3)
    merged = base.merged(min_prefilled=None, max_prefilled=60, seed=9)
    assert merged == GeneratorConfig(
        min_prefilled=20, max_prefilled=60, seed=9, max_attempts=3
    )


def test_api_max_attempts(monkeypatch):
    monkeypatch.delenv("SUDOKU_API_MAX_ATTEMPTS", raising=False)
    assert api_max_attempts_from_env() == 50

    monkeypatch.setenv("SUDOKU_API_MAX_ATTEMPTS", "0")
    assert api_max_attempts_from_env() == 1
