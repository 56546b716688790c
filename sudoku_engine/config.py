"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional, TypeVar

from .errors import InvalidState

_T = TypeVar("_T", int, float)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class GeneratorConfig:
    min_prefilled: int = 25
    max_prefilled: int = 50
    seed: Optional[int] = None
    solution_ceiling: int = 64
    samples: int = 3
    max_attempts: Optional[int] = None

    def merged(self, **overrides: Optional[int]) -> GeneratorConfig:
        """Copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> None:
        if self.min_prefilled < 0 or self.max_prefilled <= 0:
            raise InvalidState("The number of prefilled cells must be a positive range.")
        if self.min_prefilled > self.max_prefilled:
            raise InvalidState(
                f"Empty prefilled range [{self.min_prefilled}, {self.max_prefilled}]"
            )
        if self.max_prefilled > 81:
            raise InvalidState("A grid has at most 81 cells to prefill.")
        if self.solution_ceiling < 1 or self.samples < 1:
            raise InvalidState("solution_ceiling and samples must be positive")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise InvalidState("max_attempts must be positive when set")
        if self.seed is not None and self.seed < 0:
            raise InvalidState("seed must be a non-negative integer")


def config_from_env() -> GeneratorConfig:
    """Generator defaults, overridable through ``SUDOKU_*`` variables."""
    max_attempts = _env("SUDOKU_MAX_ATTEMPTS", 0)
    return GeneratorConfig(
        min_prefilled=_env("SUDOKU_MIN_PREFILLED", 25),
        max_prefilled=_env("SUDOKU_MAX_PREFILLED", 50),
        solution_ceiling=_env("SUDOKU_SOLUTION_CEILING", 64),
        max_attempts=max_attempts if max_attempts > 0 else None,
    )


def max_solutions_from_env() -> int:
    """Cap on the number of solutions an API response lists."""
    return max(1, _env("SUDOKU_MAX_SOLUTIONS", 10))


def api_max_attempts_from_env() -> int:
    """Retry cap for HTTP generation when ``SUDOKU_MAX_ATTEMPTS`` leaves it unbounded."""
    return max(1, _env("SUDOKU_API_MAX_ATTEMPTS", 50))
