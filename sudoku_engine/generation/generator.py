"""Puzzle generator driven by live solution counts."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

import numpy as np

from ..config import GeneratorConfig
from ..errors import GenerationExhausted, InvalidState
from ..grid import Grid
from ..solver.canvas import Canvas

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class Generator:
    """Builds puzzles with a prefilled cell count inside an inclusive range.

    The puzzle is grown in two phases. Seeding places random legal values
    until the grid has at least ``min_prefilled`` cells and no more than
    ``solution_ceiling`` solutions. Narrowing then steers towards one of a few
    sampled solutions, always placing the value that leaves the fewest
    solutions, until exactly one is left. If no sample narrows to a unique
    puzzle within ``max_prefilled`` cells, everything starts over.
    """

    def __init__(
        self,
        min_prefilled: int = 15,
        max_prefilled: int = 35,
        seed: Optional[int] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        if config is None:
            config = GeneratorConfig(
                min_prefilled=min_prefilled, max_prefilled=max_prefilled, seed=seed
            )
        config.validate()
        self.config = config

        seed_sequence = np.random.SeedSequence(config.seed)
        self.seed: int = int(seed_sequence.entropy)
        self._rng = np.random.default_rng(seed_sequence)

    @property
    def min_prefilled(self) -> int:
        return self.config.min_prefilled

    @property
    def max_prefilled(self) -> int:
        return self.config.max_prefilled

    def generate(self) -> Grid:
        """Return a puzzle with exactly one solution.

        Raises:
            GenerationExhausted: ``max_attempts`` is configured and was used up
        """
        _LOGGER.debug(
            "Generating sudoku with %d-%d prefilled cells (seed %x)",
            self.min_prefilled,
            self.max_prefilled,
            self.seed,
        )
        attempt = 0
        while self.config.max_attempts is None or attempt < self.config.max_attempts:
            attempt += 1
            puzzle = self._attempt()
            if puzzle is not None:
                _LOGGER.info(
                    "Generated sudoku with %d prefilled cells after %d attempt(s)",
                    puzzle.prefilled_count,
                    attempt,
                )
                return puzzle
            _LOGGER.debug("Attempt %d did not narrow to a unique puzzle, restarting", attempt)

        raise GenerationExhausted(
            f"No unique puzzle found within {self.config.max_attempts} attempts"
        )

    def _attempt(self) -> Optional[Grid]:
        grid = self._seed_grid()
        if grid is None:
            return None

        filled = grid.prefilled_count
        if grid.solution_count == 1 and filled <= self.max_prefilled:
            return grid
        if filled >= self.max_prefilled:
            return None

        solutions = list(grid.solutions)
        samples = self._pick_many(solutions, self.config.samples)
        _LOGGER.debug(
            "Seeded %d cells with %d solution(s), narrowing towards %d sample(s)",
            filled,
            len(solutions),
            len(samples),
        )
        for target in samples:
            candidate = self._narrow(grid, target)
            if candidate is not None:
                return candidate
        return None

    def _seed_grid(self) -> Optional[Grid]:
        """Phase A: random legal placements that keep at least one solution."""
        ceiling = self.config.solution_ceiling
        grid = Grid.empty()
        filled = 0
        while filled < self.min_prefilled or grid.solution_count > ceiling:
            canvas = Canvas(grid)
            unset = canvas.unset_cells()
            if not unset:
                return None
            cell = self._pick(unset)
            if cell.candidates.has_none:
                return None
            cell.set(self._pick(list(cell.candidates)))

            tryout = canvas.to_grid()
            if tryout.solution_count >= 1:
                grid = tryout
                filled += 1
        return grid

    def _narrow(self, grid: Grid, target: Grid) -> Optional[Grid]:
        """Phase B: fill cells towards ``target`` until one solution remains."""
        canvas = Canvas(grid)
        current = grid
        filled = grid.prefilled_count
        while filled < self.max_prefilled and (
            current.solution_count > 1 or filled < self.min_prefilled
        ):
            best = self._fewest_solutions(canvas, current, target)
            if best is None:
                break
            row, column, value = best
            canvas.set_cell_value(row, column, value)
            canvas.recalculate()
            current = canvas.to_grid()
            filled += 1

        if current.solution_count == 1 and self.min_prefilled <= filled <= self.max_prefilled:
            return current
        return None

    @staticmethod
    def _fewest_solutions(
        canvas: Canvas, current: Grid, target: Grid
    ) -> Optional[tuple[int, int, int]]:
        """The placement agreeing with ``target`` that leaves the fewest solutions.

        Only the value ``target`` holds in each unset cell is scored, not every
        legal candidate, so the result is the best move towards ``target``
        rather than the global minimum over all placements.
        """
        # no placement can leave more solutions than the grid already has
        best_count = current.solution_count.exact() + 1
        best: Optional[tuple[int, int, int]] = None
        for cell in sorted(canvas.unset_cells(), key=lambda c: (c.row, c.column)):
            value = target[cell.row, cell.column]
            if value not in cell.candidates:
                continue
            tryout = current.with_value(cell.row, cell.column, value)
            count = tryout.solution_count.up_to(best_count)
            if 0 < count < best_count:
                best_count = count
                best = (cell.row, cell.column, value)
                if count == 1:
                    break
        return best

    def _pick(self, items: Sequence[_T]) -> _T:
        if not items:
            raise InvalidState("Cannot pick from an empty sequence")
        return items[int(self._rng.integers(len(items)))]

    def _pick_many(self, items: Sequence[_T], count: int) -> list[_T]:
        if len(items) <= count:
            return list(items)
        indices = self._rng.choice(len(items), size=count, replace=False)
        return [items[int(i)] for i in indices]
