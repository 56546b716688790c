"""API routes for the Sudoku engine."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..config import (
    api_max_attempts_from_env,
    config_from_env,
    max_solutions_from_env,
)
from ..errors import GenerationExhausted, InvalidState, UnsolvableSudoku
from ..generation.generator import Generator
from ..grid import Grid
from ..models.schemas import (
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    SolveRequest,
    SolveResponse,
)
from ..solver.backtracking import Solver

router = APIRouter()
_LOGGER = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    config = config_from_env()

    return HealthResponse(
        status="healthy",
        min_prefilled=config.min_prefilled,
        max_prefilled=config.max_prefilled,
    )


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        },
        "max_solutions": 10
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    cells = request.grid.cells
    limit = request.max_solutions or max_solutions_from_env()

    try:
        grid = Grid(cells)
    except InvalidState as exc:
        return SolveResponse(
            success=False,
            original=cells,
            message=f"Invalid Sudoku grid format: {exc}",
        )

    try:
        solutions = []
        for solution in Solver().solve(grid):
            solutions.append(solution.to_rows())
            if len(solutions) > limit:
                break
    except UnsolvableSudoku as exc:
        return SolveResponse(success=False, original=cells, message=str(exc))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not solutions:
        return SolveResponse(
            success=False, original=cells, message="Puzzle has no solution"
        )

    unique = len(solutions) == 1
    if unique:
        message = "Puzzle solved successfully"
    elif len(solutions) > limit:
        message = f"Puzzle has more than {limit} solutions"
    else:
        message = f"Puzzle has {len(solutions)} solutions"

    return SolveResponse(
        success=True,
        original=cells,
        solutions=solutions[:limit],
        solution_count=min(len(solutions), limit),
        unique=unique,
        message=message,
    )


@router.post(
    "/api/v1/sudoku:generate", response_model=GenerateResponse, tags=["Sudoku"]
)
def generate_sudoku(request: GenerateRequest):
    """Generate a puzzle with a unique solution.

    Unset range bounds fall back to the ``SUDOKU_*`` environment defaults.
    Retries are always capped here, by ``SUDOKU_API_MAX_ATTEMPTS`` unless
    ``SUDOKU_MAX_ATTEMPTS`` sets a limit of its own.
    """
    config = config_from_env()
    if config.max_attempts is None:
        config = config.merged(max_attempts=api_max_attempts_from_env())
    config = config.merged(
        min_prefilled=request.min_prefilled,
        max_prefilled=request.max_prefilled,
        seed=request.seed,
    )
    try:
        generator = Generator(config=config)
    except InvalidState as exc:
        return GenerateResponse(success=False, message=str(exc))

    try:
        puzzle = generator.generate()
    except GenerationExhausted as exc:
        _LOGGER.warning("Generation gave up (seed %x): %s", generator.seed, exc)
        return GenerateResponse(success=False, seed=generator.seed, message=str(exc))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return GenerateResponse(
        success=True,
        grid=puzzle.to_rows(),
        prefilled=puzzle.prefilled_count,
        seed=generator.seed,
        message="Puzzle generated successfully",
    )
