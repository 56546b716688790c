"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": [
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
        }


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")
    max_solutions: int | None = Field(
        default=None, ge=1, description="Maximum number of solutions to return"
    )


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether at least one solution was found")
    original: list[list[int]] = Field(description="Original grid")
    solutions: list[list[list[int]]] = Field(
        default_factory=list, description="Solutions found, in search order"
    )
    solution_count: int = Field(
        default=0, description="Number of solutions, capped at max_solutions"
    )
    unique: bool = Field(default=False, description="Whether exactly one solution exists")
    message: str = Field(description="Status message")


class GenerateRequest(BaseModel):
    """Request to generate a puzzle."""

    min_prefilled: int | None = Field(default=None, ge=0, le=81)
    max_prefilled: int | None = Field(default=None, ge=1, le=81)
    seed: int | None = Field(default=None, ge=0, description="RNG seed")


class GenerateResponse(BaseModel):
    """Response from generating a puzzle."""

    success: bool = Field(description="Whether a puzzle was generated")
    grid: list[list[int]] | None = Field(default=None, description="Generated puzzle")
    prefilled: int | None = Field(default=None, description="Number of prefilled cells")
    seed: int | None = Field(
        default=None, description="Seed that reproduces this puzzle"
    )
    message: str = Field(description="Status message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    min_prefilled: int = Field(description="Default minimum of prefilled cells")
    max_prefilled: int = Field(description="Default maximum of prefilled cells")
