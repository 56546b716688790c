"""Solver module exports."""

from .backtracking import Solver, deduce_singles
from .candidates import CandidateSet
from .canvas import Canvas, Cell, Unit
from .explain import explain_solution

__all__ = [
    "CandidateSet",
    "Canvas",
    "Cell",
    "Solver",
    "Unit",
    "deduce_singles",
    "explain_solution",
]
