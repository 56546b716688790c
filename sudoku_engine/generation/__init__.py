"""Generation module exports."""

from .generator import Generator

__all__ = ["Generator"]
