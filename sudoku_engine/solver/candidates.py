"""Bitset of the Sudoku symbols 1-9."""

from __future__ import annotations

from typing import Iterable, Iterator

SYMBOLS = range(1, 10)

# bit 0 is never used; symbol n lives at bit n
ALL_MASK = 0b1111111110


class CandidateSet:
    """Mutable set of symbols backed by a single int.

    The unset sentinel ``0`` is never a member.
    """

    __slots__ = ("_flags",)

    def __init__(self, values: Iterable[int] = ()):
        self._flags = 0
        for value in values:
            self.add(value)

    @classmethod
    def from_mask(cls, mask: int) -> CandidateSet:
        result = cls()
        result._flags = mask & ALL_MASK
        return result

    @classmethod
    def full(cls) -> CandidateSet:
        return cls.from_mask(ALL_MASK)

    @property
    def mask(self) -> int:
        return self._flags

    def __contains__(self, value: int) -> bool:
        return bool(self._flags & (1 << value)) if 1 <= value <= 9 else False

    def add(self, value: int) -> None:
        _check_symbol(value)
        self._flags |= 1 << value

    def discard(self, value: int) -> None:
        _check_symbol(value)
        self._flags &= ~(1 << value)

    def set(self, value: int, present: bool) -> None:
        if present:
            self.add(value)
        else:
            self.discard(value)

    def reset(self) -> None:
        """Clear every flag."""
        self._flags = 0

    @property
    def has_none(self) -> bool:
        return self._flags & ALL_MASK == 0

    @property
    def has_all(self) -> bool:
        return self._flags & ALL_MASK == ALL_MASK

    @property
    def has_exactly_one(self) -> bool:
        flags = self._flags
        return flags != 0 and flags & (flags - 1) == 0

    @property
    def first(self) -> int:
        """Lowest member; the sole member when ``has_exactly_one`` holds."""
        if self.has_none:
            raise ValueError("No flag set, cannot return first")
        flags = self._flags
        return (flags & -flags).bit_length() - 1

    def __iter__(self) -> Iterator[int]:
        for value in SYMBOLS:
            if self._flags & (1 << value):
                yield value

    def __len__(self) -> int:
        return bin(self._flags).count("1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._flags == other._flags

    def copy(self) -> CandidateSet:
        return CandidateSet.from_mask(self._flags)

    def __repr__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"


def _check_symbol(value: int) -> None:
    if not 1 <= value <= 9:
        raise ValueError(f"Not a Sudoku symbol: {value}")
