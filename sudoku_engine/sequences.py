"""Lazy sequence helpers: replayable caching and deferred size comparison."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

_T = TypeVar("_T")


class CachedSequence(Generic[_T]):
    """Iterable that memoizes the elements pulled from a one-shot iterator.

    Every call to ``iter()`` starts from the first element; elements that
    were already produced are replayed, later ones are pulled from the
    underlying producer only when a consumer asks for them.
    """

    def __init__(self, source: Iterable[_T]):
        self._known: list[_T] = []
        self._source = iter(source)
        self._exhausted = False

    def __iter__(self) -> Iterator[_T]:
        index = 0
        while True:
            if index < len(self._known):
                yield self._known[index]
                index += 1
                continue
            if not self._pull():
                return

    def _pull(self) -> bool:
        if self._exhausted:
            return False
        try:
            item = next(self._source)
        except StopIteration:
            self._exhausted = True
            return False
        self._known.append(item)
        return True

    @property
    def known_count(self) -> int:
        """Number of elements produced so far."""
        return len(self._known)

    def ensure(self, count: int) -> int:
        """Pull until ``count`` elements are known or the source runs dry."""
        while len(self._known) < count and self._pull():
            pass
        return len(self._known)


def cached(source: Iterable[_T]) -> CachedSequence[_T]:
    """Wrap ``source`` in a CachedSequence unless it already is one."""
    if isinstance(source, CachedSequence):
        return source
    return CachedSequence(source)


class DeferredCount:
    """Size of a lazy sequence that is only computed as far as needed.

    Comparing against an int ``n`` pulls at most ``n + 1`` elements, and
    progress is kept between comparisons. ``count >= n`` pulls only ``n``.
    """

    def __init__(self, source: Iterable[object]):
        self._sequence = cached(source)

    @property
    def known(self) -> int:
        return self._sequence.known_count

    def _at_least(self, count: int) -> bool:
        return self._sequence.ensure(count) >= count

    def up_to(self, limit: int) -> int:
        """Exact size when it is below ``limit``, otherwise ``limit``."""
        return min(self._sequence.ensure(limit), limit)

    def exact(self) -> int:
        """Advance fully and return the size."""
        for _ in self._sequence:
            pass
        return self._sequence.known_count

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DeferredCount):
            return self.exact() == other.exact()
        if isinstance(other, int):
            return self._at_least(other) and not self._at_least(other + 1)
        return NotImplemented

    def __lt__(self, other: int) -> bool:
        return not self._at_least(other)

    def __le__(self, other: int) -> bool:
        return not self._at_least(other + 1)

    def __gt__(self, other: int) -> bool:
        return self._at_least(other + 1)

    def __ge__(self, other: int) -> bool:
        return self._at_least(other)

    def __repr__(self) -> str:
        return f"DeferredCount(known>={self.known})"
