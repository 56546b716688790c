"""Tests for the memoizing sequence and the deferred count."""

import itertools

from sudoku_engine.sequences import CachedSequence, DeferredCount, cached


class _CountingSource:
    def __init__(self, size: int):
        self.size = size
        self.pulled = 0

    def __iter__(self):
        for index in range(self.size):
            self.pulled += 1
            yield index


def test_cached_sequence_replays_without_recomputation():
    source = _CountingSource(5)
    sequence = cached(source)

    assert list(sequence) == [0, 1, 2, 3, 4]
    assert list(sequence) == [0, 1, 2, 3, 4]
    assert source.pulled == 5


def test_cached_sequence_pulls_on_demand():
    source = _CountingSource(100)
    sequence = cached(source)

    iterator = iter(sequence)
    assert [next(iterator) for _ in range(3)] == [0, 1, 2]
    assert source.pulled == 3

    # a second consumer replays and then continues from the same producer
    assert list(itertools.islice(sequence, 4)) == [0, 1, 2, 3]
    assert source.pulled == 4


def test_cached_is_a_no_op_on_cached_sequences():
    sequence = CachedSequence(range(3))
    assert cached(sequence) is sequence


def test_deferred_count_advances_only_as_needed():
    source = _CountingSource(1000)
    count = DeferredCount(source)

    assert count >= 1
    assert source.pulled == 1
    assert count > 10
    assert source.pulled == 11
    assert not count < 5
    assert source.pulled == 11


def test_deferred_count_against_short_sequences():
    assert DeferredCount([]) == 0
    assert DeferredCount(["a"]) == 1
    assert DeferredCount(["a", "b"]) != 1
    assert DeferredCount(["a", "b"]) > 1
    assert DeferredCount(["a", "b"]) <= 2
    assert DeferredCount(range(7)).exact() == 7


def test_deferred_count_up_to():
    source = _CountingSource(50)
    count = DeferredCount(source)

    assert count.up_to(4) == 4
    assert source.pulled == 4
    assert count.up_to(100) == 50
