"""Tests for the symbol bitset."""

import pytest

from sudoku_engine.solver.candidates import CandidateSet


def _subset(bits: int) -> list[int]:
    return [value for value in range(1, 10) if bits >> (value - 1) & 1]


def test_get_and_set():
    subject = CandidateSet()
    for value in range(1, 10):
        subject.set(value, True)
        assert value in subject
        subject.set(value, False)
        assert value not in subject


def test_has_exactly_one():
    subject = CandidateSet()
    for value in range(1, 10):
        subject.reset()
        subject.add(value)
        assert subject.has_exactly_one

        subject.add(value % 9 + 1)
        assert not subject.has_exactly_one


def test_first_returns_lowest_member():
    assert CandidateSet([5, 9]).first == 5
    assert CandidateSet([6, 1]).first == 1
    assert CandidateSet([3, 7, 4]).first == 3
    assert CandidateSet([8]).first == 8


def test_first_of_empty_set_raises():
    with pytest.raises(ValueError):
        CandidateSet().first


def test_predicates_hold_for_every_subset():
    for bits in range(512):
        members = _subset(bits)
        subject = CandidateSet(members)
        assert subject.has_exactly_one == (len(members) == 1)
        assert subject.has_none == (not members)
        assert subject.has_all == (len(members) == 9)
        assert list(subject) == members
        assert len(subject) == len(members)


def test_predicates_after_clearing_from_full_set():
    subject = CandidateSet.full()
    assert subject.has_all
    for value in range(1, 9):
        subject.discard(value)
    assert not subject.has_all
    assert subject.has_exactly_one
    assert subject.first == 9
    subject.discard(9)
    assert subject.has_none


def test_unset_symbol_is_never_a_member():
    subject = CandidateSet.full()
    assert 0 not in subject
    with pytest.raises(ValueError):
        subject.add(0)
    with pytest.raises(ValueError):
        subject.add(10)


def test_repr_lists_members():
    assert repr(CandidateSet([2, 7])) == "[2, 7]"
