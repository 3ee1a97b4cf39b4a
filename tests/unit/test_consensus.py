"""Tests for the jury consensus policy."""

from exam_rag.verification.consensus import compute_consensus


def test_unanimous():
    c = compute_consensus([2, 2, 2])
    assert c.index == 2
    assert c.agreement_percentage == 100.0
    assert c.has_tie is False


def test_majority():
    c = compute_consensus([1, 2, 2])
    assert c.index == 2
    assert c.agreement_percentage == 66.67
    assert c.has_tie is False


def test_three_way_split_resolves_to_lowest_index():
    c = compute_consensus([3, 1, 2])
    assert c.index == 1
    assert c.agreement_percentage == 33.33
    assert c.has_tie is True


def test_two_way_tie():
    c = compute_consensus([4, 3, 4, 3])
    assert c.index == 3
    assert c.agreement_percentage == 50.0
    assert c.has_tie is True


def test_no_votes():
    c = compute_consensus([])
    assert c.index is None
    assert c.agreement_percentage == 0.0
    assert c.has_tie is False


def test_single_vote():
    c = compute_consensus([4])
    assert c.index == 4
    assert c.agreement_percentage == 100.0
