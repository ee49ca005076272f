"""
Tests for score arithmetic.
"""
import pytest

from emplyo.services.scoring import average_score, percentage_score, round_half_up


def test_round_half_up():
    assert round_half_up(5, 2) == 3
    assert round_half_up(15, 2) == 8
    assert round_half_up(250, 3) == 83
    assert round_half_up(7, 3) == 2


def test_average_score():
    assert average_score([8]) == 8
    assert average_score([7, 8]) == 8
    assert average_score([6, 7, 7]) == 7
    assert average_score([8, 6, 7]) == 7
    assert average_score([0, 0, 1]) == 0


def test_average_score_requires_scores():
    with pytest.raises(ValueError):
        average_score([])


def test_percentage_score():
    assert percentage_score(5, 6) == 83
    assert percentage_score(1, 8) == 13
    assert percentage_score(4, 4) == 100
    assert percentage_score(0, 4) == 0


def test_percentage_score_empty_quiz():
    with pytest.raises(ValueError):
        percentage_score(0, 0)
