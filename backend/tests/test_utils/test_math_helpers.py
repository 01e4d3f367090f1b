"""Tests for clamping and rounding helpers."""

from sfcm.utils.math_helpers import clamp, clamp01, is_finite, round_half_up


def test_round_half_up_ties():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.5) == -1


def test_round_half_up_non_ties():
    assert round_half_up(5.1) == 5
    assert round_half_up(5.9) == 6
    assert round_half_up(-2.4) == -2


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp01(1.2) == 1.0
    assert clamp01(-0.1) == 0.0
    assert clamp01(0.3) == 0.3


def test_is_finite():
    assert is_finite(1.0, 2.0)
    assert not is_finite(1.0, float("nan"))
    assert not is_finite(float("inf"))
