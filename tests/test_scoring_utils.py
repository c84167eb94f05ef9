"""Tests for scoring arithmetic helpers"""
import pytest

from nimrev.analysis.scoring_utils import (
    calculate_risk_level,
    clamp01,
    nz,
    round_half_up,
    weighted_average
)


@pytest.mark.parametrize("value,expected", [(-0.5, 0.0), (0.25, 0.25), (1.7, 1.0)])
def test_clamp01(value, expected):
    assert clamp01(value) == expected


def test_nz():
    assert nz(None) == 0
    assert nz(0.3) == 0.3


def test_weighted_average():
    assert weighted_average([1, 0, 0.5], [0.5, 0.3, 0.2]) == pytest.approx(0.6)
    assert weighted_average([], []) == 0


@pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (51.49, 51)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("score,level", [
    (100, "critical"),
    (80, "critical"),
    (79.9, "high"),
    (60, "high"),
    (30, "medium"),
    (0, "low"),
    (-1, "unknown"),
])
def test_calculate_risk_level(score, level):
    assert calculate_risk_level(score) == level
