"""Tests for whole-dollar rounding."""
import pytest

from pathfinder.engine.rounding import round_half_up


@pytest.mark.parametrize("value, expected", [
    (12.5, 13),
    (13.5, 14),
    (12.49, 12),
    (-2.5, -2),
    (-2.51, -3),
    (0.0, 0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
