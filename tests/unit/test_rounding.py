"""Unit tests for half-up rounding helpers."""
import math

import pytest

from stockscore.utils.rounding import round_half_up, rounded_ratio


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        ("value", "digits", "expected"),
        [
            (0.125, 2, 0.13),
            (2.5, 0, 3.0),
            (-0.125, 2, -0.13),
            (1.005, 2, 1.0),  # binary value is just below 1.005
            (0.11538443, 4, 0.1154),
        ],
    )
    def test_rounding(self, value, digits, expected):
        assert round_half_up(value, digits) == expected

    def test_builtin_round_differs_on_ties(self):
        assert round(2.5) == 2
        assert round_half_up(2.5, 0) == 3.0

    def test_non_finite_passthrough(self):
        assert math.isnan(round_half_up(math.nan, 2))
        assert round_half_up(math.inf, 2) == math.inf


class TestRoundedRatio:
    """Tests for rounded_ratio."""

    def test_ratio(self):
        assert rounded_ratio(1400, 1000) == 1.4

    def test_zero_denominator(self):
        assert rounded_ratio(5, 0) == math.inf
        assert rounded_ratio(0, 0) == 0.0
