"""Tests for the piecewise scorer."""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from stockscore.scoring.piecewise import ScoreStep, ScoringTable, score_value
from stockscore.scoring.tables import (
    CONSECUTIVE_LIMIT_UP_TABLE,
    LOCKED_LIMIT_DOWN_TABLE,
    PRICE_INC_PERCENT_TABLE,
    VOLATILITY_TABLE,
    VOLUME_INC_PERCENT_TABLE,
)

TABLE = ScoringTable.from_rows(
    20,
    (0, 10, 0, 10),
    (10, 20, 10, 5),
)


@pytest.mark.unit
class TestScoreValue:
    """Tests for lookup and interpolation."""

    def test_from_rows_builds_steps(self):
        assert TABLE.steps[1] == ScoreStep(start=10, end=20, score_start=10, score_end=5)

    def test_value_at_step_start(self):
        assert score_value(TABLE, 10) == 10 * (20 / 10)

    def test_interpolates_within_step(self):
        # Halfway through [0, 10) scores 5 and weight 20 doubles it
        assert score_value(TABLE, 5) == 10.0
        assert score_value(TABLE, 15) == 15.0

    def test_approaches_step_end(self):
        assert score_value(TABLE, 9.9999) == pytest.approx(10 * 2, abs=0.01)

    def test_end_is_exclusive(self):
        assert score_value(TABLE, 20) == 0.0

    def test_zero_nan_and_none_score_zero(self):
        assert score_value(TABLE, 0) == 0.0
        assert score_value(TABLE, math.nan) == 0.0
        assert score_value(TABLE, None) == 0.0

    def test_outside_every_step(self):
        assert score_value(TABLE, -1) == 0.0
        assert score_value(TABLE, math.inf) == 0.0

    def test_rounded_to_two_decimals(self):
        assert score_value(VOLUME_INC_PERCENT_TABLE, 1.4) == 12.38

    def test_first_matching_step_wins(self):
        table = ScoringTable.from_rows(10, (0, 5, 1, 1), (0, 5, 9, 9))

        assert score_value(table, 2) == 1.0

    def test_table_without_steps(self):
        assert score_value(ScoringTable(weight=20), 3) == 0.0

    @given(
        st.floats(min_value=-50, max_value=50),
        st.floats(min_value=-50, max_value=50),
        st.floats(min_value=0.01, max_value=0.99),
    )
    @settings(max_examples=50)
    def test_score_between_scaled_endpoints(self, score_start, score_end, fraction):
        table = ScoringTable.from_rows(30, (1, 3, score_start, score_end))

        result = score_value(table, 1 + 2 * fraction)

        low, high = sorted((score_start * 3, score_end * 3))
        assert low - 0.01 <= result <= high + 0.01


@pytest.mark.unit
class TestScoringTables:
    """Spot checks of the composite score tables."""

    def test_low_volatility_scores_full_weight(self):
        assert score_value(VOLATILITY_TABLE, 0.05) == 30.0
        assert score_value(VOLATILITY_TABLE, 0.3) == 30.0

    def test_high_volatility_scores_nothing(self):
        assert score_value(VOLATILITY_TABLE, 3.5) == 0.0

    def test_price_ratio(self):
        assert score_value(PRICE_INC_PERCENT_TABLE, 0.85) == 17.2

    def test_locked_limit_down_is_penalty_only(self):
        assert score_value(LOCKED_LIMIT_DOWN_TABLE, 2) == 0.0
        assert score_value(LOCKED_LIMIT_DOWN_TABLE, 3) == -10.0
        assert all(score_value(LOCKED_LIMIT_DOWN_TABLE, n) <= 0 for n in range(0, 120))

    def test_long_limit_up_run_is_penalized(self):
        assert score_value(CONSECUTIVE_LIMIT_UP_TABLE, 2) == 5.0
        assert score_value(CONSECUTIVE_LIMIT_UP_TABLE, 3) == 6.25
        assert score_value(CONSECUTIVE_LIMIT_UP_TABLE, 12) == -12.0
