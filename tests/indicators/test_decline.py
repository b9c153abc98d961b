"""Tests for incremental decline detection."""

import copy

from stockscore.indicators.decline import (
    INSUFFICIENT_DATA,
    NO_SCENARIO_MATCHED,
    detect_incremental_decline,
)
from tests.utils.mock_data import flat_bars, regime_bars


class TestDetectIncrementalDecline:
    """Tests for the decline-with-rising-volume scan."""

    def test_insufficient_data(self):
        result = detect_incremental_decline(flat_bars(755))

        assert result.is_decline is False
        assert result.reason == INSUFFICIENT_DATA
        assert result.scenarios == []
        assert result.final_scenario_result is None

    def test_flat_series_never_declines(self, flat_series):
        """800 flat bars evaluate the three scenarios that fit, none match."""
        result = detect_incremental_decline(flat_series)

        assert result.is_decline is False
        assert result.reason == NO_SCENARIO_MATCHED
        assert [s.label for s in result.scenarios] == [
            "half-year vs prior 1yr",
            "half-year vs prior 2yr",
            "1yr vs prior 2yr",
        ]
        assert all(not s.volume_increased for s in result.scenarios)
        assert result.final_scenario_result == result.scenarios[-1]

    def test_half_year_decline_on_rising_volume(self, decline_series):
        result = detect_incremental_decline(decline_series)

        assert result.is_decline is True
        assert result.scenario == "half-year vs prior 1yr"
        assert result.reason is None
        final = result.final_scenario_result
        assert final.avg_close_recent == 85.0
        assert final.avg_close_compare == 100.0
        assert final.avg_vol_recent == 1400.0
        assert final.avg_vol_compare == 1000.0
        assert final.price_ratio == 0.85
        assert final.volume_ratio == 1.4
        assert len(result.scenarios) == 1

    def test_match_on_later_scenario(self):
        """Volume only looks higher against the two-year prior window."""
        bars = regime_bars(
            (524, 120.0, 600.0),
            (250, 85.0, 1400.0),
            (126, 85.0, 1400.0),
        )

        result = detect_incremental_decline(bars)

        assert result.is_decline is True
        assert result.scenario == "half-year vs prior 2yr"
        assert len(result.scenarios) == 2
        first = result.scenarios[0]
        assert first.price_declined is True
        assert first.volume_increased is False
        final = result.final_scenario_result
        assert final.avg_close_compare == 102.64
        assert final.avg_vol_compare == 997.0

    def test_sharp_increase_stops_scan(self):
        bars = regime_bars((674, 100.0, 1000.0), (126, 150.0, 2000.0))

        result = detect_incremental_decline(bars)

        assert result.is_decline is False
        assert len(result.scenarios) == 1
        assert result.scenarios[0].sharp_increase is True
        assert result.scenarios[0].price_declined is False

    def test_moderate_increase_keeps_scanning(self):
        bars = regime_bars((674, 100.0, 1000.0), (126, 115.0, 1000.0))

        result = detect_incremental_decline(bars)

        assert result.is_decline is False
        assert len(result.scenarios) == 3
        assert result.scenarios[0].sharp_increase is False
        assert result.scenarios[2].price_declined is True

    def test_scenarios_longer_than_series_are_skipped(self):
        result = detect_incremental_decline(flat_bars(1008))

        assert len(result.scenarios) == 5

    def test_does_not_mutate_input(self, decline_series):
        snapshot = copy.deepcopy(decline_series)

        detect_incremental_decline(decline_series)

        assert decline_series == snapshot
