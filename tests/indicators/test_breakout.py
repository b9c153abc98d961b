"""Tests for sideways break-below years."""

from stockscore.indicators.breakout import sideways_break_below_years
from tests.utils.mock_data import flat_bars, make_bars


class TestSidewaysBreakBelowYears:
    """Tests for years since the last meaningfully lower low."""

    def test_empty_series(self):
        assert sideways_break_below_years([]) == 0

    def test_flat_series_has_no_earlier_lower_low(self):
        assert sideways_break_below_years(flat_bars(1000)) == 0

    def test_rising_then_flat_series(self):
        """Earlier lows close to the window low round down to 0 years."""
        closes = [float(i) for i in range(1, 751)] + [750.0] * 250

        assert sideways_break_below_years(make_bars(closes)) == 0

    def test_years_since_lower_low(self):
        # Window low 100 at offset 0, last bar below 95 at index 99:
        # (750 - 99) / 245 = 2.66 years
        bars = make_bars([50.0] * 100 + [100.0] * 900)

        assert sideways_break_below_years(bars) == 3

    def test_lower_low_within_five_percent_is_ignored(self):
        bars = make_bars([96.0] * 100 + [100.0] * 900)

        assert sideways_break_below_years(bars) == 0

    def test_search_starts_before_window_minimum(self):
        """Bars inside the window but before its minimum are searched too."""
        closes = [100.0] * 800 + [120.0] * 100 + [90.0] * 100
        closes[850] = 50.0
        bars = make_bars(closes)

        # window starts at 750, minimum 50 at index 850; nothing before is < 47.5
        assert sideways_break_below_years(bars) == 0

    def test_uses_min_price(self):
        bars = make_bars([100.0] * 1000)
        for bar in bars[:245]:
            bar["minPrice"] = 10.0

        # Window low 100 at offset 0 (index 750); last lower bar at 244
        # (750 - 244) / 245 = 2.07 years
        assert sideways_break_below_years(bars) == 2

    def test_short_series(self):
        assert sideways_break_below_years(make_bars([5.0, 4.0, 3.0])) == 0
