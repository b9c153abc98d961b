"""Sideways breakout detection: years since price last broke below the recent low."""

from collections.abc import Sequence
from typing import Any

import numpy as np

from stockscore.core.constants import SidewaysThresholds, TradingCalendar
from stockscore.indicators.technical import bar_column
from stockscore.utils.rounding import round_half_up


def sideways_break_below_years(series: Sequence[Any]) -> int:
    """Years since a low more than 5% below the trailing 250-bar low.

    Finds the lowest ``min_price`` of the last 250 bars, then walks backwards
    from the bar just before that low looking for the most recent bar whose
    low is below 95% of it. The gap, in bars, is converted to years with 245
    bars per year.

    Args:
        series: Ascending daily bars

    Returns:
        Whole years, rounded half up; 0 when the series is empty or no
        earlier bar traded that low.
    """
    lows = bar_column(series, "min_price")
    if len(lows) == 0:
        return 0

    window_start = max(0, len(lows) - SidewaysThresholds.WINDOW)
    window = lows[window_start:]
    # argmin returns the first occurrence of the minimum
    min_idx = int(np.argmin(window))
    window_min = float(window[min_idx])

    before = lows[: window_start + min_idx]
    lower = np.flatnonzero(before < window_min * SidewaysThresholds.BREAK_FACTOR)
    if len(lower) == 0:
        return 0

    last_lower_idx = int(lower[-1])
    years = (len(before) - last_lower_idx) / TradingCalendar.SIDEWAYS_DAYS_PER_YEAR
    return int(round_half_up(years, 0))
