"""Trailing-window event counters for limit moves and long bullish candles.

All counters look at the last ``years * 250`` bars (the whole series when it
is shorter) and compare against percent values, e.g. ``-9.8`` for a limit-down
close.
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from stockscore.core.constants import EventThresholds, TradingCalendar
from stockscore.indicators.technical import bar_column


def _trailing(series: Sequence[Any], years: int) -> list[Any]:
    return list(series[-(years * TradingCalendar.TRADING_DAYS_PER_YEAR):])


def count_long_bull_days(
    series: Sequence[Any],
    threshold: float = EventThresholds.LONG_BULL_PCT,
    years: int = 1,
) -> int:
    """Count long bullish days in the trailing window.

    A day qualifies when its intraday high is more than ``threshold`` percent
    above the open, or when its close-over-close change exceeds ``threshold``.

    Args:
        series: Ascending daily bars
        threshold: Percent threshold (default 6)
        years: Trailing window in 250-bar years (default 1)

    Returns:
        Number of qualifying days (0 for an empty series)
    """
    recent = _trailing(series, years)
    if not recent:
        return 0

    opens = bar_column(recent, "open_price")
    highs = bar_column(recent, "max_price")
    changes = bar_column(recent, "percent_change")

    # A missing open gives no intraday reading
    safe_opens = np.where(opens != 0, opens, 1.0)
    intraday_pct = np.where(opens != 0, (highs - opens) / safe_opens * 100, 0.0)
    return int(np.count_nonzero((intraday_pct > threshold) | (changes > threshold)))


def count_down_limit_days(series: Sequence[Any], years: int = 1) -> int:
    """Count limit-down closes (change <= -9.8%) in the trailing window."""
    recent = _trailing(series, years)
    if not recent:
        return 0
    changes = bar_column(recent, "percent_change")
    return int(np.count_nonzero(changes <= EventThresholds.DOWN_LIMIT_PCT))


def count_locked_limit_down_days(series: Sequence[Any], years: int = 1) -> int:
    """Count "one-word" limit-down days in the trailing window.

    The bar opened at its close (no trading above the cap) and the day's
    change is at or below the limit-down threshold.
    """
    recent = _trailing(series, years)
    if not recent:
        return 0
    opens = bar_column(recent, "open_price")
    closes = bar_column(recent, "close_price")
    changes = bar_column(recent, "percent_change")
    # A missing open and close are both 0 and must not read as a locked bar
    locked = (opens != 0) & (opens == closes)
    return int(np.count_nonzero(locked & (changes <= EventThresholds.DOWN_LIMIT_PCT)))


def consecutive_limit_up_runs(series: Sequence[Any]) -> list[int]:
    """Lengths of consecutive limit-up runs over the last 250 bars.

    A run is a maximal stretch of bars with change >= 9.9%. Only runs of at
    least two bars are reported, oldest first.

    Example:
        Changes ``[10, 10, 10, 1, 10, 10]`` give ``[3, 2]``.
    """
    recent = _trailing(series, 1)
    runs: list[int] = []
    count = 0
    for change in bar_column(recent, "percent_change"):
        if change >= EventThresholds.UP_LIMIT_PCT:
            count += 1
            continue
        if count >= EventThresholds.MIN_LIMIT_UP_RUN:
            runs.append(count)
        count = 0
    if count >= EventThresholds.MIN_LIMIT_UP_RUN:
        runs.append(count)
    return runs
