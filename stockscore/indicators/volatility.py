"""Cross-instrument volatility coefficients.

Both readings are dimensionless, so instruments trading at very different
price levels can be compared directly:

- V1 (``compute_volatility``): std/mean of the MA series plus a weighted,
  power-scaled fluctuation term from the extreme-trimmed close range.
- V2 (``compute_volatility_v2``): std/mean of the MA series plus the std of
  its first differences.
"""

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from stockscore.core.constants import VolatilityThresholds
from stockscore.indicators.technical import (
    bar_column,
    moving_average_series,
    population_stats,
    recent_years,
)
from stockscore.schemas.scoring import VolatilityDetails, VolatilityResult
from stockscore.utils.rounding import round_half_up


def _lookback_slice(series: Sequence[Any], ma_window: int, years: int) -> list[Any] | None:
    """Bars used for a volatility reading, or None when data is insufficient."""
    min_bars = ma_window + 2
    if ma_window < 1 or len(series) < min_bars:
        return None
    return recent_years(series, years, min_bars=min_bars)


def _fluctuation(distance: float) -> float:
    # A trimmed extreme on the wrong side of the MA mean counts as no fluctuation.
    return max(distance, 0.0) ** VolatilityThresholds.FLUCTUATION_EXPONENT


def compute_volatility(
    series: Sequence[Any],
    ma_window: int = VolatilityThresholds.DEFAULT_MA_WINDOW,
    years: int = VolatilityThresholds.DEFAULT_YEARS,
) -> VolatilityResult:
    """Calculate the dispersion volatility coefficient (V1).

    Steps:
        1. Keep the last ``years`` calendar years (at least ``ma_window + 2`` bars).
        2. Build the ``ma_window`` moving average of close.
        3. ``std_over_mean`` = population std / mean of the MA series.
        4. Sort closes, drop the lowest and highest 0.5%, take max and min.
        5. ``max_fluct`` = max(up, down) ** 1.5 where up/down are the distances
           of that max/min from the MA mean, relative to the mean.
        6. ``volatility`` = ``std_over_mean + 0.7 * max_fluct``.

    Args:
        series: Ascending daily bars
        ma_window: Moving average window (default 60)
        years: Calendar years of history to use (default 5)

    Returns:
        VolatilityResult with ratios rounded to 4 decimals and prices to 2.
        The all-zero result is returned when the series has fewer than
        ``ma_window + 2`` bars.
    """
    bars = _lookback_slice(series, ma_window, years)
    if bars is None:
        return VolatilityResult.zero()

    ma = moving_average_series(bars, ma_window)
    mean, std = population_stats(ma)
    if mean == 0:
        return VolatilityResult.zero()
    std_over_mean = std / mean

    closes = np.sort(bar_column(bars, "close_price"))
    ignore = math.floor(len(closes) * VolatilityThresholds.EXTREME_TRIM_FRACTION)
    trimmed = closes[ignore : len(closes) - ignore]
    price_max = float(trimmed.max())
    price_min = float(trimmed.min())

    up_fluct = (price_max - mean) / mean
    down_fluct = (mean - price_min) / mean
    max_fluct = max(_fluctuation(up_fluct), _fluctuation(down_fluct))

    volatility = std_over_mean + max_fluct * VolatilityThresholds.FLUCTUATION_WEIGHT

    return VolatilityResult(
        volatility=round_half_up(volatility, 4),
        std_over_mean=round_half_up(std_over_mean, 4),
        max_fluct=round_half_up(max_fluct, 4),
        details=VolatilityDetails(
            ma_std=round_half_up(std, 2),
            ma_mean=round_half_up(mean, 2),
            price_max=round_half_up(price_max, 2),
            price_min=round_half_up(price_min, 2),
        ),
    )


def volatility_with_diff(
    values: NDArray[np.float64],
    alpha: float = 1.0,
    beta: float = 1.0,
) -> float:
    """Combine relative dispersion and first-difference dispersion.

    Formula: ``alpha * std(values) / mean(values) + beta * std(diff(values))``

    Args:
        values: Series to measure (typically a moving average)
        alpha: Weight of the std/mean term
        beta: Weight of the first-difference std term

    Returns:
        Combined volatility rounded to 4 decimals (0.0 for a zero-mean series)
    """
    mean, std = population_stats(values)
    if mean == 0:
        return 0.0
    _, diff_std = population_stats(np.diff(values))
    return round_half_up(alpha * (std / mean) + beta * diff_std, 4)


def compute_volatility_v2(
    series: Sequence[Any],
    ma_window: int = VolatilityThresholds.DEFAULT_MA_WINDOW,
    years: int = VolatilityThresholds.DEFAULT_YEARS,
) -> float | VolatilityResult:
    """Calculate the difference volatility coefficient (V2).

    Uses the same lookback restriction and moving average as
    ``compute_volatility`` and then applies ``volatility_with_diff``.

    Args:
        series: Ascending daily bars
        ma_window: Moving average window (default 60)
        years: Calendar years of history to use (default 5)

    Returns:
        Volatility as a float, or ``VolatilityResult.zero()`` when the series
        has fewer than ``ma_window + 2`` bars.
    """
    bars = _lookback_slice(series, ma_window, years)
    if bars is None:
        return VolatilityResult.zero()

    return volatility_with_diff(moving_average_series(bars, ma_window))
