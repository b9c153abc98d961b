"""Series access and moving-average helpers.

The engine reads bars position by position and never trusts individual
numeric fields: a missing, ``None``, NaN or non-numeric value contributes
exactly ``0.0`` to every aggregate. Skipping such values instead would shift
historical scores, so the zero rule is applied once, here, when a column is
extracted.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Attribute name -> accepted mapping keys (snake_case, wire name, legacy feed name)
FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "date": ("date",),
    "open_price": ("open_price", "openPrice"),
    "close_price": ("close_price", "closePrice"),
    "min_price": ("min_price", "minPrice"),
    "max_price": ("max_price", "maxPrice"),
    "volume": ("volume", "chenJiaoLiang"),
    "percent_change": ("percent_change", "percentChange", "zhangDieFu"),
}


def _raw_field(bar: Any, field: str) -> Any:
    if isinstance(bar, Mapping):
        for key in FIELD_KEYS.get(field, (field,)):
            if key in bar:
                return bar[key]
        return None
    return getattr(bar, field, None)


def _as_number(raw: Any) -> float:
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def bar_column(series: Sequence[Any], field: str) -> NDArray[np.float64]:
    """Extract one numeric field from every bar as a float array.

    Args:
        series: Bars as ``DailyBar`` models, mappings or attribute objects
        field: Snake_case field name, e.g. ``"close_price"``

    Returns:
        Array with one value per bar; missing/NaN/non-numeric values are 0.0
    """
    return np.array([_as_number(_raw_field(bar, field)) for bar in series], dtype=float)


def bar_year(bar: Any) -> int:
    """Calendar year from the ``YYYY-MM-DD`` prefix of a bar's date (0 if unreadable)."""
    raw = _raw_field(bar, "date")
    try:
        return int(str(raw)[:4])
    except ValueError:
        return 0


def recent_years(series: Sequence[Any], years: int | None, min_bars: int = 0) -> list[Any]:
    """Restrict a series to its last ``years`` calendar years.

    Keeps bars whose year is at least ``last_year - years + 1``. When that
    leaves fewer than ``min_bars`` bars, the last ``min_bars`` bars of the full
    series are used instead.

    Args:
        series: Ascending bars
        years: Calendar years to keep; falsy keeps everything
        min_bars: Minimum number of bars to return when available

    Returns:
        New list of bars (the input is never modified)
    """
    bars = list(series)
    if not years or not bars:
        return bars

    first_year = bar_year(bars[-1]) - years + 1
    restricted = [bar for bar in bars if bar_year(bar) >= first_year]
    if len(restricted) < min_bars:
        restricted = bars[-min_bars:]
    return restricted


def simple_moving_average(values: NDArray[np.float64], window: int) -> NDArray[np.float64]:
    """Mean over every full window of ``window`` consecutive values.

    Example:
        >>> simple_moving_average(np.array([1.0, 2.0, 3.0, 4.0]), 2)
        array([1.5, 2.5, 3.5])
    """
    if window <= 0:
        raise ValueError("Window must be greater than 0")
    if len(values) < window:
        return np.array([], dtype=float)
    kernel = np.ones(window) / window
    return np.convolve(values, kernel, mode="valid")


def moving_average_series(series: Sequence[Any], window: int) -> NDArray[np.float64]:
    """Simple moving average of closing price.

    Element ``i`` is the mean close of bars ``[i, i + window)`` of the given
    series, so the result has ``len(series) - window + 1`` values.

    Args:
        series: Ascending bars
        window: Window length in bars (>= 1)

    Returns:
        MA array; empty when the series is shorter than ``window``
    """
    return simple_moving_average(bar_column(series, "close_price"), window)


def population_stats(values: NDArray[np.float64]) -> tuple[float, float]:
    """Mean and population standard deviation (0.0, 0.0 for an empty array)."""
    if len(values) == 0:
        return 0.0, 0.0
    return float(np.mean(values)), float(np.std(values))
