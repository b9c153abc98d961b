"""Input adapters that turn upstream price data into DailyBar series.

Two upstream shapes are supported:

- the dashboard's compact feed, one ``"date,open,close,min,max,volume,pct"``
  string per bar
- a pandas OHLCV DataFrame as returned by market data providers

Also provides the fixed-size "magnifier" window used to show statistics for a
slice of the chart.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any

import pandas as pd

from stockscore.core.constants import TradingCalendar
from stockscore.core.exceptions import BarParseError, DataValidationError
from stockscore.schemas.bar import DailyBar
from stockscore.schemas.scoring import StockStats
from stockscore.scoring.engine import compute_stock_stats
from stockscore.utils.structured_logging import get_logger

logger = get_logger(__name__)

COMPACT_FIELD_COUNT = 7
REQUIRED_COLUMNS = ("Open", "High", "Low", "Close", "Volume")


def _parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_compact_bars(rows: Iterable[str]) -> list[DailyBar]:
    """Parse compact feed rows into bars sorted by date.

    Args:
        rows: Strings of the form ``"2024-01-02,10.1,10.4,10.0,10.6,123400,2.97"``
            (date, open, close, min, max, volume, percent change)

    Returns:
        Bars in ascending date order. Unparseable numbers become NaN.

    Raises:
        BarParseError: If a row does not have exactly seven fields
    """
    bars = []
    for line_no, row in enumerate(rows, start=1):
        fields = [field.strip() for field in row.split(",")]
        if len(fields) != COMPACT_FIELD_COUNT:
            raise BarParseError(
                f"Row {line_no}: expected {COMPACT_FIELD_COUNT} fields, got {len(fields)}"
            )
        date, open_price, close_price, min_price, max_price, volume, percent_change = fields
        bars.append(
            DailyBar(
                date=date,
                open_price=_parse_number(open_price),
                close_price=_parse_number(close_price),
                min_price=_parse_number(min_price),
                max_price=_parse_number(max_price),
                volume=_parse_number(volume),
                percent_change=_parse_number(percent_change),
            )
        )

    bars.sort(key=lambda bar: bar.date)
    logger.debug("compact_bars_parsed", count=len(bars))
    return bars


def _optional(value: Any) -> float | None:
    return None if pd.isna(value) else float(value)


def bars_from_dataframe(data: pd.DataFrame) -> list[DailyBar]:
    """Convert an OHLCV DataFrame into bars sorted by date.

    Dates come from a ``Date`` column when present, otherwise from the index.
    A ``PercentChange`` column is used as-is; without one the close-over-close
    change is derived (NaN for the first bar). ``TurnoverRate`` is optional.

    Args:
        data: DataFrame with Open, High, Low, Close and Volume columns

    Returns:
        Bars in ascending date order; the DataFrame is not modified.

    Raises:
        DataValidationError: If a required column is missing
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in data.columns]
    if missing:
        raise DataValidationError(f"Missing required columns: {', '.join(missing)}")

    frame = data.copy()
    dates = frame["Date"] if "Date" in frame.columns else frame.index.to_series()
    frame["_date"] = list(pd.to_datetime(dates.to_numpy()).strftime("%Y-%m-%d"))
    frame = frame.sort_values("_date", kind="stable")

    if "PercentChange" in frame.columns:
        percent_change = frame["PercentChange"]
    else:
        percent_change = frame["Close"].astype(float).pct_change() * 100

    has_turnover = "TurnoverRate" in frame.columns
    bars = []
    for (_, row), change in zip(frame.iterrows(), percent_change):
        bars.append(
            DailyBar(
                date=row["_date"],
                open_price=_optional(row["Open"]),
                close_price=_optional(row["Close"]),
                min_price=_optional(row["Low"]),
                max_price=_optional(row["High"]),
                volume=_optional(row["Volume"]),
                percent_change=_optional(change),
                turnover_rate=_optional(row["TurnoverRate"]) if has_turnover else None,
            )
        )
    return bars


def window_around(
    series: Sequence[Any], index: int, size: int = TradingCalendar.MAGNIFIER_WINDOW
) -> list[Any]:
    """``size`` bars starting at ``index``, shifted left at the end of the series.

    Args:
        series: Ascending daily bars
        index: Position of the first bar of the window
        size: Window length in bars (default 120)

    Returns:
        New list of at most ``size`` bars (empty for an empty series)
    """
    if not series:
        return []
    start = min(max(index, 0), len(series) - 1)
    end = min(len(series) - 1, start + size - 1)
    if end - start + 1 < size:
        start = max(0, end - size + 1)
    return list(series[start : end + 1])


def window_stats(
    series: Sequence[Any], index: int, size: int = TradingCalendar.MAGNIFIER_WINDOW
) -> StockStats:
    """``compute_stock_stats`` over ``window_around(series, index, size)``."""
    return compute_stock_stats(window_around(series, index, size))
