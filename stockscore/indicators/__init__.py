"""Indicators computed over a chronologically ordered series of daily bars.

Available indicators:
- Moving average of close
- Dispersion volatility (V1) and difference volatility (V2)
- Long bullish day, limit-down and locked limit-down counts
- Consecutive limit-up runs
- Incremental decline (price down on rising volume)
- Sideways break-below years
"""

from .technical import (
    bar_column,
    moving_average_series,
    population_stats,
    recent_years,
    simple_moving_average,
)
from .volatility import (
    compute_volatility,
    compute_volatility_v2,
    volatility_with_diff,
)
from .events import (
    consecutive_limit_up_runs,
    count_down_limit_days,
    count_locked_limit_down_days,
    count_long_bull_days,
)
from .decline import detect_incremental_decline
from .breakout import sideways_break_below_years

__all__ = [
    "bar_column",
    "moving_average_series",
    "population_stats",
    "recent_years",
    "simple_moving_average",
    "compute_volatility",
    "compute_volatility_v2",
    "volatility_with_diff",
    "consecutive_limit_up_runs",
    "count_down_limit_days",
    "count_locked_limit_down_days",
    "count_long_bull_days",
    "detect_incremental_decline",
    "sideways_break_below_years",
]
