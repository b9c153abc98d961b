"""Volatility, pattern detection and composite scoring for daily equity bars.

Every public function is pure: it reads a chronologically ordered sequence of
daily bars and returns freshly built result objects. Nothing is fetched,
cached or persisted, and the input series is never mutated.
"""

from .indicators import (
    bar_column,
    consecutive_limit_up_runs,
    compute_volatility,
    compute_volatility_v2,
    count_down_limit_days,
    count_locked_limit_down_days,
    count_long_bull_days,
    detect_incremental_decline,
    moving_average_series,
    recent_years,
    sideways_break_below_years,
    volatility_with_diff,
)
from .schemas import (
    DailyBar,
    DeclineResult,
    RankedInstrument,
    ScenarioResult,
    ScoreComponent,
    ScoreResult,
    StockStats,
    VolatilityDetails,
    VolatilityResult,
)
from .scoring import (
    ScoreStep,
    ScoringTable,
    compute_score,
    compute_stock_stats,
    rank_by_score,
    score_value,
)
from .utils.bars import (
    bars_from_dataframe,
    parse_compact_bars,
    window_around,
    window_stats,
)

__all__ = [
    "bar_column",
    "consecutive_limit_up_runs",
    "compute_volatility",
    "compute_volatility_v2",
    "count_down_limit_days",
    "count_locked_limit_down_days",
    "count_long_bull_days",
    "detect_incremental_decline",
    "moving_average_series",
    "recent_years",
    "sideways_break_below_years",
    "volatility_with_diff",
    "DailyBar",
    "DeclineResult",
    "RankedInstrument",
    "ScenarioResult",
    "ScoreComponent",
    "ScoreResult",
    "StockStats",
    "VolatilityDetails",
    "VolatilityResult",
    "ScoreStep",
    "ScoringTable",
    "compute_score",
    "compute_stock_stats",
    "rank_by_score",
    "score_value",
    "bars_from_dataframe",
    "parse_compact_bars",
    "window_around",
    "window_stats",
]
