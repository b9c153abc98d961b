"""Composite score engine.

Runs every indicator over one instrument's bars and folds the raw readings
into two numbers through the scoring tables:

- ``score``: volatility, long bullish days, incremental decline (flat award
  plus volume and price ratio scores) and the locked limit-down penalty
- ``extra_score``: sideways breakout years and consecutive limit-up runs,
  only computed when blended volatility is low
"""

from collections.abc import Sequence
from typing import Any

from stockscore.core.constants import EventThresholds, ScoreThresholds, VolatilityThresholds
from stockscore.indicators.breakout import sideways_break_below_years
from stockscore.indicators.decline import detect_incremental_decline
from stockscore.indicators.events import (
    consecutive_limit_up_runs,
    count_down_limit_days,
    count_locked_limit_down_days,
    count_long_bull_days,
)
from stockscore.indicators.volatility import compute_volatility, compute_volatility_v2
from stockscore.schemas.scoring import ScoreComponent, ScoreResult, StockStats
from stockscore.scoring.piecewise import ScoringTable, score_value
from stockscore.scoring.tables import (
    CONSECUTIVE_LIMIT_UP_TABLE,
    INCREMENTAL_DECLINE_TABLE,
    LOCKED_LIMIT_DOWN_TABLE,
    LONG_LINE_TABLE,
    PRICE_INC_PERCENT_TABLE,
    SIDEWAYS_BREAK_BELOW_TABLE,
    VOLATILITY_TABLE,
    VOLUME_INC_PERCENT_TABLE,
)
from stockscore.utils.rounding import round_half_up, rounded_ratio
from stockscore.utils.structured_logging import get_logger

logger = get_logger(__name__)


def _component(
    name: str, table: ScoringTable, value: float | list[int], score: float
) -> ScoreComponent:
    return ScoreComponent(value=value, score=score, weight=table.weight, name=name)


def blended_volatility(series: Sequence[Any]) -> float:
    """Volatility reading used for scoring.

    Below a 5-year volatility of 1 the lower of the 5-year (MA60) and
    4-year (MA48) readings is used; otherwise the 5-year reading alone.
    """
    volatility_5y = compute_volatility(
        series, VolatilityThresholds.DEFAULT_MA_WINDOW, VolatilityThresholds.DEFAULT_YEARS
    ).volatility
    if volatility_5y >= ScoreThresholds.VOLATILITY_BLEND_CEILING:
        return volatility_5y
    volatility_4y = compute_volatility(
        series, VolatilityThresholds.SHORT_MA_WINDOW, VolatilityThresholds.SHORT_YEARS
    ).volatility
    return min(volatility_4y, volatility_5y)


def consecutive_limit_up_score(series: Sequence[Any]) -> ScoreComponent:
    """Sum of the per-run scores of every consecutive limit-up run."""
    runs = consecutive_limit_up_runs(series)
    score = sum(score_value(CONSECUTIVE_LIMIT_UP_TABLE, run) for run in runs)
    return _component(
        "Consecutive limit-up (extra)", CONSECUTIVE_LIMIT_UP_TABLE, runs, score
    )


def compute_score(series: Sequence[Any]) -> ScoreResult:
    """Compute the composite score for one instrument.

    Args:
        series: Ascending daily bars for a single instrument

    Returns:
        ScoreResult with the main score, the extra score and every
        component's value, score, weight and name. Never raises for short or
        incomplete data; missing signals simply score 0.
    """
    volatility = blended_volatility(series)
    volatility_score = score_value(VOLATILITY_TABLE, volatility)

    long_line = count_long_bull_days(series, EventThresholds.LONG_BULL_PCT, 1)
    long_line_score = score_value(LONG_LINE_TABLE, long_line)

    decline = detect_incremental_decline(series)
    incremental_decline_score = 0.0
    volume_inc_percent = 0.0
    volume_inc_percent_score = 0.0
    price_inc_percent = 0.0
    price_inc_percent_score = 0.0
    if decline.is_decline and decline.final_scenario_result is not None:
        final = decline.final_scenario_result
        incremental_decline_score = float(INCREMENTAL_DECLINE_TABLE.weight)
        volume_inc_percent = rounded_ratio(final.avg_vol_recent, final.avg_vol_compare)
        volume_inc_percent_score = score_value(VOLUME_INC_PERCENT_TABLE, volume_inc_percent)
        price_inc_percent = rounded_ratio(final.avg_close_recent, final.avg_close_compare)
        price_inc_percent_score = score_value(PRICE_INC_PERCENT_TABLE, price_inc_percent)

    sideways_years = 0
    sideways_score = 0.0
    limit_up_result = _component(
        "Consecutive limit-up (extra)", CONSECUTIVE_LIMIT_UP_TABLE, [], 0.0
    )
    if volatility < ScoreThresholds.LOW_VOLATILITY:
        sideways_years = sideways_break_below_years(series)
        sideways_score = score_value(SIDEWAYS_BREAK_BELOW_TABLE, sideways_years)
        limit_up_result = consecutive_limit_up_score(series)

    locked_limit_down = count_locked_limit_down_days(series, 1)
    locked_limit_down_score = score_value(LOCKED_LIMIT_DOWN_TABLE, locked_limit_down)

    score = round_half_up(
        volatility_score
        + long_line_score
        + volume_inc_percent_score
        + price_inc_percent_score
        + incremental_decline_score
        + locked_limit_down_score,
        2,
    )
    extra_score = round_half_up(sideways_score + limit_up_result.score, 2)

    logger.debug(
        "score_computed",
        bars=len(series),
        volatility=volatility,
        is_decline=decline.is_decline,
        score=score,
        extra_score=extra_score,
    )

    return ScoreResult(
        score=score,
        extra_score=extra_score,
        volatility_result=_component(
            "Volatility", VOLATILITY_TABLE, volatility, volatility_score
        ),
        long_line_result=_component(
            "Long bull days", LONG_LINE_TABLE, long_line, long_line_score
        ),
        volume_result=_component(
            "Volume", VOLUME_INC_PERCENT_TABLE, volume_inc_percent, volume_inc_percent_score
        ),
        price_result=_component(
            "Price", PRICE_INC_PERCENT_TABLE, price_inc_percent, price_inc_percent_score
        ),
        incremental_decline_result=_component(
            "Incremental decline",
            INCREMENTAL_DECLINE_TABLE,
            incremental_decline_score,
            incremental_decline_score,
        ),
        sideways_break_below_years_result=_component(
            "Sideways break-below years (extra)",
            SIDEWAYS_BREAK_BELOW_TABLE,
            sideways_years,
            sideways_score,
        ),
        locked_limit_down_result=_component(
            "Locked limit-down penalty",
            LOCKED_LIMIT_DOWN_TABLE,
            locked_limit_down,
            locked_limit_down_score,
        ),
        consecutive_limit_up_days_result=limit_up_result,
    )


def compute_stock_stats(series: Sequence[Any]) -> StockStats:
    """V1 volatility fields plus trailing-year counts and V2 volatility."""
    volatility = compute_volatility(series, VolatilityThresholds.DEFAULT_MA_WINDOW)
    return StockStats(
        **volatility.model_dump(),
        long_bull_count=count_long_bull_days(series, EventThresholds.LONG_BULL_PCT, 1),
        down_limit_count=count_down_limit_days(series, 1),
        locked_limit_down_count=count_locked_limit_down_days(series, 1),
        volatility_v2=compute_volatility_v2(series),
    )
