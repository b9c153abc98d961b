"""Incremental decline detection ("price down on rising volume").

Compares a recent window with the window immediately before it, for a fixed
list of window pairs from half a year up to two years. The first pair where
average close fell and average volume rose wins.
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from stockscore.core.constants import DeclineThresholds
from stockscore.indicators.technical import bar_column
from stockscore.schemas.scoring import DeclineResult, ScenarioResult
from stockscore.utils.rounding import round_half_up, rounded_ratio
from stockscore.utils.structured_logging import get_logger

logger = get_logger(__name__)

INSUFFICIENT_DATA = "insufficient data"
NO_SCENARIO_MATCHED = "no scenario matched"


def _evaluate_scenario(
    label: str,
    recent: Sequence[Any],
    compare: Sequence[Any],
) -> ScenarioResult:
    avg_vol_recent = float(np.mean(bar_column(recent, "volume")))
    avg_vol_compare = float(np.mean(bar_column(compare, "volume")))
    avg_close_recent = float(np.mean(bar_column(recent, "close_price")))
    avg_close_compare = float(np.mean(bar_column(compare, "close_price")))
    price_decline = DeclineThresholds.PRICE_DECLINE

    return ScenarioResult(
        label=label,
        recent_days=len(recent),
        compare_days=len(compare),
        volume_increased=avg_vol_recent * (1 - DeclineThresholds.VOLUME_INCREASE) > avg_vol_compare,
        avg_vol_recent=round_half_up(avg_vol_recent, 0),
        avg_vol_compare=round_half_up(avg_vol_compare, 0),
        volume_ratio=rounded_ratio(avg_vol_recent, avg_vol_compare),
        price_declined=avg_close_recent * (1 - price_decline) < avg_close_compare,
        sharp_increase=avg_close_recent * (1 - price_decline * 2) > avg_close_compare,
        avg_close_recent=round_half_up(avg_close_recent, 2),
        avg_close_compare=round_half_up(avg_close_compare, 2),
        price_ratio=rounded_ratio(avg_close_recent, avg_close_compare),
    )


def detect_incremental_decline(series: Sequence[Any]) -> DeclineResult:
    """Detect a decline in average price accompanied by rising average volume.

    Scenarios are evaluated in order, each comparing the last ``recent`` bars
    with the ``prior`` bars right before them:

    - price did not decline and rose sharply (> 20% threshold): stop scanning,
      no later scenario can be a decline
    - price did not decline otherwise: try the next scenario
    - price declined and volume increased: match, stop scanning

    Every evaluated scenario is kept in ``scenarios`` for diagnostics.

    Args:
        series: Ascending daily bars (at least 756 are needed)

    Returns:
        DeclineResult. ``reason`` explains a non-match.
    """
    bars = list(series)
    if len(bars) < DeclineThresholds.MIN_BARS:
        return DeclineResult(is_decline=False, reason=INSUFFICIENT_DATA)

    evaluated: list[ScenarioResult] = []
    matched: str | None = None
    for label, recent_days, compare_days in DeclineThresholds.SCENARIOS:
        if len(bars) < recent_days + compare_days:
            continue
        recent = bars[-recent_days:]
        compare = bars[-(recent_days + compare_days) : -recent_days]
        result = _evaluate_scenario(label, recent, compare)
        evaluated.append(result)

        if not result.price_declined:
            if result.sharp_increase:
                break
            continue
        if result.volume_increased:
            matched = label
            break

    final = evaluated[-1] if evaluated else None
    if matched is None:
        return DeclineResult(
            is_decline=False,
            reason=NO_SCENARIO_MATCHED,
            scenarios=evaluated,
            final_scenario_result=final,
        )

    logger.debug(
        "incremental_decline_matched",
        scenario=matched,
        avg_close_recent=final.avg_close_recent,
        avg_close_compare=final.avg_close_compare,
        avg_vol_recent=final.avg_vol_recent,
        avg_vol_compare=final.avg_vol_compare,
    )
    return DeclineResult(
        is_decline=True,
        scenario=matched,
        scenarios=evaluated,
        final_scenario_result=final,
    )
