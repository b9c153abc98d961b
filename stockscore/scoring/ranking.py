"""Rank instruments by composite score.

Pure logic with no I/O: each series is scored independently and the results
are ordered by main score, then extra score, then symbol.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from stockscore.schemas.scoring import RankedInstrument
from stockscore.scoring.engine import compute_score
from stockscore.utils.structured_logging import get_logger

logger = get_logger(__name__)


def rank_by_score(series_by_symbol: Mapping[str, Sequence[Any]]) -> list[RankedInstrument]:
    """Score every instrument and return them best first.

    Args:
        series_by_symbol: Ascending daily bars keyed by symbol

    Returns:
        RankedInstrument list, rank 1 first. Ties on score are broken by
        the higher extra score, then alphabetically by symbol.
    """
    scored = [
        (symbol, compute_score(series)) for symbol, series in series_by_symbol.items()
    ]
    scored.sort(key=lambda item: (-item[1].score, -item[1].extra_score, item[0]))

    ranked = [
        RankedInstrument(
            rank=position,
            symbol=symbol,
            score=result.score,
            extra_score=result.extra_score,
            result=result,
        )
        for position, (symbol, result) in enumerate(scored, start=1)
    ]
    logger.debug(
        "instruments_ranked",
        count=len(ranked),
        top=ranked[0].symbol if ranked else None,
    )
    return ranked
