"""Piecewise scoring tables, the composite score engine and ranking."""

from .engine import (
    blended_volatility,
    compute_score,
    compute_stock_stats,
    consecutive_limit_up_score,
)
from .piecewise import ScoreStep, ScoringTable, score_value
from .ranking import rank_by_score

__all__ = [
    "blended_volatility",
    "compute_score",
    "compute_stock_stats",
    "consecutive_limit_up_score",
    "ScoreStep",
    "ScoringTable",
    "score_value",
    "rank_by_score",
]
