"""Pydantic schemas for bars and engine results."""

from .bar import DailyBar
from .scoring import (
    DeclineResult,
    RankedInstrument,
    ScenarioResult,
    ScoreComponent,
    ScoreResult,
    StockStats,
    VolatilityDetails,
    VolatilityResult,
)

__all__ = [
    "DailyBar",
    "DeclineResult",
    "RankedInstrument",
    "ScenarioResult",
    "ScoreComponent",
    "ScoreResult",
    "StockStats",
    "VolatilityDetails",
    "VolatilityResult",
]
