"""Piecewise-linear score tables.

A ``ScoringTable`` is plain data: a weight and an ordered tuple of half-open
``[start, end)`` steps. ``score_value`` is the only interpretation logic, so
new bands are added by editing tables, not code.
"""

import math
from dataclasses import dataclass

from stockscore.utils.rounding import round_half_up


@dataclass(frozen=True)
class ScoreStep:
    """One band of a scoring table.

    Scores are interpolated linearly from ``score_start`` at ``start``
    towards ``score_end`` at ``end`` (exclusive).
    """

    start: float
    end: float
    score_start: float
    score_end: float


@dataclass(frozen=True)
class ScoringTable:
    """Weighted step function. Weight 10 leaves step scores unscaled."""

    weight: float
    steps: tuple[ScoreStep, ...] = ()

    @classmethod
    def from_rows(cls, weight: float, *rows: tuple[float, float, float, float]) -> "ScoringTable":
        """Build a table from ``(start, end, score_start, score_end)`` rows."""
        return cls(weight=weight, steps=tuple(ScoreStep(*row) for row in rows))


def score_value(table: ScoringTable, value: float | None) -> float:
    """Convert a raw metric into a weighted score.

    The first step with ``start <= value < end`` is used:
    ``score = score_start + (score_end - score_start) * (value - start) / (end - start)``
    scaled by ``weight / 10`` and rounded to 2 decimals. A zero-width step
    returns its ``score_start`` unscaled.

    Args:
        table: Scoring table to look up
        value: Raw metric value

    Returns:
        Weighted score; 0 for None, NaN, exactly 0, or a value outside every step.
    """
    if value is None or math.isnan(value) or value == 0:
        return 0.0

    for step in table.steps:
        if step.start <= value < step.end:
            if step.end == step.start:
                return step.score_start
            ratio = (value - step.start) / (step.end - step.start)
            score = step.score_start + (step.score_end - step.score_start) * ratio
            return round_half_up(score * (table.weight / 10), 2)
    return 0.0
