"""Scoring tables used by the composite score.

Rows are ``(start, end, score_start, score_end)``; see ``score_value``.
"""

from stockscore.scoring.piecewise import ScoringTable

# Blended volatility: low-to-moderate is rewarded, >= 3 scores nothing
VOLATILITY_TABLE = ScoringTable.from_rows(
    30,
    (0, 0.1, 10, 10),
    (0.1, 0.3, 10, 10),
    (0.3, 0.8, 10, 5),
    (0.8, 1.5, 5, 2),
    (1.5, 3, 1, 1),
    (3, 999, 0, 0),
)

# Long bullish days in the last year
LONG_LINE_TABLE = ScoringTable.from_rows(
    10,
    (0, 5, 0, 2),
    (5, 10, 2, 5),
    (10, 30, 5, 10),
    (30, 50, 10, 8),
    (50, 999, 1, 1),
)

# Recent / prior average volume of the matched decline scenario
VOLUME_INC_PERCENT_TABLE = ScoringTable.from_rows(
    20,
    (0, 0.5, -10, -10),
    (0.5, 0.9, -5, -5),
    (0.9, 3, 5, 10),
    (3, 5, 10, 8),
    (5, 999, 5, 5),
)

# Recent / prior average close of the matched decline scenario
PRICE_INC_PERCENT_TABLE = ScoringTable.from_rows(
    20,
    (0, 0.5, -10, -5),
    (0.5, 1, 10, 8),
    (1, 1.5, 8, 6),
    (1.5, 999, -10, -10),
)

# Flat award for a matched decline; no steps
INCREMENTAL_DECLINE_TABLE = ScoringTable(weight=20)

SIDEWAYS_BREAK_BELOW_TABLE = ScoringTable.from_rows(
    20,
    (0, 10, 0, 10),
    (10, 99, 10, 10),
)

# Penalty only: three or more one-word limit-downs in a year
LOCKED_LIMIT_DOWN_TABLE = ScoringTable.from_rows(
    20,
    (0, 3, 0, 0),
    (3, 10, -5, -10),
    (10, 99, -10, -10),
)

# Scored per run length; long runs are heavily penalized
CONSECUTIVE_LIMIT_UP_TABLE = ScoringTable.from_rows(
    10,
    (2, 6, 5, 10),
    (6, 10, 10, 5),
    (10, 99, -10, -99),
)
