"""Core exception classes for the stock score engine.

The scoring functions never raise for bad or short data. These exceptions are
only raised by the input adapters in ``stockscore.utils.bars``.
"""


class StockScoreError(Exception):
    """Base exception for stockscore."""

    pass


class BarParseError(StockScoreError):
    """Raised when a compact bar row cannot be split into its fields."""

    pass


class DataValidationError(StockScoreError):
    """Raised when tabular input is missing required columns."""

    pass
