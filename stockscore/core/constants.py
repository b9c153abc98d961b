"""Constants and thresholds for the indicator and scoring modules.

All magic numbers used by the engine are defined here. Windows are counted in
bars (positions), never in calendar days.
"""


class TradingCalendar:
    """Position-based approximations of calendar periods."""

    TRADING_DAYS_PER_YEAR = 250
    """Bars per year for every trailing window (event counters, limit-up runs)."""

    SIDEWAYS_DAYS_PER_YEAR = 245
    """
    Bars per year used only when converting the sideways breakout gap into
    years. Deliberately different from TRADING_DAYS_PER_YEAR; changing it
    shifts historical breakout years.
    """

    MAGNIFIER_WINDOW = 120
    """Bars shown in the chart magnifier window."""


class VolatilityThresholds:
    """Parameters of the V1 / V2 volatility coefficients."""

    DEFAULT_MA_WINDOW = 60
    DEFAULT_YEARS = 5

    SHORT_MA_WINDOW = 48
    SHORT_YEARS = 4
    """Secondary (4-year, MA48) reading blended in by the composite score."""

    EXTREME_TRIM_FRACTION = 0.005
    """Fraction of closes dropped from each end before taking the price range."""

    FLUCTUATION_EXPONENT = 1.5
    FLUCTUATION_WEIGHT = 0.7


class EventThresholds:
    """Percent-change thresholds for daily event counters."""

    LONG_BULL_PCT = 6.0
    DOWN_LIMIT_PCT = -9.8
    UP_LIMIT_PCT = 9.9

    MIN_LIMIT_UP_RUN = 2
    """Shortest run of consecutive limit-up days that is reported."""


class DeclineThresholds:
    """Incremental decline (price down on rising volume) parameters."""

    MIN_BARS = 756
    """Roughly 2.5 years; below this the scan reports insufficient data."""

    VOLUME_INCREASE = 0.25
    PRICE_DECLINE = 0.10
    """Sharp increase uses twice this threshold."""

    SCENARIOS: tuple[tuple[str, int, int], ...] = (
        ("half-year vs prior 1yr", 126, 250),
        ("half-year vs prior 2yr", 126, 504),
        ("1yr vs prior 2yr", 252, 504),
        ("1.5yr vs prior 2yr", 378, 504),
        ("2yr vs prior 2yr", 504, 504),
    )
    """(label, recent bars, prior bars), evaluated in order."""


class SidewaysThresholds:
    """Sideways breakout detector parameters."""

    WINDOW = 250
    BREAK_FACTOR = 0.95
    """An earlier low counts only when below 95% of the window low."""


class ScoreThresholds:
    """Branch conditions of the composite score."""

    VOLATILITY_BLEND_CEILING = 1.0
    """At or above this 5-year volatility the 4-year reading is ignored."""

    LOW_VOLATILITY = 0.5
    """Below this blended volatility the extra score is computed."""
