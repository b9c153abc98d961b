"""Result schemas for volatility, pattern detection and composite scoring."""

from __future__ import annotations

from pydantic import Field

from stockscore.schemas.base import CamelModel


class VolatilityDetails(CamelModel):
    """Intermediate values behind a V1 volatility reading."""

    ma_std: float = Field(0.0, description="Population std of the MA series")
    ma_mean: float = Field(0.0, description="Mean of the MA series")
    price_max: float = Field(0.0, description="Max close after trimming extremes")
    price_min: float = Field(0.0, description="Min close after trimming extremes")


class VolatilityResult(CamelModel):
    """Dispersion volatility (V1) reading."""

    volatility: float = 0.0
    std_over_mean: float = 0.0
    max_fluct: float = 0.0
    details: VolatilityDetails = Field(default_factory=VolatilityDetails)

    @classmethod
    def zero(cls) -> VolatilityResult:
        """Result returned when there is not enough data."""
        return cls()


class ScenarioResult(CamelModel):
    """Averages and flags for one recent-vs-prior window pair."""

    label: str
    recent_days: int
    compare_days: int
    volume_increased: bool
    avg_vol_recent: float
    avg_vol_compare: float
    volume_ratio: float
    price_declined: bool
    sharp_increase: bool
    avg_close_recent: float
    avg_close_compare: float
    price_ratio: float


class DeclineResult(CamelModel):
    """Outcome of the decline-with-rising-volume scan."""

    is_decline: bool
    scenario: str | None = None
    reason: str | None = None
    scenarios: list[ScenarioResult] = Field(default_factory=list)
    final_scenario_result: ScenarioResult | None = None


class ScoreComponent(CamelModel):
    """One weighted sub-score, kept for display and debugging."""

    value: float | list[int]
    score: float
    weight: float
    name: str


class ScoreResult(CamelModel):
    """Composite score breakdown."""

    score: float
    extra_score: float
    volatility_result: ScoreComponent
    long_line_result: ScoreComponent
    volume_result: ScoreComponent
    price_result: ScoreComponent
    incremental_decline_result: ScoreComponent
    sideways_break_below_years_result: ScoreComponent
    locked_limit_down_result: ScoreComponent
    consecutive_limit_up_days_result: ScoreComponent


class StockStats(VolatilityResult):
    """V1 volatility fields plus the trailing-year event counts."""

    long_bull_count: int = 0
    down_limit_count: int = 0
    locked_limit_down_count: int = 0
    volatility_v2: float | VolatilityResult = 0.0


class RankedInstrument(CamelModel):
    """One instrument's position in a score ranking."""

    rank: int
    symbol: str
    score: float
    extra_score: float
    result: ScoreResult
