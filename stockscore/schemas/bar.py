"""Daily bar schema."""

from datetime import date as date_type

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class DailyBar(BaseModel):
    """One trading day for one instrument.

    Accepts snake_case names, the camelCase wire names (``openPrice``,
    ``percentChange``) and the legacy feed names (``chenJiaoLiang``,
    ``zhangDieFu``, ``huanShouLv``). Numeric fields may be ``None`` or NaN.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        allow_inf_nan=True,
        frozen=True,
    )

    date: str = Field(..., description="Trading date in YYYY-MM-DD format")
    open_price: float | None = Field(
        None,
        validation_alias=AliasChoices("open_price", "openPrice"),
        serialization_alias="openPrice",
    )
    close_price: float | None = Field(
        None,
        validation_alias=AliasChoices("close_price", "closePrice"),
        serialization_alias="closePrice",
    )
    min_price: float | None = Field(
        None,
        validation_alias=AliasChoices("min_price", "minPrice"),
        serialization_alias="minPrice",
    )
    max_price: float | None = Field(
        None,
        validation_alias=AliasChoices("max_price", "maxPrice"),
        serialization_alias="maxPrice",
    )
    volume: float | None = Field(
        None,
        validation_alias=AliasChoices("volume", "chenJiaoLiang"),
        serialization_alias="volume",
    )
    percent_change: float | None = Field(
        None,
        validation_alias=AliasChoices("percent_change", "percentChange", "zhangDieFu"),
        serialization_alias="percentChange",
    )
    turnover_rate: float | None = Field(
        None,
        validation_alias=AliasChoices("turnover_rate", "turnoverRate", "huanShouLv"),
        serialization_alias="turnoverRate",
    )

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: object) -> object:
        if isinstance(value, date_type):
            return value.isoformat()[:10]
        return value

    @property
    def year(self) -> int:
        return int(self.date[:4])
