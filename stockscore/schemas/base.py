"""Base Pydantic schemas shared by bar and result models."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """Base model that forbids extra fields.

    Result models inherit from this class so the contract with the
    presentation layer stays explicit.

    When to use BaseModel instead:
        - Settings/config models that need extra="ignore" for env vars
        - Models parsing external data that may have extra fields (DailyBar)
    """

    model_config = ConfigDict(extra="forbid")


class CamelModel(StrictBaseModel):
    """Strict model that serializes with camelCase keys.

    Attributes stay snake_case in Python; ``model_dump(by_alias=True)``
    produces the camelCase shape the dashboard consumes.
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )
