"""Pydantic v2 configuration models for payperiods."""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from payperiods.core.dates import parse_date

PayPeriodFrequency = Literal["weekly", "bi-weekly", "semi-monthly", "monthly", "custom"]

FREQUENCIES: tuple[str, ...] = ("weekly", "bi-weekly", "semi-monthly", "monthly", "custom")


class PayPeriodConfig(BaseModel):
    """One recurring income source.

    Serialized field names are camelCase (``startDate``, ``isActive``) to
    match persisted preference blobs; snake_case names are accepted too.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(min_length=1, description="Identifier, unique among configs")
    frequency: PayPeriodFrequency = "monthly"
    start_date: date = Field(description="Anchor date of the first period")
    amount: int | float = Field(default=0, ge=0, description="Income per period")
    source: str = Field(default="", description="Free-text label, e.g. employer")
    is_active: bool = True

    @field_validator("start_date", mode="before")
    @classmethod
    def _parse_start_date(cls, value: Any) -> date:
        # InvalidDateFormat is not a ValueError, so pydantic lets it propagate.
        return parse_date(value)

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, value: int | float) -> int | float:
        if not math.isfinite(value):
            raise ValueError("amount must be finite")
        return value


class PayPeriodSettings(BaseModel):
    """Persisted pay-period preferences: an enablement flag and income sources."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    enabled: bool = False
    pay_periods: list[PayPeriodConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> PayPeriodSettings:
        seen: set[str] = set()
        for config in self.pay_periods:
            if config.id in seen:
                raise ValueError(f"duplicate pay period id {config.id!r}")
            seen.add(config.id)
        return self
