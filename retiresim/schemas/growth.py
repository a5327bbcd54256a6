"""Data contracts for fixed and variable growth projections."""

from __future__ import annotations

from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

from retiresim.core.rates import RateUnit
from retiresim.schemas.common import MAX_RATE, MAX_YEARS, SchedulePoint

# Losing years are allowed, so only the upper bound is checked here.
YearlyRate = Annotated[float, Field(le=MAX_RATE, allow_inf_nan=False)]


class FixedGrowthRequest(BaseModel):
    """Inputs for compounding a principal at one constant rate."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, allow_inf_nan=False, description="Initial investment.")
    rate: float = Field(
        ...,
        ge=0,
        le=MAX_RATE,
        allow_inf_nan=False,
        description="Annual rate as a fraction (0.05) or a percentage (5).",
    )
    years: int = Field(..., ge=1, le=MAX_YEARS, description="Number of years to compound.")
    rateUnit: RateUnit = "auto"


class VariableGrowthRequest(BaseModel):
    """Inputs for compounding through an ordered list of yearly rates."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, allow_inf_nan=False)
    rates: List[YearlyRate] = Field(..., min_length=1, max_length=MAX_YEARS)
    rateUnit: RateUnit = "auto"


class GrowthResponse(BaseModel):
    finalBalance: float
    normalizedRates: List[float]
    schedule: List[SchedulePoint]
