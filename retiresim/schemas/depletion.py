"""Data contracts for depletion and optimal withdrawal calculations."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from retiresim.core.rates import RateUnit
from retiresim.schemas.common import MAX_RATE, MAX_YEARS, SchedulePoint


class DepletionRequest(BaseModel):
    """Inputs for simulating how long a balance lasts."""

    model_config = ConfigDict(extra="forbid")

    balance: float = Field(..., gt=0, allow_inf_nan=False, description="Retirement balance.")
    annualExpense: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Withdrawal taken at the start of each year."
    )
    rate: float = Field(..., ge=0, le=MAX_RATE, allow_inf_nan=False)
    rateUnit: RateUnit = "auto"

    @model_validator(mode="after")
    def ensure_affordable(self) -> "DepletionRequest":
        if self.annualExpense > self.balance:
            raise ValueError("annualExpense cannot be higher than balance")
        return self


class DepletionResponse(BaseModel):
    yearsLasted: int
    capYears: int
    neverDepletes: bool
    message: str
    schedule: List[SchedulePoint]


class WithdrawalRequest(BaseModel):
    """Inputs for finding the withdrawal that lasts exactly ``targetYears``."""

    model_config = ConfigDict(extra="forbid")

    balance: float = Field(..., gt=0, allow_inf_nan=False)
    rate: float = Field(..., ge=0, le=MAX_RATE, allow_inf_nan=False)
    targetYears: int = Field(..., ge=1, le=MAX_YEARS)
    rateUnit: RateUnit = "auto"


class WithdrawalResponse(BaseModel):
    withdrawal: float = Field(..., ge=0)
    targetYears: int
    yearsLasted: int
    capYears: int
    neverDepletes: bool
    iterations: int
    schedule: List[SchedulePoint]
