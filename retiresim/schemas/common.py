"""Pieces shared by every calculation contract."""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field

# Limits enforced on incoming forms.
MAX_RATE = 1000
MAX_YEARS = 1000


class PingResponse(BaseModel):
    message: str


class SchedulePoint(BaseModel):
    """Balance at the end of one period; period 0 is the starting balance."""

    model_config = ConfigDict(extra="forbid")

    period: int = Field(..., ge=0)
    balance: float


def to_schedule(trajectory: Sequence[float]) -> List[SchedulePoint]:
    return [
        SchedulePoint(period=period, balance=round(balance, 2))
        for period, balance in enumerate(trajectory)
    ]
