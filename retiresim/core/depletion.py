"""How long a balance lasts under a constant annual withdrawal."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from retiresim.core.errors import require_bounded, require_count, require_non_negative
from retiresim.core.rates import RateUnit, normalize_rate

logger = logging.getLogger(__name__)

# Upper bound on simulated years when growth outpaces withdrawals.
SAFETY_CAP_YEARS = 120


@dataclass(frozen=True)
class DepletionResult:
    """Years a balance lasted and its balance at the end of each year."""

    years_lasted: int
    cap_years: int
    trajectory: List[float] = field(default_factory=list)

    @property
    def final_balance(self) -> float:
        return self.trajectory[-1]

    @property
    def never_depletes(self) -> bool:
        """True when the run stopped on the cap with money still left."""
        return self.years_lasted >= self.cap_years and self.final_balance > 0


def deplete(
    balance: float,
    annual_expense: float,
    rate: float,
    cap_years: int = SAFETY_CAP_YEARS,
    unit: RateUnit = "auto",
) -> DepletionResult:
    """
    Simulate withdraw-then-grow years until the balance hits zero or the cap.

    Order of operations (per year):
      1) Withdraw ``annual_expense`` at the START of the year.
      2) If anything is left, grow the remainder by ``remainder * rate``.
         Otherwise floor the balance at exactly 0 and stop.
      3) Record the balance.

    ``trajectory[0]`` is the starting balance, so the trajectory always holds
    ``years_lasted + 1`` entries.
    """
    remaining = require_non_negative(balance, "balance")
    expense = require_non_negative(annual_expense, "annual_expense")
    rate = require_non_negative(normalize_rate(rate, unit), "rate")
    cap_years = require_count(cap_years, "cap_years")

    trajectory = [remaining]
    years = 0
    while remaining > 0 and years < cap_years:
        remaining -= expense
        if remaining > 0:
            remaining += remaining * rate
        else:
            remaining = 0.0
        years += 1
        trajectory.append(require_bounded(remaining, years))

    if remaining > 0:
        logger.debug(
            "balance %.2f still funded after cap of %d years (expense %.2f, rate %.4f)",
            balance,
            cap_years,
            expense,
            rate,
        )

    return DepletionResult(years_lasted=years, cap_years=cap_years, trajectory=trajectory)
