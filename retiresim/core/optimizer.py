"""Largest constant withdrawal that makes a balance last a target number of years."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from retiresim.core.depletion import SAFETY_CAP_YEARS, deplete
from retiresim.core.errors import (
    SimulationInputError,
    require_count,
    require_finite,
    require_non_negative,
)
from retiresim.core.rates import RateUnit, normalize_rate

logger = logging.getLogger(__name__)

# One cent.
DEFAULT_EPSILON = 0.01


@dataclass(frozen=True)
class WithdrawalResult:
    withdrawal: float
    target_years: int
    years_lasted: int
    cap_years: int
    iterations: int
    trajectory: List[float] = field(default_factory=list)

    @property
    def never_depletes(self) -> bool:
        return self.years_lasted >= self.cap_years and self.trajectory[-1] > 0


def optimize_withdrawal(
    balance: float,
    rate: float,
    target_years: int,
    *,
    epsilon: float = DEFAULT_EPSILON,
    cap_years: int = SAFETY_CAP_YEARS,
    unit: RateUnit = "auto",
) -> WithdrawalResult:
    """
    Binary search the annual withdrawal that drains ``balance`` in ``target_years``.

    Years lasted is non-increasing in the withdrawal, so the bracket
    ``[0, balance]`` can be halved until it is narrower than ``epsilon``.
    Each probe runs a depletion with ``cap_years`` as its own bound, not
    ``target_years``. The lower end of the final bracket is returned so the
    answer never spends faster than the target allows.

    When even tiny withdrawals never exhaust the balance within the cap the
    result is flagged ``never_depletes`` instead of being an exact answer.
    """
    balance = require_non_negative(balance, "balance")
    rate = require_non_negative(normalize_rate(rate, unit), "rate")
    target_years = require_count(target_years, "target_years")
    cap_years = require_count(cap_years, "cap_years")
    epsilon = require_finite(epsilon, "epsilon")
    if epsilon <= 0:
        raise SimulationInputError(["epsilon must be positive"])

    low = 0.0
    high = balance
    iterations = 0

    while (high - low) > epsilon:
        mid = (high + low) / 2.0
        years_lasted = deplete(balance, mid, rate, cap_years, unit="fraction").years_lasted
        if years_lasted < target_years:
            # ran out too early, spend less
            high = mid
        else:
            low = mid
        iterations += 1

    final = deplete(balance, low, rate, cap_years, unit="fraction")
    logger.debug(
        "withdrawal search converged after %d iterations: [%.4f, %.4f] lasts %d years (target %d)",
        iterations,
        low,
        high,
        final.years_lasted,
        target_years,
    )

    return WithdrawalResult(
        withdrawal=low,
        target_years=target_years,
        years_lasted=final.years_lasted,
        cap_years=cap_years,
        iterations=iterations,
        trajectory=final.trajectory,
    )


def max_withdrawal(
    balance: float, rate: float, target_years: int, unit: RateUnit = "auto"
) -> float:
    """Shorthand for :func:`optimize_withdrawal` returning only the amount."""
    return optimize_withdrawal(balance, rate, target_years, unit=unit).withdrawal
