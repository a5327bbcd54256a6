"""Compound growth with a fixed rate or with a per-year rate schedule."""

from __future__ import annotations

from typing import List, Sequence

from retiresim.core.errors import (
    SimulationInputError,
    require_bounded,
    require_count,
    require_non_negative,
)
from retiresim.core.rates import RateUnit, normalize_rate, normalize_schedule


def fixed_growth(principal: float, rate: float, years: int, unit: RateUnit = "auto") -> float:
    """Balance after compounding ``principal`` at ``rate`` for ``years`` years."""
    return fixed_growth_trajectory(principal, rate, years, unit)[-1]


def fixed_growth_trajectory(
    principal: float, rate: float, years: int, unit: RateUnit = "auto"
) -> List[float]:
    """Year 0..years balances under a single constant rate."""
    balance = require_non_negative(principal, "principal")
    rate = require_non_negative(normalize_rate(rate, unit), "rate")
    years = require_count(years, "years", allow_zero=True)

    trajectory = [balance]
    for year in range(1, years + 1):
        balance = balance * (1 + rate)
        trajectory.append(require_bounded(balance, year))
    return trajectory


def variable_growth(
    principal: float, schedule: Sequence[float], unit: RateUnit = "auto"
) -> float:
    """Balance after applying each rate of ``schedule`` in order."""
    return variable_growth_trajectory(principal, schedule, unit)[-1]


def variable_growth_trajectory(
    principal: float, schedule: Sequence[float], unit: RateUnit = "auto"
) -> List[float]:
    """
    Running balance after each period of ``schedule``.

    The first entry is the principal itself, so an empty schedule yields
    ``[principal]``. Rates may be negative (a losing year) but a rate of
    -100% or below would wipe out or invert the balance and is rejected.
    """
    balance = require_non_negative(principal, "principal")
    rates = normalize_schedule(schedule, unit)

    bad = [
        f"period {index}: rate {rate:.4f} must be greater than -1"
        for index, rate in enumerate(rates, start=1)
        if rate <= -1
    ]
    if bad:
        raise SimulationInputError(bad)

    trajectory = [balance]
    for period, rate in enumerate(rates, start=1):
        balance = balance * (1 + rate)
        trajectory.append(require_bounded(balance, period))
    return trajectory
