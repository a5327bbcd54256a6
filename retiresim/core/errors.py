"""Input guards shared by the simulation entry points."""

from __future__ import annotations

import math
from typing import List


class SimulationInputError(ValueError):
    """Input outside the domain a simulation can handle."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def require_finite(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SimulationInputError([f"{name} must be a number"])
    if math.isnan(value) or math.isinf(value):
        raise SimulationInputError([f"{name} must be a finite number"])
    return float(value)


def require_non_negative(value: float, name: str) -> float:
    value = require_finite(value, name)
    if value < 0:
        raise SimulationInputError([f"{name} must not be negative"])
    return value


def require_count(value: int, name: str, *, allow_zero: bool = False) -> int:
    """Validate an integer period count (years, caps, targets)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SimulationInputError([f"{name} must be an integer"])
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise SimulationInputError([f"{name} must be a {bound} integer"])
    return value


def require_bounded(balance: float, period: int) -> float:
    # compounding large rates over many years can exceed float range
    if not math.isfinite(balance):
        raise SimulationInputError([f"balance overflows at period {period}"])
    return balance
