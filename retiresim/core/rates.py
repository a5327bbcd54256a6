"""Rate ingestion.

Rates arrive either as a decimal fraction (0.05) or as a percentage (5).
Internally every simulation works with fractions.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Literal

from retiresim.core.errors import SimulationInputError, require_finite

logger = logging.getLogger(__name__)

RateUnit = Literal["auto", "percent", "fraction"]
RATE_UNITS = ("auto", "percent", "fraction")


def normalize_rate(rate: float, unit: RateUnit = "auto") -> float:
    """Convert a user supplied rate into a decimal fraction.

    With ``unit="auto"`` any value of 1 or more is taken as a percentage and
    divided by 100 exactly once; smaller values are already fractions. A
    literal 1 is ambiguous (1% or 100%?) and resolves to 1%, with a warning.
    Pass ``unit="fraction"`` or ``unit="percent"`` to skip the guesswork.
    """
    rate = require_finite(rate, "rate")

    if unit not in RATE_UNITS:
        raise SimulationInputError([f"unknown rate unit {unit!r}"])
    if unit == "fraction":
        return rate
    if unit == "percent":
        return rate / 100.0

    if rate == 1:
        logger.warning("rate of exactly 1 is ambiguous; treating it as 1 percent")
    if rate >= 1:
        return rate / 100.0
    return rate


def normalize_schedule(rates: Iterable[float], unit: RateUnit = "auto") -> List[float]:
    # keep order; compounding with differing rates is path dependent
    return [normalize_rate(rate, unit) for rate in rates]
