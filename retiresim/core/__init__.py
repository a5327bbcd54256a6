"""Pure simulation and optimization routines."""

from retiresim.core.depletion import SAFETY_CAP_YEARS, DepletionResult, deplete
from retiresim.core.errors import SimulationInputError
from retiresim.core.growth import (
    fixed_growth,
    fixed_growth_trajectory,
    variable_growth,
    variable_growth_trajectory,
)
from retiresim.core.optimizer import WithdrawalResult, max_withdrawal, optimize_withdrawal
from retiresim.core.rates import normalize_rate, normalize_schedule

__all__ = [
    "SAFETY_CAP_YEARS",
    "DepletionResult",
    "SimulationInputError",
    "WithdrawalResult",
    "deplete",
    "fixed_growth",
    "fixed_growth_trajectory",
    "max_withdrawal",
    "normalize_rate",
    "normalize_schedule",
    "optimize_withdrawal",
    "variable_growth",
    "variable_growth_trajectory",
]
