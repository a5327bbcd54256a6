from __future__ import annotations

from math import isclose

import pytest

from retiresim.core.errors import SimulationInputError
from retiresim.core.growth import (
    fixed_growth,
    fixed_growth_trajectory,
    variable_growth,
    variable_growth_trajectory,
)


def test_fixed_growth_compounds_yearly():
    assert isclose(fixed_growth(1000, 0.05, 10), 1628.89, abs_tol=0.01)


def test_fixed_growth_percent_matches_fraction():
    assert fixed_growth(1000, 5, 10) == fixed_growth(1000, 0.05, 10)


def test_fixed_growth_zero_years_or_rate_returns_principal():
    assert fixed_growth(2500.0, 0.07, 0) == 2500.0
    assert fixed_growth(2500.0, 0.0, 40) == 2500.0


def test_fixed_growth_trajectory_has_one_entry_per_year():
    trajectory = fixed_growth_trajectory(1000, 0.10, 3)

    assert len(trajectory) == 4
    assert trajectory[0] == 1000
    assert [round(value, 2) for value in trajectory] == [1000.0, 1100.0, 1210.0, 1331.0]


@pytest.mark.parametrize(
    "principal, rate, years",
    [
        (-1.0, 0.05, 10),
        (1000.0, float("nan"), 10),
        (1000.0, float("inf"), 10),
        (1000.0, -0.02, 10),
        (1000.0, 0.05, -1),
        (1000.0, 0.05, 2.5),
    ],
)
def test_fixed_growth_rejects_bad_input(principal, rate, years):
    with pytest.raises(SimulationInputError):
        fixed_growth(principal, rate, years)


def test_variable_growth_applies_rates_in_order():
    assert isclose(variable_growth(1000, [0.10, -0.05, 0.08]), 1128.6, abs_tol=0.01)


def test_variable_growth_trajectory_records_each_period():
    trajectory = variable_growth_trajectory(1000, [0.10, -0.05, 0.08])

    expected = [1000.0, 1100.0, 1045.0, 1128.6]
    assert len(trajectory) == len(expected)
    for value, target in zip(trajectory, expected):
        assert isclose(value, target, abs_tol=1e-9)


def test_variable_growth_empty_schedule_returns_principal():
    assert variable_growth(750.0, []) == 750.0
    assert variable_growth_trajectory(750.0, []) == [750.0]


def test_variable_growth_normalizes_each_rate():
    """Mixed fraction/percentage input behaves like the all-fraction schedule."""
    mixed = variable_growth(1000, [10, 0.02, 3])
    fractions = variable_growth(1000, [0.10, 0.02, 0.03])
    assert mixed == fractions


def test_variable_growth_rejects_total_loss_rate():
    with pytest.raises(SimulationInputError) as excinfo:
        variable_growth(1000, [0.05, -1.0, 0.05])

    assert "period 2" in excinfo.value.errors[0]


def test_fixed_growth_overflow_is_rejected():
    with pytest.raises(SimulationInputError) as excinfo:
        fixed_growth(1000, 1000, 1000)

    assert "overflows" in excinfo.value.errors[0]


def test_variable_growth_overflow_names_the_period():
    with pytest.raises(SimulationInputError) as excinfo:
        variable_growth(1e308, [0.9, 0.9])

    assert excinfo.value.errors == ["balance overflows at period 1"]
