from __future__ import annotations

import random
from math import isclose

import pytest

from retiresim.core.depletion import SAFETY_CAP_YEARS, deplete
from retiresim.core.errors import SimulationInputError


def test_withdraw_then_grow_sequence():
    result = deplete(100000, 10000, 0.05, 120)

    # (100000 - 10000) * 1.05, then (94500 - 10000) * 1.05, ...
    assert isclose(result.trajectory[1], 94500.0, abs_tol=1e-6)
    assert isclose(result.trajectory[2], 88725.0, abs_tol=1e-6)
    assert isclose(result.trajectory[3], 82661.25, abs_tol=1e-6)
    assert result.years_lasted == 14
    assert result.trajectory[-1] == 0.0
    assert not result.never_depletes


def test_trajectory_starts_with_balance_and_floors_at_zero():
    result = deplete(25000, 10000, 0.0)

    assert result.trajectory == [25000.0, 15000.0, 5000.0, 0.0]
    assert result.years_lasted == 3


def test_zero_expense_never_depletes():
    for rate in (0.0001, 0.03, 0.5, 7):
        result = deplete(50000, 0, rate, 80)
        assert result.years_lasted == 80
        assert result.never_depletes


def test_growth_outpacing_withdrawal_stops_at_cap():
    result = deplete(100000, 4000, 0.05)

    assert result.years_lasted == SAFETY_CAP_YEARS
    assert result.cap_years == SAFETY_CAP_YEARS
    assert result.never_depletes
    assert result.final_balance > 100000


def test_running_out_in_the_cap_year_is_not_never_depletes():
    result = deplete(3000, 1000, 0.0, 3)

    assert result.years_lasted == 3
    assert result.years_lasted == result.cap_years
    assert result.final_balance == 0.0
    assert not result.never_depletes


def test_balance_overflow_is_rejected():
    with pytest.raises(SimulationInputError) as excinfo:
        deplete(1000, 1, 1000, unit="fraction")

    assert "overflows" in excinfo.value.errors[0]


def test_zero_balance_lasts_zero_years():
    result = deplete(0, 1000, 0.05)

    assert result.years_lasted == 0
    assert result.trajectory == [0.0]


def test_trajectory_length_matches_years_lasted():
    rng = random.Random(7)
    for _ in range(200):
        result = deplete(
            rng.uniform(0, 1_000_000),
            rng.uniform(0, 100_000),
            rng.uniform(0, 0.2),
            rng.randint(1, 150),
        )
        assert len(result.trajectory) == result.years_lasted + 1
        assert result.years_lasted <= result.cap_years


def test_more_spending_never_lasts_longer():
    rng = random.Random(2024)
    for _ in range(200):
        balance = rng.uniform(1_000, 2_000_000)
        rate = rng.uniform(0, 0.15)
        low_expense = rng.uniform(0, balance)
        high_expense = rng.uniform(low_expense, balance)

        slow = deplete(balance, low_expense, rate)
        fast = deplete(balance, high_expense, rate)
        assert fast.years_lasted <= slow.years_lasted


@pytest.mark.parametrize("cap_years", [0, -5, 10.0, True])
def test_cap_must_be_positive_integer(cap_years):
    with pytest.raises(SimulationInputError):
        deplete(1000, 100, 0.05, cap_years)


@pytest.mark.parametrize(
    "balance, expense, rate",
    [
        (float("nan"), 100, 0.05),
        (1000, float("inf"), 0.05),
        (-1000, 100, 0.05),
        (1000, -100, 0.05),
        (1000, 100, -0.05),
    ],
)
def test_rejects_invalid_amounts(balance, expense, rate):
    with pytest.raises(SimulationInputError):
        deplete(balance, expense, rate)
