"""HTTP routes for the Flask API."""

from __future__ import annotations

import math
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from retiresim.core.depletion import deplete
from retiresim.core.errors import SimulationInputError
from retiresim.core.growth import fixed_growth_trajectory, variable_growth_trajectory
from retiresim.core.optimizer import optimize_withdrawal
from retiresim.core.rates import normalize_rate, normalize_schedule
from retiresim.schemas.common import PingResponse, to_schedule
from retiresim.schemas.depletion import (
    DepletionRequest,
    DepletionResponse,
    WithdrawalRequest,
    WithdrawalResponse,
)
from retiresim.schemas.growth import (
    FixedGrowthRequest,
    GrowthResponse,
    VariableGrowthRequest,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.info("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(SimulationInputError)
def _handle_simulation_error(exc: SimulationInputError):
    current_app.logger.info("rejected %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=True)
    if raw_payload is None:
        raise SimulationInputError(["request body must be valid JSON"])
    return raw_payload


def _cents(amount: float) -> float:
    # round down so the displayed amount never outspends the target
    return math.floor(amount * 100) / 100


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.post("/calc/fixed")
def fixed() -> Any:
    payload = FixedGrowthRequest.model_validate(_payload())
    rate = normalize_rate(payload.rate, payload.rateUnit)
    trajectory = fixed_growth_trajectory(payload.principal, rate, payload.years, unit="fraction")
    response = GrowthResponse(
        finalBalance=round(trajectory[-1], 2),
        normalizedRates=[rate],
        schedule=to_schedule(trajectory),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/variable")
def variable() -> Any:
    payload = VariableGrowthRequest.model_validate(_payload())
    rates = normalize_schedule(payload.rates, payload.rateUnit)
    trajectory = variable_growth_trajectory(payload.principal, rates, unit="fraction")
    response = GrowthResponse(
        finalBalance=round(trajectory[-1], 2),
        normalizedRates=rates,
        schedule=to_schedule(trajectory),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/depletion")
def depletion() -> Any:
    """Years until the balance runs out at a fixed annual expense."""
    payload = DepletionRequest.model_validate(_payload())
    result = deplete(
        payload.balance,
        payload.annualExpense,
        payload.rate,
        current_app.config["SAFETY_CAP_YEARS"],
        payload.rateUnit,
    )

    if result.never_depletes:
        message = f"{result.cap_years} | Retirement funds will never deplete in lifetime"
    else:
        message = f"Funds last {result.years_lasted} years"

    response = DepletionResponse(
        yearsLasted=result.years_lasted,
        capYears=result.cap_years,
        neverDepletes=result.never_depletes,
        message=message,
        schedule=to_schedule(result.trajectory),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/withdrawal")
def withdrawal() -> Any:
    """Largest constant withdrawal that lasts ``targetYears``."""
    payload = WithdrawalRequest.model_validate(_payload())
    result = optimize_withdrawal(
        payload.balance,
        payload.rate,
        payload.targetYears,
        epsilon=current_app.config["WITHDRAWAL_EPSILON"],
        cap_years=current_app.config["SAFETY_CAP_YEARS"],
        unit=payload.rateUnit,
    )
    current_app.logger.info(
        "withdrawal for %.2f over %d years: %.2f (%d iterations)",
        payload.balance,
        payload.targetYears,
        result.withdrawal,
        result.iterations,
    )

    response = WithdrawalResponse(
        withdrawal=_cents(result.withdrawal),
        targetYears=result.target_years,
        yearsLasted=result.years_lasted,
        capYears=result.cap_years,
        neverDepletes=result.never_depletes,
        iterations=result.iterations,
        schedule=to_schedule(result.trajectory),
    )
    return jsonify(response.model_dump())
