"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from wangku.core.compounding import project
from wangku.core.epf_contribution import (
    calculate_contribution,
    contribution_explanation,
    contribution_rate_presets,
    validate_contribution_percentages,
)
from wangku.core.goals import project_goal
from wangku.core.instruments import project_asb, project_epf, project_tabung_haji
from wangku.core.rate_selection import RateMethod, select_rate
from wangku.core.rates import DividendRates, EPFSavingsType
from wangku.core.recommendation import recommend
from wangku.domain.validation import (
    InputValidationError,
    ensure_valid,
    validate_age,
    validate_amount,
    validate_date,
    validate_salary,
    validate_target_amount,
)
from wangku.schemas.epf import ContributionRequest, ContributionSettingsPayload
from wangku.schemas.goals import GoalProjectionRequest, RecommendationRequest
from wangku.schemas.ping import PingResponse
from wangku.schemas.projection import ASBRequest, CompoundRequest, EPFRequest, TabungHajiRequest
from wangku.schemas.rates import RateSelectionRequest, RateSelectionResponse

logger = logging.getLogger(__name__)

RATES_EXTENSION = "wangku.rates"

api_bp = Blueprint("api", __name__)


def _rates() -> DividendRates:
    return current_app.extensions[RATES_EXTENSION]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _dump(result: BaseModel) -> Dict[str, Any]:
    return result.model_dump(mode="json", by_alias=True)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected %s: %s", request.path, exc.error_count())
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InputValidationError)
def _handle_input_error(exc: InputValidationError):
    logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValueError)
def _handle_value_error(exc: ValueError):
    logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify({"error": [str(exc)]}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    asb = _rates().asb
    response = PingResponse(message="pong", ratesThrough=max(asb) if asb else None)
    return jsonify(response.model_dump())


# -----------------------------
# Rates
# -----------------------------


def _instrument_table(rates: DividendRates, instrument: str, savings_type: EPFSavingsType) -> Dict[int, float]:
    if instrument == "EPF":
        return rates.epf_table(savings_type)
    return rates.table_for(instrument) or {}


@api_bp.get("/rates")
def rate_tables() -> Any:
    """Every table with the effective rate under each selection method."""
    rates = _rates()
    tables = {
        "ASB": rates.asb,
        "Tabung Haji": rates.tabung_haji,
        "EPF Conventional": rates.epf_conventional,
        "EPF Syariah": rates.epf_syariah,
    }
    body = {
        name: {
            "table": {str(year): rate for year, rate in sorted(table.items())},
            "effective": {method.value: select_rate(table, method) for method in RateMethod},
        }
        for name, table in tables.items()
    }
    body["asbDetailed"] = {
        str(year): detail.model_dump() for year, detail in sorted(rates.asb_detailed.items())
    }
    body["epfBenchmarks"] = {str(age): amount for age, amount in sorted(rates.epf_benchmarks.items())}
    body["hajjCost"] = rates.hajj_cost
    body["umrahCost"] = rates.umrah_cost
    body["fixedRates"] = rates.fixed_rates
    return jsonify(body)


@api_bp.post("/rates/select")
def rate_selection() -> Any:
    payload = RateSelectionRequest.model_validate(_payload())
    savings_type = payload.savingsType or EPFSavingsType.CONVENTIONAL
    table = _instrument_table(_rates(), payload.instrument, savings_type)
    response = RateSelectionResponse(
        instrument=payload.instrument,
        method=payload.method,
        savingsType=savings_type if payload.instrument == "EPF" else None,
        rate=select_rate(table, payload.method),
        table=table,
    )
    return jsonify(response.model_dump(mode="json"))


# -----------------------------
# Projections
# -----------------------------


@api_bp.post("/projection/compound")
def compound_projection() -> Any:
    payload = CompoundRequest.model_validate(_payload())
    result = project(payload.currentBalance, payload.monthlyContribution, payload.ratePercent, payload.years)
    return jsonify(_dump(result))


@api_bp.post("/projection/asb")
def asb_projection() -> Any:
    payload = ASBRequest.model_validate(_payload())
    result = project_asb(
        _rates(),
        current_balance=payload.currentBalance,
        monthly_contribution=payload.monthlyContribution,
        years=payload.years,
        units_held=payload.unitsHeld,
        year=payload.year,
    )
    return jsonify(_dump(result))


def _checked_settings(payload: ContributionSettingsPayload):
    check = validate_contribution_percentages(payload.employeePercentage, payload.employerPercentage)
    if not check.is_valid:
        raise InputValidationError(list(check.warnings))
    return payload.to_settings(), check.warnings


@api_bp.post("/projection/epf")
def epf_projection() -> Any:
    payload = EPFRequest.model_validate(_payload())
    settings_payload = payload.contributionSettings or ContributionSettingsPayload()
    settings, warnings = _checked_settings(settings_payload)

    checks = [validate_age(payload.currentAge)]
    if not (settings.is_manual and settings.manual_amount is not None):
        checks.append(validate_salary(payload.monthlySalary))
    ensure_valid(*checks)

    result = project_epf(
        _rates(),
        current_balance=payload.currentBalance,
        current_age=payload.currentAge,
        monthly_salary=payload.monthlySalary,
        settings=settings,
        retirement_age=payload.retirementAge,
        savings_type=payload.savingsType,
        rate_method=payload.rateMethod,
    )
    body = _dump(result)
    body["warnings"] = warnings
    body["explanation"] = contribution_explanation(settings)
    return jsonify(body)


@api_bp.post("/projection/tabung-haji")
def tabung_haji_projection() -> Any:
    payload = TabungHajiRequest.model_validate(_payload())
    result = project_tabung_haji(
        _rates(),
        current_balance=payload.currentBalance,
        monthly_contribution=payload.monthlyContribution,
        target_amount=payload.targetAmount,
        pilgrimage_type=payload.pilgrimageType,
        people=payload.people,
        rate_method=payload.rateMethod,
    )
    return jsonify(_dump(result))


# -----------------------------
# EPF contributions
# -----------------------------


@api_bp.post("/epf/contribution")
def epf_contribution() -> Any:
    payload = ContributionRequest.model_validate(_payload())
    settings, warnings = _checked_settings(payload.settings)
    breakdown = calculate_contribution(payload.monthlySalary, settings)
    body = _dump(breakdown)
    body["warnings"] = warnings
    body["explanation"] = contribution_explanation(settings)
    return jsonify(body)


@api_bp.get("/epf/presets")
def epf_presets() -> Any:
    return jsonify([_dump(preset) for preset in contribution_rate_presets()])


# -----------------------------
# Goals
# -----------------------------


@api_bp.post("/goals/projection")
def goal_projection() -> Any:
    payload = GoalProjectionRequest.model_validate(_payload())
    ensure_valid(
        validate_amount(payload.currentAmount, "Current amount"),
        validate_target_amount(payload.targetAmount),
        validate_date(payload.targetDate, "Target date"),
    )
    result = project_goal(
        payload.currentAmount,
        payload.targetAmount,
        payload.targetDate,
        monthly_contribution=payload.monthlyContribution,
        start_date=payload.startDate,
    )
    return jsonify(_dump(result))


@api_bp.post("/goals/recommendation")
def goal_recommendation() -> Any:
    payload = RecommendationRequest.model_validate(_payload())
    account_type = recommend(_rates(), payload.goalCategory, payload.heldAccountTypes)
    return jsonify({"goalCategory": payload.goalCategory, "recommendedAccount": account_type})
