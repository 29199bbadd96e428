"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from retirement_calc.core.calculations import retirement_savings
from retirement_calc.core.health import health_status
from retirement_calc.core.projection import project_retirement
from retirement_calc.core.series import generate_series
from retirement_calc.schemas.projection import (
    FormValidationError,
    ProjectionRequest,
    SavingsRequest,
    validate_form,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info(f"Rejected payload on {request.path}: {exc.error_count()} validation error(s)")
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(FormValidationError)
def _handle_form_error(exc: FormValidationError):
    """Report every broken form rule at once, keyed by field."""
    logger.info(f"Rejected form on {request.path}: {exc}")
    return jsonify({"errors": exc.errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _json_body() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = health_status(current_app.config["APP_ENV"])
    return jsonify(response.model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Summary figures plus the year-by-year chart series."""
    payload = validate_form(ProjectionRequest.model_validate(_json_body()))
    result = project_retirement(payload)
    return jsonify(result.model_dump(by_alias=True))


@api_bp.post("/calc/series")
def series() -> Any:
    """Chart series only."""
    payload = validate_form(ProjectionRequest.model_validate(_json_body()))
    chart = generate_series(
        payload.current_age,
        payload.retirement_age,
        payload.current_savings,
        payload.monthly_contribution,
        payload.expected_rate_of_return,
        payload.inflation_rate,
        payload.currency,
    )
    return jsonify(chart.model_dump(by_alias=True))


@api_bp.post("/calc/savings")
def savings() -> Any:
    """Unrounded nominal and inflation-adjusted totals; out-of-range numbers are clamped."""
    payload = SavingsRequest.model_validate(_json_body())
    result = retirement_savings(
        payload.current_savings,
        payload.monthly_contribution,
        payload.annual_return_rate,
        payload.years,
        payload.inflation_rate,
    )
    return jsonify(result.model_dump(by_alias=True))
