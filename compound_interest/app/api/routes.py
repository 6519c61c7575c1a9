"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_interest import __version__
from compound_interest.config import Settings
from compound_interest.core.formatting import format_currency, format_result
from compound_interest.core.interest import compute
from compound_interest.core.validation import (
    FormValidationError,
    ensure_finite_result,
    normalize_form,
    normalize_numeric_text,
    parse_form,
    validate_all_fields,
    validate_field,
)
from compound_interest.schemas.interest import (
    CalculationResponse,
    CalculatorForm,
    FieldValidationRequest,
    FieldValidationResponse,
    FormState,
    FormValidationResponse,
    RefusalResponse,
)
from compound_interest.schemas.ping import PingResponse
from compound_interest.storage import FormStateStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_NUMERIC_FIELDS = {"initialCapital", "periodicContribution", "investmentDuration", "interestRate"}


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _store() -> FormStateStore:
    return current_app.extensions["form_state_store"]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(FormValidationError)
def _handle_refusal(exc: FormValidationError):
    """A calculation was requested with invalid fields."""
    logger.info("calculation refused", extra={"fields": sorted(exc.errors)})
    body = RefusalResponse(error=exc.message, fields=exc.errors)
    return jsonify(body.model_dump()), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/validate/field")
def validate_single_field() -> Any:
    """Immediate feedback for one edited field."""
    payload = FieldValidationRequest.model_validate(_payload())
    value = payload.value
    if payload.field in _NUMERIC_FIELDS:
        value = normalize_numeric_text(value)
    response = FieldValidationResponse(
        field=payload.field,
        value=value,
        error=validate_field(payload.field, value),
    )
    return jsonify(response.model_dump())


@api_bp.post("/validate")
def validate_form() -> Any:
    form = normalize_form(CalculatorForm.model_validate(_payload()))
    errors = validate_all_fields(form)
    response = FormValidationResponse(valid=not errors, errors=errors)
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Validate the whole form, then compute the future value and income."""
    form = normalize_form(CalculatorForm.model_validate(_payload()))
    inputs = parse_form(form)
    result = compute(inputs)
    ensure_finite_result(form, result)
    logger.debug(
        "future value computed",
        extra={"future_value": result.future_value},
    )

    symbol = _settings().currency_symbol
    response = CalculationResponse(
        futureValue=result.future_value,
        dailyIncome=result.daily_income,
        monthlyIncome=result.monthly_income,
        yearlyIncome=result.yearly_income,
        formatted=format_result(result, symbol),
        clipboardText=format_currency(result.future_value, symbol),
    )
    return jsonify(response.model_dump())


@api_bp.get("/state")
def load_state() -> Any:
    """Return the saved form state, or the defaults when nothing is saved."""
    state = _store().load(_settings().state_key) or FormState()
    return jsonify(state.model_dump())


@api_bp.put("/state")
def save_state() -> Any:
    state = FormState.model_validate(_payload())
    _store().save(_settings().state_key, state)
    return jsonify(state.model_dump())
