"""Two-phase validation of the raw calculator form.

Phase one (``validate_field``) runs on every edit and only looks at a single
field; an empty field is not an error yet. Phase two
(``validate_all_fields``) runs before a calculation and adds the cross-field
rule that either an initial capital or a contribution must be entered.
"""

from __future__ import annotations

import math
import re
from typing import Dict, Optional

from compound_interest.schemas.interest import CalculatorForm, InterestInputs, InterestResult

GENERAL_MESSAGE = "Please check the marked fields before calculating."
CAPITAL_OR_CONTRIBUTION_REQUIRED = (
    "You must enter an initial capital or make periodic contributions."
)
NON_NEGATIVE = "Must be a positive number or zero."
CAPITAL_NON_NEGATIVE = "Initial capital must be a positive number or zero."
CONTRIBUTION_NON_NEGATIVE = "Contribution must be a positive number or zero."
DURATION_POSITIVE = "Duration must be greater than 0."
RATE_POSITIVE = "Interest rate must be greater than 0%."
RESULT_TOO_LARGE = "The result is too large to calculate. Try a shorter duration or a lower rate."

_LEADING_ZEROS = re.compile(r"^0+(?=\d)")


class FormValidationError(ValueError):
    """Calculation refused: one or more fields are invalid."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{name}: {msg}" for name, msg in errors.items()))
        self.errors = errors
        self.message = GENERAL_MESSAGE


def normalize_numeric_text(text: str) -> str:
    """Strip redundant leading zeros the way the form input does ("007" -> "7")."""
    if text == "":
        return text
    sign, value = ("-", text[1:]) if text.startswith("-") else ("", text)
    value = _LEADING_ZEROS.sub("", value)
    if "." in value:
        integer, _, decimal = value.partition(".")
        if integer and not integer.isdigit():
            return sign + value
        value = f"{integer or '0'}.{decimal}"
    return sign + value


def parse_number(text: str) -> Optional[float]:
    """Parse form text to a finite float, or None when it is not a number."""
    raw = text.strip()
    # float() accepts "1_000"; the form input does not.
    if not raw or "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _is_blank(text: str) -> bool:
    return text.strip() == ""


def _non_negative_error(text: str, message: str) -> Optional[str]:
    number = parse_number(text)
    if number is None or number < 0:
        return message
    return None


def _positive_error(text: str, message: str) -> Optional[str]:
    number = parse_number(text)
    if number is None or number <= 0:
        return message
    return None


def validate_field(field: str, value: str) -> Optional[str]:
    """Per-field check for immediate feedback. Returns the message or None."""
    if _is_blank(value):
        return None
    if field in ("initialCapital", "periodicContribution"):
        return _non_negative_error(value, NON_NEGATIVE)
    if field == "investmentDuration":
        return _positive_error(value, DURATION_POSITIVE)
    if field == "interestRate":
        return _positive_error(value, RATE_POSITIVE)
    # enum fields are constrained by the schema
    return None


def validate_all_fields(form: CalculatorForm) -> Dict[str, str]:
    """Full validation before computing. An empty dict means the form is valid."""
    errors: Dict[str, str] = {}

    if _is_blank(form.initialCapital) and _is_blank(form.periodicContribution):
        errors["initialCapital"] = CAPITAL_OR_CONTRIBUTION_REQUIRED
        errors["periodicContribution"] = CAPITAL_OR_CONTRIBUTION_REQUIRED
    else:
        if not _is_blank(form.initialCapital):
            error = _non_negative_error(form.initialCapital, CAPITAL_NON_NEGATIVE)
            if error:
                errors["initialCapital"] = error
        if not _is_blank(form.periodicContribution):
            error = _non_negative_error(form.periodicContribution, CONTRIBUTION_NON_NEGATIVE)
            if error:
                errors["periodicContribution"] = error

    error = _positive_error(form.investmentDuration, DURATION_POSITIVE)
    if error:
        errors["investmentDuration"] = error

    error = _positive_error(form.interestRate, RATE_POSITIVE)
    if error:
        errors["interestRate"] = error

    return errors


def parse_form(form: CalculatorForm) -> InterestInputs:
    """Convert a valid form into engine inputs; blank amounts count as 0."""
    errors = validate_all_fields(form)
    if errors:
        raise FormValidationError(errors)

    return InterestInputs(
        initial_capital=parse_number(form.initialCapital) or 0.0,
        periodic_contribution=parse_number(form.periodicContribution) or 0.0,
        contribution_frequency=form.contributionFrequency,
        investment_duration=parse_number(form.investmentDuration),
        duration_unit=form.durationUnit,
        interest_rate=parse_number(form.interestRate),
        contribution_timing=form.contributionTiming,
    )


def normalize_form(form: CalculatorForm) -> CalculatorForm:
    """Apply :func:`normalize_numeric_text` to every numeric text field."""
    return form.model_copy(
        update={
            "initialCapital": normalize_numeric_text(form.initialCapital),
            "periodicContribution": normalize_numeric_text(form.periodicContribution),
            "investmentDuration": normalize_numeric_text(form.investmentDuration),
            "interestRate": normalize_numeric_text(form.interestRate),
        }
    )


def ensure_finite_result(form: CalculatorForm, result: InterestResult) -> None:
    """Refuse results that overflowed; they cannot be shown or sent as JSON."""
    values = (
        result.future_value,
        result.daily_income,
        result.monthly_income,
        result.yearly_income,
    )
    if all(math.isfinite(value) for value in values):
        return

    errors: Dict[str, str] = {}
    for name in ("initialCapital", "periodicContribution"):
        if parse_number(getattr(form, name)):
            errors[name] = RESULT_TOO_LARGE
    errors["investmentDuration"] = RESULT_TOO_LARGE
    errors["interestRate"] = RESULT_TOO_LARGE
    raise FormValidationError(errors)
