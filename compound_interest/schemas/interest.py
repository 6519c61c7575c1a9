"""Data contracts for compound interest calculations."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ContributionFrequency = Literal["monthly", "annual"]
DurationUnit = Literal["months", "years"]
ContributionTiming = Literal["start", "end"]
CompoundingFrequency = Literal["monthly"]

FormField = Literal[
    "initialCapital",
    "periodicContribution",
    "contributionFrequency",
    "investmentDuration",
    "durationUnit",
    "interestRate",
    "contributionTiming",
]


def _as_text(value: Any) -> Any:
    # JSON clients may send numbers where the form holds text.
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class CalculatorForm(BaseModel):
    """Raw form fields exactly as the user typed them."""

    model_config = ConfigDict(extra="forbid")

    initialCapital: str = ""
    periodicContribution: str = ""
    contributionFrequency: ContributionFrequency = "monthly"
    investmentDuration: str = ""
    durationUnit: DurationUnit = "years"
    interestRate: str = ""
    compoundingFrequency: CompoundingFrequency = "monthly"
    contributionTiming: ContributionTiming = "start"

    @field_validator(
        "initialCapital",
        "periodicContribution",
        "investmentDuration",
        "interestRate",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class FormState(CalculatorForm):
    """Form fields plus the last computed result, as persisted between visits."""

    result: float = 0.0
    dailyIncome: float = 0.0
    monthlyIncome: float = 0.0
    yearlyIncome: float = 0.0


class InterestInputs(BaseModel):
    """Validated numeric inputs for the interest engine."""

    initial_capital: float = Field(0.0, ge=0, description="Capital invested at period 0.")
    periodic_contribution: float = Field(
        0.0,
        ge=0,
        description="Recurring deposit, expressed per contribution_frequency.",
    )
    contribution_frequency: ContributionFrequency = "monthly"
    investment_duration: float = Field(..., gt=0, description="Length of the term.")
    duration_unit: DurationUnit = "years"
    interest_rate: float = Field(
        ...,
        gt=0,
        description="Nominal annual rate as a percentage (e.g. 6 for 6%).",
    )
    contribution_timing: ContributionTiming = Field(
        "start",
        description="Deposit before (start) or after (end) each period's growth.",
    )


class InterestResult(BaseModel):
    """Accumulated balance and the passive income it would yield."""

    future_value: float
    daily_income: float
    monthly_income: float
    yearly_income: float


class FormattedResult(BaseModel):
    futureValue: str
    dailyIncome: str
    monthlyIncome: str
    yearlyIncome: str


class CalculationResponse(BaseModel):
    """Result payload returned to the form."""

    futureValue: float
    dailyIncome: float
    monthlyIncome: float
    yearlyIncome: float
    formatted: FormattedResult
    clipboardText: str


class FieldValidationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    field: FormField
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class FieldValidationResponse(BaseModel):
    field: FormField
    value: str
    error: Optional[str] = None


class FormValidationResponse(BaseModel):
    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


class RefusalResponse(BaseModel):
    """Body returned when a calculation is refused because of invalid fields."""

    error: str
    fields: Dict[str, str]
