"""Data contracts for the projection endpoints."""

from typing import Any, Dict, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from retirement_calc.models import ProjectionSeries

Currency = Literal["INR", "USD"]

MAX_CURRENT_AGE = 100
MAX_RETIREMENT_AGE = 120
MAX_RATE_OF_RETURN = 30.0
MAX_INFLATION_RATE = 20.0

# form defaults per currency: (currentSavings, monthlyContribution)
DEFAULT_AMOUNTS: Dict[str, Tuple[float, float]] = {
    "INR": (1_000_000, 20_000),
    "USD": (12_000, 240),
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="forbid",
    )


class FormValidationError(ValueError):
    """Well-typed form input that breaks a business rule; ``errors`` maps field alias to message."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(errors.values()))
        self.errors = errors


class ProjectionRequest(_CamelModel):
    """Calculator form submission. Omitted fields take the form's defaults."""

    current_age: int = Field(30, description="Age today, in whole years.")
    retirement_age: int = Field(65, description="Planned retirement age.")
    current_savings: float = Field(1_000_000, description="Savings already invested.")
    monthly_contribution: float = Field(20_000, description="Amount added every month.")
    expected_rate_of_return: float = Field(
        7.0, description="Expected annual return as a percentage (7 for 7%)."
    )
    inflation_rate: float = Field(5.0, description="Expected annual inflation as a percentage.")
    currency: Currency = "INR"

    @model_validator(mode="before")
    @classmethod
    def _currency_defaults(cls, data: Any) -> Any:
        """Fill omitted amounts with the defaults of the submitted currency."""
        if not isinstance(data, dict):
            return data
        currency = data.get("currency", "INR")
        amounts = DEFAULT_AMOUNTS.get(currency) if isinstance(currency, str) else None
        if amounts is None:
            return data

        filled = dict(data)
        savings, contribution = amounts
        for name, alias, default in (
            ("current_savings", "currentSavings", savings),
            ("monthly_contribution", "monthlyContribution", contribution),
        ):
            if name not in filled and alias not in filled:
                filled[alias] = default
        return filled


class SavingsRequest(_CamelModel):
    """Raw inputs for the scalar savings total; the engine clamps everything but an oversized horizon."""

    current_savings: float
    monthly_contribution: float
    annual_return_rate: float
    years: float = Field(le=MAX_RETIREMENT_AGE, description="Horizon in years; negatives are clamped to 0.")
    inflation_rate: float


class ProjectionSummary(_CamelModel):
    years_to_retirement: int
    total_savings: int
    inflation_adjusted_savings: int
    currency: Currency


class ProjectionResponse(_CamelModel):
    summary: ProjectionSummary
    chart: ProjectionSeries


def collect_form_errors(request: ProjectionRequest) -> Dict[str, str]:
    """Apply the calculator form's rules; returns an empty dict when the submission is usable."""
    errors: Dict[str, str] = {}

    if request.current_age == 0:
        errors["currentAge"] = "Please enter your current age"
    elif request.current_age < 0:
        errors["currentAge"] = "Age cannot be negative"
    elif request.current_age > MAX_CURRENT_AGE:
        errors["currentAge"] = "Please enter a valid age (0-100)"

    if request.retirement_age == 0:
        errors["retirementAge"] = "Please enter your retirement age"
    elif request.retirement_age <= request.current_age:
        errors["retirementAge"] = "Retirement age must be greater than current age"
    elif request.retirement_age > MAX_RETIREMENT_AGE:
        errors["retirementAge"] = "Please enter a reasonable retirement age (up to 120)"

    if request.current_savings < 0:
        errors["currentSavings"] = "Current savings cannot be negative"

    if request.monthly_contribution < 0:
        errors["monthlyContribution"] = "Monthly contribution cannot be negative"

    if request.expected_rate_of_return < 0:
        errors["expectedRateOfReturn"] = "Rate of return cannot be negative"
    elif request.expected_rate_of_return > MAX_RATE_OF_RETURN:
        errors["expectedRateOfReturn"] = "Rate of return seems unrealistically high (max 30%)"

    if request.inflation_rate < 0:
        errors["inflationRate"] = "Inflation rate cannot be negative"
    elif request.inflation_rate > MAX_INFLATION_RATE:
        errors["inflationRate"] = "Inflation rate seems unrealistically high (max 20%)"

    return errors


def validate_form(request: ProjectionRequest) -> ProjectionRequest:
    errors = collect_form_errors(request)
    if errors:
        raise FormValidationError(errors)
    return request
