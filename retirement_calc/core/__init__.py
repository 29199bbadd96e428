"""Projection engine: pure functions over plain numbers, no web or UI dependencies."""

from retirement_calc.core.calculations import (
    compound_interest,
    inflation_adjusted_value,
    retirement_savings,
)
from retirement_calc.core.contributions import (
    future_value_of_contributions,
    yearly_contribution_growth,
)
from retirement_calc.core.normalize import normalize_projection_input
from retirement_calc.core.series import generate_series

__all__ = [
    "compound_interest",
    "future_value_of_contributions",
    "inflation_adjusted_value",
    "retirement_savings",
    "yearly_contribution_growth",
    "normalize_projection_input",
    "generate_series",
]
