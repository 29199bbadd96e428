"""Clamp step run first by every engine entry point.

The engine never rejects numbers: negative amounts, rates and ages are floored
at zero and a retirement age before the current age collapses to a zero-length
horizon. Rejecting bad form input is the job of ``schemas.projection``.
"""

import math

from retirement_calc.models import ProjectionInput


def non_negative(value: float) -> float:
    """Floor ``value`` at zero. NaN also maps to zero (``max`` keeps its first argument)."""
    return max(0.0, float(value))


def non_negative_age(value: float) -> int:
    return int(math.floor(non_negative(value)))


def normalize_projection_input(
    current_age: float,
    retirement_age: float,
    current_savings: float,
    monthly_contribution: float,
    annual_return_rate_percent: float,
    inflation_rate_percent: float,
) -> ProjectionInput:
    start_age = non_negative_age(current_age)
    end_age = max(start_age, non_negative_age(retirement_age))
    return ProjectionInput(
        current_age=start_age,
        retirement_age=end_age,
        current_savings=non_negative(current_savings),
        monthly_contribution=non_negative(monthly_contribution),
        annual_return_rate_percent=non_negative(annual_return_rate_percent),
        inflation_rate_percent=non_negative(inflation_rate_percent),
    )
