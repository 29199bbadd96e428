"""
Financial calculations for retirement planning.

Rates are percentages (7 means 7 %). Every function returns a plain float and
answers non-positive inputs with an identity instead of raising. Growth that
exceeds the float range saturates to infinity.
"""

import math

from retirement_calc.core.contributions import future_value_of_contributions
from retirement_calc.core.normalize import non_negative
from retirement_calc.models import RetirementSavingsResult


def compound_interest(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounding_frequency: int = 1,
) -> float:
    """
    Future value of a lump sum: ``P * (1 + r/n) ** (n * t)``.

    The principal comes back unchanged when it is not positive, when ``years``
    is negative or when the rate is not positive. A frequency below 1 is
    treated as annual compounding.
    """
    if principal <= 0 or years < 0:
        return principal

    if annual_rate_percent <= 0:
        return principal

    periods_per_year = max(1, compounding_frequency)
    rate = annual_rate_percent / 100
    try:
        growth = (1 + rate / periods_per_year) ** (periods_per_year * years)
    except OverflowError:
        return math.inf
    return principal * growth


def inflation_adjusted_value(
    future_value: float, inflation_rate_percent: float, years: float
) -> float:
    """Discount a nominal future amount to today's purchasing power: ``FV / (1 + i) ** t``."""
    if future_value <= 0 or years <= 0:
        return future_value

    if inflation_rate_percent <= 0:
        return future_value

    try:
        price_level = (1 + inflation_rate_percent / 100) ** years
    except OverflowError:
        # an infinite nominal amount stays infinite rather than becoming NaN
        return future_value if math.isinf(future_value) else 0.0
    return future_value / price_level


def retirement_savings(
    current_savings: float,
    monthly_contribution: float,
    annual_return_rate_percent: float,
    years: float,
    inflation_rate_percent: float,
) -> RetirementSavingsResult:
    """
    Nominal savings at retirement and the same amount in today's money.

    Current savings compound once a year; monthly contributions compound
    monthly. Inputs are floored at zero first. Results are not rounded.
    """
    initial_savings = non_negative(current_savings)
    contribution = non_negative(monthly_contribution)
    return_rate = non_negative(annual_return_rate_percent)
    inflation = non_negative(inflation_rate_percent)
    period = non_negative(years)

    total_savings = compound_interest(initial_savings, return_rate, period, 1) + (
        future_value_of_contributions(contribution, return_rate, period)
    )

    return RetirementSavingsResult(
        total_savings=total_savings,
        inflation_adjusted_savings=inflation_adjusted_value(total_savings, inflation, period),
    )
