"""Year-by-year projection feeding the savings chart."""

from typing import List

from retirement_calc.core.contributions import MONTHS_PER_YEAR, yearly_contribution_growth
from retirement_calc.core.normalize import normalize_projection_input
from retirement_calc.models import ProjectionSeries, SavingsDataPoint
from retirement_calc.utils.money import round_half_up


def generate_series(
    current_age: float,
    retirement_age: float,
    current_savings: float,
    monthly_contribution: float,
    annual_return_rate_percent: float,
    inflation_rate_percent: float,
    currency: str,
) -> ProjectionSeries:
    """
    Build one data point per age from current_age to retirement_age (inclusive).

    Per year after the first:
      1) Initial savings compound once at the annual rate.
      2) Contributions: the previous balance compounds once at the annual rate,
         then this year's twelve deposits are added at their year-end value.
         With a zero rate deposits just accumulate.
      3) Each field is rounded to a whole unit for storage; the running
         balances stay unrounded.

    ``inflation_rate_percent`` is normalised with the rest but does not change
    the nominal series. ``currency`` is passed through untouched.
    """
    inputs = normalize_projection_input(
        current_age,
        retirement_age,
        current_savings,
        monthly_contribution,
        annual_return_rate_percent,
        inflation_rate_percent,
    )
    years_to_retirement = inputs.years_to_retirement
    contribution = inputs.monthly_contribution

    annual_rate = inputs.annual_return_rate_percent / 100
    monthly_rate = annual_rate / MONTHS_PER_YEAR

    initial_savings_value = inputs.current_savings
    contributions_value = 0.0

    points: List[SavingsDataPoint] = [
        SavingsDataPoint(
            year=0,
            age=inputs.current_age,
            initial_savings_value=initial_savings_value,
            contributions_value=0,
            total_value=initial_savings_value,
        )
    ]

    for year in range(1, years_to_retirement + 1):
        initial_savings_value = initial_savings_value * (1 + annual_rate)

        if annual_rate <= 0:
            contributions_value += contribution * MONTHS_PER_YEAR
        elif year == 1:
            contributions_value = yearly_contribution_growth(contribution, monthly_rate)
        else:
            contributions_value = contributions_value * (1 + annual_rate) + (
                yearly_contribution_growth(contribution, monthly_rate)
            )

        points.append(
            SavingsDataPoint(
                year=year,
                age=inputs.current_age + year,
                initial_savings_value=round_half_up(initial_savings_value),
                contributions_value=round_half_up(contributions_value),
                total_value=round_half_up(initial_savings_value + contributions_value),
            )
        )

    return ProjectionSeries.from_points(points, currency, years_to_retirement)
