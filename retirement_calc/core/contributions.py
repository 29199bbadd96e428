"""
Contribution growth estimators.

Two strategies value the same stream of equal monthly deposits:

  - ``future_value_of_contributions``: whole-horizon total, iterated month by
    month. Feeds the summary figures.
  - ``yearly_contribution_growth``: value of one year's deposits at that year's
    end. The series generator chains it year over year to get a decomposed
    running balance for the chart.

They do not agree numerically over multi-year horizons: the series grows the
prior balance once per year at the annual rate, while the scalar total
compounds every month. Both are kept as-is.
"""

from retirement_calc.utils.money import round_half_up

MONTHS_PER_YEAR = 12


def future_value_of_contributions(
    monthly_contribution: float, annual_rate_percent: float, years: float
) -> float:
    """Future value of ``years * 12`` monthly deposits, each compounding monthly until the end."""
    if monthly_contribution <= 0 or years <= 0:
        return 0.0

    if annual_rate_percent <= 0:
        return monthly_contribution * MONTHS_PER_YEAR * years

    monthly_rate = annual_rate_percent / 100 / MONTHS_PER_YEAR
    total_months = round_half_up(years * MONTHS_PER_YEAR)

    value = 0.0
    for _ in range(total_months):
        # deposit at the start of the month, then a month of growth
        value = (value + monthly_contribution) * (1 + monthly_rate)
    return value


def yearly_contribution_growth(monthly_contribution: float, monthly_rate: float) -> float:
    """End-of-year value of twelve deposits; the one made in month ``m`` (0-based) compounds ``12 - m`` times."""
    if monthly_contribution <= 0 or monthly_rate < 0:
        return 0.0

    if monthly_rate == 0:
        return monthly_contribution * MONTHS_PER_YEAR

    return sum(
        monthly_contribution * (1 + monthly_rate) ** (MONTHS_PER_YEAR - month)
        for month in range(MONTHS_PER_YEAR)
    )
