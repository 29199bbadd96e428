"""Summary plus chart for one calculator form submission."""

from loguru import logger

from retirement_calc.core.calculations import retirement_savings
from retirement_calc.core.series import generate_series
from retirement_calc.schemas.projection import (
    ProjectionRequest,
    ProjectionResponse,
    ProjectionSummary,
)
from retirement_calc.utils.money import round_half_up


def project_retirement(request: ProjectionRequest) -> ProjectionResponse:
    """
    Run both engine entry points on the same raw inputs.

    The summary totals come from the whole-horizon formula and are rounded for
    display; the chart comes from the year-by-year generator. The two are not
    expected to match to the unit.
    """
    years_to_retirement = request.retirement_age - request.current_age

    savings = retirement_savings(
        request.current_savings,
        request.monthly_contribution,
        request.expected_rate_of_return,
        years_to_retirement,
        request.inflation_rate,
    )
    chart = generate_series(
        request.current_age,
        request.retirement_age,
        request.current_savings,
        request.monthly_contribution,
        request.expected_rate_of_return,
        request.inflation_rate,
        request.currency,
    )

    logger.debug(
        f"Projected {years_to_retirement} years ({request.currency}): "
        f"total={savings.total_savings:.2f}, real={savings.inflation_adjusted_savings:.2f}, "
        f"chart points={len(chart.points)}"
    )

    return ProjectionResponse(
        summary=ProjectionSummary(
            years_to_retirement=years_to_retirement,
            total_savings=round_half_up(savings.total_savings),
            inflation_adjusted_savings=round_half_up(savings.inflation_adjusted_savings),
            currency=request.currency,
        ),
        chart=chart,
    )
