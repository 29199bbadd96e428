from __future__ import annotations

import math
from math import isclose, isfinite

import pytest

from retirement_calc.core.calculations import (
    compound_interest,
    inflation_adjusted_value,
    retirement_savings,
)
from retirement_calc.core.contributions import future_value_of_contributions


def test_compound_interest_simple_case():
    # 1000 at 10% for 1 year
    assert compound_interest(1000, 10, 1) == pytest.approx(1100)


def test_compound_interest_multiple_years():
    assert compound_interest(1000, 5, 10) == pytest.approx(1628.89, abs=0.05)


@pytest.mark.parametrize("principal, years", [(5000, 5), (0, 3), (1234.5, 0)])
def test_compound_interest_zero_rate_keeps_principal(principal, years):
    assert compound_interest(principal, 0, years) == principal


@pytest.mark.parametrize("rate", [7, 0, -3])
def test_compound_interest_zero_principal_stays_zero(rate):
    assert compound_interest(0, rate, 10) == 0


def test_compound_interest_negative_years_returns_principal():
    assert compound_interest(1000, 5, -2) == 1000


def test_monthly_compounding_beats_annual():
    annual = compound_interest(1000, 12, 1, 1)
    monthly = compound_interest(1000, 12, 1, 12)

    assert annual == pytest.approx(1120)
    assert monthly == pytest.approx(1126.83, abs=0.05)
    assert monthly > annual


def test_compound_interest_frequency_below_one_is_annual():
    assert compound_interest(1000, 12, 2, 0) == compound_interest(1000, 12, 2, 1)


def test_contributions_monthly_case():
    # 100 a month at 6% for a year, each deposit compounding monthly
    assert future_value_of_contributions(100, 6, 1) == pytest.approx(1240, abs=0.5)


def test_contributions_zero_contribution():
    assert future_value_of_contributions(0, 5, 10) == 0


def test_contributions_zero_years():
    assert future_value_of_contributions(500, 5, 0) == 0


def test_contributions_zero_rate_is_simple_accumulation():
    assert future_value_of_contributions(200, 0, 2) == 200 * 12 * 2


def test_contributions_grow_superlinearly():
    one_year = future_value_of_contributions(500, 7, 1)
    two_years = future_value_of_contributions(500, 7, 2)

    assert two_years > one_year * 2


def test_contributions_fractional_years_round_to_whole_months():
    # 1.5 years -> 18 deposits
    half_year_more = future_value_of_contributions(100, 6, 1.5)
    monthly_rate = 0.06 / 12
    expected = 0.0
    for _ in range(18):
        expected = (expected + 100) * (1 + monthly_rate)
    assert isclose(half_year_more, expected, rel_tol=1e-12)


def test_inflation_adjustment():
    assert inflation_adjusted_value(10000, 3, 10) == pytest.approx(7440.94, abs=0.05)


def test_inflation_adjustment_high_inflation():
    assert inflation_adjusted_value(1000, 20, 5) == pytest.approx(401.88, abs=0.05)


@pytest.mark.parametrize(
    "value, inflation, years",
    [(5000, 0, 20), (7500, 5, 0), (0, 5, 10), (-100, 5, 10)],
)
def test_inflation_adjustment_identities(value, inflation, years):
    assert inflation_adjusted_value(value, inflation, years) == value


def test_retirement_savings_typical_case():
    result = retirement_savings(10000, 500, 7, 30, 3)

    assert 650_000 < result.total_savings < 750_000
    assert 250_000 < result.inflation_adjusted_savings < 350_000


def test_retirement_savings_initial_savings_only():
    result = retirement_savings(50000, 0, 5, 20, 2)

    assert result.total_savings == pytest.approx(132_700, abs=50)
    assert result.inflation_adjusted_savings == pytest.approx(89_300, abs=50)


def test_retirement_savings_contributions_only():
    result = retirement_savings(0, 1000, 6, 25, 2.5)

    assert result.total_savings > 0
    assert 0 < result.inflation_adjusted_savings < result.total_savings


def test_retirement_savings_zero_rate_and_inflation_is_exact():
    result = retirement_savings(20000, 2000, 0, 10, 0)

    # 20000 + 2000 * 12 * 10
    assert result.total_savings == 260_000
    assert result.inflation_adjusted_savings == result.total_savings


def test_retirement_savings_clamps_negative_inputs():
    """Negative amounts, rates and horizons are floored at zero instead of raising."""
    result = retirement_savings(-5000, -100, -7, -10, -3)

    assert result.total_savings == 0
    assert result.inflation_adjusted_savings == 0


def test_retirement_savings_nan_inputs_are_clamped():
    result = retirement_savings(float("nan"), 100, float("nan"), 1, float("nan"))

    assert result.total_savings == 1200
    assert isfinite(result.inflation_adjusted_savings)


@pytest.mark.parametrize("years", [0, 1, 5, 40, 80])
@pytest.mark.parametrize("rate", [0, 0.5, 7, 30])
def test_retirement_savings_stays_finite(years, rate):
    result = retirement_savings(250_000, 3000, rate, years, 6)

    assert isfinite(result.total_savings)
    assert isfinite(result.inflation_adjusted_savings)
    assert result.inflation_adjusted_savings <= result.total_savings


def test_compound_interest_saturates_on_long_horizon():
    assert compound_interest(1000, 30, 3000) == math.inf


def test_retirement_savings_long_horizon_does_not_raise():
    result = retirement_savings(1000, 100, 30, 3000, 3)

    assert result.total_savings == math.inf
    assert result.inflation_adjusted_savings == math.inf


def test_retirement_savings_long_horizon_without_inflation():
    result = retirement_savings(1000, 0, 30, 3000, 0)

    assert result.total_savings == math.inf
    assert result.inflation_adjusted_savings == result.total_savings


def test_inflation_adjustment_when_price_level_overflows():
    # an unbounded price level wipes out a finite amount but never turns infinity into NaN
    assert inflation_adjusted_value(1000, 20, 5000) == 0.0
    assert inflation_adjusted_value(math.inf, 20, 5000) == math.inf
