from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ValueModel(BaseModel):
    """Immutable value type; serialises with camelCase keys for the frontend."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProjectionInput(_ValueModel):
    """Sanitized projection inputs. Build through ``core.normalize``, never directly from user data."""

    current_age: int = Field(ge=0)
    retirement_age: int = Field(ge=0)
    current_savings: float = Field(ge=0)
    monthly_contribution: float = Field(ge=0)
    annual_return_rate_percent: float = Field(ge=0)
    inflation_rate_percent: float = Field(ge=0)

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age


class RetirementSavingsResult(_ValueModel):
    total_savings: float
    inflation_adjusted_savings: float


class SavingsDataPoint(_ValueModel):
    """One year of the projection. ``year`` 0 is the starting point."""

    year: int = Field(ge=0)
    age: int
    initial_savings_value: float
    contributions_value: float
    total_value: float


class ProjectionSeries(_ValueModel):
    """Year-by-year projection plus the parallel arrays a chart consumes."""

    points: List[SavingsDataPoint]
    labels: List[str]
    initial_savings_data: List[float]
    contributions_data: List[float]
    total_data: List[float]
    currency: str
    years_to_retirement: int = Field(ge=0)

    @classmethod
    def from_points(
        cls, points: List[SavingsDataPoint], currency: str, years_to_retirement: int
    ) -> "ProjectionSeries":
        return cls(
            points=points,
            labels=[f"Age {point.age}" for point in points],
            initial_savings_data=[point.initial_savings_value for point in points],
            contributions_data=[point.contributions_value for point in points],
            total_data=[point.total_value for point in points],
            currency=currency,
            years_to_retirement=years_to_retirement,
        )


__all__ = [
    "ProjectionInput",
    "RetirementSavingsResult",
    "SavingsDataPoint",
    "ProjectionSeries",
]
