"""Savings targets and multi-year projections"""

from typing import List, Sequence
from finance_tracker.domain.models import ProjectionPoint, SavingsBaseline
from finance_tracker.domain.frequency import MONTHS_PER_YEAR

PROJECTION_HORIZONS = (1, 3, 5, 10)


def monthly_savings_target(monthly_income: float, savings_percentage: float) -> float:
    return monthly_income * savings_percentage / 100


def yearly_savings_target(monthly_income: float, savings_percentage: float) -> float:
    return monthly_savings_target(monthly_income, savings_percentage) * MONTHS_PER_YEAR


def project_savings(
    current_savings: float,
    already_saved: float,
    monthly_income: float,
    savings_percentage: float,
    years: int,
) -> float:
    """
    Total savings after `years` at a constant savings rate.

    Flat sum, no interest or growth:
        current_savings + already_saved + yearly_target * years

    Zero or negative years return the baseline unchanged.
    """
    years = max(years, 0)
    return current_savings + already_saved + yearly_savings_target(monthly_income, savings_percentage) * years


def build_projections(
    baseline: SavingsBaseline,
    monthly_income: float,
    savings_percentage: float,
    horizons: Sequence[int] = PROJECTION_HORIZONS,
) -> List[ProjectionPoint]:
    """Projection per horizon, paired with the savings-only component"""
    yearly_target = yearly_savings_target(monthly_income, savings_percentage)

    return [
        ProjectionPoint(
            years_ahead=years,
            projected_total=project_savings(
                baseline.current_savings,
                baseline.already_saved,
                monthly_income,
                savings_percentage,
                years,
            ),
            projected_saved=yearly_target * max(years, 0),
        )
        for years in horizons
    ]
