"""Results composer - core entry point that assembles a CalculationResult"""

from typing import Iterable, Sequence
from finance_tracker.domain.models import (
    CalculationResult,
    IncomeSource,
    MonthlyIncomeEntry,
    SavingsBaseline,
)
from finance_tracker.domain.income import (
    YearEntries,
    monthly_income_from_entries,
    monthly_income_from_sources,
    yearly_income_from_entries,
    yearly_income_from_sources,
)
from finance_tracker.domain.breakdown import breakdown_from_entries, breakdown_from_sources
from finance_tracker.domain.savings import (
    PROJECTION_HORIZONS,
    build_projections,
    monthly_savings_target,
    yearly_savings_target,
)


def _compose(
    monthly_income: float,
    yearly_income: float,
    breakdown,
    baseline: SavingsBaseline,
    savings_percentage: float,
    horizons: Sequence[int],
) -> CalculationResult:
    return CalculationResult(
        monthly_income=monthly_income,
        yearly_income=yearly_income,
        monthly_savings_target=monthly_savings_target(monthly_income, savings_percentage),
        yearly_savings_target=yearly_savings_target(monthly_income, savings_percentage),
        projections=build_projections(baseline, monthly_income, savings_percentage, horizons),
        breakdown=breakdown,
    )


def compose_results_from_entries(
    current_month_entries: Sequence[MonthlyIncomeEntry],
    year_entries: YearEntries,
    baseline: SavingsBaseline,
    savings_percentage: float,
    horizons: Sequence[int] = PROJECTION_HORIZONS,
) -> CalculationResult:
    """
    Main entry point: derive dashboard numbers from recorded monthly income.

    Monthly income, savings targets, projections and the category breakdown
    come from the current month only; yearly income sums all 12 months of
    `year_entries`.
    """
    return _compose(
        monthly_income=monthly_income_from_entries(current_month_entries),
        yearly_income=yearly_income_from_entries(year_entries),
        breakdown=breakdown_from_entries(current_month_entries),
        baseline=baseline,
        savings_percentage=savings_percentage,
        horizons=horizons,
    )


def compose_results_from_sources(
    sources: Iterable[IncomeSource],
    baseline: SavingsBaseline,
    savings_percentage: float,
    horizons: Sequence[int] = PROJECTION_HORIZONS,
) -> CalculationResult:
    """Derive the same numbers from recurring source definitions instead of recorded months"""
    sources = list(sources)
    return _compose(
        monthly_income=monthly_income_from_sources(sources),
        yearly_income=yearly_income_from_sources(sources),
        breakdown=breakdown_from_sources(sources),
        baseline=baseline,
        savings_percentage=savings_percentage,
        horizons=horizons,
    )
