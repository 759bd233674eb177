"""Income aggregation over source definitions or per-month entries"""

from typing import Dict, Iterable, List, Mapping, Sequence
from finance_tracker.domain.models import IncomeSource, MonthlyIncomeEntry
from finance_tracker.domain.frequency import to_monthly, MONTHS_PER_YEAR

YearEntries = Mapping[int, Sequence[MonthlyIncomeEntry]]


def monthly_income_from_sources(sources: Iterable[IncomeSource]) -> float:
    """Sum of active sources, each normalized to a monthly amount"""
    return sum(
        (to_monthly(source.amount, source.frequency) for source in sources if source.is_active),
        0.0,
    )


def yearly_income_from_sources(sources: Iterable[IncomeSource]) -> float:
    return monthly_income_from_sources(sources) * MONTHS_PER_YEAR


def monthly_income_from_entries(entries: Iterable[MonthlyIncomeEntry]) -> float:
    """Sum of active entries; entries are already month-scoped so no conversion"""
    return sum((entry.amount for entry in entries if entry.is_active), 0.0)


def yearly_income_from_entries(year_entries: YearEntries) -> float:
    """
    Sum monthly income across months 1-12 of a year.

    Missing months count as 0. Keys outside 1-12 are ignored.
    """
    return sum(
        (monthly_income_from_entries(year_entries.get(month, ())) for month in range(1, MONTHS_PER_YEAR + 1)),
        0.0,
    )


def group_entries_by_month(entries: Iterable[MonthlyIncomeEntry], year: int) -> Dict[int, List[MonthlyIncomeEntry]]:
    """Bucket a flat snapshot into month -> entries for one year, all 12 months present"""
    by_month: Dict[int, List[MonthlyIncomeEntry]] = {month: [] for month in range(1, MONTHS_PER_YEAR + 1)}
    for entry in entries:
        if entry.year == year and entry.month in by_month:
            by_month[entry.month].append(entry)
    return by_month
