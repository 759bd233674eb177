"""Actual savings tracking - what was really put aside, month by month"""

import logging
from typing import Dict, Iterable, List
from finance_tracker.domain.models import (
    MonthlySavingsPoint,
    MonthlySavingsRecord,
    SavingsBaseline,
    SavingsSummary,
)
from finance_tracker.domain.income import YearEntries, monthly_income_from_entries, yearly_income_from_entries
from finance_tracker.domain.frequency import MONTHS_PER_YEAR

logger = logging.getLogger(__name__)


def _rate(saved: float, income: float) -> float:
    return saved / income * 100 if income > 0 else 0.0


def index_savings_by_month(records: Iterable[MonthlySavingsRecord], year: int) -> Dict[int, MonthlySavingsRecord]:
    """
    Map month -> savings record for one year.

    There should be at most one record per month. If a snapshot holds more,
    the first one wins and the rest are reported.
    """
    by_month: Dict[int, MonthlySavingsRecord] = {}
    for record in records:
        if record.year != year:
            continue
        if record.month in by_month:
            logger.warning(
                "Duplicate savings record for month, keeping the first",
                extra={"year": year, "month": record.month, "record_id": record.id},
            )
            continue
        by_month[record.month] = record
    return by_month


def saved_in_month(records: Iterable[MonthlySavingsRecord], year: int, month: int) -> float:
    record = index_savings_by_month(records, year).get(month)
    return record.saved_amount if record else 0.0


def saved_in_year(records: Iterable[MonthlySavingsRecord], year: int) -> float:
    return sum((record.saved_amount for record in index_savings_by_month(records, year).values()), 0.0)


def savings_timeline(
    records: Iterable[MonthlySavingsRecord],
    year: int,
    year_entries: YearEntries,
) -> List[MonthlySavingsPoint]:
    """Twelve points with saved amount, running total and actual savings rate"""
    by_month = index_savings_by_month(records, year)

    timeline = []
    cumulative = 0.0
    for month in range(1, MONTHS_PER_YEAR + 1):
        record = by_month.get(month)
        saved = record.saved_amount if record else 0.0
        income = monthly_income_from_entries(year_entries.get(month, ()))
        cumulative += saved

        timeline.append(
            MonthlySavingsPoint(
                month=month,
                income=income,
                saved=saved,
                cumulative=cumulative,
                savings_rate=_rate(saved, income),
            )
        )

    return timeline


def summarize_savings(
    records: Iterable[MonthlySavingsRecord],
    year: int,
    month: int,
    year_entries: YearEntries,
    baseline: SavingsBaseline,
) -> SavingsSummary:
    """
    Compare actual savings against income for the year and the given month.

    Total savings is the baseline plus everything saved this year. Savings
    rates are 0 whenever the matching income is 0.
    """
    timeline = savings_timeline(records, year, year_entries)
    saved_this_year = timeline[-1].cumulative
    current = timeline[month - 1] if 1 <= month <= MONTHS_PER_YEAR else None

    return SavingsSummary(
        year=year,
        month=month,
        saved_this_month=current.saved if current else 0.0,
        actual_savings_rate=current.savings_rate if current else 0.0,
        saved_this_year=saved_this_year,
        total_savings=baseline.total + saved_this_year,
        average_savings_rate=_rate(saved_this_year, yearly_income_from_entries(year_entries)),
        timeline=timeline,
    )
