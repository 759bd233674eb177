"""Month-scoped income entries derived from recurring sources"""

from dataclasses import replace
from typing import Iterable, List, Sequence
from finance_tracker.domain.models import IncomeFrequency, IncomeSource, MonthlyIncomeEntry
from finance_tracker.utils.date_utils import generate_month_range


def entry_id_for(source_id: str, year: int, month: int) -> str:
    return f"{source_id}-{year}-{month:02d}"


def materialize_source_entries(
    source: IncomeSource,
    start_year: int,
    start_month: int,
    months_count: int = 12,
    existing: Sequence[MonthlyIncomeEntry] = (),
) -> List[MonthlyIncomeEntry]:
    """
    Generate monthly entries for a recurring monthly source.

    Only monthly sources are materialized; every other frequency yields an
    empty list. Months that already hold an entry backed by this source are
    skipped, so re-running over the same window adds nothing.

    Raises:
        InvalidPeriodError: start_month is outside 1-12
    """
    months = generate_month_range(start_year, start_month, months_count)

    if source.frequency != IncomeFrequency.MONTHLY:
        return []

    taken = {(entry.year, entry.month) for entry in existing if entry.source_id == source.id}

    return [
        MonthlyIncomeEntry(
            id=entry_id_for(source.id, year, month),
            year=year,
            month=month,
            source_id=source.id,
            amount=source.amount,
            name=source.name,
            category=source.category,
            is_active=source.is_active,
            is_recurring=True,
        )
        for year, month in months
        if (year, month) not in taken
    ]


def sync_entries_with_source(
    source: IncomeSource,
    entries: Iterable[MonthlyIncomeEntry],
) -> List[MonthlyIncomeEntry]:
    """
    Copy an edited source's amount, name and category onto its entries.

    Entries backed by other sources (or none) pass through untouched. The
    per-month active flag is left alone.
    """
    return [
        replace(entry, amount=source.amount, name=source.name, category=source.category)
        if entry.source_id == source.id
        else entry
        for entry in entries
    ]
