"""Income breakdown by category"""

from typing import Dict, Iterable, List, Tuple
from finance_tracker.domain.models import CategoryShare, IncomeSource, MonthlyIncomeEntry
from finance_tracker.domain.frequency import to_monthly


def _shares(amounts: Iterable[Tuple[str, float]]) -> List[CategoryShare]:
    # dict keeps first-occurrence order; callers should sort before asserting order
    totals: Dict[str, float] = {}
    for category, amount in amounts:
        totals[category] = totals.get(category, 0.0) + amount

    grand_total = sum(totals.values(), 0.0)

    return [
        CategoryShare(
            category=category,
            amount=amount,
            percentage_of_total=(amount / grand_total * 100) if grand_total > 0 else 0.0,
        )
        for category, amount in totals.items()
    ]


def breakdown_from_sources(sources: Iterable[IncomeSource]) -> List[CategoryShare]:
    """Group active sources by category using their monthly-normalized amounts"""
    return _shares(
        (source.category, to_monthly(source.amount, source.frequency))
        for source in sources
        if source.is_active
    )


def breakdown_from_entries(entries: Iterable[MonthlyIncomeEntry]) -> List[CategoryShare]:
    """Group active month entries by category using their raw amounts"""
    return _shares((entry.category, entry.amount) for entry in entries if entry.is_active)
