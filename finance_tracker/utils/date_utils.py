"""Calendar month utilities"""

from typing import List, Tuple
from finance_tracker.domain.exceptions import InvalidPeriodError

MONTHS_PER_YEAR = 12


def validate_month(month: int) -> None:
    """Raise InvalidPeriodError unless month is 1-12"""
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidPeriodError(f"Month must be between 1 and 12, got {month}")


def add_months(year: int, month: int, months: int) -> Tuple[int, int]:
    """Shift a (year, month) pair forward, rolling over year boundaries"""
    validate_month(month)
    index = year * MONTHS_PER_YEAR + (month - 1) + months
    return index // MONTHS_PER_YEAR, index % MONTHS_PER_YEAR + 1


def generate_month_range(start_year: int, start_month: int, count: int) -> List[Tuple[int, int]]:
    """
    Generate `count` consecutive (year, month) pairs starting at the given month.

    The start month is validated even when `count` is 0.
    """
    validate_month(start_month)
    return [add_months(start_year, start_month, i) for i in range(max(count, 0))]
