"""Frequency normalization - convert per-period amounts to monthly/yearly equivalents"""

import logging
from finance_tracker.domain.models import IncomeFrequency
from finance_tracker.utils.date_utils import MONTHS_PER_YEAR

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52


def to_monthly(amount: float, frequency: str) -> float:
    """
    Convert an amount paid at `frequency` into its monthly equivalent.

    - monthly:  unchanged
    - weekly:   amount * 52 / 12 (average weeks per month, not 4)
    - yearly:   amount / 12
    - one_time: 0, one-time income never counts toward a recurring rate

    Unrecognized frequencies normalize to 0. A warning is logged so bad
    data stays visible, but the result is still 0.
    """
    if frequency == IncomeFrequency.MONTHLY:
        return amount
    if frequency == IncomeFrequency.WEEKLY:
        return amount * WEEKS_PER_YEAR / MONTHS_PER_YEAR
    if frequency == IncomeFrequency.YEARLY:
        return amount / MONTHS_PER_YEAR
    if frequency == IncomeFrequency.ONE_TIME:
        return 0.0

    logger.warning(
        "Unrecognized income frequency, treating as zero",
        extra={"frequency": str(frequency)},
    )
    return 0.0


def to_yearly(amount: float, frequency: str) -> float:
    """Yearly equivalent, always to_monthly(...) * 12"""
    return to_monthly(amount, frequency) * MONTHS_PER_YEAR
