"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPeriodError(DomainException):
    """Year/month pair is outside the calendar"""

    pass
