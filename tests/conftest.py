"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from finance_tracker.api.main import create_app
from finance_tracker.domain.models import (
    IncomeSource,
    MonthlyIncomeEntry,
    MonthlySavingsRecord,
    SavingsBaseline,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def salary_source() -> IncomeSource:
    return IncomeSource(
        id="src-salary",
        name="Day job",
        amount=3000.0,
        category="salary",
        frequency="monthly",
    )


@pytest.fixture
def investment_source() -> IncomeSource:
    return IncomeSource(
        id="src-dividends",
        name="Dividends",
        amount=1200.0,
        category="investment",
        frequency="yearly",
    )


@pytest.fixture
def baseline() -> SavingsBaseline:
    return SavingsBaseline(current_savings=5000.0, already_saved=1000.0)


def _make_entry(
    entry_id: str,
    month: int,
    amount: float,
    category: str = "salary",
    year: int = 2024,
    is_active: bool = True,
    source_id: str | None = None,
) -> MonthlyIncomeEntry:
    return MonthlyIncomeEntry(
        id=entry_id,
        year=year,
        month=month,
        source_id=source_id,
        amount=amount,
        name=f"Income {entry_id}",
        category=category,
        is_active=is_active,
        is_recurring=source_id is not None,
    )


@pytest.fixture
def make_entry():
    """Factory for MonthlyIncomeEntry records"""
    return _make_entry


@pytest.fixture
def year_entries() -> dict[int, list[MonthlyIncomeEntry]]:
    """2024 income: salary every month, a freelance gig in March, an inactive bonus in June"""
    entries = {
        month: [_make_entry(f"salary-{month}", month, 3000.0, source_id="src-salary")]
        for month in range(1, 13)
    }
    entries[3].append(_make_entry("gig", 3, 1000.0, category="freelance"))
    entries[6].append(_make_entry("bonus", 6, 5000.0, is_active=False))
    return entries


@pytest.fixture
def savings_records() -> list[MonthlySavingsRecord]:
    """Savings put aside in January, February and March 2024"""
    return [
        MonthlySavingsRecord(id="sav-1", year=2024, month=1, saved_amount=600.0),
        MonthlySavingsRecord(id="sav-2", year=2024, month=2, saved_amount=300.0, notes="car repair"),
        MonthlySavingsRecord(id="sav-3", year=2024, month=3, saved_amount=1000.0),
    ]
