"""Domain models - immutable records for income, savings and derived results"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Union


class IncomeCategory(str, Enum):
    """Closed set of income source categories"""

    SALARY = "salary"
    FREELANCE = "freelance"
    SIDE_HUSTLE = "side_hustle"
    INVESTMENT = "investment"
    PASSIVE = "passive"
    OTHER = "other"


class IncomeFrequency(str, Enum):
    """How often an income source pays out"""

    MONTHLY = "monthly"
    WEEKLY = "weekly"
    YEARLY = "yearly"
    ONE_TIME = "one_time"


@dataclass(frozen=True)
class IncomeSource:
    """User-declared income stream, amount is per frequency period"""

    id: str
    name: str
    amount: float
    category: str
    frequency: str
    is_active: bool = True


@dataclass(frozen=True)
class MonthlyIncomeEntry:
    """Income counted in one specific year/month"""

    id: str
    year: int
    month: int  # 1-12
    source_id: Optional[str]  # None for one-off entries
    amount: float
    name: str
    category: str
    is_active: bool = True
    is_recurring: bool = False


@dataclass(frozen=True)
class MonthlySavingsRecord:
    """Amount actually put aside in one year/month"""

    id: str
    year: int
    month: int
    saved_amount: float
    notes: Optional[str] = None


@dataclass(frozen=True)
class SavingsBaseline:
    """Savings held before tracking started"""

    current_savings: float = 0.0
    already_saved: float = 0.0

    @property
    def total(self) -> float:
        return self.current_savings + self.already_saved


@dataclass(frozen=True)
class Goal:
    """Financial goal with a target amount"""

    id: str
    name: str
    target_amount: float
    current_amount: float = 0.0
    deadline: Optional[date] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected savings N years ahead"""

    years_ahead: int
    projected_total: float  # baseline + saved
    projected_saved: float  # savings-only component


@dataclass(frozen=True)
class CategoryShare:
    """One category's slice of total monthly income"""

    category: str
    amount: float
    percentage_of_total: float


@dataclass(frozen=True)
class CalculationResult:
    """Aggregate numbers behind the dashboard and analytics views"""

    monthly_income: float
    yearly_income: float
    monthly_savings_target: float
    yearly_savings_target: float
    projections: List[ProjectionPoint] = field(default_factory=list)
    breakdown: List[CategoryShare] = field(default_factory=list)


@dataclass(frozen=True)
class WhatIfScenario:
    """Projection under an alternate savings percentage"""

    savings_percentage: float
    monthly_income: float
    monthly_savings: float
    projection_5_years: float
    projection_10_years: float


@dataclass(frozen=True)
class FiniteMonths:
    """Goal is reachable in a whole number of months"""

    months: int


@dataclass(frozen=True)
class Unreachable:
    """Goal is never reached at the current savings rate"""


MonthsToGoal = Union[FiniteMonths, Unreachable]


@dataclass(frozen=True)
class GoalProgress:
    """Progress snapshot for a single goal"""

    goal_id: str
    progress_percent: float
    months_to_goal: MonthsToGoal


@dataclass(frozen=True)
class MonthlySavingsPoint:
    """Actual savings for one month of the savings timeline"""

    month: int
    income: float
    saved: float
    cumulative: float
    savings_rate: float


@dataclass(frozen=True)
class SavingsSummary:
    """Actual savings compared against income for one year"""

    year: int
    month: int
    saved_this_month: float
    actual_savings_rate: float
    saved_this_year: float
    total_savings: float
    average_savings_rate: float
    timeline: List[MonthlySavingsPoint] = field(default_factory=list)
