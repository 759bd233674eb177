"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import Annotated, List, Optional
from pydantic import BaseModel, Field

from finance_tracker.domain.models import (
    CalculationResult,
    FiniteMonths,
    Goal,
    GoalProgress,
    IncomeCategory,
    IncomeSource,
    MonthlyIncomeEntry,
    MonthlySavingsRecord,
    SavingsBaseline,
    SavingsSummary,
    WhatIfScenario,
)


class IncomeSourceSchema(BaseModel):
    """Recurring or one-time income source"""

    id: str = Field(..., min_length=1)
    name: str
    amount: float = Field(..., ge=0)
    category: IncomeCategory
    # Plain string: unknown frequencies normalize to 0 instead of failing validation
    frequency: str = Field(..., description="monthly | weekly | yearly | one_time")
    is_active: bool = True

    def to_domain(self) -> IncomeSource:
        return IncomeSource(
            id=self.id,
            name=self.name,
            amount=self.amount,
            category=self.category.value,
            frequency=self.frequency,
            is_active=self.is_active,
        )


class MonthlyIncomeEntrySchema(BaseModel):
    """Income counted in one year/month"""

    id: str = Field(..., min_length=1)
    year: int
    month: int = Field(..., ge=1, le=12)
    source_id: Optional[str] = None
    amount: float = Field(..., ge=0)
    name: str
    category: IncomeCategory
    is_active: bool = True
    is_recurring: bool = False

    def to_domain(self) -> MonthlyIncomeEntry:
        return MonthlyIncomeEntry(
            id=self.id,
            year=self.year,
            month=self.month,
            source_id=self.source_id,
            amount=self.amount,
            name=self.name,
            category=self.category.value,
            is_active=self.is_active,
            is_recurring=self.is_recurring,
        )

    @classmethod
    def from_domain(cls, entry: MonthlyIncomeEntry) -> "MonthlyIncomeEntrySchema":
        return cls(
            id=entry.id,
            year=entry.year,
            month=entry.month,
            source_id=entry.source_id,
            amount=entry.amount,
            name=entry.name,
            category=entry.category,
            is_active=entry.is_active,
            is_recurring=entry.is_recurring,
        )


class MonthlySavingsSchema(BaseModel):
    """Amount actually saved in one year/month"""

    id: str = Field(..., min_length=1)
    year: int
    month: int = Field(..., ge=1, le=12)
    saved_amount: float = Field(..., ge=0)
    notes: Optional[str] = None

    def to_domain(self) -> MonthlySavingsRecord:
        return MonthlySavingsRecord(
            id=self.id,
            year=self.year,
            month=self.month,
            saved_amount=self.saved_amount,
            notes=self.notes,
        )


class BaselineSchema(BaseModel):
    """Savings held before tracking started"""

    current_savings: float = Field(0.0, ge=0)
    already_saved: float = Field(0.0, ge=0)

    def to_domain(self) -> SavingsBaseline:
        return SavingsBaseline(current_savings=self.current_savings, already_saved=self.already_saved)


class SourcesCalculationRequest(BaseModel):
    """Request body for POST /v1/calculations/sources"""

    sources: List[IncomeSourceSchema] = []
    baseline: BaselineSchema = BaselineSchema()
    savings_percentage: Optional[float] = Field(None, ge=0, le=100)


class MonthlyCalculationRequest(BaseModel):
    """Request body for POST /v1/calculations/monthly"""

    year: int
    month: int = Field(..., ge=1, le=12, description="Current month, drives breakdown and monthly income")
    entries: List[MonthlyIncomeEntrySchema] = []
    baseline: BaselineSchema = BaselineSchema()
    savings_percentage: Optional[float] = Field(None, ge=0, le=100)


class ProjectionSchema(BaseModel):
    years_ahead: int
    projected_total: float
    projected_saved: float


class CategoryShareSchema(BaseModel):
    category: str
    amount: float
    percentage_of_total: float


class CalculationResponse(BaseModel):
    """Derived totals, projections and category breakdown"""

    savings_percentage: float
    monthly_income: float
    yearly_income: float
    monthly_savings_target: float
    yearly_savings_target: float
    projections: List[ProjectionSchema]
    breakdown: List[CategoryShareSchema]

    @classmethod
    def from_domain(cls, result: CalculationResult, savings_percentage: float) -> "CalculationResponse":
        return cls(
            savings_percentage=savings_percentage,
            monthly_income=result.monthly_income,
            yearly_income=result.yearly_income,
            monthly_savings_target=result.monthly_savings_target,
            yearly_savings_target=result.yearly_savings_target,
            projections=[
                ProjectionSchema(
                    years_ahead=p.years_ahead,
                    projected_total=p.projected_total,
                    projected_saved=p.projected_saved,
                )
                for p in result.projections
            ],
            breakdown=[
                CategoryShareSchema(
                    category=share.category,
                    amount=share.amount,
                    percentage_of_total=share.percentage_of_total,
                )
                for share in result.breakdown
            ],
        )


class ScenarioRequest(BaseModel):
    """Request body for POST /v1/scenarios"""

    monthly_income: float = Field(..., ge=0)
    baseline: BaselineSchema = BaselineSchema()
    percentages: Optional[List[Annotated[float, Field(ge=0, le=100)]]] = None


class ScenarioSchema(BaseModel):
    savings_percentage: float
    monthly_income: float
    monthly_savings: float
    projection_5_years: float
    projection_10_years: float

    @classmethod
    def from_domain(cls, scenario: WhatIfScenario) -> "ScenarioSchema":
        return cls(
            savings_percentage=scenario.savings_percentage,
            monthly_income=scenario.monthly_income,
            monthly_savings=scenario.monthly_savings,
            projection_5_years=scenario.projection_5_years,
            projection_10_years=scenario.projection_10_years,
        )


class ScenarioResponse(BaseModel):
    """Response for POST /v1/scenarios"""

    scenarios: List[ScenarioSchema]


class GoalSchema(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    target_amount: float = Field(..., ge=0)
    current_amount: float = Field(0.0, ge=0)
    deadline: Optional[date] = None
    description: Optional[str] = None

    def to_domain(self) -> Goal:
        return Goal(
            id=self.id,
            name=self.name,
            target_amount=self.target_amount,
            current_amount=self.current_amount,
            deadline=self.deadline,
            description=self.description,
        )


class GoalProgressRequest(BaseModel):
    """Request body for POST /v1/goals/progress"""

    goals: List[GoalSchema]
    monthly_savings: float = Field(..., ge=0)


class GoalProgressSchema(BaseModel):
    goal_id: str
    progress_percent: float
    reachable: bool
    months_to_goal: Optional[int] = None  # None when unreachable

    @classmethod
    def from_domain(cls, progress: GoalProgress) -> "GoalProgressSchema":
        months = progress.months_to_goal
        reachable = isinstance(months, FiniteMonths)
        return cls(
            goal_id=progress.goal_id,
            progress_percent=progress.progress_percent,
            reachable=reachable,
            months_to_goal=months.months if reachable else None,
        )


class GoalProgressResponse(BaseModel):
    """Response for POST /v1/goals/progress"""

    goals: List[GoalProgressSchema]


class SavingsSummaryRequest(BaseModel):
    """Request body for POST /v1/savings/summary"""

    year: int
    month: int = Field(..., ge=1, le=12)
    entries: List[MonthlyIncomeEntrySchema] = []
    savings: List[MonthlySavingsSchema] = []
    baseline: BaselineSchema = BaselineSchema()


class MonthlySavingsPointSchema(BaseModel):
    month: int
    income: float
    saved: float
    cumulative: float
    savings_rate: float


class SavingsSummaryResponse(BaseModel):
    """Response for POST /v1/savings/summary"""

    year: int
    month: int
    saved_this_month: float
    actual_savings_rate: float
    saved_this_year: float
    total_savings: float
    average_savings_rate: float
    timeline: List[MonthlySavingsPointSchema]

    @classmethod
    def from_domain(cls, summary: SavingsSummary) -> "SavingsSummaryResponse":
        return cls(
            year=summary.year,
            month=summary.month,
            saved_this_month=summary.saved_this_month,
            actual_savings_rate=summary.actual_savings_rate,
            saved_this_year=summary.saved_this_year,
            total_savings=summary.total_savings,
            average_savings_rate=summary.average_savings_rate,
            timeline=[
                MonthlySavingsPointSchema(
                    month=point.month,
                    income=point.income,
                    saved=point.saved,
                    cumulative=point.cumulative,
                    savings_rate=point.savings_rate,
                )
                for point in summary.timeline
            ],
        )


class MaterializeRequest(BaseModel):
    """Request body for POST /v1/income/materialize"""

    source: IncomeSourceSchema
    start_year: int
    # Not range-checked here; the domain raises InvalidPeriodError
    start_month: int
    months_count: Optional[int] = Field(None, ge=0)
    existing: List[MonthlyIncomeEntrySchema] = []


class MaterializeResponse(BaseModel):
    """Response for POST /v1/income/materialize"""

    entries: List[MonthlyIncomeEntrySchema]
