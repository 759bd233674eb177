"""POST /v1/calculations/* - dashboard totals, projections and breakdown"""

import time
from fastapi import APIRouter, Depends, Request

from finance_tracker.api.v1.schemas import (
    CalculationResponse,
    MonthlyCalculationRequest,
    SourcesCalculationRequest,
)
from finance_tracker.api.dependencies import get_request_id, get_settings
from finance_tracker.config import Settings
from finance_tracker.domain.income import group_entries_by_month
from finance_tracker.domain.results import compose_results_from_entries, compose_results_from_sources
from finance_tracker.infrastructure.observability.metrics import record_calculation
from finance_tracker.infrastructure.observability.logging import log_calculation

router = APIRouter()


def _percentage(requested: float | None, config: Settings) -> float:
    return config.default_savings_percentage if requested is None else requested


@router.post("/calculations/monthly", response_model=CalculationResponse)
def calculate_from_monthly_data(
    request_body: MonthlyCalculationRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Derive results from recorded monthly income.

    Flow:
    1. Group the posted entries into the requested year's 12 months
    2. Use the requested month as the current month
    3. Compose totals, savings targets, projections and breakdown
    """
    start_time = time.time()
    request_id = get_request_id(request)
    savings_percentage = _percentage(request_body.savings_percentage, config)

    year_entries = group_entries_by_month(
        (entry.to_domain() for entry in request_body.entries),
        request_body.year,
    )
    result = compose_results_from_entries(
        current_month_entries=year_entries[request_body.month],
        year_entries=year_entries,
        baseline=request_body.baseline.to_domain(),
        savings_percentage=savings_percentage,
        horizons=config.projection_horizons,
    )

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("monthly", savings_percentage)
    log_calculation(request_id, "monthly", result.monthly_income, savings_percentage, duration_ms)

    return CalculationResponse.from_domain(result, savings_percentage)


@router.post("/calculations/sources", response_model=CalculationResponse)
def calculate_from_sources(
    request_body: SourcesCalculationRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """Derive results from recurring income source definitions"""
    start_time = time.time()
    request_id = get_request_id(request)
    savings_percentage = _percentage(request_body.savings_percentage, config)

    result = compose_results_from_sources(
        sources=[source.to_domain() for source in request_body.sources],
        baseline=request_body.baseline.to_domain(),
        savings_percentage=savings_percentage,
        horizons=config.projection_horizons,
    )

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("sources", savings_percentage)
    log_calculation(request_id, "sources", result.monthly_income, savings_percentage, duration_ms)

    return CalculationResponse.from_domain(result, savings_percentage)
