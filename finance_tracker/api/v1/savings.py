"""POST /v1/savings/summary - actual savings against income"""

import time
from fastapi import APIRouter, Request

from finance_tracker.api.v1.schemas import SavingsSummaryRequest, SavingsSummaryResponse
from finance_tracker.api.dependencies import get_request_id
from finance_tracker.domain.income import group_entries_by_month
from finance_tracker.domain.tracking import summarize_savings
from finance_tracker.infrastructure.observability.logging import log_request_step

router = APIRouter()


@router.post("/savings/summary", response_model=SavingsSummaryResponse)
def get_savings_summary(request_body: SavingsSummaryRequest, request: Request):
    """Month-by-month savings timeline plus year totals for the requested year"""
    start_time = time.time()

    summary = summarize_savings(
        records=[record.to_domain() for record in request_body.savings],
        year=request_body.year,
        month=request_body.month,
        year_entries=group_entries_by_month(
            (entry.to_domain() for entry in request_body.entries),
            request_body.year,
        ),
        baseline=request_body.baseline.to_domain(),
    )

    duration_ms = (time.time() - start_time) * 1000
    log_request_step(get_request_id(request), "savings_summary_complete", duration_ms, len(request_body.savings))

    return SavingsSummaryResponse.from_domain(summary)
