"""POST /v1/income/materialize - month entries for a recurring source"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from finance_tracker.api.v1.schemas import MaterializeRequest, MaterializeResponse, MonthlyIncomeEntrySchema
from finance_tracker.api.dependencies import get_request_id, get_settings
from finance_tracker.config import Settings
from finance_tracker.domain.materialize import materialize_source_entries
from finance_tracker.domain.exceptions import InvalidPeriodError
from finance_tracker.infrastructure.observability.logging import log_request_step

router = APIRouter()


@router.post("/income/materialize", response_model=MaterializeResponse)
def materialize_income(
    request_body: MaterializeRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Generate the entries a monthly source still needs in the requested window.

    Months already covered by `existing` entries for the same source are
    skipped. Non-monthly sources produce no entries.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    months_count = request_body.months_count if request_body.months_count is not None else config.materialize_months

    try:
        entries = materialize_source_entries(
            source=request_body.source.to_domain(),
            start_year=request_body.start_year,
            start_month=request_body.start_month,
            months_count=months_count,
            existing=[entry.to_domain() for entry in request_body.existing],
        )
    except InvalidPeriodError as e:
        logging.warning(f"Invalid materialization window: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    log_request_step(request_id, "materialize_complete", duration_ms, len(entries))

    return MaterializeResponse(entries=[MonthlyIncomeEntrySchema.from_domain(e) for e in entries])
