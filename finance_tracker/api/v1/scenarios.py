"""POST /v1/scenarios - what-if table over alternate savings percentages"""

import time
from fastapi import APIRouter, Depends, Request

from finance_tracker.api.v1.schemas import ScenarioRequest, ScenarioResponse, ScenarioSchema
from finance_tracker.api.dependencies import get_request_id, get_settings
from finance_tracker.config import Settings
from finance_tracker.domain.scenarios import create_what_if_scenarios
from finance_tracker.infrastructure.observability.metrics import scenario_counter
from finance_tracker.infrastructure.observability.logging import log_request_step

router = APIRouter()


@router.post("/scenarios", response_model=ScenarioResponse)
def create_scenarios(
    request_body: ScenarioRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Project savings under each candidate percentage.

    Percentages default to the configured scenario list when omitted.
    """
    start_time = time.time()
    percentages = request_body.percentages if request_body.percentages is not None else config.scenario_percentages

    scenarios = create_what_if_scenarios(
        monthly_income=request_body.monthly_income,
        baseline=request_body.baseline.to_domain(),
        percentages=percentages,
    )

    duration_ms = (time.time() - start_time) * 1000
    scenario_counter.inc(len(scenarios))
    log_request_step(get_request_id(request), "scenarios_complete", duration_ms, len(scenarios))

    return ScenarioResponse(scenarios=[ScenarioSchema.from_domain(s) for s in scenarios])
