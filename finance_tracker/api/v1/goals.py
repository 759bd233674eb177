"""POST /v1/goals/progress - goal completion and time-to-goal"""

import time
from fastapi import APIRouter, Request

from finance_tracker.api.v1.schemas import GoalProgressRequest, GoalProgressResponse, GoalProgressSchema
from finance_tracker.api.dependencies import get_request_id
from finance_tracker.domain.goals import evaluate_goals
from finance_tracker.infrastructure.observability.metrics import record_goal_outcome
from finance_tracker.infrastructure.observability.logging import log_request_step

router = APIRouter()


@router.post("/goals/progress", response_model=GoalProgressResponse)
def get_goal_progress(request_body: GoalProgressRequest, request: Request):
    """
    Progress percent and months remaining for each goal.

    Returns:
        One entry per goal in request order; `months_to_goal` is null and
        `reachable` false when monthly savings are zero
    """
    start_time = time.time()

    progress = evaluate_goals(
        (goal.to_domain() for goal in request_body.goals),
        request_body.monthly_savings,
    )

    items = [GoalProgressSchema.from_domain(p) for p in progress]
    for item in items:
        record_goal_outcome(item.months_to_goal)

    duration_ms = (time.time() - start_time) * 1000
    log_request_step(get_request_id(request), "goals_complete", duration_ms, len(items))

    return GoalProgressResponse(goals=items)
