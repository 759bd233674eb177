"""Goal progress and time-to-goal estimates"""

import math
from typing import Iterable, List
from finance_tracker.domain.models import FiniteMonths, Goal, GoalProgress, MonthsToGoal, Unreachable


def progress_percent(current: float, target: float) -> float:
    """Percent of target reached, capped at 100; a zero target reports 0"""
    if target == 0:
        return 0.0
    return min(current / target * 100, 100.0)


def months_to_goal(current: float, target: float, monthly_savings: float) -> MonthsToGoal:
    """
    Whole months of saving needed to close the gap.

    - no monthly savings: Unreachable
    - gap already closed: FiniteMonths(0)
    - otherwise: FiniteMonths(ceil(gap / monthly_savings))

    Deadlines are not considered here.
    """
    if monthly_savings == 0:
        return Unreachable()

    remaining = target - current
    if remaining <= 0:
        return FiniteMonths(0)

    return FiniteMonths(math.ceil(remaining / monthly_savings))


def evaluate_goal(goal: Goal, monthly_savings: float) -> GoalProgress:
    return GoalProgress(
        goal_id=goal.id,
        progress_percent=progress_percent(goal.current_amount, goal.target_amount),
        months_to_goal=months_to_goal(goal.current_amount, goal.target_amount, monthly_savings),
    )


def evaluate_goals(goals: Iterable[Goal], monthly_savings: float) -> List[GoalProgress]:
    return [evaluate_goal(goal, monthly_savings) for goal in goals]
