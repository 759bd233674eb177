"""What-if scenarios across alternate savings percentages"""

from typing import List, Sequence
from finance_tracker.domain.models import SavingsBaseline, WhatIfScenario
from finance_tracker.domain.savings import monthly_savings_target, project_savings

DEFAULT_SCENARIO_PERCENTAGES = (10, 15, 20, 30, 40, 50)


def create_what_if_scenario(
    monthly_income: float,
    savings_percentage: float,
    baseline: SavingsBaseline,
) -> WhatIfScenario:
    """Savings and 5/10-year projections if `savings_percentage` were used instead"""
    return WhatIfScenario(
        savings_percentage=savings_percentage,
        monthly_income=monthly_income,
        monthly_savings=monthly_savings_target(monthly_income, savings_percentage),
        projection_5_years=project_savings(
            baseline.current_savings, baseline.already_saved, monthly_income, savings_percentage, 5
        ),
        projection_10_years=project_savings(
            baseline.current_savings, baseline.already_saved, monthly_income, savings_percentage, 10
        ),
    )


def create_what_if_scenarios(
    monthly_income: float,
    baseline: SavingsBaseline,
    percentages: Sequence[float] = DEFAULT_SCENARIO_PERCENTAGES,
) -> List[WhatIfScenario]:
    """
    One independent scenario per percentage.

    Scenarios never build on each other: every percentage is applied to the
    same income and baseline.
    """
    return [create_what_if_scenario(monthly_income, percentage, baseline) for percentage in percentages]
