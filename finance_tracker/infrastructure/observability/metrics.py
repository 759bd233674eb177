"""Prometheus metrics for calculation volume, goal outcomes and request latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "finance_calculations_total",
    "Total calculation results composed",
    ["mode"],  # sources | monthly
)

savings_percentage_histogram = Histogram(
    "finance_savings_percentage",
    "Savings percentage used per calculation",
    buckets=[5, 10, 15, 20, 30, 40, 50, 75, 100],
)

scenario_counter = Counter(
    "finance_scenarios_total",
    "What-if scenarios generated",
)

goal_evaluation_counter = Counter(
    "finance_goal_evaluations_total",
    "Goals evaluated",
    ["outcome"],  # reached | in_progress | unreachable
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(mode: str, savings_percentage: float) -> None:
    """Record calculation volume and the savings rates users pick"""
    calculation_counter.labels(mode=mode).inc()
    savings_percentage_histogram.observe(savings_percentage)


def record_goal_outcome(months: int | None) -> None:
    """Bucket goal evaluations by how far they are from completion"""
    if months is None:
        outcome = "unreachable"
    elif months == 0:
        outcome = "reached"
    else:
        outcome = "in_progress"

    goal_evaluation_counter.labels(outcome=outcome).inc()
