"""Integration tests for API endpoints"""

import logging

import pytest
from fastapi.testclient import TestClient
from finance_tracker.api.dependencies import get_settings
from finance_tracker.config import Settings


@pytest.fixture
def monthly_payload():
    """Two months of 2024 income plus a stray 2023 entry"""
    return {
        "year": 2024,
        "month": 2,
        "savings_percentage": 20,
        "baseline": {"current_savings": 1000, "already_saved": 500},
        "entries": [
            {"id": "jan", "year": 2024, "month": 1, "amount": 4000, "name": "Salary", "category": "salary",
             "source_id": "src-salary", "is_recurring": True},
            {"id": "feb", "year": 2024, "month": 2, "amount": 4000, "name": "Salary", "category": "salary",
             "source_id": "src-salary", "is_recurring": True},
            {"id": "feb-gig", "year": 2024, "month": 2, "amount": 1000, "name": "Logo design",
             "category": "freelance"},
            {"id": "old", "year": 2023, "month": 2, "amount": 9999, "name": "Old", "category": "other"},
        ],
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "finance_calculations_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_calculate_from_sources(client: TestClient):
    """Monthly salary 3000 plus yearly dividends 1200"""
    response = client.post(
        "/v1/calculations/sources",
        json={
            "sources": [
                {"id": "s1", "name": "Job", "amount": 3000, "category": "salary", "frequency": "monthly"},
                {"id": "s2", "name": "Dividends", "amount": 1200, "category": "investment", "frequency": "yearly"},
            ],
            "savings_percentage": 10,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_income"] == pytest.approx(3100.0)
    assert data["yearly_income"] == pytest.approx(37200.0)
    assert data["monthly_savings_target"] == pytest.approx(310.0)
    assert [p["years_ahead"] for p in data["projections"]] == [1, 3, 5, 10]

    shares = {s["category"]: s["percentage_of_total"] for s in data["breakdown"]}
    assert shares["salary"] == pytest.approx(96.77, abs=0.01)
    assert shares["investment"] == pytest.approx(3.23, abs=0.01)


def test_calculate_from_sources_unknown_frequency_counts_as_zero(client: TestClient):
    response = client.post(
        "/v1/calculations/sources",
        json={
            "sources": [
                {"id": "s1", "name": "Job", "amount": 3000, "category": "salary", "frequency": "monthly"},
                {"id": "s2", "name": "Odd", "amount": 500, "category": "other", "frequency": "biweekly"},
            ],
        },
    )

    assert response.status_code == 200
    assert response.json()["monthly_income"] == pytest.approx(3000.0)


def test_calculate_uses_default_percentage(client: TestClient):
    response = client.post(
        "/v1/calculations/sources",
        json={"sources": [{"id": "s1", "name": "Job", "amount": 1000, "category": "salary", "frequency": "monthly"}]},
    )

    data = response.json()
    assert data["savings_percentage"] == pytest.approx(20.0)
    assert data["monthly_savings_target"] == pytest.approx(200.0)


def test_settings_override(client: TestClient):
    client.app.dependency_overrides[get_settings] = lambda: Settings(
        default_savings_percentage=50, projection_horizons=[2]
    )

    response = client.post(
        "/v1/calculations/sources",
        json={"sources": [{"id": "s1", "name": "Job", "amount": 1000, "category": "salary", "frequency": "monthly"}]},
    )

    data = response.json()
    assert data["monthly_savings_target"] == pytest.approx(500.0)
    assert [p["years_ahead"] for p in data["projections"]] == [2]


def test_calculate_from_monthly_data(client: TestClient, monthly_payload):
    response = client.post("/v1/calculations/monthly", json=monthly_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_income"] == pytest.approx(5000.0)
    assert data["yearly_income"] == pytest.approx(9000.0)  # 2023 entry ignored
    assert data["monthly_savings_target"] == pytest.approx(1000.0)
    assert data["projections"][0]["projected_total"] == pytest.approx(1500.0 + 12000.0)

    shares = {s["category"]: s["percentage_of_total"] for s in data["breakdown"]}
    assert shares == pytest.approx({"salary": 80.0, "freelance": 20.0})


def test_calculate_from_monthly_data_is_idempotent(client: TestClient, monthly_payload):
    first = client.post("/v1/calculations/monthly", json=monthly_payload).json()
    second = client.post("/v1/calculations/monthly", json=monthly_payload).json()
    assert first == second


@pytest.mark.parametrize(
    "field,value",
    [("month", 13), ("savings_percentage", 120)],
)
def test_calculate_from_monthly_data_validation(client: TestClient, monthly_payload, field, value):
    monthly_payload[field] = value
    response = client.post("/v1/calculations/monthly", json=monthly_payload)
    assert response.status_code == 422


def test_negative_amount_rejected(client: TestClient):
    response = client.post(
        "/v1/calculations/sources",
        json={"sources": [{"id": "s1", "name": "Job", "amount": -5, "category": "salary", "frequency": "monthly"}]},
    )
    assert response.status_code == 422


def test_scenarios(client: TestClient):
    response = client.post("/v1/scenarios", json={"monthly_income": 5000, "percentages": [10, 20]})

    assert response.status_code == 200
    scenarios = response.json()["scenarios"]
    assert [s["monthly_savings"] for s in scenarios] == pytest.approx([500.0, 1000.0])
    assert [s["projection_5_years"] for s in scenarios] == pytest.approx([30000.0, 60000.0])


@pytest.mark.parametrize("percentages", [[150], [-10], [20, 101]])
def test_scenarios_reject_out_of_range_percentages(client: TestClient, percentages):
    response = client.post("/v1/scenarios", json={"monthly_income": 5000, "percentages": percentages})
    assert response.status_code == 422


def test_scenarios_default_percentages(client: TestClient):
    response = client.post("/v1/scenarios", json={"monthly_income": 5000})

    scenarios = response.json()["scenarios"]
    assert [s["savings_percentage"] for s in scenarios] == [10, 15, 20, 30, 40, 50]


def test_goal_progress(client: TestClient):
    response = client.post(
        "/v1/goals/progress",
        json={
            "monthly_savings": 250,
            "goals": [
                {"id": "g1", "name": "Emergency fund", "target_amount": 1000},
                {"id": "g2", "name": "Laptop", "target_amount": 100, "current_amount": 150},
            ],
        },
    )

    assert response.status_code == 200
    goals = response.json()["goals"]
    assert goals[0] == {"goal_id": "g1", "progress_percent": 0.0, "reachable": True, "months_to_goal": 4}
    assert goals[1]["progress_percent"] == 100.0
    assert goals[1]["months_to_goal"] == 0


def test_goal_progress_unreachable(client: TestClient):
    response = client.post(
        "/v1/goals/progress",
        json={"monthly_savings": 0, "goals": [{"id": "g1", "name": "House", "target_amount": 50000}]},
    )

    goal = response.json()["goals"][0]
    assert goal["reachable"] is False
    assert goal["months_to_goal"] is None


def test_savings_summary(client: TestClient, monthly_payload):
    response = client.post(
        "/v1/savings/summary",
        json={
            "year": 2024,
            "month": 2,
            "entries": monthly_payload["entries"],
            "baseline": {"current_savings": 1000, "already_saved": 500},
            "savings": [
                {"id": "s1", "year": 2024, "month": 1, "saved_amount": 800},
                {"id": "s2", "year": 2024, "month": 2, "saved_amount": 1000},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["saved_this_month"] == pytest.approx(1000.0)
    assert data["actual_savings_rate"] == pytest.approx(20.0)
    assert data["saved_this_year"] == pytest.approx(1800.0)
    assert data["total_savings"] == pytest.approx(3300.0)
    assert data["average_savings_rate"] == pytest.approx(20.0)
    assert len(data["timeline"]) == 12


def test_materialize_income(client: TestClient):
    response = client.post(
        "/v1/income/materialize",
        json={
            "source": {"id": "src", "name": "Job", "amount": 3000, "category": "salary", "frequency": "monthly"},
            "start_year": 2024,
            "start_month": 12,
            "months_count": 2,
        },
    )

    assert response.status_code == 200
    entries = response.json()["entries"]
    assert [(e["year"], e["month"]) for e in entries] == [(2024, 12), (2025, 1)]
    assert all(e["is_recurring"] for e in entries)


def test_materialize_income_uses_configured_window(client: TestClient):
    response = client.post(
        "/v1/income/materialize",
        json={
            "source": {"id": "src", "name": "Job", "amount": 3000, "category": "salary", "frequency": "monthly"},
            "start_year": 2024,
            "start_month": 1,
        },
    )

    assert len(response.json()["entries"]) == 12


@pytest.mark.parametrize("months_count", [None, 0])
def test_materialize_income_invalid_month(client: TestClient, months_count):
    response = client.post(
        "/v1/income/materialize",
        json={
            "source": {"id": "src", "name": "Job", "amount": 3000, "category": "salary", "frequency": "monthly"},
            "start_year": 2024,
            "start_month": 14,
            "months_count": months_count,
        },
    )

    assert response.status_code == 422
    assert "Month must be between 1 and 12" in response.json()["detail"]


@pytest.mark.parametrize(
    "path,payload,step",
    [
        ("/v1/scenarios", {"monthly_income": 5000, "percentages": [10, 20]}, "scenarios_complete"),
        ("/v1/goals/progress", {"monthly_savings": 100, "goals": [{"id": "g", "name": "G", "target_amount": 500}]},
         "goals_complete"),
        ("/v1/savings/summary", {"year": 2024, "month": 1}, "savings_summary_complete"),
    ],
)
def test_request_steps_are_logged_with_request_id(client: TestClient, caplog, path, payload, step):
    with caplog.at_level(logging.INFO):
        response = client.post(path, json=payload, headers={"X-Request-ID": "req-log"})

    assert response.status_code == 200
    logged = [r for r in caplog.records if getattr(r, "step", None) == step]
    assert len(logged) == 1
    assert logged[0].request_id == "req-log"
    assert logged[0].duration_ms >= 0
