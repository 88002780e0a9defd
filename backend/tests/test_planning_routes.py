"""Tests for the income, investment projection, and goal allocation endpoints."""
import pytest
from fastapi.testclient import TestClient

from pathfinder.main import app

client = TestClient(app)


def test_net_income_endpoint():
    response = client.post("/api/income/net", json={"gross_annual_income": 100_000})
    assert response.status_code == 200
    data = response.json()
    assert data["taxable_income"] == pytest.approx(86_150)
    assert data["net_annual_income"] == pytest.approx(76_739.5)


def test_net_income_with_benefits():
    response = client.post("/api/income/net", json={
        "gross_annual_income": 60_000,
        "tax_settings": {"federal_bracket": 0.12, "state_bracket": 0.0},
        "benefits": {"health_insurance": 1_000, "custom_benefits": [{"name": "FSA", "amount": 500}]},
    })
    data = response.json()
    assert data["total_benefits"] == 1_500
    assert data["state_tax"] == 0.0


def test_investment_projections_endpoint():
    response = client.post("/api/investments/projections", json=[
        {"ticker": "VTI", "current_value": 10_000, "expected_annual_return": 0.0},
    ])
    assert response.status_code == 200
    data = response.json()
    assert data["by_investment"][0]["ticker"] == "VTI"
    assert data["total_portfolio"]["30"] == pytest.approx(10_000)


def test_goal_allocations_endpoint():
    response = client.post("/api/goals/allocations", json={
        "net_monthly_income": 1_200,
        "as_of": "2026-01-15",
        "goals": [
            {"goal_id": "low", "target_amount": 2_000, "target_date": "2026-02-01", "priority": 3},
            {"goal_id": "high", "target_amount": 1_000, "target_date": "2026-02-01", "priority": 5},
        ],
    })
    assert response.status_code == 200
    data = response.json()
    assert [a["goal_id"] for a in data["allocations"]] == ["high", "low"]
    assert data["allocations"][1]["shortfall"] == pytest.approx(1_800)
    assert data["total_shortfall"] == pytest.approx(1_800)


def test_goal_allocations_bad_priority_returns_422():
    response = client.post("/api/goals/allocations", json={
        "net_monthly_income": 100,
        "goals": [{"goal_id": "g", "target_amount": 10, "target_date": "2026-02-01", "priority": 9}],
    })
    assert response.status_code == 422
