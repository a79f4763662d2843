from __future__ import annotations

from unittest.mock import AsyncMock, patch


def test_health_reports_employee_api_ok(client):
    with patch(
        "staffboard.api.endpoints.health.employee_client.check_connection",
        new=AsyncMock(return_value=True),
    ):
        response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_api"] == "ok"


def test_health_degraded_when_employee_api_unreachable(client):
    with patch(
        "staffboard.api.endpoints.health.employee_client.check_connection",
        new=AsyncMock(return_value=False),
    ):
        response = client.get("/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["employee_api"] == "error"


def test_health_not_configured_is_healthy(client):
    with patch("staffboard.api.endpoints.health.employee_client.initialized", new=False):
        response = client.get("/health")

    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_api"] == "not_configured"


def test_readiness_probe(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
