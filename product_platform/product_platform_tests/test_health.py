"""Tests for health and readiness endpoints."""
from unittest.mock import patch


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data


def test_ready_when_database_reachable(client):
    response = client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["database"] == "connected"


def test_not_ready_when_database_unreachable(client, app):
    with patch.object(app.state.database, "check_connection", return_value=False):
        response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["detail"]["database"] == "disconnected"


def test_health_needs_no_token(client):
    assert client.get("/health").status_code == 200


def test_api_docs_served(client):
    response = client.get("/api-docs")
    assert response.status_code == 200
    assert "swagger" in response.text.lower()

    schema = client.get("/openapi.json").json()
    assert "/api/login" in schema["paths"]
    assert "/api/products/{product_id}" in schema["paths"]
