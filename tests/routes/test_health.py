"""
Tests for the public /health endpoint.
"""

from fastapi.testclient import TestClient

from career_backend.main import app

client = TestClient(app)


def test_health_returns_ok():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_openapi_lists_recommendations_endpoint():
    response = client.get("/openapi.json")

    assert response.status_code == 200
    assert "/api/recommendations" in response.json()["paths"]
