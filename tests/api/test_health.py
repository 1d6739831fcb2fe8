"""
Test suite for liveness endpoints.

System role: Verification of GET / and GET /health
"""

from fastapi.testclient import TestClient

from chatpdf.api.routers.health import LIVENESS_MESSAGE


class TestHealthEndpoints:
    """Tests for liveness routes."""

    def test_root_returns_plain_text(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == LIVENESS_MESSAGE

    def test_health_returns_json(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "message": "Server Healthy"}

    def test_responses_carry_correlation_id(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"
