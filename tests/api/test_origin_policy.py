"""
Test suite for the browser origin allow-list.

System role: Verification of CORS and origin rejection
"""

from fastapi.testclient import TestClient


class TestOriginPolicy:
    """Tests for OriginAllowListMiddleware with CORSMiddleware."""

    def test_allowed_origin_gets_cors_headers(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "http://localhost:5173"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_disallowed_origin_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/ask",
            json={"question": "q"},
            headers={"Origin": "https://evil.example"},
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Origin not allowed"}

    def test_disallowed_preflight_is_rejected(self, client: TestClient) -> None:
        response = client.options(
            "/upload",
            headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 403

    def test_allowed_preflight_succeeds(self, client: TestClient) -> None:
        response = client.options(
            "/ask",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 200

    def test_request_without_origin_passes(self, client: TestClient) -> None:
        assert client.get("/").status_code == 200
