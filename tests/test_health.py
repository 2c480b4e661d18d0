"""Tests for the service endpoints and request middleware."""


class TestServiceEndpoints:
    """Tests for /health and /."""

    def test_health_check(self, client) -> None:
        """Test that the health check reports the service name."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "mealbasket-api"}

    def test_root_endpoint(self, client) -> None:
        """Test that the root endpoint links docs and health."""
        data = client.get("/").json()
        assert data["name"] == "Mealbasket API"
        assert data["version"] == "0.1.0"
        assert data["docs"] == "/docs"
        assert data["health"] == "/health"


class TestRequestIdMiddleware:
    """Tests for the request-id middleware."""

    def test_request_id_echoed(self, client) -> None:
        """Test that a supplied request id is returned on the response."""
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    def test_request_id_generated(self, client) -> None:
        """Test that a hex request id is generated when none is supplied."""
        request_id = client.get("/health").headers["X-Request-ID"]
        assert len(request_id) == 32
        int(request_id, 16)
