"""
API tests for the greeting endpoint and the health check.
"""

from profile_api.api.greeting import GREETING


class TestGreetingEndpoint:

    def test_returns_fixed_text(self, client):
        response = client.get("/api/api1/hello")
        assert response.status_code == 200
        assert response.text == "hello from api 1"
        assert response.headers["content-type"].startswith("text/plain")

    def test_ignores_query_and_headers(self, client):
        plain = client.get("/api/api1/hello")
        noisy = client.get(
            "/api/api1/hello",
            params={"name": "ignored", "x": "1"},
            headers={"Accept": "application/json", "X-Anything": "yes"},
        )
        assert noisy.status_code == 200
        assert noisy.text == plain.text == GREETING

    def test_post_is_not_allowed(self, client):
        assert client.post("/api/api1/hello").status_code == 405

    def test_echoes_correlation_id(self, client):
        response = client.get("/api/api1/hello", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_generates_correlation_id(self, client):
        response = client.get("/api/api1/hello")
        assert response.headers["X-Correlation-ID"]


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
