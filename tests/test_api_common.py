"""
API tests for cross-cutting behavior: health, headers, tracing, rate limits.
"""

from validation_patterns.core.config import settings
from validation_patterns.shared.security.headers import SECURE_HEADERS
from validation_patterns.shared.tracing import TRACE_HEADER


class TestHealth:
    """Tests for GET /health."""

    def test_reports_status_and_version(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "version": settings.version,
            "environment": settings.environment,
        }


class TestSecurityHeaders:
    """Every response carries the secure headers, error responses included."""

    def test_success_response(self, client) -> None:
        response = client.get("/health")
        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value

    def test_problem_response(self, client) -> None:
        response = client.post("/filter-posts/", json={})
        assert response.status_code == 400
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestCorrelationId:
    """Tests for the X-Request-ID round trip."""

    def test_generated_when_absent(self, client) -> None:
        response = client.get("/health")
        assert response.headers[TRACE_HEADER]

    def test_echoed_and_used_as_trace_id(self, client) -> None:
        response = client.post(
            "/pipeline-behavior-posts/", json={}, headers={TRACE_HEADER: "req-42"}
        )
        assert response.headers[TRACE_HEADER] == "req-42"
        assert response.json()["traceId"] == "req-42"

    def test_unusable_header_is_replaced(self, client) -> None:
        response = client.get("/health", headers={TRACE_HEADER: "bad id with spaces"})
        assert response.headers[TRACE_HEADER] != "bad id with spaces"

    def test_each_request_gets_its_own_id(self, client) -> None:
        first = client.get("/health").headers[TRACE_HEADER]
        second = client.get("/health").headers[TRACE_HEADER]
        assert first != second


class TestUnknownRoutes:
    def test_unknown_path_is_404(self, client) -> None:
        assert client.get("/nowhere").status_code == 404
