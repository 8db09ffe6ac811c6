"""
test_middleware.py — Tests for request/response middleware and error format

Verifies request ID generation, security headers, and the structured
ErrorResponse body produced by the handlers in main.py.

Called by: pytest
Depends on: app/main.py (middleware, handlers), tests/conftest.py (client fixture)
"""


def test_request_id_header_present(client):
    """Every response should include X-Request-ID."""
    resp = client.get("/health")
    assert "X-Request-ID" in resp.headers
    assert len(resp.headers["X-Request-ID"]) == 8


def test_request_id_unique_per_request(client):
    ids = {client.get("/health").headers["X-Request-ID"] for _ in range(5)}
    assert len(ids) == 5


def test_health_returns_ok(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["version"]


def test_security_headers(client):
    resp = client.get("/health")
    assert resp.headers.get("X-Content-Type-Options") == "nosniff"
    assert resp.headers.get("X-Frame-Options") == "DENY"
    assert resp.headers.get("X-API-Version") == "v1"


def test_404_structured_error(client):
    """Unknown routes return ErrorResponse JSON and still carry the request ID."""
    resp = client.get("/nonexistent-route-xyz")
    assert resp.status_code == 404
    assert "X-Request-ID" in resp.headers
    data = resp.json()
    assert data["status_code"] == 404
    assert data["error"] == "Not Found"
    assert data["request_id"] == resp.headers["X-Request-ID"]


def test_catch_all_handler_registered():
    from app.main import app

    assert Exception in app.exception_handlers


def test_validation_error_detail_lists_fields(client):
    resp = client.post("/api/summaries", json={})
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "Validation error"
    assert isinstance(data["detail"], list)
    assert data["detail"][0]["loc"][-1] == "thread"


def test_http_error_has_no_detail(client):
    resp = client.get("/nonexistent-route-xyz")
    assert resp.json()["detail"] is None
