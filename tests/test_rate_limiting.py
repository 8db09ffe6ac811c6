"""
tests/test_rate_limiting.py — Tests for rate limiting behavior

Covers: slowapi limiter configuration and that repeated summary requests
pass while limiting is disabled for tests.

Called by: pytest
Depends on: app.rate_limit, routers/summaries.py
"""

import os


def test_limiter_uses_remote_address():
    """Key function is get_remote_address (IP-based limiting)."""
    from slowapi.util import get_remote_address

    from app.rate_limit import limiter

    assert limiter._key_func is get_remote_address


def test_limiter_attached_to_app():
    from app.main import app
    from app.rate_limit import limiter

    assert app.state.limiter is limiter


def test_rate_limit_disabled_in_test_mode():
    assert os.environ.get("RATE_LIMIT_ENABLED") == "false"
    from app.rate_limit import limiter

    assert limiter.enabled is False


def test_repeated_requests_pass(client, acme_thread):
    for _ in range(5):
        resp = client.post("/api/summaries", json={"thread": acme_thread})
        assert resp.status_code == 200
