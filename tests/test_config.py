"""Tests for app.config — defaults and .env / environment overrides."""

from unittest.mock import patch

from app.config import Settings, get_settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.notes_review_threshold == 200
    assert s.max_thread_chars == 200_000
    assert s.simulated_latency_ms == 0
    assert s.forwarding_address == "vendor-analysis@example.com"


def test_env_override():
    with patch.dict("os.environ", {"NOTES_REVIEW_THRESHOLD": "50", "SIMULATED_LATENCY_MS": "2500"}):
        s = Settings(_env_file=None)
    assert s.notes_review_threshold == 50
    assert s.simulated_latency_ms == 2500


def test_get_settings_cached():
    assert get_settings() is get_settings()
