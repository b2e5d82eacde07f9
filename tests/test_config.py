"""Tests for environment-driven settings."""

from patreon_webhooks.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.webhook_secret == ""
    assert s.event_header == "X-Patreon-Event"
    assert s.signature_header == "X-Patreon-Signature"
    assert s.log_level == "info"
    assert s.log_json is False


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("PATREON_WEBHOOK_SECRET", "from-env")
    monkeypatch.setenv("PATREON_LOG_JSON", "true")
    s = Settings(_env_file=None)
    assert s.webhook_secret == "from-env"
    assert s.log_json is True
