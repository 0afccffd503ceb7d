"""Tests for environment-driven settings."""

from turismo.config import API_PORT, Settings


def test_defaults(monkeypatch):
    for var in ("HOST", "WEB_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.web_port == 3000
    assert settings.log_level == "info"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("host", "127.0.0.1")
    monkeypatch.setenv("WEB_PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.web_port == 8080
    assert settings.log_level == "debug"


def test_unknown_variables_ignored(monkeypatch):
    monkeypatch.setenv("DISCOVER_SOMETHING", "1")
    Settings(_env_file=None)


def test_api_port_not_configurable(monkeypatch):
    monkeypatch.setenv("API_PORT", "9999")
    assert API_PORT == 4000
    assert "api_port" not in Settings.model_fields
