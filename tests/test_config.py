"""Settings — environment overrides and log level validation."""

import pytest
from pydantic import ValidationError

from apicrud.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("IDLE_TIMEOUT_SECONDS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.idle_timeout_seconds == 60


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
