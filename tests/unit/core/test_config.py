from __future__ import annotations

import pytest

from assettrack.core.config import _build_config
from assettrack.core.exceptions import ConfigurationError


def test_defaults_are_valid(monkeypatch):
    for name in ("DATABASE_URL", "LOCK_TIMEOUT_SECONDS", "NOTES_MAX_LENGTH", "API_PREFIX", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    config = _build_config("development")

    assert config.DATABASE_URL == "sqlite:///./assettrack.db"
    assert config.LOCK_TIMEOUT_SECONDS == 5.0
    assert config.NOTES_MAX_LENGTH == 1000
    assert config.API_PREFIX == "/api/v1"
    assert config.DEBUG is True


def test_production_disables_debug(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://app:secret@db:5432/assets")

    config = _build_config("production")

    assert config.is_production is True
    assert config.DEBUG is False


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("LOCK_TIMEOUT_SECONDS", "0", "LOCK_TIMEOUT_SECONDS"),
        ("NOTES_MAX_LENGTH", "0", "NOTES_MAX_LENGTH"),
        ("API_PREFIX", "api", "API_PREFIX"),
        ("LOG_LEVEL", "chatty", "LOG_LEVEL"),
        ("DATABASE_URL", "mysql://root@localhost/assets", "DATABASE_URL"),
        ("DATABASE_URL", "postgresql:///assets", "hostname"),
        ("LOCK_TIMEOUT_SECONDS", "abc", "LOCK_TIMEOUT_SECONDS must be a number"),
        ("NOTES_MAX_LENGTH", "1.5", "NOTES_MAX_LENGTH must be a number"),
        ("API_PORT", "http", "API_PORT must be a number"),
    ],
)
def test_invalid_values_raise_configuration_error(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError, match=message):
        _build_config("development")


def test_production_rejects_placeholder_credentials(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://change_me:change_me@db:5432/assets")
    with pytest.raises(ConfigurationError, match="placeholder"):
        _build_config("production")
