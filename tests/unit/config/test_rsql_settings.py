"""Unit tests for configuration settings."""

import pytest
from pydantic import ValidationError

from relational_sql.config import Settings, get_settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    monkeypatch.delenv("RSQL_DEFAULT_DIALECT", raising=False)
    monkeypatch.delenv("RSQL_QUOTE_IDENTIFIERS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.default_dialect == "sqlserver"
    assert settings.quote_identifiers is True
    assert settings.log_to_file is False


@pytest.mark.unit
def test_env_prefix(monkeypatch):
    monkeypatch.setenv("RSQL_DEFAULT_DIALECT", "sqlite")
    assert Settings(_env_file=None).default_dialect == "sqlite"


@pytest.mark.unit
def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_unknown_dialect_rejected(monkeypatch):
    monkeypatch.setenv("RSQL_DEFAULT_DIALECT", "oracle")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.unit
def test_get_settings_is_cached():
    assert get_settings() is get_settings()
