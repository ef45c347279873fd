from __future__ import annotations

import pytest

from crm.core.config import _build_config
from crm.core.exceptions import ConfigurationError


def test_defaults_for_development(monkeypatch):
    for name in ("DATABASE_URL", "API_PORT", "SERVER_PORT", "CORS_ORIGINS", "AUTO_CREATE_TABLES", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    cfg = _build_config("development")
    assert cfg.DATABASE_URL.startswith("sqlite")
    assert cfg.API_PORT == 2022
    assert cfg.CORS_ORIGINS == ("*",)
    assert cfg.AUTO_CREATE_TABLES is True
    assert cfg.DB_CONNECTIVITY_REQUIRED is False


def test_production_disables_debug_and_requires_database(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://crm:secret@db:5432/crm")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.delenv("DB_CONNECTIVITY_REQUIRED", raising=False)
    cfg = _build_config("production")
    assert cfg.DEBUG is False
    assert cfg.DB_CONNECTIVITY_REQUIRED is True
    assert cfg.is_production


def test_rejects_unknown_database_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mysql://root@localhost/crm")
    with pytest.raises(ConfigurationError, match="DATABASE_URL"):
        _build_config("development")


def test_rejects_invalid_log_level(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        _build_config("development")


def test_rejects_prefix_without_slash(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("API_PREFIX", "api")
    with pytest.raises(ConfigurationError, match="API_PREFIX"):
        _build_config("development")
