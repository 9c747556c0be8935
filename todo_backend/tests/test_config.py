from __future__ import annotations

import pytest
from pydantic import ValidationError

from todo_backend.shared.config import AppConfig, DatabaseConfig, SecurityConfig


def test_defaults(monkeypatch) -> None:
    for var in ("APP_TIMEZONE", "SERVER_PORT", "TOKEN_TTL_HOURS"):
        monkeypatch.delenv(var, raising=False)

    config = AppConfig()

    assert config.server_port == 3000
    assert config.token_ttl_hours == 24
    assert config.timezone == "UTC"


def test_production_refuses_dev_secret() -> None:
    with pytest.raises(ValidationError):
        AppConfig(app_env="production", jwt_secret="dev")

    config = AppConfig(app_env="production", jwt_secret="x" * 40)
    assert config.is_production()


def test_database_url_from_parts() -> None:
    config = DatabaseConfig(
        url=None, user="todo", password="s3cr3t", host="db", port=5433, name="todo"
    )

    assert config.resolved_url() == "postgresql+psycopg://todo:s3cr3t@db:5433/todo"


def test_explicit_database_url_wins() -> None:
    config = DatabaseConfig(url="sqlite:///:memory:", host="db")

    assert config.resolved_url() == "sqlite:///:memory:"


def test_allowed_origins_from_csv(monkeypatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:5173, https://todo.example.org")

    config = SecurityConfig()

    assert config.allowed_origins == ["http://localhost:5173", "https://todo.example.org"]
