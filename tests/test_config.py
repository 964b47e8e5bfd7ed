"""
Tests for settings parsing.
"""

import pytest
from pydantic import ValidationError

from app import main
from app.core.config import DEFAULT_ADMIN_PASSWORD, DEFAULT_JWT_SECRET, Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_database_url_wins_when_set() -> None:
    settings = _settings(DATABASE_URL="sqlite:///./other.db", DB_HOST="db")
    assert settings.SQLALCHEMY_DATABASE_URI == "sqlite:///./other.db"
    assert settings.is_sqlite


def test_postgres_url_built_from_parts() -> None:
    settings = _settings(
        DATABASE_URL=None,
        DB_HOST="db",
        DB_PORT=5433,
        DB_USERNAME="movies",
        DB_PASSWORD="pw",
        DB_DATABASE="catalog",
    )
    assert settings.SQLALCHEMY_DATABASE_URI == "postgresql://movies:pw@db:5433/catalog"
    assert not settings.is_sqlite


def test_falls_back_to_local_sqlite() -> None:
    settings = _settings(DATABASE_URL=None, DB_HOST=None)
    assert settings.SQLALCHEMY_DATABASE_URI == "sqlite:///./movies.db"


def test_cors_origins_from_comma_separated_string() -> None:
    settings = _settings(BACKEND_CORS_ORIGINS="http://localhost:3000, http://example.com")
    assert [str(o).rstrip("/") for o in settings.BACKEND_CORS_ORIGINS] == [
        "http://localhost:3000",
        "http://example.com",
    ]


def test_empty_jwt_secret_rejected() -> None:
    with pytest.raises(ValidationError):
        _settings(JWT_SECRET="  ")


def test_non_positive_expiry_rejected() -> None:
    with pytest.raises(ValidationError):
        _settings(JWT_EXPIRE_MINUTES=0)


def test_startup_warns_about_placeholder_credentials(monkeypatch, caplog) -> None:
    monkeypatch.setattr(main.settings, "JWT_SECRET", DEFAULT_JWT_SECRET)
    monkeypatch.setattr(main.settings, "FIRST_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)
    monkeypatch.setattr(main.settings, "DISABLE_BOOTSTRAP_USERS", False)

    with caplog.at_level("WARNING", logger="app.main"):
        main.warn_insecure_defaults()

    messages = [r.getMessage() for r in caplog.records]
    assert any("JWT_SECRET" in m for m in messages)
    assert any("FIRST_ADMIN_PASSWORD" in m for m in messages)


def test_startup_quiet_with_real_credentials(monkeypatch, caplog) -> None:
    monkeypatch.setattr(main.settings, "JWT_SECRET", "a-real-secret")
    monkeypatch.setattr(main.settings, "FIRST_ADMIN_PASSWORD", "a-real-password")

    with caplog.at_level("WARNING", logger="app.main"):
        main.warn_insecure_defaults()

    assert caplog.records == []
