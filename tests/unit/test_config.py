"""
Unit tests for settings and the database handle.
"""
from sqlalchemy.pool import StaticPool

from seshop.core.config import Settings
from seshop.database import Database, _normalize_url


def test_settings_defaults():
    settings = Settings(DATABASE_URL="sqlite://", JWT_SECRET="s", _env_file=None)

    assert settings.JWT_ALG == "HS256"
    assert settings.DOCS_URL == "/api-docs"
    assert settings.CLIENT_URL is None


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./shop.db")
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("CLIENT_URL", "http://localhost:5173")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "sqlite:///./shop.db"
    assert settings.JWT_SECRET == "from-env"
    assert settings.CLIENT_URL == "http://localhost:5173"


def test_postgres_url_gets_sslmode():
    assert _normalize_url("postgresql://u:p@h/db") == "postgresql://u:p@h/db?sslmode=require"
    assert (
        _normalize_url("postgresql://u:p@h/db?application_name=x")
        == "postgresql://u:p@h/db?application_name=x&sslmode=require"
    )


def test_explicit_sslmode_and_sqlite_are_untouched():
    assert _normalize_url("postgresql://h/db?sslmode=disable") == "postgresql://h/db?sslmode=disable"
    assert _normalize_url("sqlite:///./shop.db") == "sqlite:///./shop.db"


def test_in_memory_sqlite_uses_single_connection():
    db = Database("sqlite://")
    try:
        assert isinstance(db.engine.pool, StaticPool)
        db.create_tables()
        with db.session() as session:
            assert session.bind is db.engine
    finally:
        db.dispose()
