"""
Configuration tests.
"""

import pytest

from vfa_gallery.config import Settings, get_settings


def test_get_settings_returns_settings() -> None:
    """get_settings returns a Settings instance."""
    settings = get_settings()
    assert isinstance(settings, Settings)


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.APP_NAME == "VFA.gallery"
    assert settings.JWT_ALGORITHM == "HS256"
    assert settings.DEFAULT_COLLECTION_LIMIT == 1000


def test_test_environment_uses_sqlite() -> None:
    """conftest points the app at in-memory SQLite."""
    settings = get_settings()
    assert settings.APP_ENV == "test"
    assert settings.is_sqlite is True
    assert settings.is_production is False


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_COLLECTION_LIMIT", "25")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://vfa:vfa@db:5432/vfa")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.DEFAULT_COLLECTION_LIMIT == 25
        assert settings.is_production is True
        assert settings.is_sqlite is False
    finally:
        get_settings.cache_clear()
