# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import DEFAULT_DB_URL, DEFAULT_SECRET, Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Drop the variables conftest sets so defaults apply."""
    for name in ("ENVIRONMENT", "SECRET", "DB_URL", "SESSION_BACKEND"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test Settings defaults and validation."""

    def test_development_defaults(self, clean_env):
        config = Settings()

        assert config.is_development
        assert config.DB_URL == DEFAULT_DB_URL
        assert config.SECRET == DEFAULT_SECRET
        assert config.PORT == 3000
        assert config.SESSION_BACKEND == "mongo"
        assert config.SESSION_MAX_AGE_SECONDS == 7 * 24 * 3600

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SESSION_BACKEND", "redis")

        config = Settings()

        assert config.PORT == 8080
        assert config.SESSION_BACKEND == "redis"

    def test_production_requires_db_url_and_secret(self, clean_env):
        with pytest.raises(ValidationError) as exc_info:
            Settings(ENVIRONMENT="production")

        assert "DB_URL, SECRET" in str(exc_info.value)

    def test_production_requires_secret(self, clean_env):
        with pytest.raises(ValidationError) as exc_info:
            Settings(ENVIRONMENT="production", DB_URL="mongodb://db:27017/YelpCamp")

        assert "SECRET must be set" in str(exc_info.value)

    def test_production_with_explicit_values(self, clean_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DB_URL", "mongodb://db:27017/YelpCamp")
        monkeypatch.setenv("SECRET", "a-real-production-secret")

        config = Settings()

        assert config.is_production
        assert config.SECRET == "a-real-production-secret"

    def test_short_secret_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(SECRET="short")

    def test_seed_author_must_be_object_id(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(SEED_AUTHOR_ID="alice")
