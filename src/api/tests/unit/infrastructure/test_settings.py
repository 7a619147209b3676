"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import DatabaseSettings, OracleSettings, Settings


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings(_env_file=None)
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)

    def test_connection_string_omits_password(self):
        settings = DatabaseSettings(
            host="db", port=5433, database="colloquy", username="app", password="s3cret"
        )

        assert settings.connection_string == "postgresql://app@db:5433/colloquy"
        assert "s3cret" not in settings.connection_string


class TestDatabaseSettingsEnvironment:
    """Tests for COLLOQUY_DB_ environment variables."""

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_DB_HOST", "postgres.internal")
        monkeypatch.setenv("COLLOQUY_DB_PORT", "6543")

        settings = DatabaseSettings(_env_file=None)

        assert settings.host == "postgres.internal"
        assert settings.port == 6543


class TestOracleSettings:
    """Tests for conversational model settings."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in (
            "GEMINI_API_KEY",
            "AI_MODEL",
            "COLLOQUY_ORACLE_API_KEY",
            "COLLOQUY_ORACLE_MODEL",
            "COLLOQUY_ORACLE_TITLE_MODEL",
            "COLLOQUY_ORACLE_TIMEOUT_SECONDS",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = OracleSettings(_env_file=None)

        assert settings.model == "gemini-2.5-flash"
        assert settings.api_key.get_secret_value() == ""
        assert settings.timeout_seconds is None
        assert settings.effective_title_model == "gemini-2.5-flash"

    def test_reads_gemini_api_key_alias(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gk-123")

        settings = OracleSettings(_env_file=None)

        assert settings.api_key.get_secret_value() == "gk-123"

    def test_prefixed_key_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_ORACLE_API_KEY", "prefixed")
        monkeypatch.setenv("GEMINI_API_KEY", "legacy")

        settings = OracleSettings(_env_file=None)

        assert settings.api_key.get_secret_value() == "prefixed"

    def test_reads_ai_model_alias(self, monkeypatch):
        monkeypatch.setenv("AI_MODEL", "gemini-2.5-pro")

        assert OracleSettings(_env_file=None).model == "gemini-2.5-pro"

    def test_title_model_override(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_ORACLE_TITLE_MODEL", "gemini-2.5-flash-lite")

        settings = OracleSettings(_env_file=None)

        assert settings.effective_title_model == "gemini-2.5-flash-lite"

    def test_api_key_is_not_revealed_in_repr(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gk-123")

        assert "gk-123" not in repr(OracleSettings(_env_file=None))

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            OracleSettings(_env_file=None, timeout_seconds=0)


class TestApplicationSettings:
    """Tests for top-level Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COLLOQUY_DEBUG", raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "Colloquy API"
        assert settings.debug is False
        assert settings.cors_origins == ["*"]

    def test_exposes_section_settings(self):
        settings = Settings(_env_file=None)

        assert isinstance(settings.database, DatabaseSettings)
        assert isinstance(settings.oracle, OracleSettings)
