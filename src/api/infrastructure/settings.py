"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        COLLOQUY_DB_HOST: Database host (default: localhost)
        COLLOQUY_DB_PORT: Database port (default: 5432)
        COLLOQUY_DB_DATABASE: Database name (default: colloquy)
        COLLOQUY_DB_USERNAME: Database user (default: colloquy)
        COLLOQUY_DB_PASSWORD: Database password (required in production)
        COLLOQUY_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        COLLOQUY_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        COLLOQUY_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLOQUY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="colloquy", description="Database name")
    username: str = Field(default="colloquy", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OracleSettings(BaseSettings):
    """Conversational model settings.

    Environment variables:
        COLLOQUY_ORACLE_API_KEY or GEMINI_API_KEY: Gemini API key
        COLLOQUY_ORACLE_MODEL or AI_MODEL: Model used for replies
            (default: gemini-2.5-flash)
        COLLOQUY_ORACLE_TITLE_MODEL: Model used for session titles
            (default: same as the reply model)
        COLLOQUY_ORACLE_TIMEOUT_SECONDS: HTTP timeout for model calls
            (default: unset, no timeout)
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLOQUY_ORACLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("COLLOQUY_ORACLE_API_KEY", "GEMINI_API_KEY"),
        description="Gemini API key",
    )
    model: str = Field(
        default="gemini-2.5-flash",
        validation_alias=AliasChoices("COLLOQUY_ORACLE_MODEL", "AI_MODEL"),
        description="Model used to generate bot replies",
    )
    title_model: str | None = Field(
        default=None,
        description="Model used to generate session titles",
    )
    timeout_seconds: float | None = Field(
        default=None,
        description="HTTP timeout for model calls",
        gt=0,
    )

    @property
    def effective_title_model(self) -> str:
        """Title model, falling back to the reply model."""
        return self.title_model or self.model


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="COLLOQUY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Colloquy API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware",
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def oracle(self) -> OracleSettings:
        """Get oracle settings."""
        return get_oracle_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_oracle_settings() -> OracleSettings:
    """Get cached oracle settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return OracleSettings()
