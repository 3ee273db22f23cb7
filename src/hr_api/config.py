"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, RedisDsn, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Distinct characters a production JWT secret must contain
MIN_SECRET_UNIQUE_CHARS = 16

SUPPORTED_DATABASE_SCHEMES = (
    "postgresql://",
    "postgres://",
    "postgresql+asyncpg://",
    "sqlite+aiosqlite://",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "HR Management API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Database (required)
    database_url: str = Field(
        description="PostgreSQL (asyncpg) or SQLite (aiosqlite) connection URL"
    )
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Redis (optional, used as rate limiter storage)
    redis_url: RedisDsn | None = None

    # Security - JWT
    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_expiration_seconds: int = 3600
    jwt_issuer: str = "hr-api"
    jwt_audience: str = "hr-app"

    # CORS settings
    cors_origins: str = "http://localhost:5173"  # Comma-separated list

    # Rate limiting settings (requests per minute)
    rate_limit_enabled: bool = True
    rate_limit_default: int = 100
    rate_limit_auth_login: int = 5

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Reject unsafe combinations before the app starts."""
        production = self.environment == "production"
        if production and self.debug:
            raise ValueError("DEBUG must be off in production: it exposes docs and raw error text")

        url = self.database_url
        if not url.startswith(SUPPORTED_DATABASE_SCHEMES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL starting with 'postgresql://' "
                "or an SQLite URL starting with 'sqlite+aiosqlite://'"
            )

        if production and self.is_sqlite:
            raise ValueError("SQLite cannot be used in production")
        if production and len(set(self.jwt_secret)) < MIN_SECRET_UNIQUE_CHARS:
            raise ValueError(
                f"JWT_SECRET needs at least {MIN_SECRET_UNIQUE_CHARS} distinct characters in production"
            )

        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """Get async database URL for SQLAlchemy.

        PostgreSQL URLs are rewritten for asyncpg, converting the sslmode
        parameter to ssl:
        - sslmode=disable -> ssl=disable
        - sslmode=require -> ssl=require
        """
        url = self.database_url
        if self.is_sqlite or url.startswith("postgresql+asyncpg://"):
            return url
        url = url.replace("postgres://", "postgresql://", 1)
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url.replace("sslmode=", "ssl=")

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
