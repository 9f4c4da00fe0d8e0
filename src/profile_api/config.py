"""Application configuration."""

import logging
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, PostgresDsn, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Minimum entropy for secrets (measured by character diversity)
MIN_SECRET_UNIQUE_CHARS = 16

# Substrings of well-known placeholder secrets
WEAK_SECRET_MARKERS = ("change-me", "change-in-production", "secret-key-change", "test-jwt-secret")


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Employee Profile API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Database (required - no default for security)
    database_url: PostgresDsn = Field(
        description="PostgreSQL connection URL. Must be set via environment variable."
    )
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Security - JWT
    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60

    # CORS settings (comma-separated lists)
    cors_origins: str = "http://localhost:5173"
    cors_allowed_methods: str = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
    cors_allowed_headers: str = "Authorization,Content-Type,X-Requested-With"
    cors_allow_credentials: bool = True

    # Demo toggles
    demo_switch_user_enabled: bool = False

    # Feedback polishing (Hugging Face chat completions)
    polisher_enabled: bool = True
    polisher_api_url: str = "https://router.huggingface.co/v1/chat/completions"
    polisher_model: str = "meta-llama/Llama-3.1-8B-Instruct"
    polisher_api_key: str = ""
    polisher_timeout_seconds: float = Field(default=10.0, gt=0)

    # Calendar used for "today" in absence validation and the completion sweep
    service_timezone: str = "UTC"
    absence_sweep_hour: int = Field(default=1, ge=0, le=23)

    # Feedback
    feedback_max_length: int = Field(default=5000, ge=1)

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings for security and consistency requirements."""
        # Security: Prevent debug mode in production
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG mode cannot be enabled in production environment. "
                "This would expose API documentation and detailed error messages."
            )

        url = str(self.database_url)
        if not url.startswith(("postgresql://", "postgres://")):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL starting with 'postgresql://' or 'postgres://'"
            )

        try:
            ZoneInfo(self.service_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"SERVICE_TIMEZONE '{self.service_timezone}' is not a known time zone") from e

        if "*" in self.cors_origins_list and self.cors_allow_credentials:
            raise ValueError(
                "CORS_ORIGINS cannot contain '*' wildcard when CORS_ALLOW_CREDENTIALS=true. "
                "Specify explicit origins."
            )

        weak_secret = any(marker in self.jwt_secret for marker in WEAK_SECRET_MARKERS)

        if self.environment == "production":
            if weak_secret or len(set(self.jwt_secret)) < MIN_SECRET_UNIQUE_CHARS:
                raise ValueError(
                    f"JWT_SECRET must contain at least {MIN_SECRET_UNIQUE_CHARS} unique characters "
                    "and must not be a placeholder value. Use a cryptographically random value."
                )
            if self.polisher_enabled and not self.polisher_api_key:
                raise ValueError(
                    "POLISHER_API_KEY must be configured when feedback polishing is enabled. "
                    "Set POLISHER_API_KEY or disable polishing with POLISHER_ENABLED=false."
                )
        else:
            if weak_secret:
                logger.warning("Using a placeholder JWT secret; set JWT_SECRET before deploying")
            if self.polisher_enabled and not self.polisher_api_key:
                logger.warning("Feedback polishing is enabled but POLISHER_API_KEY is empty")

        return self

    @property
    def async_database_url(self) -> str:
        """Get async database URL for SQLAlchemy with asyncpg.

        Converts sslmode parameter to ssl for asyncpg compatibility.
        """
        url = str(self.database_url)
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
        return url.replace("sslmode=", "ssl=")

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return _split_csv(self.cors_origins)

    @property
    def cors_allowed_methods_list(self) -> list[str]:
        """Get CORS methods as a list."""
        return _split_csv(self.cors_allowed_methods)

    @property
    def cors_allowed_headers_list(self) -> list[str]:
        """Get CORS headers as a list."""
        return _split_csv(self.cors_allowed_headers)

    @property
    def zone(self) -> ZoneInfo:
        """Time zone that defines the service's calendar date."""
        return ZoneInfo(self.service_timezone)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
