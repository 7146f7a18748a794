"""Core configuration module."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite:///./prodfloor.db"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_title: str = "ProdFloor Jobs API"
    api_version: str = "0.1.0"
    api_prefix: str = "/api/v1"
    environment: str = os.getenv("ENVIRONMENT", "development")
    testing: bool = os.getenv("TESTING", "false").lower() == "true"

    # Database
    database_url: str = DEFAULT_DATABASE_URL

    # Logging
    log_level: str = "INFO"
    log_format: str | None = None  # "json", "console", or None (auto-detect based on environment)

    # CORS
    cors_origins: list[str] | str = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Job listing
    jobs_page_size: int = 4

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Allow comma-separated strings or JSON-like lists; tolerate empty."""
        if value is None or value == "":
            return []
        if isinstance(value, str):
            parts = [origin.strip() for origin in value.split(",") if origin.strip()]
            if parts:
                return parts
            return []
        return value

    @field_validator("cors_origins", mode="after")
    @classmethod
    def validate_cors_origins(cls, value: list[str]) -> list[str]:
        """Validate CORS origins.

        In production:
        - Rejects empty CORS origins list
        - Rejects wildcard "*" origins
        - Requires all origins to be valid URLs (http:// or https://)
        """
        is_production = os.getenv("ENVIRONMENT", "development").lower() == "production"

        if is_production and not value:
            raise ValueError(
                "CORS_ORIGINS must be configured for production deployments. "
                "Set CORS_ORIGINS to a comma-separated list of allowed origins."
            )

        for origin in value:
            if origin == "*":
                if is_production:
                    raise ValueError(
                        "Wildcard '*' CORS origin is not allowed in production. "
                        "Specify explicit origins instead."
                    )
                continue

            if not origin.startswith(("http://", "https://")):
                raise ValueError(
                    f"Invalid CORS origin '{origin}': must start with http:// or https://"
                )

            if " " in origin:
                raise ValueError(f"Invalid CORS origin '{origin}': contains spaces")

        return value

    @field_validator("database_url")
    @classmethod
    def guard_default_database(cls, value: str) -> str:
        """Ensure production deployments point at a real database."""
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env == "production" and value == DEFAULT_DATABASE_URL:
            raise ValueError("database_url must be provided via environment for production")
        return value

    @field_validator("jobs_page_size")
    @classmethod
    def require_positive_page_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("jobs_page_size must be a positive integer")
        return value


settings = Settings()
