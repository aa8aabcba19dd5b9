import json
from typing import Annotated, Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and `.env`.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Backoffice API"
    PROJECT_DESCRIPTION: str = "Order lifecycle, delivery routing and dashboard statistics"
    VERSION: str = "1.0.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(default=[], description="Allowed CORS origins outside debug mode")

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("backoffice", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DATABASE_URL: str | None = Field(None, description="Full SQLAlchemy URL, overrides the DB_* parts")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")
    DB_AUTO_CREATE: bool = Field(False, description="Create tables on startup instead of running migrations")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="colored, json or plain")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    # Orders domain
    STATS_TIMEZONE: str | None = Field(
        None, description="IANA timezone for dashboard day/month windows (server local when unset)"
    )
    ENFORCE_ROUTE_ELIGIBILITY: bool = Field(
        False, description="Reject assignments to shipped or delivered delivery routes"
    )
    REVIEW_MAX_IMAGES: int = Field(5, description="Maximum images attached to one review (0 to 5)")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Accept a JSON list or a comma-separated string."""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("REVIEW_MAX_IMAGES")
    @classmethod
    def validate_review_max_images(cls, v):
        if v < 0:
            raise ValueError("REVIEW_MAX_IMAGES must be 0 or greater")
        if v > 5:
            raise ValueError("REVIEW_MAX_IMAGES should not exceed 5")
        return v

    @computed_field
    @property
    def async_database_url(self) -> str:
        """SQLAlchemy async URL: DATABASE_URL when set, otherwise PostgreSQL via asyncpg."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            credentials = f"{user}:{quote_plus(self.DB_PASSWORD)}"
        else:
            credentials = user
        return f"postgresql+asyncpg://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local", "test"]

    @computed_field
    @property
    def database_config(self) -> dict:
        """Engine options for the current environment."""
        base_config = {
            "echo": self.DB_ECHO,
            "pool_pre_ping": True,
        }

        if self.is_development:
            return {
                **base_config,
                "poolclass": "NullPool",
            }
        return {
            **base_config,
            "poolclass": "QueuePool",
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_recycle": self.DB_POOL_RECYCLE,
            "pool_timeout": self.DB_POOL_TIMEOUT,
        }


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance so the environment is read once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
