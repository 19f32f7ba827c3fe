# profile_api/core/config.py
"""
Application configuration using Pydantic Settings.

Every field can be overridden with an environment variable prefixed with
"PROFILE_API_" (e.g. PROFILE_API_PORT=9000) or from a .env file.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROFILE_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Profile API", description="OpenAPI title")
    app_version: str = Field(default="0.1.0", description="OpenAPI version")

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8080, gt=0, lt=65536, description="Bind port")
    api_prefix: str = Field(default="/api", description="Prefix for API routers")

    timezone: str = Field(
        default="UTC",
        description="IANA zone used to resolve the current date for age calculation",
    )

    log_level: str = Field(default="INFO", description="DEBUG | INFO | WARNING | ERROR | CRITICAL")
    json_logs: bool = Field(default=True, description="Render logs as JSON lines")

    docs_enabled: bool = Field(default=True, description="Serve Swagger UI and per-API documents")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown time zone: {v!r}")
        return v

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("api_prefix must start with '/'")
        return v.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    """
    Return the process-wide settings, loaded once.
    """
    return Settings()
