# core/config.py

"""
Application configuration settings using Pydantic Settings.

Settings are read from environment variables prefixed with `COURSE_MGMT_`
(or a local `.env` file), falling back to the defaults below.

Example:
    >>> from core.config import get_settings
    >>> settings = get_settings()
    >>> settings.store_backend
    'sql'
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration for the course management console.

    Attributes:
        store_backend: Which entity store to build ("sql", "memory", or "json").
        database_url: SQLAlchemy URL used by the "sql" backend.
        sql_echo: Echo emitted SQL through the SQLAlchemy logger.
        data_dir: Snapshot directory used by the "json" backend.
        log_level: Minimum level for application logs.
        debug: Log at DEBUG level regardless of `log_level`, with colored console output.
    """

    model_config = SettingsConfigDict(
        env_prefix="COURSE_MGMT_",
        env_file=".env",
        extra="ignore",
    )

    store_backend: Literal["sql", "memory", "json"] = "sql"
    database_url: str = "sqlite:///course_management.db"
    sql_echo: bool = False
    data_dir: str = Field(default="~/Documents/CourseManagement")
    log_level: str = "WARNING"
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
