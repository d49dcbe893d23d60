"""Environment-based configuration for sqlwrap.

Settings are loaded with pydantic-settings from ``SQLWRAP_``-prefixed
environment variables (or a local ``.env`` file)::

    SQLWRAP_DRIVER=postgres
    SQLWRAP_LOG_STATEMENTS=true
    SQLWRAP_LOG_LEVEL=DEBUG

Only ``new_builder()`` and ``configure_logging()`` consult these values when
called without explicit arguments; explicitly constructed builders never read
the environment.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlwrap.dialect.base import Driver


class BuilderSettings(BaseSettings):
    """Process-wide defaults for builders and logging.

    Attributes:
        driver: Dialect used by ``new_builder()`` when no driver is passed.
        log_statements: Emit a ``statement_built`` debug event per statement.
        log_level: Level used by ``configure_logging()`` when none is passed.
    """

    model_config = SettingsConfigDict(
        env_prefix="SQLWRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    driver: Driver = Field(default=Driver.MYSQL, description="Default SQL dialect")
    log_statements: bool = Field(default=False, description="Log every built statement")
    log_level: str = Field(default="INFO", description="Logging level (uppercase)")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> BuilderSettings:
    """Return the cached settings instance.

    Call ``get_settings.cache_clear()`` after changing the environment to
    force a reload.
    """
    return BuilderSettings()
