"""
Centralized configuration for the tabular library.

Settings are read from environment variables prefixed with ``TABULAR_``
(and from a local ``.env`` file when present), using Pydantic Settings.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TabularSettings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="TABULAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(
        default="INFO",
        description="Log level for tabular loggers"
    )
    excel_data_only: bool = Field(
        default=True,
        description="Read cached formula results instead of formula strings"
    )
    max_rows: Optional[int] = Field(
        default=None,
        ge=1,
        description="Optional limit on rows read from a worksheet"
    )
    max_cols: Optional[int] = Field(
        default=None,
        ge=1,
        description="Optional limit on columns read from a worksheet"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v or "INFO").strip().upper()


settings = TabularSettings()


def get_settings() -> TabularSettings:
    """
    Get the global settings instance

    Returns:
        TabularSettings: The global settings instance
    """
    return settings


def reload_settings() -> TabularSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        TabularSettings: New settings instance with reloaded values
    """
    global settings
    settings = TabularSettings()
    return settings
