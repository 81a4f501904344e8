"""
Configuration management for relational_sql.

Environment-based configuration using Pydantic BaseSettings. Values are read
from the process environment and an optional ``.env`` file; variables use the
``RSQL_`` prefix except for the shared ``LOG_LEVEL``.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("RSQL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

DialectName = Literal["sqlserver", "postgresql", "sqlite"]


class Settings(BaseSettings):
    """
    Settings for command generation and logging.

    Environment variables are loaded with the RSQL_ prefix. For example,
    RSQL_DEFAULT_DIALECT=postgresql selects the PostgreSQL generator when no
    dialect is named explicitly.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    log_to_file: bool = Field(default=False, description="Also write logs to a file")
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    default_dialect: DialectName = Field(
        default="sqlserver",
        description="Dialect used by get_generator() when none is named",
    )
    quote_identifiers: bool = Field(
        default=True,
        description="Quote table and column names in concrete dialects",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="RSQL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
