"""
Configuration management for entity_mapping.

Environment-based configuration using Pydantic BaseSettings. Values are read
from ``EMAP_``-prefixed environment variables or a ``.env`` file at the project
root (override the path with ``EMAP_ENV_FILE``).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import List

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from entity_mapping.infrastructure.constants import RESERVED_COLUMNS

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("EMAP_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the EMAP_ prefix, e.g.
    EMAP_MAPPING_CONFIG overrides ``mapping_config``. The logging fields use
    unprefixed names (LOG_LEVEL, LOG_TO_FILE, LOG_FILE_DIR).

    ``reserved_columns`` is parsed as a JSON list when given through the
    environment: EMAP_RESERVED_COLUMNS='["deleted", "langcode"]'.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        validation_alias="LOG_TO_FILE",
        description="Also write logs to a daily rotating file",
    )
    LOG_FILE_DIR: str = Field(
        default="logs",
        validation_alias="LOG_FILE_DIR",
        description="Directory for log files",
    )

    reserved_columns: List[str] = Field(
        default_factory=lambda: list(RESERVED_COLUMNS),
        description="Property names that are never prefixed with the field name",
    )
    mapping_config: str = Field(
        default="./config/table_mapping.yml",
        description="Path to the YAML table layout file",
    )

    @field_validator("reserved_columns")
    @classmethod
    def _strip_reserved_columns(cls, value: List[str]) -> List[str]:
        columns = [column.strip() for column in value]
        if any(not column for column in columns):
            raise ValueError("reserved_columns entries must be non-empty strings")
        return columns

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="EMAP_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; tests that change the environment
    call ``get_settings.cache_clear()``.
    """
    return Settings()
