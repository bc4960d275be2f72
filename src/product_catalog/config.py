"""Catalog configuration using Pydantic Settings.

Values come from environment variables prefixed ``PRODUCT_CATALOG_``
(for example ``PRODUCT_CATALOG_STORAGE_BACKEND=sqlalchemy``), or from the
file named by ``PRODUCT_CATALOG_ENV_FILE`` when that variable is set.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(str, Enum):
    """Which repository implementation backs the catalog."""

    MEMORY = "memory"
    SQLALCHEMY = "sqlalchemy"


class Settings(BaseSettings):
    """
    Catalog settings with type validation.

    ``storage_backend`` selects the repository at startup; the
    ``database_*`` values only apply to the SQLAlchemy backend.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_CATALOG_",
        env_file=os.getenv("PRODUCT_CATALOG_ENV_FILE") or None,
        extra="ignore",
    )

    storage_backend: StorageBackend = StorageBackend.MEMORY
    database_url: str = "sqlite+aiosqlite:///:memory:"
    database_echo: bool = False

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
