"""Configuration for catalog-search.

Settings are read from ``CATALOG_SEARCH_*`` environment variables (or a
``.env`` file) and passed explicitly to :func:`create_app`; nothing reads
the environment at import time.
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CatalogSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CATALOG_SEARCH_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./catalog.db")
    echo_sql: bool = False

    # Logging
    log_level: str = "INFO"

    # HTTP
    api_prefix: str = ""


def configure_logging(settings: CatalogSearchSettings) -> None:
    """Set the root logger level and format from *settings*."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
