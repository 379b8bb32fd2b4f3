"""
Unified client settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the client
"""

from functools import lru_cache

from pydantic import Field

from pass_search.configs.base import BaseSettings
from pass_search.configs.indexer import IndexerSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    indexer: IndexerSettings = Field(default_factory=IndexerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Environment variables and .env are read once, on first call.

    Returns:
        Settings: Settings instance

    Usage:
        from pass_search.configs import get_settings
        settings = get_settings()
    """
    return Settings()
