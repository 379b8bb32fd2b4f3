"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from pass_search.configs.indexer import IndexerSettings
from pass_search.configs.settings import Settings, get_settings

__all__ = ["IndexerSettings", "Settings", "get_settings"]
