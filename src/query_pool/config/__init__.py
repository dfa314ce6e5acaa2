"""Configuration management for query-pool.

Usage:
    >>> from query_pool.config import get_settings
    >>> settings = get_settings()
    >>> settings.get_database_connection_string()
"""

from query_pool.config.settings import DatabaseSettings, Settings, get_settings

__all__ = [
    "DatabaseSettings",
    "Settings",
    "get_settings",
]
