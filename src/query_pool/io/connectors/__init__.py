"""Driver connectors."""

from .asyncpg_pool import check_connection, close_pool, create_pool, init_from_settings

__all__ = ["check_connection", "close_pool", "create_pool", "init_from_settings"]
