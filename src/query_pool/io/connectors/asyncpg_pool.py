"""
asyncpg connection pool management.

Creates the pool from Settings, installs it as the default client, reports
its health, and closes it on shutdown.

Usage:
    >>> pool = await init_from_settings()
    >>> rows = await select({"columns": ["id"], "from": "users"})
    >>> await close_pool()
"""

from typing import Any, Dict, Optional

import asyncpg

from query_pool.config import Settings, get_settings
from query_pool.errors import DatabaseConnectionError
from query_pool.io.executor.core import QueryExecutor
from query_pool.io.executor.protocol import QueryClient
from query_pool.io.executor.registry import get_client, reset_client, set_client
from query_pool.utils.logging import get_logger, mask_dsn

logger = get_logger(__name__)


async def create_pool(
    settings: Optional[Settings] = None, **overrides: Any
) -> asyncpg.Pool:
    """
    Create an asyncpg pool from settings.

    Args:
        settings: Settings instance (defaults to ``get_settings()``)
        **overrides: Extra keyword arguments for ``asyncpg.create_pool``

    Returns:
        asyncpg.Pool instance

    Raises:
        DatabaseConnectionError: If the pool cannot be created
    """
    settings = settings or get_settings()
    dsn = settings.get_database_connection_string()

    pool_kwargs: Dict[str, Any] = {
        "dsn": dsn,
        "min_size": settings.db_pool_min_size,
        "max_size": settings.db_pool_size,
        "command_timeout": settings.db_command_timeout,
        "timeout": settings.db_connect_timeout,
    }
    pool_kwargs.update(overrides)

    try:
        pool = await asyncpg.create_pool(**pool_kwargs)
    except Exception as exc:
        logger.error(
            "database.pool.create_failed", dsn=mask_dsn(dsn), error=str(exc)
        )
        raise DatabaseConnectionError(
            f"Failed to create pool: {exc}", cause=exc
        ) from exc

    logger.info(
        "database.pool.initialized",
        dsn=mask_dsn(dsn),
        min_size=pool_kwargs["min_size"],
        max_size=pool_kwargs["max_size"],
    )
    return pool


async def init_from_settings(
    settings: Optional[Settings] = None, **overrides: Any
) -> asyncpg.Pool:
    """Create a pool and install it as the default client."""
    pool = await create_pool(settings, **overrides)
    set_client(pool)
    return pool


async def close_pool(pool: Optional[asyncpg.Pool] = None) -> None:
    """
    Close ``pool``, or the default client when no pool is given.

    The registry slot is cleared when it held the pool being closed.
    """
    current = get_client()
    target = pool if pool is not None else current
    if target is None:
        return

    try:
        await target.close()
    finally:
        if target is current:
            reset_client()
    logger.info("database.pool.closed")


async def check_connection(client: Optional[QueryClient] = None) -> Dict[str, Any]:
    """
    Check database connectivity with ``SELECT 1``.

    Args:
        client: Client to probe (defaults to the registry's client)

    Returns:
        Connection status information; never raises
    """
    client = client if client is not None else get_client()
    if client is None:
        return {"connected": False, "error": "Client not configured"}

    try:
        await QueryExecutor(client).fetch("SELECT 1;")
    except Exception as exc:
        return {"connected": False, "error": str(exc)}

    status: Dict[str, Any] = {"connected": True}
    if isinstance(client, asyncpg.Pool):
        status.update(
            pool_size=client.get_size(),
            free_connections=client.get_idle_size(),
            max_size=client.get_max_size(),
        )
    return status
