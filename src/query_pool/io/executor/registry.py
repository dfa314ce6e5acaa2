"""
Process-wide default client.

``set_client`` installs the client once at startup; ``select`` and ``insert``
then run through a QueryExecutor bound to whatever client is current when
they are called. Code that needs more than one database should construct
``QueryExecutor`` instances directly.
"""

from typing import Optional

from query_pool.errors import ClientNotConfiguredError
from query_pool.infrastructure.sql.core.descriptors import (
    InsertDescriptor,
    SelectDescriptor,
)
from query_pool.io.executor.core import QueryExecutor, Rows
from query_pool.io.executor.protocol import QueryClient
from query_pool.utils.logging import get_logger

logger = get_logger(__name__)

# Last write wins; no guard against racing in-flight queries
_client: Optional[QueryClient] = None


def set_client(client: QueryClient) -> None:
    """Replace the default client. No validation is performed."""
    global _client

    _client = client
    logger.info("database.client.configured", client=type(client).__name__)


def get_client() -> Optional[QueryClient]:
    return _client


def reset_client() -> None:
    """Forget the default client."""
    global _client

    _client = None


def get_executor() -> QueryExecutor:
    """
    Build an executor around the current default client.

    Raises:
        ClientNotConfiguredError: If ``set_client`` has not been called
    """
    if _client is None:
        raise ClientNotConfiguredError(
            "No database client configured; call set_client() first"
        )
    return QueryExecutor(_client)


async def select(descriptor: SelectDescriptor) -> Rows:
    """Run a SELECT on the default client. See ``QueryExecutor.select``."""
    return await get_executor().select(descriptor)


async def insert(descriptor: InsertDescriptor) -> Rows:
    """Run an INSERT on the default client. See ``QueryExecutor.insert``."""
    return await get_executor().insert(descriptor)
