"""
Query execution over a pooled client.

Acquires a connection, runs a built statement, and releases the connection
exactly once whatever the outcome.
"""

from .core import QueryExecutor
from .models import Lease
from .protocol import QueryClient, QueryConnection
from .registry import (
    get_client,
    get_executor,
    insert,
    reset_client,
    select,
    set_client,
)

__all__ = [
    "Lease",
    "QueryClient",
    "QueryConnection",
    "QueryExecutor",
    "get_client",
    "get_executor",
    "insert",
    "reset_client",
    "select",
    "set_client",
]
