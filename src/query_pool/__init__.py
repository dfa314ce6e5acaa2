"""
query-pool - SQL string builder and pooled query executor.

Builds SELECT and INSERT statements from declarative descriptors and runs them
on connections leased from an injected pool, releasing each connection exactly
once.
"""

from query_pool.config import get_settings
from query_pool.errors import (
    ClientNotConfiguredError,
    DatabaseConnectionError,
    InvalidQueryError,
    QueryExecutionError,
    QueryPoolError,
)
from query_pool.infrastructure.sql import (
    InsertQuery,
    SelectQuery,
    build_insert,
    build_select,
)
from query_pool.io.executor import (
    QueryExecutor,
    get_client,
    insert,
    reset_client,
    select,
    set_client,
)

__version__ = "0.1.0"

__all__ = [
    "ClientNotConfiguredError",
    "DatabaseConnectionError",
    "InsertQuery",
    "InvalidQueryError",
    "QueryExecutionError",
    "QueryExecutor",
    "QueryPoolError",
    "SelectQuery",
    "build_insert",
    "build_select",
    "get_client",
    "get_settings",
    "insert",
    "reset_client",
    "select",
    "set_client",
]
