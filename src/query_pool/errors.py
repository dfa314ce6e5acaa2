"""Exception hierarchy for query-pool."""

from typing import Optional


class QueryPoolError(Exception):
    """Base class for every error raised by query-pool."""


class InvalidQueryError(QueryPoolError, ValueError):
    """Raised when a query descriptor is missing a required key."""


class ClientNotConfiguredError(QueryPoolError):
    """Raised when a registry operation runs before ``set_client``."""


class DatabaseConnectionError(QueryPoolError):
    """Raised when a connection cannot be acquired from the client."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class QueryExecutionError(QueryPoolError):
    """Raised when a statement fails.

    The message references the SQL text only; the driver error is chained as
    ``__cause__`` but never copied into the message.
    """

    def __init__(self, sql: str):
        super().__init__(f"Error executing {sql} query!")
        self.sql = sql
