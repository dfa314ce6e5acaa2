import time
from functools import partial
from typing import Any, Optional, Sequence

from query_pool.errors import DatabaseConnectionError, QueryExecutionError
from query_pool.infrastructure.sql import build_insert, build_select
from query_pool.infrastructure.sql.core.descriptors import (
    InsertDescriptor,
    SelectDescriptor,
    as_insert_query,
)
from query_pool.io.executor.models import Lease, resolve
from query_pool.io.executor.protocol import QueryClient
from query_pool.utils.logging import get_logger

structured_logger = get_logger(__name__)

Rows = Optional[Sequence[Any]]


class QueryExecutor:
    """Runs built statements on connections leased from an injected client.

    Every call acquires its own connection and releases it exactly once,
    right after the statement returns or fails and before the result or
    error reaches the caller.
    """

    def __init__(self, client: QueryClient):
        self.client = client
        self._logger = structured_logger

    async def _connect(self) -> Lease:
        """Acquire a connection; no release is attempted if this fails."""
        try:
            connection = await resolve(self.client.acquire())
        except Exception as exc:
            self._logger.error("database.connect.failed", error=str(exc))
            raise DatabaseConnectionError(
                f"Connection error: {exc}", cause=exc
            ) from exc

        return Lease(
            connection=connection,
            release_callback=partial(self.client.release, connection),
        )

    async def _release(
        self, lease: Lease, sql: str, failure: Optional[Exception]
    ) -> None:
        """Release the lease; a query failure outranks a release failure."""
        try:
            await lease.release()
        except Exception as exc:
            self._logger.error("database.release.failed", sql=sql, error=str(exc))
            if failure is None:
                raise

    async def _make_query(self, lease: Lease, sql: str, values: Sequence[Any]) -> Rows:
        start_time = time.perf_counter()
        self._logger.debug(
            "database.query.started", sql=sql, param_count=len(values)
        )

        failure: Optional[Exception] = None
        try:
            rows = await resolve(lease.connection.fetch(sql, *values))
        except Exception as exc:
            failure = exc
            self._logger.error(
                "database.query.failed",
                sql=sql,
                duration_ms=(time.perf_counter() - start_time) * 1000,
                error=str(exc),
            )
        finally:
            await self._release(lease, sql, failure)

        if failure is not None:
            raise QueryExecutionError(sql) from failure

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._logger.info(
            "database.query.completed",
            sql=sql,
            duration_ms=duration_ms,
            row_count=len(rows) if rows is not None else 0,
        )
        return rows

    async def fetch(self, sql: str, *values: Any) -> Rows:
        """
        Run raw SQL text through the acquire/execute/release cycle.

        Args:
            sql: Statement to run; only ``values`` are parameterized
            *values: Positional parameters bound to ``$1..$N``

        Returns:
            Rows returned by the driver (may be empty or None)

        Raises:
            DatabaseConnectionError: If no connection could be acquired
            QueryExecutionError: If the statement failed
        """
        lease = await self._connect()
        return await self._make_query(lease, sql, values)

    async def select(self, descriptor: SelectDescriptor) -> Rows:
        """
        Run a SELECT built from ``descriptor``.

        Args:
            descriptor: SelectQuery or ``{"columns", "from", "where"}`` mapping

        Returns:
            Rows returned by the driver (may be empty or None)
        """
        sql = build_select(descriptor)
        return await self.fetch(sql)

    async def insert(self, descriptor: InsertDescriptor) -> Rows:
        """
        Run an INSERT built from ``descriptor`` with its values bound.

        Args:
            descriptor: InsertQuery or ``{"into", "columns", "values"}`` mapping

        Returns:
            Rows returned by the driver; empty without a RETURNING clause
        """
        query = as_insert_query(descriptor)
        sql = build_insert(query)
        return await self.fetch(sql, *query.values)
