"""
Client capability contract.

The executor only needs three awaitables, so pooling stays behind a small
port. ``asyncpg.Pool`` satisfies ``QueryClient`` as-is and its connections
satisfy ``QueryConnection``.
"""

from typing import Any, Optional, Protocol, Sequence


class QueryConnection(Protocol):
    """A leased connection able to run one statement."""

    async def fetch(self, query: str, *args: Any) -> Optional[Sequence[Any]]:
        ...


class QueryClient(Protocol):
    """A pool (or pool-like object) handing out connections."""

    async def acquire(self) -> QueryConnection:
        ...

    async def release(self, connection: QueryConnection) -> None:
        ...
