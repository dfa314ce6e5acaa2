import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Union


async def resolve(result: Union[Any, Awaitable[Any]]) -> Any:
    """Await ``result`` if the client handed back an awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


@dataclass
class Lease:
    """A connection plus the callback that hands it back to the pool.

    ``release()`` runs the callback at most once per lease.
    """

    connection: Any
    release_callback: Callable[[], Any]
    released: bool = field(default=False, init=False)

    async def release(self) -> None:
        if self.released:
            return
        self.released = True
        await resolve(self.release_callback())
