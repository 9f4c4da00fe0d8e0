"""Request-scoped lookup cache."""

from collections.abc import Awaitable, Callable, Iterable
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class RequestScopedCache(Generic[T]):
    """Collapses duplicate keyed lookups while one response is built.

    Lives exactly as long as the service instance that owns it, which is one
    request. Misses are remembered too, so an unknown id is loaded once.
    """

    def __init__(self, loader: Callable[[list[UUID]], Awaitable[dict[UUID, T]]]) -> None:
        """Initialize the cache.

        Args:
            loader: Batch loader returning found values keyed by id
        """
        self._loader = loader
        self._values: dict[UUID, T | None] = {}

    async def get(self, key: UUID) -> T | None:
        """Get one value, loading it on first access."""
        if key not in self._values:
            await self.prime([key])
        return self._values[key]

    async def get_many(self, keys: Iterable[UUID]) -> dict[UUID, T]:
        """Get several values with at most one batch load."""
        wanted = list(dict.fromkeys(keys))
        await self.prime(wanted)
        return {key: value for key in wanted if (value := self._values[key]) is not None}

    async def prime(self, keys: Iterable[UUID]) -> None:
        """Load every key not seen yet in one batch."""
        missing = [key for key in dict.fromkeys(keys) if key not in self._values]
        if not missing:
            return
        loaded = await self._loader(missing)
        for key in missing:
            self._values[key] = loaded.get(key)

    def put(self, key: UUID, value: T) -> None:
        """Record an already-loaded value."""
        self._values[key] = value

    def clear(self) -> None:
        """Forget every cached value."""
        self._values.clear()
