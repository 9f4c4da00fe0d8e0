"""Tests for the request-scoped lookup cache."""

from uuid import UUID, uuid4

from profile_api.utils.request_cache import RequestScopedCache


class _Loader:
    """Batch loader that records every call."""

    def __init__(self, values: dict[UUID, str]) -> None:
        self.values = values
        self.calls: list[list[UUID]] = []

    async def __call__(self, keys: list[UUID]) -> dict[UUID, str]:
        self.calls.append(keys)
        return {key: self.values[key] for key in keys if key in self.values}


class TestRequestScopedCache:
    """Tests for RequestScopedCache."""

    async def test_loads_once(self):
        """Repeated lookups of one key hit the loader once."""
        key = uuid4()
        loader = _Loader({key: "Maria"})
        cache = RequestScopedCache(loader)

        assert await cache.get(key) == "Maria"
        assert await cache.get(key) == "Maria"
        assert loader.calls == [[key]]

    async def test_misses_are_cached(self):
        """Unknown keys are not reloaded."""
        loader = _Loader({})
        cache = RequestScopedCache(loader)
        key = uuid4()

        assert await cache.get(key) is None
        assert await cache.get(key) is None
        assert len(loader.calls) == 1

    async def test_get_many_batches_missing_keys(self):
        """Only keys not seen yet are loaded, in one batch."""
        a, b, c = uuid4(), uuid4(), uuid4()
        loader = _Loader({a: "A", b: "B"})
        cache = RequestScopedCache(loader)
        await cache.get(a)

        found = await cache.get_many([a, b, c, b])

        assert found == {a: "A", b: "B"}
        assert loader.calls == [[a], [b, c]]

    async def test_put_and_clear(self):
        """Primed values skip the loader until cleared."""
        key = uuid4()
        loader = _Loader({key: "loaded"})
        cache = RequestScopedCache(loader)

        cache.put(key, "primed")
        assert await cache.get(key) == "primed"
        assert loader.calls == []

        cache.clear()
        assert await cache.get(key) == "loaded"
