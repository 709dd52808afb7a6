"""Application cache – cache-aside lookup for derived views."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Sequence

from viewcache.application.cache.generator import CacheKeyGenerator
from viewcache.kernel.errors import InfrastructureError
from viewcache.kernel.ports import KeyValueStore, ParsedParameters
from viewcache.observability.logging import get_logger

__all__ = ["CachedViewLoader"]

logger = get_logger(__name__)


class _KeyLock:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.users = 0


class CachedViewLoader:
    """Serves a view from the store, loading and populating it on a miss.

    Only one coroutine per key runs the loader at a time. Store failures on
    this path fall back to the loader; the response is still served, just
    uncached.
    """

    def __init__(self, generator: CacheKeyGenerator, store: KeyValueStore) -> None:
        self._generator = generator
        self._store = store
        self._locks: dict[str, _KeyLock] = {}

    async def get_or_load(
        self,
        entity_id: str,
        is_alternate_identity: bool,
        parameters: ParsedParameters,
        scope: str | None,
        loader: Callable[[], Awaitable[str]],
        response_type: str | Sequence[str] | None = None,
    ) -> str:
        if not self._generator.is_cacheable(response_type, parameters):
            return await loader()
        key = await self._generator.generate_cache_key(
            entity_id, is_alternate_identity, parameters, scope
        )
        if key is None:
            return await loader()

        cached = await self._read(key)
        if cached is not None:
            return cached

        entry = self._locks.get(key)
        if entry is None:
            entry = self._locks[key] = _KeyLock()
        entry.users += 1
        try:
            async with entry.lock:
                cached = await self._read(key)
                if cached is not None:
                    return cached
                value = await loader()
                await self._write(key, value)
                return value
        finally:
            # The entry lives while any coroutine holds or awaits its lock.
            entry.users -= 1
            if entry.users == 0 and self._locks.get(key) is entry:
                del self._locks[key]

    async def _read(self, key: str) -> str | None:
        try:
            await self._store.connect()
            return await self._store.get(key)
        except (InfrastructureError, OSError) as exc:
            logger.warning("cache_lookup.read_failed", cache_key=key, error=repr(exc))
            return None

    async def _write(self, key: str, value: str) -> None:
        try:
            await self._store.set(key, value)
        except (InfrastructureError, OSError) as exc:
            logger.warning("cache_lookup.write_failed", cache_key=key, error=repr(exc))
