"""Application cache – GenerationProvider.

A generation is a per (entity, operation) counter embedded in cache keys.
Advancing it makes every key minted under the previous value unreachable
without having to find those keys.
"""
from __future__ import annotations

from viewcache.kernel.errors import GenerationParseError
from viewcache.kernel.identity import KEY_SEP, EntityIdentity
from viewcache.kernel.ports import KeyValueStore

__all__ = ["GENERATION_MARKER", "GenerationProvider"]

GENERATION_MARKER = "Generation"


class GenerationProvider:
    """Reads and advances generation counters held in a :class:`KeyValueStore`."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @staticmethod
    def generation_key(identity: EntityIdentity, operation: str) -> str:
        return KEY_SEP.join((identity.prefix, operation, GENERATION_MARKER))

    @staticmethod
    def is_generation_key(key: str) -> bool:
        return key.endswith(KEY_SEP + GENERATION_MARKER)

    async def read(self, key: str) -> int | None:
        """Return the stored generation, or ``None`` if it was never minted.

        Raises:
            GenerationParseError: the stored value is not a non-negative integer.
        """
        raw = await self._store.get(key)
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        if not (isinstance(raw, str) and raw.isascii() and raw.isdigit()):
            raise GenerationParseError(key, raw)
        return int(raw)

    async def increment_and_get(self, key: str) -> int:
        return await self._store.increment_and_get(key)

    async def current_or_mint(self, key: str) -> int:
        """Return the current generation, minting generation 1 when absent.

        Reading first means a lookup never bumps an existing generation, which
        would invalidate everything cached under it.
        """
        current = await self.read(key)
        if current is not None:
            return current
        return await self.increment_and_get(key)
