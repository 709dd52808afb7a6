"""Application cache – CacheKeyManager (write-path invalidation and diagnostics)."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import TYPE_CHECKING, Iterable

from viewcache.application.cache.generation import GenerationProvider
from viewcache.kernel.errors import InfrastructureError
from viewcache.kernel.identity import KEY_SEP, EntityIdentity, EntityKind
from viewcache.kernel.ports import KeyValueStore
from viewcache.observability.logging import get_logger

if TYPE_CHECKING:
    from viewcache.config.settings import CacheSettings

__all__ = ["CacheKeyManager", "GenerationEntry", "ResourceKeys"]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class GenerationEntry:
    key: str
    value: str | None


@dataclasses.dataclass(frozen=True)
class ResourceKeys:
    """Every key stored under one entity prefix, split by kind."""
    cache_keys: frozenset[str] = frozenset()
    generation_keys: tuple[GenerationEntry, ...] = ()


class CacheKeyManager:
    """Invalidates cached views by entity prefix.

    Store failures propagate: a silently failed invalidation leaves stale views
    behind with nothing to show for it.

    With ``preserve_generations`` (the default) a sweep deletes the cached views
    and then advances every generation counter under the prefix, so a key minted
    before the sweep is never valid again. A counter that cannot be advanced
    (for instance a corrupt value) is deleted instead. Without the flag the
    whole prefix, counters included, is deleted and counters restart at 1.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        generations: GenerationProvider | None = None,
        preserve_generations: bool = True,
    ) -> None:
        self._store = store
        self._generations = generations or GenerationProvider(store)
        self._preserve_generations = preserve_generations

    @classmethod
    def from_settings(cls, store: KeyValueStore, settings: "CacheSettings") -> "CacheKeyManager":
        return cls(store, preserve_generations=settings.preserve_generations)

    @staticmethod
    def prefix_for(entity_kind: str | EntityKind, entity_id: str) -> str | None:
        """Return the sweep prefix for an entity, or ``None`` if it owns no views."""
        kind = EntityKind.from_resource_type(entity_kind)
        if kind is None or not entity_id:
            return None
        # Trailing separator keeps "Patient:42" from matching "Patient:420".
        return EntityIdentity(kind, entity_id).prefix + KEY_SEP

    async def invalidate_keys(self, cache_keys: Iterable[str]) -> None:
        keys = list(cache_keys)
        if not keys:
            return
        await self._store.connect()
        await self._store.bulk_delete(keys)

    async def invalidate_for_entity(self, entity_kind: str | EntityKind, entity_id: str) -> None:
        prefix = self.prefix_for(entity_kind, entity_id)
        if not prefix:
            logger.debug("cache_invalidation.skipped", entity_kind=str(entity_kind), entity_id=entity_id)
            return
        await self._store.connect()

        if not self._preserve_generations:
            removed = await self._store.invalidate_by_prefix(prefix)
            logger.info("cache_invalidation.swept", prefix=prefix, count=removed)
            return

        # SCAN may repeat keys; each counter must advance once.
        keys = list(dict.fromkeys([key async for key in self._store.enumerate_by_prefix(prefix)]))
        cache_keys = [key for key in keys if not GenerationProvider.is_generation_key(key)]
        generation_keys = [key for key in keys if GenerationProvider.is_generation_key(key)]
        removed = await self._store.bulk_delete(cache_keys) if cache_keys else 0

        results = await asyncio.gather(
            *(self._generations.increment_and_get(key) for key in generation_keys),
            return_exceptions=True,
        )
        failed = {
            key: result
            for key, result in zip(generation_keys, results)
            if isinstance(result, BaseException)
        }
        if failed:
            # A counter that cannot advance is dropped; the next build mints a fresh one.
            await self._store.bulk_delete(list(failed))
            logger.warning(
                "cache_invalidation.generations_reset",
                prefix=prefix,
                keys=sorted(failed),
                errors=[repr(exc) for exc in failed.values()],
            )
            unexpected = [exc for exc in failed.values() if not isinstance(exc, InfrastructureError)]
            if unexpected:
                raise unexpected[0]

        logger.info(
            "cache_invalidation.swept",
            prefix=prefix,
            count=removed,
            generations_advanced=len(generation_keys) - len(failed),
            generations_reset=len(failed),
        )

    async def get_all_keys_for_resource(
        self, entity_kind: str | EntityKind, entity_id: str
    ) -> ResourceKeys:
        """Diagnostic listing of every key under the entity prefix."""
        prefix = self.prefix_for(entity_kind, entity_id)
        if not prefix:
            return ResourceKeys()
        await self._store.connect()

        cache_keys: set[str] = set()
        generation_keys: dict[str, None] = {}
        async for key in self._store.enumerate_by_prefix(prefix):
            if GenerationProvider.is_generation_key(key):
                generation_keys[key] = None
            else:
                cache_keys.add(key)

        values = await asyncio.gather(*(self._store.get(key) for key in generation_keys))
        return ResourceKeys(
            cache_keys=frozenset(cache_keys),
            generation_keys=tuple(
                GenerationEntry(key=key, value=value) for key, value in zip(generation_keys, values)
            ),
        )
