"""Application cache – CacheKeyPolicy base and Operation tags."""
from __future__ import annotations

import enum
from typing import ClassVar

from viewcache.kernel.identity import EntityIdentity

__all__ = ["CacheKeyPolicy", "Operation"]


class Operation(str, enum.Enum):
    """View operations whose responses may be cached."""

    EVERYTHING = "Everything"
    SUMMARY = "Summary"


class CacheKeyPolicy:
    """Per-operation configuration consumed by :class:`CacheKeyGenerator`.

    Subclasses set the class-level configuration and, when the operation
    tracks generations, override :meth:`get_generation_for_id`.

    * ``cacheable_content_types`` – response types that may be cached.
    * ``disqualifying_params`` – parameters whose truthy presence bypasses the cache.
    * ``key_params`` – parameters hashed into the key, in this order.
    """

    operation: ClassVar[Operation]
    cacheable_content_types: ClassVar[frozenset[str]] = frozenset()
    disqualifying_params: ClassVar[tuple[str, ...]] = ()
    key_params: ClassVar[tuple[str, ...]] = ()

    @property
    def tracks_generation(self) -> bool:
        return type(self).get_generation_for_id is not CacheKeyPolicy.get_generation_for_id

    async def get_generation_for_id(self, identity: EntityIdentity) -> int | None:  # noqa: ARG002
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(operation={self.operation.value!r})"
