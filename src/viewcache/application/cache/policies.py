"""Application cache – concrete policies for the Everything and Summary views."""
from __future__ import annotations

from viewcache.application.cache.content_types import JSON_FAMILY, NDJSON_FAMILY
from viewcache.application.cache.generation import GenerationProvider
from viewcache.application.cache.policy import CacheKeyPolicy, Operation
from viewcache.kernel.errors import UnsupportedIdentityError
from viewcache.kernel.identity import EntityIdentity

__all__ = ["EverythingCacheKeyPolicy", "SummaryCacheKeyPolicy"]


class EverythingCacheKeyPolicy(CacheKeyPolicy):
    """``$everything`` view.

    No generation tracking: its keys are removed by the prefix sweep. Parameters
    that widen the result set or change its shape per request are not cached.
    """

    operation = Operation.EVERYTHING
    cacheable_content_types = JSON_FAMILY | NDJSON_FAMILY
    disqualifying_params = (
        "_since",
        "_includePatientLinkedOnly",
        "_rewritePatientReference",
        "_includeNonClinicalResources",
        "_debug",
        "_explain",
        "_includeHidden",
        "_includeProxyPatientLinkedOnly",
        "_excludeProxyPatientLinked",
        "_includePatientLinkedUuidOnly",
        "_includeUuidOnly",
        "contained",
    )


class SummaryCacheKeyPolicy(CacheKeyPolicy):
    """``$summary`` view, generation-tracked for ``ClientPerson`` identities only."""

    operation = Operation.SUMMARY
    cacheable_content_types = JSON_FAMILY
    disqualifying_params = ("_rewritePatientReference", "_debug", "_explain", "_lastUpdated")
    key_params = ("_includeSummaryCompositionOnly",)

    def __init__(self, generations: GenerationProvider) -> None:
        if not isinstance(generations, GenerationProvider):
            raise TypeError(f"generations must be a GenerationProvider, got {type(generations).__name__}")
        self._generations = generations

    async def get_generation_for_id(self, identity: EntityIdentity) -> int | None:
        if not identity.is_alternate:
            raise UnsupportedIdentityError(self.operation.value, identity.kind.value)
        key = GenerationProvider.generation_key(identity, self.operation.value)
        return await self._generations.current_or_mint(key)
