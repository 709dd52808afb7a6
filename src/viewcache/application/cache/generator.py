"""Application cache – CacheKeyGenerator.

Key layout (segments in brackets are optional, order is fixed)::

    <Kind>:<id>:<Operation>[:Generation:<n>]:Scopes:<fingerprint>[:Param:<hash>]
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Sequence

from viewcache.application.cache.content_types import DEFAULT_CONTENT_TYPE
from viewcache.application.cache.generation import GENERATION_MARKER
from viewcache.application.cache.hashing import fingerprint_params, normalize_scopes
from viewcache.application.cache.policy import CacheKeyPolicy
from viewcache.kernel.errors import InfrastructureError
from viewcache.kernel.identity import KEY_SEP, EntityIdentity, generate_id_component
from viewcache.kernel.ports import ParsedParameters
from viewcache.observability.logging import get_logger
from viewcache.resilience.timeouts import TimeoutPolicy

if TYPE_CHECKING:
    from viewcache.config.settings import CacheSettings

__all__ = ["CacheKeyGenerator"]

logger = get_logger(__name__)

SCOPES_MARKER = "Scopes"
PARAM_MARKER = "Param"
FORMAT_PARAM = "_format"


def _is_truthy(value: Any) -> bool:
    # Only booleans are judged by value; any other present value disqualifies.
    if isinstance(value, bool):
        return value
    return True


def _normalize_param_value(value: Any) -> Any:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(sorted(str(v) for v in value))
    return value


class CacheKeyGenerator:
    """Builds cache keys for one view operation as described by its policy.

    Request-path failures while reading the generation degrade to "do not
    cache" (``None``). :class:`~viewcache.kernel.errors.UnsupportedIdentityError`
    is a caller mismatch and always propagates.
    """

    def __init__(self, policy: CacheKeyPolicy, *, generation_timeout: float | None = None) -> None:
        self._policy = policy
        self._timeout = TimeoutPolicy(generation_timeout) if generation_timeout else None

    @classmethod
    def from_settings(cls, policy: CacheKeyPolicy, settings: "CacheSettings") -> "CacheKeyGenerator":
        return cls(policy, generation_timeout=settings.generation_timeout_seconds)

    @property
    def policy(self) -> CacheKeyPolicy:
        return self._policy

    @property
    def operation(self) -> str:
        return self._policy.operation.value

    def is_cacheable(
        self,
        response_type: str | Sequence[str] | None,
        parameters: ParsedParameters,
    ) -> bool:
        """Return ``True`` if the response type (or ``_format``) may be cached."""
        if not response_type:
            response_type = DEFAULT_CONTENT_TYPE
        elif not isinstance(response_type, str):
            response_type = response_type[0]
        cacheable = self._policy.cacheable_content_types
        if response_type in cacheable:
            return True
        requested_format = parameters.get_raw_args().get(FORMAT_PARAM)
        return isinstance(requested_format, str) and requested_format in cacheable

    def is_disqualified(self, raw_args: Mapping[str, Any]) -> bool:
        return any(
            name in raw_args and _is_truthy(raw_args[name])
            for name in self._policy.disqualifying_params
        )

    @staticmethod
    def generate_id_component(entity_id: str, is_alternate_identity: bool) -> str:
        return generate_id_component(entity_id, is_alternate_identity)

    async def get_generation_for_id(self, entity_id: str, is_alternate_identity: bool) -> int | None:
        identity = EntityIdentity.of(entity_id, is_alternate_identity)
        if self._timeout is None:
            return await self._policy.get_generation_for_id(identity)
        return await self._timeout.execute(lambda: self._policy.get_generation_for_id(identity))

    async def generate_cache_key(
        self,
        entity_id: str,
        is_alternate_identity: bool,
        parameters: ParsedParameters,
        scope: str | None,
    ) -> str | None:
        """Return the cache key for this request, or ``None`` to skip caching."""
        raw_args = parameters.get_raw_args()
        if self.is_disqualified(raw_args):
            logger.debug(
                "cache_key.disqualified",
                operation=self.operation,
                entity_id=entity_id,
            )
            return None

        segments = [self.generate_id_component(entity_id, is_alternate_identity), self.operation]

        try:
            generation = await self.get_generation_for_id(entity_id, is_alternate_identity)
        except (InfrastructureError, OSError) as exc:
            logger.error(
                "cache_key.generation_failed",
                operation=self.operation,
                entity_id=entity_id,
                is_alternate_identity=is_alternate_identity,
                error=repr(exc),
            )
            return None
        if generation is not None:
            segments += [GENERATION_MARKER, str(generation)]

        segments += [SCOPES_MARKER, normalize_scopes(scope)]

        param_hash = self._param_fingerprint(raw_args)
        if param_hash is not None:
            segments += [PARAM_MARKER, param_hash]

        return KEY_SEP.join(segments)

    def _param_fingerprint(self, raw_args: Mapping[str, Any]) -> str | None:
        params: dict[str, Any] = {}
        for name in self._policy.key_params:
            if name not in raw_args:
                continue
            value = _normalize_param_value(raw_args[name])
            if value is None or value == "":
                continue
            params[name] = value
        if not params:
            return None
        return fingerprint_params(params)
