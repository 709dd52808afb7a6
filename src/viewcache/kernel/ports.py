"""Kernel ports – key-value store and request-parameter accessors.

Concrete stores live in ``adapters/redis`` and ``testing/fakes``.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Port: the external store that holds cached views and generation counters.

    ``increment_and_get`` must be atomic on the store side; generation
    correctness under concurrent requests depends on it.
    """

    async def connect(self) -> None:
        """Open the connection. Safe to call repeatedly."""
        ...

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def increment_and_get(self, key: str) -> int: ...

    async def bulk_delete(self, keys: Iterable[str]) -> int:
        """Delete *keys*; missing keys are ignored. Returns the number removed."""
        ...

    def enumerate_by_prefix(self, prefix: str) -> AsyncIterator[str]:
        """Yield every key that starts with *prefix* (literal, not a pattern)."""
        ...

    async def invalidate_by_prefix(self, prefix: str) -> int:
        """Delete every key that starts with *prefix*. Returns the number removed."""
        ...


class ParsedParameters(Protocol):
    """Accessor over a request's parsed query parameters."""

    def get_raw_args(self) -> Mapping[str, Any]:
        """Return the raw (unparsed) parameter values keyed by name."""
        ...


__all__ = ["KeyValueStore", "ParsedParameters"]
