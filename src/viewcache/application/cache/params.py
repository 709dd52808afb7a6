"""Application cache – mapping-backed ParsedParameters."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

__all__ = ["RawParameters"]


class RawParameters:
    """Read-only view over raw request parameters.

    Request handlers usually hand in their own parsed-args object; this one
    covers callers that only hold a plain mapping.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Mapping[str, Any] | None = None, **params: Any) -> None:
        merged = dict(raw or {})
        merged.update(params)
        self._raw = MappingProxyType(merged)

    def get_raw_args(self) -> Mapping[str, Any]:
        return self._raw

    def __repr__(self) -> str:
        return f"RawParameters({dict(self._raw)!r})"
