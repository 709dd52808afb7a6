"""Infrastructure errors – key-value store failures."""

from __future__ import annotations

from typing import Any

from viewcache.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Store / I/O failure that is not a rule violation."""

    default_code = "infrastructure_error"


class StoreUnavailableError(InfrastructureError):
    """The key-value store could not complete an operation."""

    default_code = "store_unavailable"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Key-value store failed during '{operation}'", **kwargs)
        self.operation = operation


class StoreTimeoutError(InfrastructureError):
    """A store call exceeded its deadline."""

    default_code = "store_timeout"


class GenerationParseError(InfrastructureError):
    """A stored generation value is not a non-negative integer."""

    default_code = "generation_parse_error"

    def __init__(self, key: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid generation value for key {key}: {value!r}",
            detail={"key": key, "value": repr(value)},
            **kwargs,
        )
        self.key = key
        self.value = value


__all__ = [
    "GenerationParseError",
    "InfrastructureError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
