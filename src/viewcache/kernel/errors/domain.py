"""Domain errors – caller/programmer mistakes that must surface."""

from __future__ import annotations

from typing import Any

from viewcache.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rule of the key scheme is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An invariant of the key scheme was violated."""

    default_code = "invariant_violation"


class UnsupportedIdentityError(InvariantViolationError):
    """A policy was asked to track generations for an identity kind it does not support.

    This is a caller mismatch, not a store failure, so key generation lets it
    propagate instead of degrading to "no cache".
    """

    default_code = "unsupported_identity"

    def __init__(
        self,
        operation: str,
        kind: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"{operation} generation tracking does not support '{kind}' identities",
            detail={"operation": operation, "kind": kind},
            **kwargs,
        )
        self.operation = operation
        self.kind = kind


__all__ = ["DomainError", "InvariantViolationError", "UnsupportedIdentityError"]
