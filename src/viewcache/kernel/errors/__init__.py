"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── InvariantViolationError
    │       └── UnsupportedIdentityError
    ├── ApplicationError             (application.py)
    └── InfrastructureError          (infrastructure.py)
        ├── StoreUnavailableError
        ├── StoreTimeoutError
        └── GenerationParseError
"""

from viewcache.kernel.errors.application import ApplicationError
from viewcache.kernel.errors.base import BaseError
from viewcache.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    UnsupportedIdentityError,
)
from viewcache.kernel.errors.infrastructure import (
    GenerationParseError,
    InfrastructureError,
    StoreTimeoutError,
    StoreUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "GenerationParseError",
    "InfrastructureError",
    "InvariantViolationError",
    "StoreTimeoutError",
    "StoreUnavailableError",
    "UnsupportedIdentityError",
]
