"""Config settings – Settings base class and CacheSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from viewcache.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class CacheSettings(Settings):
    """Store connection and invalidation settings, read from ``VIEWCACHE_*``.

    ``preserve_generations`` chooses what a whole-entity sweep does with
    generation counters: advance them (``True``) or delete them with the rest
    of the prefix (``False``).
    """

    _prefix: ClassVar[str] = "VIEWCACHE"

    redis_url: str = "redis://localhost:6379/0"
    socket_timeout: float = 2.0
    generation_timeout_seconds: float = 0.5
    scan_count: int = 500
    delete_chunk_size: int = 500
    preserve_generations: bool = True

    def _validate(self) -> None:
        if not self.redis_url:
            raise InvalidSettingValueError("redis_url", self.redis_url, "must not be empty")
        for name in ("socket_timeout", "generation_timeout_seconds", "scan_count", "delete_chunk_size"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be positive")


__all__ = ["CacheSettings", "Settings"]
