"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from viewcache.kernel.errors import StoreTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Deadline applied to a single store call site."""
    timeout_seconds: float

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except TimeoutError as exc:
            raise StoreTimeoutError(
                f"Store call timed out after {self.timeout_seconds}s",
                detail={"timeout_seconds": self.timeout_seconds},
            ) from exc


__all__ = ["TimeoutPolicy"]
