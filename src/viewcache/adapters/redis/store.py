"""Redis adapter – RedisKeyValueStore."""
from __future__ import annotations

import asyncio
import contextlib
import re
from typing import TYPE_CHECKING, Any, AsyncIterator, Iterable, Iterator

from viewcache.kernel.errors import StoreTimeoutError, StoreUnavailableError

if TYPE_CHECKING:
    from viewcache.config.settings import CacheSettings

_GLOB_SPECIAL = re.compile(r"([\\*?\[\]])")


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'viewcache[redis]' to use the Redis adapter") from exc


def _escape_glob(value: str) -> str:
    """Escape SCAN MATCH metacharacters so *value* is matched literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", value)


@contextlib.contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    from redis.exceptions import RedisError
    from redis.exceptions import TimeoutError as RedisTimeoutError

    try:
        yield
    except (RedisTimeoutError, TimeoutError) as exc:
        raise StoreTimeoutError(
            f"Redis timed out during '{operation}'",
            detail={"operation": operation},
            cause=exc,
        ) from exc
    except RedisError as exc:
        raise StoreUnavailableError(operation, cause=exc) from exc


def _chunks(keys: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(keys), size):
        yield keys[start:start + size]


class RedisKeyValueStore:
    """Async Redis implementation of :class:`~viewcache.kernel.ports.KeyValueStore`.

    The client is created on first use (or on :meth:`connect`) and verified
    with a ``PING``. Every Redis failure surfaces as
    :class:`~viewcache.kernel.errors.StoreUnavailableError` or
    :class:`~viewcache.kernel.errors.StoreTimeoutError`.
    """

    def __init__(
        self,
        url: str,
        *,
        socket_timeout: float | None = 2.0,
        scan_count: int = 500,
        delete_chunk_size: int = 500,
        **kwargs: Any,
    ) -> None:
        self._url = url
        self._client_kwargs = {
            "decode_responses": True,
            "socket_timeout": socket_timeout,
            "socket_connect_timeout": socket_timeout,
            **kwargs,
        }
        self._scan_count = scan_count
        self._delete_chunk_size = delete_chunk_size
        self._client: Any = None
        self._connect_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: "CacheSettings") -> "RedisKeyValueStore":
        return cls(
            settings.redis_url,
            socket_timeout=settings.socket_timeout,
            scan_count=settings.scan_count,
            delete_chunk_size=settings.delete_chunk_size,
        )

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        if self._client is not None:
            return
        async with self._connect_lock:
            if self._client is not None:
                return
            aioredis = _require_redis()
            client = aioredis.from_url(self._url, **self._client_kwargs)
            with _store_errors("connect"):
                await client.ping()
            self._client = client

    async def _connected(self) -> Any:
        await self.connect()
        return self._client

    async def get(self, key: str) -> str | None:
        client = await self._connected()
        with _store_errors("get"):
            return await client.get(key)

    async def set(self, key: str, value: str) -> None:
        client = await self._connected()
        with _store_errors("set"):
            await client.set(key, value)

    async def increment_and_get(self, key: str) -> int:
        client = await self._connected()
        with _store_errors("incr"):
            return int(await client.incr(key))

    async def bulk_delete(self, keys: Iterable[str]) -> int:
        pending = list(keys)
        if not pending:
            return 0
        client = await self._connected()
        deleted = 0
        with _store_errors("bulk_delete"):
            for chunk in _chunks(pending, self._delete_chunk_size):
                async with client.pipeline(transaction=False) as pipe:
                    pipe.unlink(*chunk)
                    results = await pipe.execute()
                deleted += sum(int(r or 0) for r in results)
        return deleted

    async def enumerate_by_prefix(self, prefix: str) -> AsyncIterator[str]:
        client = await self._connected()
        with _store_errors("scan"):
            async for key in client.scan_iter(match=f"{_escape_glob(prefix)}*", count=self._scan_count):
                yield key.decode() if isinstance(key, bytes) else key

    async def invalidate_by_prefix(self, prefix: str) -> int:
        if not prefix:
            return 0
        deleted = 0
        chunk: list[str] = []
        async for key in self.enumerate_by_prefix(prefix):
            chunk.append(key)
            if len(chunk) >= self._delete_chunk_size:
                deleted += await self.bulk_delete(chunk)
                chunk = []
        if chunk:
            deleted += await self.bulk_delete(chunk)
        return deleted

    async def close(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        with _store_errors("close"):
            await client.aclose()


__all__ = ["RedisKeyValueStore"]
