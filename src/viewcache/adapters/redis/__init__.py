"""Redis adapter – key-value store for cached views and generation counters."""
from viewcache.adapters.redis.store import RedisKeyValueStore

__all__ = ["RedisKeyValueStore"]
