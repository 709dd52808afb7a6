"""Testing fakes – in-memory doubles for kernel ports."""
from viewcache.testing.fakes.store import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
