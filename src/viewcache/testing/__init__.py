"""Testing – in-memory store double and property-based strategies."""
from viewcache.testing.fakes import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
