"""Application cache – key derivation, generations, invalidation and lookup."""
from viewcache.application.cache.aside import CachedViewLoader
from viewcache.application.cache.generation import GENERATION_MARKER, GenerationProvider
from viewcache.application.cache.generator import CacheKeyGenerator
from viewcache.application.cache.hashing import normalize_scopes
from viewcache.application.cache.manager import CacheKeyManager, GenerationEntry, ResourceKeys
from viewcache.application.cache.params import RawParameters
from viewcache.application.cache.policies import EverythingCacheKeyPolicy, SummaryCacheKeyPolicy
from viewcache.application.cache.policy import CacheKeyPolicy, Operation

__all__ = [
    "GENERATION_MARKER",
    "CacheKeyGenerator",
    "CacheKeyManager",
    "CacheKeyPolicy",
    "CachedViewLoader",
    "EverythingCacheKeyPolicy",
    "GenerationEntry",
    "GenerationProvider",
    "Operation",
    "RawParameters",
    "ResourceKeys",
    "SummaryCacheKeyPolicy",
    "normalize_scopes",
]
