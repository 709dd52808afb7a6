"""
viewcache – cache-key derivation and invalidation for derived resource views.

Import path convention::

    from viewcache.application.cache import CacheKeyGenerator, SummaryCacheKeyPolicy
    from viewcache.application.cache import CacheKeyManager
    from viewcache.adapters.redis import RedisKeyValueStore
    from viewcache.kernel.errors import UnsupportedIdentityError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
