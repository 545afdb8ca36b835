"""Cache providers.

MemoryCacheProvider is process-local; RedisCacheProvider is shared across
workers and restarts.  Both implement ICacheProvider.
"""

from songlist.providers.cache.memory_cache import MemoryCacheProvider
from songlist.providers.cache.redis_cache import RedisCacheProvider

__all__ = ["MemoryCacheProvider", "RedisCacheProvider"]
