"""In-memory cache provider using cachetools.

Simple, fast cache suitable for development and single-process deployments.
Can be swapped for Redis via the ICacheProvider interface.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog
from cachetools import Cache, LRUCache, TTLCache

from songlist.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """In-memory cache backed by ``cachetools``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Time-to-live in seconds for every entry.  ``0`` disables expiry
        and the cache becomes a plain LRU.
    """

    def __init__(self, max_size: int = 100_000, ttl: int = 0) -> None:
        self._cache: Cache[str, str]
        if ttl > 0:
            self._cache = TTLCache(maxsize=max_size, ttl=ttl)
        else:
            self._cache = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def mget(self, keys: Sequence[str]) -> list[str | None]:
        """Return cached values for *keys*, ``None`` where missing/expired."""
        values = [self._cache.get(key) for key in keys]
        hits = sum(1 for v in values if v is not None)
        logger.debug("cache_mget", keys=len(keys), hits=hits)
        return values

    async def mset(self, entries: Mapping[str, str], ttl: int | None = None) -> None:
        """Store every entry.

        *ttl* is ignored: entries share the uniform TTL set at construction
        time.
        """
        for key, value in entries.items():
            self._cache[key] = value
        logger.debug("cache_mset", keys=len(entries))

    def get_provider_name(self) -> str:
        return "memory"

    def __len__(self) -> int:
        return len(self._cache)
