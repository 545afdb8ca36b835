"""Redis cache provider using ``redis.asyncio``.

Shared across processes and restarts, so a song resolved by any worker is
a cache hit for every other.  Reads use a single ``MGET``; writes are sent
as one pipelined batch of ``SET`` commands so each entry can carry a TTL.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from redis.asyncio import Redis
from redis.exceptions import RedisError

from songlist.interfaces.cache_provider import ICacheProvider
from songlist.utils.errors import CacheError
from songlist.utils.logging import get_logger


class RedisCacheProvider(ICacheProvider):
    """Cache provider backed by a Redis server.

    Parameters
    ----------
    client:
        Injected ``redis.asyncio.Redis`` client.  It must be created with
        ``decode_responses=True`` so values come back as ``str``.
    default_ttl:
        Expiry in seconds applied when :meth:`mset` gets no explicit TTL.
        ``0`` stores entries without expiry.
    """

    def __init__(self, client: Redis, default_ttl: int = 0) -> None:
        self._client = client
        self._default_ttl = default_ttl
        self._logger = get_logger(__name__)

    @classmethod
    def from_url(cls, url: str, timeout: float = 2.0, default_ttl: int = 0) -> RedisCacheProvider:
        """Build a provider with its own connection pool for *url*."""
        client = Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
        )
        return cls(client, default_ttl=default_ttl)

    async def mget(self, keys: Sequence[str]) -> list[str | None]:
        if not keys:
            return []
        try:
            values = await self._client.mget(list(keys))
        except RedisError as exc:
            self._logger.warning("redis_mget_failed", keys=len(keys), error=str(exc))
            raise CacheError(
                message=f"Redis MGET failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        return list(values)

    async def mset(self, entries: Mapping[str, str], ttl: int | None = None) -> None:
        if not entries:
            return
        expiry = self._default_ttl if ttl is None else ttl
        try:
            async with self._client.pipeline(transaction=False) as pipe:
                for key, value in entries.items():
                    pipe.set(key, value, ex=expiry or None)
                await pipe.execute()
        except RedisError as exc:
            self._logger.warning("redis_mset_failed", keys=len(entries), error=str(exc))
            raise CacheError(
                message=f"Redis pipelined SET failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        self._logger.debug("redis_mset", keys=len(entries), ttl=expiry)

    def get_provider_name(self) -> str:
        return "redis"

    async def close(self) -> None:
        await self._client.aclose()
