"""Unit tests for MemoryCacheProvider and RedisCacheProvider."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from songlist.providers.cache.memory_cache import MemoryCacheProvider
from songlist.providers.cache.redis_cache import RedisCacheProvider
from songlist.utils.errors import CacheError


# ======================================================================
# MemoryCacheProvider
# ======================================================================


class TestMemoryCacheProvider:
    @pytest.fixture()
    def cache(self) -> MemoryCacheProvider:
        return MemoryCacheProvider(max_size=100)

    @pytest.mark.asyncio
    async def test_missing_keys_return_none(self, cache: MemoryCacheProvider) -> None:
        assert await cache.mget(["net:1", "net:2"]) == [None, None]

    @pytest.mark.asyncio
    async def test_mset_then_mget_preserves_key_order(self, cache: MemoryCacheProvider) -> None:
        await cache.mset({"net:1": "A - X", "net:3": "C - Z"})
        result = await cache.mget(["net:3", "net:2", "net:1"])
        assert result == ["C - Z", None, "A - X"]

    @pytest.mark.asyncio
    async def test_mset_overwrites_existing(self, cache: MemoryCacheProvider) -> None:
        await cache.mset({"net:1": "old"})
        await cache.mset({"net:1": "new"})
        assert await cache.mget(["net:1"]) == ["new"]

    @pytest.mark.asyncio
    async def test_lru_eviction_at_max_size(self) -> None:
        cache = MemoryCacheProvider(max_size=2)
        await cache.mset({"a": "1", "b": "2"})
        await cache.mset({"c": "3"})
        assert len(cache) == 2
        assert await cache.mget(["c"]) == ["3"]

    @pytest.mark.asyncio
    async def test_ttl_cache_stores_values(self) -> None:
        cache = MemoryCacheProvider(max_size=10, ttl=3600)
        await cache.mset({"net:1": "A - X"})
        assert await cache.mget(["net:1"]) == ["A - X"]

    @pytest.mark.asyncio
    async def test_per_call_ttl_ignored(self) -> None:
        cache = MemoryCacheProvider(max_size=10)
        await cache.mset({"net:1": "A - X"}, ttl=1)
        assert await cache.mget(["net:1"]) == ["A - X"]

    def test_provider_name(self, cache: MemoryCacheProvider) -> None:
        assert cache.get_provider_name() == "memory"


# ======================================================================
# RedisCacheProvider
# ======================================================================


def _mock_pipeline() -> MagicMock:
    pipe = MagicMock()
    pipe.__aenter__ = AsyncMock(return_value=pipe)
    pipe.__aexit__ = AsyncMock(return_value=False)
    pipe.execute = AsyncMock(return_value=[True, True])
    return pipe


class TestRedisCacheProvider:
    @pytest.mark.asyncio
    async def test_mget_passes_keys_through(self) -> None:
        client = MagicMock()
        client.mget = AsyncMock(return_value=["A - X", None])
        cache = RedisCacheProvider(client)

        result = await cache.mget(["net:1", "net:2"])

        assert result == ["A - X", None]
        client.mget.assert_awaited_once_with(["net:1", "net:2"])

    @pytest.mark.asyncio
    async def test_mget_empty_skips_round_trip(self) -> None:
        client = MagicMock()
        client.mget = AsyncMock()
        cache = RedisCacheProvider(client)

        assert await cache.mget([]) == []
        client.mget.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mget_failure_raises_cache_error(self) -> None:
        client = MagicMock()
        client.mget = AsyncMock(side_effect=RedisConnectionError("refused"))
        cache = RedisCacheProvider(client)

        with pytest.raises(CacheError) as exc_info:
            await cache.mget(["net:1"])
        assert exc_info.value.provider_name == "redis"

    @pytest.mark.asyncio
    async def test_mset_pipelines_set_with_ttl(self) -> None:
        pipe = _mock_pipeline()
        client = MagicMock()
        client.pipeline = MagicMock(return_value=pipe)
        cache = RedisCacheProvider(client, default_ttl=600)

        await cache.mset({"net:1": "A - X", "net:2": "B - Y"})

        client.pipeline.assert_called_once_with(transaction=False)
        pipe.set.assert_any_call("net:1", "A - X", ex=600)
        pipe.set.assert_any_call("net:2", "B - Y", ex=600)
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_mset_zero_ttl_means_no_expiry(self) -> None:
        pipe = _mock_pipeline()
        client = MagicMock()
        client.pipeline = MagicMock(return_value=pipe)
        cache = RedisCacheProvider(client)

        await cache.mset({"net:1": "A - X"}, ttl=0)

        pipe.set.assert_called_once_with("net:1", "A - X", ex=None)

    @pytest.mark.asyncio
    async def test_mset_failure_raises_cache_error(self) -> None:
        pipe = _mock_pipeline()
        pipe.execute = AsyncMock(side_effect=RedisConnectionError("refused"))
        client = MagicMock()
        client.pipeline = MagicMock(return_value=pipe)
        cache = RedisCacheProvider(client)

        with pytest.raises(CacheError):
            await cache.mset({"net:1": "A - X"})

    @pytest.mark.asyncio
    async def test_close_closes_client(self) -> None:
        client = MagicMock()
        client.aclose = AsyncMock()
        cache = RedisCacheProvider(client)

        await cache.close()

        client.aclose.assert_awaited_once()

    def test_from_url_decodes_responses(self) -> None:
        cache = RedisCacheProvider.from_url("redis://localhost:6379/0", timeout=1.5)
        kwargs = cache._client.connection_pool.connection_kwargs
        assert kwargs["decode_responses"] is True
        assert kwargs["socket_timeout"] == 1.5
