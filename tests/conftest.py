"""Shared pytest fixtures and in-memory fakes for the songlist test suite."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence

import pytest

from songlist.interfaces.cache_provider import ICacheProvider
from songlist.interfaces.music_platform_provider import IMusicPlatformProvider, SongRecord
from songlist.models.playlist import PlaylistMetadata, TrackId
from songlist.services.playlist_service import PlaylistService
from songlist.services.song_resolver import SongResolver
from songlist.utils.errors import CacheError, RemoteFetchError

# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeCache(ICacheProvider):
    """Dict-backed cache that records calls and can be told to fail."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.fail_reads = False
        self.fail_writes = False
        self.mget_calls: list[list[str]] = []
        self.mset_calls: list[dict[str, str]] = []

    async def mget(self, keys: Sequence[str]) -> list[str | None]:
        self.mget_calls.append(list(keys))
        if self.fail_reads:
            raise CacheError("cache down", provider_name="fake")
        return [self.data.get(key) for key in keys]

    async def mset(self, entries: Mapping[str, str], ttl: int | None = None) -> None:
        self.mset_calls.append(dict(entries))
        if self.fail_writes:
            raise CacheError("cache down", provider_name="fake")
        self.data.update(entries)

    def get_provider_name(self) -> str:
        return "fake"


class FakeMusicPlatform(IMusicPlatformProvider):
    """Music platform serving a fixed catalogue.

    ``songs`` maps song id to ``(title, artists)``.  Ids missing from the
    catalogue are silently left out of song-detail responses, as the real
    API does.  ``fail_on_chunk`` makes the Nth song-detail call (0-based)
    raise :class:`RemoteFetchError`.
    """

    def __init__(
        self,
        track_ids: list[int],
        songs: dict[int, tuple[str, list[str]]],
        name: str = "Test Playlist",
        track_count: int | None = None,
    ) -> None:
        self.track_ids = track_ids
        self.songs = songs
        self.name = name
        self.track_count = len(track_ids) if track_count is None else track_count
        self.fail_on_chunk: int | None = None
        self.playlist_error: Exception | None = None
        self.chunk_delay = 0.0
        self.playlist_calls: list[str] = []
        self.song_calls: list[list[int]] = []

    async def fetch_playlist(self, playlist_id: str) -> PlaylistMetadata:
        self.playlist_calls.append(playlist_id)
        if self.playlist_error is not None:
            raise self.playlist_error
        return PlaylistMetadata(
            playlist_id=playlist_id,
            name=self.name,
            track_ids=[TrackId(id=tid, position=pos) for pos, tid in enumerate(self.track_ids)],
            track_count=self.track_count,
        )

    async def fetch_songs(self, song_ids: Sequence[int]) -> list[SongRecord]:
        call_index = len(self.song_calls)
        self.song_calls.append(list(song_ids))
        if self.chunk_delay:
            await asyncio.sleep(self.chunk_delay)
        if self.fail_on_chunk == call_index:
            raise RemoteFetchError("song detail failed", provider_name="fake")
        return [
            SongRecord(id=sid, name=self.songs[sid][0], artists=tuple(self.songs[sid][1]))
            for sid in song_ids
            if sid in self.songs
        ]

    def get_provider_name(self) -> str:
        return "fake"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def worked_example_platform() -> FakeMusicPlatform:
    """Playlist [101, 102, 103] whose songs resolve to B - Y and C - Z remotely."""
    return FakeMusicPlatform(
        track_ids=[101, 102, 103],
        songs={
            101: ("A", ["X"]),
            102: ("B", ["Y"]),
            103: ("C", ["Z"]),
        },
    )


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


def make_service(
    platform: FakeMusicPlatform,
    cache: ICacheProvider,
    chunk_size: int = 500,
) -> PlaylistService:
    """Wire a PlaylistService around the given fakes."""
    resolver = SongResolver(provider=platform, chunk_size=chunk_size)
    return PlaylistService(provider=platform, cache=cache, resolver=resolver)
