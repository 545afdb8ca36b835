"""Cache-aside playlist resolution.

Architecture role: **Facade / Orchestrator**
--------------------------------------------
Turns a playlist link into its ordered "Title - Artist" strings while
keeping song-detail requests to a minimum:

1. extract the playlist id from the link,
2. fetch playlist detail (name, ordered track ids, declared count),
3. look every track up in the cache with one bulk read,
4. resolve only the misses via :class:`SongResolver`,
5. write the fresh entries back with one bulk write,
6. walk the source order and emit every track that has a display string.

The cache is never on the correctness path.  A failed read counts as a
full miss; a failed write is logged and dropped.  Remote failures
propagate: :class:`AccessDeniedError` and :class:`RemoteFetchError` from
the provider, :class:`RemoteFetchError` from the batch stage.
"""

from __future__ import annotations

import structlog

from songlist.interfaces.cache_provider import ICacheProvider
from songlist.interfaces.music_platform_provider import IMusicPlatformProvider
from songlist.models.playlist import (
    PlaylistMetadata,
    PlaylistResolution,
    ResolvedSong,
    SongList,
)
from songlist.services.song_resolver import SongResolver
from songlist.utils.link_parser import extract_playlist_id
from songlist.utils.logging import get_logger

DEFAULT_CACHE_NAMESPACE = "net"


def cache_key(song_id: int, namespace: str = DEFAULT_CACHE_NAMESPACE) -> str:
    """Return the cache key for *song_id*, e.g. ``"net:1901371647"``."""
    return f"{namespace}:{song_id}"


class PlaylistService:
    """Resolves playlists through the cache, the resolver and the provider.

    All collaborators are injected so tests can substitute fakes with
    controllable failure modes.
    """

    def __init__(
        self,
        provider: IMusicPlatformProvider,
        cache: ICacheProvider,
        resolver: SongResolver,
        cache_namespace: str = DEFAULT_CACHE_NAMESPACE,
        cache_ttl: int | None = None,
    ) -> None:
        self._provider = provider
        self._cache = cache
        self._resolver = resolver
        self._namespace = cache_namespace
        self._cache_ttl = cache_ttl
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # -- Public API -----------------------------------------------------------

    async def discover(self, link: str) -> SongList:
        """Resolve *link* and return name, display strings and declared count."""
        resolution = await self.resolve_playlist(link)
        return resolution.to_song_list()

    async def resolve_playlist(self, link: str) -> PlaylistResolution:
        """Resolve the playlist behind *link* into ordered songs.

        Raises
        ------
        InvalidLinkError
            If *link* carries no playlist id.
        AccessDeniedError
            If the platform refuses access to the playlist.
        RemoteFetchError
            On any playlist-detail or song-detail failure.
        """
        playlist_id = extract_playlist_id(link)
        log = self._logger.bind(playlist_id=playlist_id)

        metadata = await self._provider.fetch_playlist(playlist_id)
        track_ids = [track.id for track in metadata.track_ids]
        keys = [cache_key(song_id, self._namespace) for song_id in track_ids]

        cached = await self._read_cache(keys, log)

        resolved: dict[int, str] = {
            song_id: value for song_id, value in zip(track_ids, cached) if value is not None
        }
        # Each id is fetched at most once, even if it repeats in the playlist.
        misses = list(dict.fromkeys(song_id for song_id in track_ids if song_id not in resolved))
        cache_hits = len(resolved)

        fresh: dict[int, str] = {}
        if not misses:
            log.info("cache_fully_satisfied", songs=len(track_ids))
        else:
            fresh = await self._resolver.resolve_missing(misses)
            resolved.update(fresh)
            await self._write_cache(fresh, log)

        songs = self._materialize(metadata, resolved)
        omitted = len(metadata.track_ids) - len(songs)
        if omitted:
            log.warning("songs_missing_from_remote", omitted=omitted)

        log.info(
            "playlist_resolved",
            name=metadata.name,
            songs=len(songs),
            cache_hits=cache_hits,
            fetched=len(fresh),
        )
        return PlaylistResolution(
            metadata=metadata,
            songs=songs,
            cache_hits=cache_hits,
            fetched=len(fresh),
        )

    # -- Cache helpers --------------------------------------------------------

    async def _read_cache(
        self, keys: list[str], log: structlog.BoundLogger
    ) -> list[str | None]:
        """Bulk-read *keys*; any failure degrades to an all-miss result."""
        if not keys:
            return []
        try:
            values = await self._cache.mget(keys)
        except Exception as exc:  # noqa: BLE001
            log.warning("cache_read_failed", error=str(exc), error_type=type(exc).__name__)
            return [None] * len(keys)

        if len(values) != len(keys):
            log.warning("cache_read_length_mismatch", expected=len(keys), got=len(values))
            return [None] * len(keys)
        return values

    async def _write_cache(self, fresh: dict[int, str], log: structlog.BoundLogger) -> None:
        """Best-effort bulk write of newly resolved songs."""
        if not fresh:
            return
        entries = {cache_key(song_id, self._namespace): value for song_id, value in fresh.items()}
        try:
            await self._cache.mset(entries, ttl=self._cache_ttl)
        except Exception as exc:  # noqa: BLE001
            log.warning(
                "cache_write_failed",
                entries=len(entries),
                error=str(exc),
                error_type=type(exc).__name__,
            )

    @staticmethod
    def _materialize(metadata: PlaylistMetadata, resolved: dict[int, str]) -> list[ResolvedSong]:
        """Emit songs in source order, skipping tracks with no display string."""
        return [
            ResolvedSong(track=track, display=resolved[track.id])
            for track in metadata.track_ids
            if track.id in resolved
        ]
