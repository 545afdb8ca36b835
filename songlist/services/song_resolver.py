"""Batch song resolver: fetch display strings for uncached song ids.

The song-detail endpoint takes at most 500 ids per request, so the missing
ids are split positionally into chunks and one request per chunk is
dispatched concurrently.  Each chunk task builds its own
``{id: "Title - Artist1 / Artist2"}`` dict; the dicts are merged at the
single join point, so no mutable state is shared between tasks.

Failure is all-or-nothing: the first chunk error cancels the chunks still
in flight and the whole call raises :class:`RemoteFetchError`.  Callers
never see a partially resolved batch.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import structlog

from songlist.interfaces.music_platform_provider import IMusicPlatformProvider
from songlist.utils.concurrency import chunked, gather_fail_fast
from songlist.utils.errors import RemoteFetchError
from songlist.utils.logging import get_logger
from songlist.utils.text_normalizer import format_display_name

DEFAULT_CHUNK_SIZE = 500


class SongResolver:
    """Resolves song ids to display strings via chunked parallel requests.

    Parameters
    ----------
    provider:
        Music platform used for song-detail lookups.
    chunk_size:
        Maximum ids per request.
    max_concurrent_chunks:
        Upper bound on simultaneously in-flight requests; ``0`` launches
        every chunk at once.
    """

    def __init__(
        self,
        provider: IMusicPlatformProvider,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_concurrent_chunks: int = 0,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self._provider = provider
        self._chunk_size = chunk_size
        self._max_concurrent_chunks = max_concurrent_chunks
        self._logger: structlog.BoundLogger = get_logger(__name__)

    async def resolve_missing(self, song_ids: Sequence[int]) -> dict[int, str]:
        """Fetch display strings for every id in *song_ids*.

        Parameters
        ----------
        song_ids:
            Ids not found in the cache, in source order.

        Returns
        -------
        dict[int, str]
            ``{song id: display string}`` for every song the remote
            returned.  Ids the remote omitted are absent.

        Raises
        ------
        RemoteFetchError
            If any chunk request fails.
        """
        if not song_ids:
            return {}

        chunks = chunked(list(song_ids), self._chunk_size)
        semaphore = (
            asyncio.Semaphore(self._max_concurrent_chunks)
            if self._max_concurrent_chunks > 0
            else None
        )
        self._logger.info(
            "batch_resolve_started",
            songs=len(song_ids),
            chunks=len(chunks),
        )

        try:
            partials = await gather_fail_fast(
                [self._resolve_chunk(index, chunk) for index, chunk in enumerate(chunks)],
                semaphore=semaphore,
            )
        except RemoteFetchError as exc:
            self._logger.error("batch_resolve_failed", error=str(exc))
            raise
        except Exception as exc:
            self._logger.error("batch_resolve_failed", error=str(exc))
            raise RemoteFetchError(
                message=f"Batch song lookup failed: {exc}",
                provider_name=self._provider.get_provider_name(),
            ) from exc

        resolved: dict[int, str] = {}
        for partial in partials:
            resolved.update(partial)

        self._logger.info(
            "batch_resolve_complete",
            requested=len(song_ids),
            resolved=len(resolved),
        )
        return resolved

    async def _resolve_chunk(self, index: int, chunk: list[int]) -> dict[int, str]:
        """Fetch one chunk and format each returned song."""
        records = await self._provider.fetch_songs(chunk)
        requested = set(chunk)
        result: dict[int, str] = {}
        for record in records:
            if record.id not in requested:
                continue
            result[record.id] = format_display_name(record.name, list(record.artists))

        self._logger.debug(
            "chunk_resolved",
            chunk=index,
            requested=len(chunk),
            returned=len(result),
        )
        return result
