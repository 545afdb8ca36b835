"""NetEase Cloud Music provider using the public web API.

Two endpoints are used:

* ``/api/v6/playlist/detail`` -- form body ``id=<playlist id>``; returns the
  playlist name, the *full* ordered list of track ids and the declared
  track count.  Private playlists come back with HTTP 200 and a body-level
  ``code`` of 401, which must be checked explicitly.
* ``/api/v3/song/detail`` -- form body ``c=[{"id": 1}, ...]``; returns title
  and artists for up to 500 songs per call.

Follows the adapter pattern: injected ``httpx.AsyncClient``, typed wire
models, failures mapped onto the songlist error hierarchy.  No retries.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from songlist.config.settings import Settings
from songlist.interfaces.music_platform_provider import IMusicPlatformProvider, SongRecord
from songlist.models.netease import (
    ACCESS_DENIED_CODE,
    NetEasePlaylistResponse,
    NetEaseSongsResponse,
)
from songlist.models.playlist import PlaylistMetadata, TrackId
from songlist.utils.errors import AccessDeniedError, RemoteFetchError
from songlist.utils.logging import get_logger

_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Referer": "https://music.163.com/",
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/121.0.0.0 Safari/537.36"
    ),
}


class NetEaseProvider(IMusicPlatformProvider):
    """Music platform provider for NetEase Cloud Music.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient`` for testability and connection
        pooling.  Request timeouts are taken from the client.
    settings:
        Application settings holding the endpoint URLs.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self._playlist_url = settings.netease_playlist_url
        self._song_url = settings.netease_song_url
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _post(self, url: str, data: dict[str, str]) -> bytes:
        """POST a form body and return the raw response bytes."""
        try:
            response = await self._http.post(url, data=data, headers=_HEADERS)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self._logger.error("netease_request_failed", url=url, error=str(exc))
            raise RemoteFetchError(
                message=f"Request to {url} failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        return response.content

    def _parse_error(self, what: str, exc: Exception) -> RemoteFetchError:
        self._logger.error("netease_unmarshal_failed", what=what, error=str(exc))
        return RemoteFetchError(
            message=f"Malformed {what} response: {exc}",
            provider_name=self.get_provider_name(),
        )

    # ------------------------------------------------------------------
    # IMusicPlatformProvider implementation
    # ------------------------------------------------------------------

    async def fetch_playlist(self, playlist_id: str) -> PlaylistMetadata:
        """Fetch playlist detail for *playlist_id*."""
        body = await self._post(self._playlist_url, {"id": playlist_id})
        try:
            parsed = NetEasePlaylistResponse.model_validate_json(body)
        except ValidationError as exc:
            raise self._parse_error("playlist detail", exc) from exc

        if parsed.code == ACCESS_DENIED_CODE:
            self._logger.error("netease_access_denied", playlist_id=playlist_id)
            raise AccessDeniedError(provider_name=self.get_provider_name())

        if parsed.playlist is None:
            raise RemoteFetchError(
                message=f"Playlist detail for {playlist_id} has no playlist (code {parsed.code})",
                provider_name=self.get_provider_name(),
            )

        playlist = parsed.playlist
        metadata = PlaylistMetadata(
            playlist_id=playlist_id,
            name=playlist.name,
            track_ids=[
                TrackId(id=ref.id, position=pos) for pos, ref in enumerate(playlist.track_ids)
            ],
            track_count=playlist.track_count,
        )
        self._logger.debug(
            "netease_playlist_fetched",
            playlist_id=playlist_id,
            tracks=len(metadata.track_ids),
            declared=metadata.track_count,
        )
        return metadata

    async def fetch_songs(self, song_ids: Sequence[int]) -> list[SongRecord]:
        """Fetch title and artists for *song_ids* in one request."""
        payload = json.dumps([{"id": song_id} for song_id in song_ids], separators=(",", ":"))
        body = await self._post(self._song_url, {"c": payload})
        try:
            parsed = NetEaseSongsResponse.model_validate_json(body)
        except ValidationError as exc:
            raise self._parse_error("song detail", exc) from exc

        return [
            SongRecord(
                id=song.id,
                name=song.name,
                artists=tuple(artist.name for artist in song.artists),
            )
            for song in parsed.songs
        ]

    def get_provider_name(self) -> str:
        return "netease"
