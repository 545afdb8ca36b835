"""Abstract base class for music platform providers.

Defines the two remote calls the playlist service depends on: playlist
detail (ordered track ids) and batched song detail (title and artists).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from songlist.models.playlist import PlaylistMetadata


@dataclass(frozen=True)
class SongRecord:
    """One song as returned by a song-detail lookup.

    Attributes
    ----------
    id:
        Platform song id, matching :attr:`TrackId.id`.
    name:
        Raw title, before qualifier stripping.
    artists:
        Artist display names in credit order.
    """

    id: int
    name: str
    artists: tuple[str, ...] = field(default_factory=tuple)


class IMusicPlatformProvider(ABC):
    """Contract for a remote music platform."""

    @abstractmethod
    async def fetch_playlist(self, playlist_id: str) -> PlaylistMetadata:
        """Fetch name, ordered track ids and declared count of a playlist.

        Raises
        ------
        songlist.utils.errors.AccessDeniedError
            If the platform refuses access to the playlist.
        songlist.utils.errors.RemoteFetchError
            On transport failure or an unparseable response.
        """

    @abstractmethod
    async def fetch_songs(self, song_ids: Sequence[int]) -> list[SongRecord]:
        """Fetch song details for *song_ids* in a single request.

        Songs the platform does not know are simply absent from the result.

        Raises
        ------
        songlist.utils.errors.RemoteFetchError
            On transport failure or an unparseable response.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the provider identifier, e.g. ``"netease"``."""
