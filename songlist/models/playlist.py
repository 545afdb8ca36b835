"""Domain models for playlist resolution.

Defines Pydantic v2 models for the data that flows through the cache-aside
pipeline.  All models use frozen config to enforce immutability.

Flow:
    - PlaylistMetadata  ← built by the music platform provider from the
                          playlist-detail response
    - TrackId           ← one per source track, carries its position
    - ResolvedSong      ← a TrackId bound to its "Title - Artist" string
    - PlaylistResolution← what PlaylistService.resolve_playlist returns
    - SongList          ← the caller-facing shape served by the API / CLI
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TrackId(BaseModel):
    """A song identifier plus its position in the source playlist.

    Position defines the final output order.  The same ``id`` appearing
    twice in one playlist yields two TrackIds with different positions.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    position: int = Field(ge=0)


class PlaylistMetadata(BaseModel):
    """Playlist name, ordered track ids and the declared song count.

    ``track_count`` is what the remote claims the playlist holds; it can
    exceed ``len(track_ids)`` and is reported as-is, never enforced.
    """

    model_config = ConfigDict(frozen=True)

    playlist_id: str
    name: str
    track_ids: list[TrackId] = Field(default_factory=list)
    track_count: int = 0


class ResolvedSong(BaseModel):
    """A track bound to its display string."""

    model_config = ConfigDict(frozen=True)

    track: TrackId
    display: str


class PlaylistResolution(BaseModel):
    """Result of one resolution: metadata plus songs in source order.

    ``cache_hits`` and ``fetched`` count how many songs came from the cache
    and from the remote respectively.  Tracks the remote failed to return
    are absent from ``songs``.
    """

    model_config = ConfigDict(frozen=True)

    metadata: PlaylistMetadata
    songs: list[ResolvedSong] = Field(default_factory=list)
    cache_hits: int = 0
    fetched: int = 0

    def to_song_list(self) -> SongList:
        """Project onto the caller-facing :class:`SongList`."""
        return SongList(
            name=self.metadata.name,
            songs=[song.display for song in self.songs],
            songs_count=self.metadata.track_count,
        )


class SongList(BaseModel):
    """Playlist name, ordered display strings and declared song count."""

    model_config = ConfigDict(frozen=True)

    name: str
    songs: list[str] = Field(default_factory=list)
    songs_count: int = 0
