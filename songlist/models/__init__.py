"""songlist domain and wire models."""

from songlist.models.playlist import (
    PlaylistMetadata,
    PlaylistResolution,
    ResolvedSong,
    SongList,
    TrackId,
)

__all__ = [
    "PlaylistMetadata",
    "PlaylistResolution",
    "ResolvedSong",
    "SongList",
    "TrackId",
]
