"""Wire models for the NetEase Cloud Music web API.

Only the fields the pipeline reads are declared; everything else in the
(very large) responses is ignored.  Field aliases map NetEase's camelCase
and abbreviated keys (``trackIds``, ``ar``) to readable names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Body-level ``code`` value NetEase returns for private playlists.
ACCESS_DENIED_CODE = 401


class NetEaseTrackRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int


class NetEasePlaylist(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    track_ids: list[NetEaseTrackRef] = Field(default_factory=list, alias="trackIds")
    track_count: int = Field(default=0, alias="trackCount")


class NetEasePlaylistResponse(BaseModel):
    """Response of ``/api/v6/playlist/detail``."""

    model_config = ConfigDict(extra="ignore")

    code: int = 200
    playlist: NetEasePlaylist | None = None


class NetEaseArtist(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class NetEaseSong(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: str = ""
    artists: list[NetEaseArtist] = Field(default_factory=list, alias="ar")


class NetEaseSongsResponse(BaseModel):
    """Response of ``/api/v3/song/detail``."""

    model_config = ConfigDict(extra="ignore")

    code: int = 200
    songs: list[NetEaseSong] = Field(default_factory=list)
