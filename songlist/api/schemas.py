"""Pydantic request/response schemas for the songlist HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SongListRequest(BaseModel):
    """Playlist link (or bare id) to resolve."""

    url: str = Field(..., min_length=1, max_length=2048)


class SongListResponse(BaseModel):
    """Resolved playlist: name, ordered display strings, declared count."""

    name: str
    songs: list[str]
    songs_count: int


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    cache_backend: str


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str | None = None
