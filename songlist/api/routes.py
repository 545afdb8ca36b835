"""FastAPI routes for the songlist service.

# Endpoint              Method  Description
# ──────────────────────────────────────────────────────────────
# /api/v1/songlist      POST    Resolve a playlist link to songs
# /api/v1/health        GET     Health check + cache backend

Services are resolved from ``app.state`` (populated in ``main.py``) via
``Depends`` with the ``Annotated`` pattern, so tests can attach fakes to
a bare ``FastAPI()`` instance.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request

from songlist import __version__
from songlist.api.schemas import ErrorResponse, HealthResponse, SongListRequest, SongListResponse
from songlist.interfaces.cache_provider import ICacheProvider
from songlist.services.playlist_service import PlaylistService
from songlist.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter(prefix="/api/v1")


def _get_playlist_service(request: Request) -> PlaylistService:
    """Return the playlist service from application state."""
    return request.app.state.playlist_service


def _get_cache(request: Request) -> ICacheProvider:
    """Return the cache provider from application state."""
    return request.app.state.cache


PlaylistServiceDep = Annotated[PlaylistService, Depends(_get_playlist_service)]
CacheDep = Annotated[ICacheProvider, Depends(_get_cache)]


@router.post(
    "/songlist",
    response_model=SongListResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def resolve_songlist(body: SongListRequest, service: PlaylistServiceDep) -> SongListResponse:
    """Resolve a playlist link into ordered "Title - Artist" strings."""
    song_list = await service.discover(body.url)
    return SongListResponse(
        name=song_list.name,
        songs=song_list.songs,
        songs_count=song_list.songs_count,
    )


@router.get("/health", response_model=HealthResponse)
async def health(cache: CacheDep) -> HealthResponse:
    """Report liveness and which cache backend is in use."""
    return HealthResponse(
        status="ok",
        version=__version__,
        cache_backend=cache.get_provider_name(),
    )
