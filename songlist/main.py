"""songlist FastAPI application entry point.

Wires the cache, the NetEase provider, the song resolver and the playlist
service together and exposes them over HTTP.  ``build_components`` is also
used by the CLI, which runs the same service without the web server.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from songlist import __version__
from songlist.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from songlist.api.routes import router as api_router
from songlist.config.settings import Settings
from songlist.interfaces.cache_provider import ICacheProvider
from songlist.providers.cache.memory_cache import MemoryCacheProvider
from songlist.providers.cache.redis_cache import RedisCacheProvider
from songlist.providers.music.netease_provider import NetEaseProvider
from songlist.services.playlist_service import PlaylistService
from songlist.services.song_resolver import SongResolver
from songlist.utils.errors import ConfigurationError
from songlist.utils.logging import configure_logging, get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Component construction
# ---------------------------------------------------------------------------


def build_cache(app_settings: Settings) -> ICacheProvider:
    """Return the cache provider selected by ``CACHE_BACKEND``."""
    backend = app_settings.cache_backend.strip().lower()
    if backend == "memory":
        return MemoryCacheProvider(
            max_size=app_settings.cache_max_size,
            ttl=app_settings.cache_ttl,
        )
    if backend == "redis":
        return RedisCacheProvider.from_url(
            app_settings.redis_url,
            timeout=app_settings.redis_timeout,
            default_ttl=app_settings.cache_ttl,
        )
    raise ConfigurationError(f"Unknown cache backend: {app_settings.cache_backend!r}")


def build_components(app_settings: Settings) -> dict[str, Any]:
    """Construct every provider and service for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    The caller owns ``http_client`` and ``cache`` and must close them.
    """
    cache = build_cache(app_settings)
    http_client = httpx.AsyncClient(timeout=app_settings.http_timeout)
    provider = NetEaseProvider(http_client=http_client, settings=app_settings)
    resolver = SongResolver(
        provider=provider,
        chunk_size=app_settings.chunk_size,
        max_concurrent_chunks=app_settings.max_concurrent_chunks,
    )
    playlist_service = PlaylistService(
        provider=provider,
        cache=cache,
        resolver=resolver,
        cache_namespace=app_settings.cache_namespace,
        cache_ttl=app_settings.cache_ttl or None,
    )
    return {
        "settings": app_settings,
        "http_client": http_client,
        "cache": cache,
        "provider": provider,
        "resolver": resolver,
        "playlist_service": playlist_service,
    }


async def close_components(components: dict[str, Any]) -> None:
    """Close the shared HTTP client and the cache backend."""
    http_client: httpx.AsyncClient = components["http_client"]
    await http_client.aclose()
    cache: ICacheProvider = components["cache"]
    await cache.close()


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    """Build all components on startup, close shared clients on shutdown."""
    app_settings: Settings = application.state.settings
    components = build_components(app_settings)

    for key, value in components.items():
        setattr(application.state, key, value)

    _logger.info(
        "app_startup",
        version=__version__,
        environment=app_settings.app_env,
        cache_backend=components["cache"].get_provider_name(),
        chunk_size=app_settings.chunk_size,
    )

    yield

    await close_components(components)
    _logger.info("app_shutdown", message="HTTP client and cache closed")


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    app_settings = app_settings or Settings()
    application = FastAPI(
        title="songlist API",
        version=__version__,
        description=(
            "Resolve a NetEase Cloud Music playlist link into an ordered list "
            "of 'Title - Artist' strings, caching per-song lookups."
        ),
        lifespan=_lifespan,
    )
    application.state.settings = app_settings

    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(application)

    application.include_router(api_router)
    return application


def main() -> None:
    """Run the API server with uvicorn."""
    app_settings = Settings()
    configure_logging(
        log_level=app_settings.log_level,
        json_output=(app_settings.app_env == "production"),
    )
    uvicorn.run(
        create_app(app_settings),
        host=app_settings.app_host,
        port=app_settings.app_port,
    )


if __name__ == "__main__":
    main()
