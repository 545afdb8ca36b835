"""Utility modules for songlist.

- **errors** -- Exception hierarchy rooted at SongListError.
- **logging** -- structlog setup: coloured console output in development,
  JSON in production.
- **concurrency** -- Positional chunking and a fail-fast concurrent gather.
- **text_normalizer** -- Song title cleanup and display-string formatting.
- **link_parser** -- Playlist id extraction from share links.
"""

from songlist.utils.concurrency import chunked, gather_fail_fast
from songlist.utils.errors import (
    AccessDeniedError,
    CacheError,
    ConfigurationError,
    InvalidInputError,
    InvalidLinkError,
    RemoteFetchError,
    SongListError,
)
from songlist.utils.link_parser import extract_playlist_id
from songlist.utils.logging import configure_logging, get_logger
from songlist.utils.text_normalizer import format_display_name, standard_song_name

__all__ = [
    "AccessDeniedError",
    "CacheError",
    "ConfigurationError",
    "InvalidInputError",
    "InvalidLinkError",
    "RemoteFetchError",
    "SongListError",
    "chunked",
    "configure_logging",
    "extract_playlist_id",
    "format_display_name",
    "gather_fail_fast",
    "get_logger",
    "standard_song_name",
]
