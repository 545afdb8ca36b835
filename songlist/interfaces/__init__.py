"""Abstract interfaces for the external services songlist depends on.

    Interface               →  Concrete implementations (songlist/providers/)
    ──────────────────────────────────────────────────────────────────────
    ICacheProvider          →  MemoryCacheProvider, RedisCacheProvider
    IMusicPlatformProvider  →  NetEaseProvider
"""

from songlist.interfaces.cache_provider import ICacheProvider
from songlist.interfaces.music_platform_provider import IMusicPlatformProvider, SongRecord

__all__ = ["ICacheProvider", "IMusicPlatformProvider", "SongRecord"]
