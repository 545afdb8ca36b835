"""Music platform providers."""

from songlist.providers.music.netease_provider import NetEaseProvider

__all__ = ["NetEaseProvider"]
