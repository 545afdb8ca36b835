"""Playlist id extraction from share links.

Handles the link shapes users paste from the NetEase Cloud Music apps and
web player::

    2075587
    https://music.163.com/#/playlist?id=2075587
    https://music.163.com/playlist?id=2075587&userid=123
    https://y.music.163.com/m/playlist?id=2075587&creatorId=1
    https://music.163.com/playlist/2075587/123/?userid=123

This is a pure parser: short links (``163cn.tv/xxxx``) need an HTTP
redirect to resolve and are rejected here.
"""

from __future__ import annotations

import re

from songlist.utils.errors import InvalidLinkError

_BARE_ID_RE = re.compile(r"^\d+$")
# ``id=`` must be a query parameter of a playlist page; ``userid=`` and song
# pages (``/song?id=``) don't match.
_QUERY_ID_RE = re.compile(r"playlist\?(?:[^#\s]*&)?id=(\d+)")
_PATH_ID_RE = re.compile(r"/playlist/(\d+)")


def extract_playlist_id(link: str) -> str:
    """Return the numeric playlist id contained in *link*.

    Raises
    ------
    InvalidLinkError
        If *link* is empty or carries no recognisable playlist id.
    """
    text = (link or "").strip()
    if not text:
        raise InvalidLinkError("Playlist link is empty")

    if _BARE_ID_RE.match(text):
        return text

    match = _QUERY_ID_RE.search(text) or _PATH_ID_RE.search(text)
    if match is None:
        raise InvalidLinkError(f"No playlist id found in link: {text}")
    return match.group(1)
