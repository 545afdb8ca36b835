"""Text normalization utilities for song titles.

Remote catalogues append qualifier groups to titles -- ``(Live)``,
``（伴奏）``, ``[Remastered 2011]``, ``【官方版】`` -- which make the
"Title - Artist" strings noisy and hurt matching when the list is imported
into another service.  :func:`standard_song_name` strips them.
"""

import re

# Half- and full-width round brackets, square brackets and CJK lenticular
# brackets.  Each pass removes innermost groups only, so "A (x) B (y)" keeps
# "B"; nested groups need repeated passes.
_QUALIFIER_RE = re.compile(r"\s*(?:\([^()]*\)|（[^（）]*）|\[[^\[\]]*\]|【[^【】]*】)")
_WHITESPACE_RE = re.compile(r"\s+")


def standard_song_name(name: str) -> str:
    """Strip bracketed qualifiers and excess whitespace from a song title.

    Args:
        name: Raw title as returned by the remote API.

    Returns:
        The cleaned title.  If stripping would leave nothing (e.g. a title
        that is entirely a bracketed group), the trimmed original is kept.
    """
    stripped, count = _QUALIFIER_RE.subn("", name)
    while count:
        stripped, count = _QUALIFIER_RE.subn("", stripped)
    stripped = _WHITESPACE_RE.sub(" ", stripped).strip()
    if not stripped:
        return _WHITESPACE_RE.sub(" ", name).strip()
    return stripped


def format_display_name(title: str, artists: list[str]) -> str:
    """Build the ``"Title - Artist1 / Artist2"`` display string."""
    return f"{standard_song_name(title)} - {' / '.join(artists)}"
