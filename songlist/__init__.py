"""songlist — resolve music playlists into ordered "Title - Artist" lists.

Per-song lookups are cached so repeated and overlapping playlists cost as
few calls to the rate-limited remote API as possible.
"""

__version__ = "0.1.0"
