"""Abstract base class for cache service providers.

Defines the bulk key-value contract the playlist service uses to avoid
repeated song-detail lookups.  Implementations may use an in-memory dict,
Redis, or any other storage backend; the backend can be swapped without
touching business logic.

A miss is represented by ``None`` in the returned list, never by an
exception.  Backend failures are raised as
:class:`~songlist.utils.errors.CacheError`; callers decide whether that is
fatal (the playlist service treats it as a full miss).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence


class ICacheProvider(ABC):
    """Contract for bulk key-value cache services.

    All operations are async to allow for network-backed stores (e.g. Redis)
    without blocking the event loop.
    """

    @abstractmethod
    async def mget(self, keys: Sequence[str]) -> list[str | None]:
        """Retrieve the values stored under *keys*.

        Parameters
        ----------
        keys:
            Cache keys to look up.

        Returns
        -------
        list[str | None]
            One entry per key, in the same order; ``None`` for a miss.

        Raises
        ------
        songlist.utils.errors.CacheError
            If the backing store cannot be reached.
        """

    @abstractmethod
    async def mset(self, entries: Mapping[str, str], ttl: int | None = None) -> None:
        """Store every ``key -> value`` pair in *entries*.

        Parameters
        ----------
        entries:
            Values to store, keyed by cache key.
        ttl:
            Time-to-live in seconds.  ``None`` or ``0`` means the entry does
            not expire automatically (or uses the backend default).
            Backends with a uniform expiry policy, such as the in-memory
            cache, may ignore it.

        Raises
        ------
        songlist.utils.errors.CacheError
            If the backing store cannot be reached.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short backend identifier, e.g. ``"memory"``."""

    async def close(self) -> None:  # noqa: B027
        """Release backend resources.  No-op by default."""
