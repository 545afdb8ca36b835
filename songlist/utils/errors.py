"""Custom exception hierarchy for songlist.

All application exceptions inherit from :class:`SongListError`, which
carries an optional ``provider_name`` so error handlers can identify which
external service (e.g. "netease", "redis") caused the failure.

    SongListError  (base -- catch-all for any songlist error)
    +-- InvalidInputError        (playlist reference could not be parsed)
    |   +-- InvalidLinkError     (no playlist id found in a link)
    +-- AccessDeniedError        (remote refused access to the playlist)
    +-- RemoteFetchError         (transport / deserialization / chunk failure)
    +-- CacheError               (cache backend failure, never user-facing)
    +-- ConfigurationError       (startup / invalid config)

The API layer maps each class to an HTTP status; the playlist service
downgrades ``CacheError`` to a cache miss and never lets it escape.
"""


class SongListError(Exception):
    """Base exception for all songlist errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which external service triggered the
    error.  ``__str__`` prefixes the provider name in brackets for
    structured log output, e.g. ``[netease] Song detail request failed``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

class InvalidInputError(SongListError):
    """Raised when a playlist identifier cannot be derived from the input."""

    def __init__(
        self,
        message: str = "Invalid playlist reference",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidLinkError(InvalidInputError):
    """Raised when a link contains no recognisable playlist id."""

    def __init__(
        self,
        message: str = "No playlist id found in link",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Remote service errors
# ---------------------------------------------------------------------------

class AccessDeniedError(SongListError):
    """Raised when the remote service explicitly denies access to a playlist.

    Distinct from :class:`RemoteFetchError`: the request succeeded but the
    response body carried an authorization failure code.  Not retried.
    """

    def __init__(
        self,
        message: str = "Sorry, you do not have permission to access this playlist",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class RemoteFetchError(SongListError):
    """Raised on transport or deserialization failure from a remote endpoint.

    Also raised when any chunk of a batch song lookup fails, in which case
    the whole batch is discarded.
    """

    def __init__(
        self,
        message: str = "Remote request failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Infrastructure errors
# ---------------------------------------------------------------------------

class CacheError(SongListError):
    """Raised by cache providers when the backing store fails."""

    def __init__(
        self,
        message: str = "Cache operation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(SongListError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
