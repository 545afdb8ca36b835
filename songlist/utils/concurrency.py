"""Shared concurrency primitives for batch song lookups.

Two helpers are exposed:

1. **chunked** -- Positional split of a sequence into consecutive slices of
   at most ``size`` items.  Used to keep each remote request under the
   song-detail endpoint's per-call id limit.

2. **gather_fail_fast** -- Run awaitables concurrently and return their
   results in input order, or raise the first failure.  Unlike
   ``asyncio.gather`` the siblings of a failed task are cancelled and
   awaited before the exception propagates, so no task outlives the call.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Sequence, TypeVar

_T = TypeVar("_T")


def chunked(items: Sequence[_T], size: int) -> list[list[_T]]:
    """Split *items* into consecutive chunks of at most *size* elements."""
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


async def gather_fail_fast(
    coros: list[Awaitable[_T]],
    semaphore: asyncio.Semaphore | None = None,
) -> list[_T]:
    """Run awaitables concurrently; raise the first error, cancelling the rest.

    Parameters
    ----------
    coros:
        Awaitable objects to execute concurrently.
    semaphore:
        Optional semaphore bounding how many awaitables run at once.  When
        ``None`` every awaitable starts immediately.

    Returns
    -------
    list[_T]
        Results in the same order as the input awaitables.

    Raises
    ------
    BaseException
        When one or more tasks have failed by the time the first failure is
        observed, the exception of the earliest of them in input order.
        Remaining tasks are cancelled and drained before it is re-raised.
    """
    if not coros:
        return []

    async def _wrapped(coro: Awaitable[_T]) -> _T:
        if semaphore is None:
            return await coro
        try:
            await semaphore.acquire()
        except asyncio.CancelledError:
            # Cancelled while queued: the coroutine never started.
            close = getattr(coro, "close", None)
            if close is not None:
                close()
            raise
        try:
            return await coro
        finally:
            semaphore.release()

    tasks = [asyncio.ensure_future(_wrapped(c)) for c in coros]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    failed = [t for t in tasks if t in done and not t.cancelled() and t.exception() is not None]
    if failed:
        for task in pending:
            task.cancel()
        # Drain cancelled siblings so nothing keeps running after we return.
        await asyncio.gather(*pending, return_exceptions=True)
        # Retrieve every exception so asyncio does not warn about unread ones.
        for task in failed[1:]:
            task.exception()
        raise failed[0].exception()  # type: ignore[misc]

    return [t.result() for t in tasks]
