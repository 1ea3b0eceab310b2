"""Timeout combinators

Combinators for execution time limiting."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable

from kungfu import Error, Result

from .._errors import TimeoutError
from .._helpers import MISSING, const
from ..io import IO, Interp, WithTimeout

log = logging.getLogger(__name__)


async def run_with_deadline[T, E](
    interp: Interp[T, E],
    *,
    seconds: float,
    on_timeout: Callable[[asyncio.TimeoutError], E],
) -> Result[T, E]:
    """
    Await interp() with a deadline.

    On expiry the in-flight evaluation is cancelled (it sees CancelledError,
    so its cleanups run) and on_timeout converts the signal into an error.
    A TimeoutError raised by interp itself is not ours and propagates.
    """
    deadline = asyncio.timeout(seconds)
    try:
        async with deadline:
            return await interp()
    except asyncio.TimeoutError as exc:
        if not deadline.expired():
            raise
        log.debug("Deadline of %ss elapsed, evaluation cancelled", seconds)
        return Error(on_timeout(exc))


def timeout[T, E](
    io: IO[T, E],
    *,
    seconds: float,
    error: typing.Any = MISSING,
    on_timeout: Callable[[asyncio.TimeoutError], typing.Any] | None = None,
) -> IO[T, typing.Any]:
    """
    Fail if io takes longer than seconds.

    - error=...: fixed error value on timeout
    - on_timeout=...: build the error from the asyncio timeout signal
    - neither: lazyio.TimeoutError(seconds)
    """
    if seconds < 0.0:
        raise ValueError("timeout(): seconds must be >= 0")
    if error is not MISSING and on_timeout is not None:
        raise ValueError("timeout(): provide either 'error' or 'on_timeout', not both")

    if on_timeout is None:
        if error is MISSING:
            on_timeout = lambda _: TimeoutError(seconds)  # noqa: E731
        else:
            on_timeout = const(error)
    return WithTimeout(io, seconds, on_timeout)


__all__ = ("run_with_deadline", "timeout")
