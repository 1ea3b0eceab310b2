"""
Bracket combinators
===================

Resource management: acquire → use → release (always, exactly once).
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, Ok, Result

from .._helpers import resolve
from .._types import Task, Thunk
from ..io import IO, Bracket, Failed

log = logging.getLogger(__name__)


async def run_bracket[R, U](
    acquire: Thunk[R],
    *,
    use: Callable[[R], U | Awaitable[U]],
    release: Callable[[R], typing.Any],
) -> Result[U, Exception]:
    """
    Run acquire, then use, then release.

    - acquire raises: Error(exc), neither use nor release is called
    - use returns: Ok(value)
    - use raises: Error(exc)

    release runs once on every exit path after a successful acquire,
    cancellation included. If release itself raises, the outcome of use
    still wins and the release failure is logged.
    """
    try:
        resource = await resolve(acquire)
    except Exception as exc:
        return Error(exc)

    try:
        return Ok(await resolve(use, resource))
    except Exception as exc:
        return Error(exc)
    finally:
        await _release(release, resource)


async def _release[R](release: Callable[[R], typing.Any], resource: R) -> None:
    try:
        await resolve(release, resource)
    except Exception:
        log.warning("Release of %r failed, keeping the outcome of use", resource, exc_info=True)


def bracket[R, U](
    acquire: Thunk[R],
    use: Callable[[R], U | Awaitable[U]],
    release: Callable[[R], typing.Any],
) -> Task[U]:
    """
    Acquire a resource, use it, with a guaranteed release.

    All three callables may be sync or async.
    """
    return Bracket(acquire, use, release)


def brace[T, E, A](
    io: IO[T, E],
    before: IO[A, E],
    after: Callable[[A], IO[typing.Any, E]],
) -> IO[T, E]:
    """
    Surround io with a before and after IO.

    - before fails: nothing else runs
    - io succeeds: after runs; its failure, if any, replaces the result
    - io fails: after still runs, its outcome is ignored, io's failure is kept
    """

    def around(a: A) -> IO[T, E]:
        def settle(outcome: Result[T, E]) -> IO[T, E]:
            match outcome:
                case Ok(value):
                    return after(a).as_(value)
                case Error(error):
                    return after(a).attempt().flat_map(lambda _: Failed(error))

        return io.attempt().flat_map(settle)

    return before.flat_map(around)


__all__ = ("bracket", "brace", "run_bracket")
