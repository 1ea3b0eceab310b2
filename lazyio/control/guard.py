"""
Guard combinators
=================

Conditional construction, coalescing into failure and error narrowing.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .._errors import RefinementError
from .._helpers import identity
from .._types import FIO
from ..io import IO, FailWith, Failed, SucceedWith

log = logging.getLogger(__name__)


def cond[T, E](
    predicate: bool | Callable[[], bool],
    success: Callable[[], T],
    error: Callable[[], E],
) -> IO[T, E]:
    """
    Succeed with success() when predicate holds, fail with error() otherwise.

    predicate may be a bool or a zero-arg callable; the callable, success and
    error are all evaluated when the IO runs, not when it is built.
    """
    check = predicate if callable(predicate) else (lambda: predicate)

    def branch(ok: bool) -> IO[T, E]:
        return SucceedWith(success) if ok else FailWith(error)

    return SucceedWith(check).flat_map(branch)


def coalesce[T, E](
    io: IO[T, E],
    if_success: Callable[[T], E] = identity,
) -> FIO[E]:
    """Coalesce into an IO that never succeeds, converting a success with if_success."""
    return io.flat_map(lambda t: Failed(if_success(t)))


def refine_or_die[E](io: IO[typing.Any, typing.Any], kind: type[E]) -> FIO[E]:
    """
    Narrow the error to kind.

    An error that is an instance of kind stays a failure. Any other error,
    and any success, is a defect: RefinementError is raised and no
    combinator turns it back into a typed failure.
    """

    def die(actual: typing.Any) -> typing.NoReturn:
        log.error("refine_or_die(): expected %s, got %r", kind.__qualname__, actual)
        raise RefinementError(kind, actual)

    def narrow(error: typing.Any) -> FIO[E]:
        if isinstance(error, kind):
            return Failed(error)
        die(error)

    return io.flat_map(die).flat_map_error(narrow)


__all__ = ("coalesce", "cond", "refine_or_die")
