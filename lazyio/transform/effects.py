"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the computation result."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..io import IO, EffectTotal, Failed


def for_each[T, E](
    io: IO[T, E],
    effect: Callable[[T], typing.Any],
) -> IO[T, E]:
    """
    On success call effect(value) and pass the value through.

    effect may be sync or async; its return value is ignored. It must not
    raise: an exception from it is a defect and propagates.
    """
    return io.flat_map(lambda t: EffectTotal(lambda: effect(t)).as_(t))


def tap[T, E](
    io: IO[T, E],
    f: Callable[[T], IO[typing.Any, typing.Any]],
) -> IO[T, E]:
    """Peek at the success by running f(value). Its result, failure included, is ignored."""
    return io.flat_map(lambda t: f(t).attempt().as_(t))


def tap_error[T, E](
    io: IO[T, E],
    f: Callable[[E], IO[typing.Any, typing.Any]],
) -> IO[T, E]:
    """Peek at the failure by running f(error). Its result, failure included, is ignored."""
    return io.flat_map_error(lambda e: f(e).attempt().flat_map(lambda _: Failed(e)))


__all__ = ("for_each", "tap", "tap_error")
