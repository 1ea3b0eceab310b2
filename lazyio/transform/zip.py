"""
Zip combinators
===============

Sequential pairwise combine: left first, then right. For concurrent
evaluation use par().
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..io import IO, Zip


def zip[T, U, V, E](
    first: IO[T, E],
    second: IO[U, E],
    f: Callable[[T, U], V],
) -> IO[V, E]:
    """Run first then second, combine both values. Left-biased on failure."""
    return Zip(first, second, f)


def zip_left[T, V, E](
    first: IO[T, E],
    second: IO[typing.Any, E],
    f: Callable[[T], V],
) -> IO[V, E]:
    """Run first then second, keep only the value of first."""
    return Zip(first, second, lambda t, _: f(t))


def zip_right[U, V, E](
    first: IO[typing.Any, E],
    second: IO[U, E],
    f: Callable[[U], V],
) -> IO[V, E]:
    """Run first then second, keep only the value of second."""
    return Zip(first, second, lambda _, u: f(u))


__all__ = ("zip", "zip_left", "zip_right")
