"""Filter combinators"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Predicate
from ..io import IO, Failed, Succeeded


def filter_or_fail[T, E](
    io: IO[T, E],
    *,
    predicate: Predicate[T],
    otherwise: Callable[[T], E],
) -> IO[T, E]:
    """Turn Ok into Error(otherwise(value)) if value fails predicate."""

    def check(value: T) -> IO[T, E]:
        if predicate(value):
            return Succeeded(value)
        return Failed(otherwise(value))

    return io.flat_map(check)


__all__ = ("filter_or_fail",)
