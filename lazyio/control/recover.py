"""Recover combinators"""

from __future__ import annotations

from collections.abc import Callable

from .._types import UIO
from ..io import IO, FlatMapError, Succeeded


def recover[T, E](
    io: IO[T, E],
    handler: Callable[[E], IO[T, E]],
) -> IO[T, E]:
    """On Error, run the IO produced by handler. Ok passes through."""
    return FlatMapError(io, handler)


def recover_with[T, E](
    io: IO[T, E],
    handler: Callable[[E], T],
) -> UIO[T]:
    """Turn any Error into Ok using recovery function."""
    return FlatMapError(io, lambda e: Succeeded(handler(e)))


def or_succeed[T, E](io: IO[T, E], *, default: T) -> UIO[T]:
    """Turn any Error into Ok with fallback value."""
    return FlatMapError(io, lambda _: Succeeded(default))


__all__ = ("or_succeed", "recover", "recover_with")
