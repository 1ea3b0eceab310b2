"""Delay combinators"""

from __future__ import annotations

import asyncio

from .._types import UIO
from ..io import IO, EffectTotal


def sleep(seconds: float) -> UIO[None]:
    """IO that suspends for seconds, then succeeds with None."""
    if seconds < 0.0:
        raise ValueError("sleep(): seconds must be >= 0")
    return EffectTotal(lambda: asyncio.sleep(seconds))


def delay[T, E](
    io: IO[T, E],
    *,
    seconds: float,
) -> IO[T, E]:
    """Sleep before running."""
    if seconds == 0.0:
        return io
    return sleep(seconds).flat_map(lambda _: io)


__all__ = ("delay", "sleep")
