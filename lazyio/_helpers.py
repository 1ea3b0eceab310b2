"""Internal helpers for lazyio.

Common functions used across multiple combinator modules.
These are not part of the public API."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable


# Sentinel for "argument not given" where None is a legitimate value
MISSING: typing.Final[typing.Any] = object()


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def const[T](value: T) -> Callable[..., T]:
    """Function ignoring its arguments and returning value."""
    def fn(*_: typing.Any) -> T:
        return value
    return fn


async def resolve[T](fn: Callable[..., T | Awaitable[T]], *args: typing.Any) -> T:
    """
    Call fn and await the outcome if it is awaitable.

    Lets every user-supplied callable be either sync or async.
    """
    out = fn(*args)
    if inspect.isawaitable(out):
        return await out
    return typing.cast(T, out)


__all__ = (
    "MISSING",
    "identity",
    "const",
    "resolve",
)
