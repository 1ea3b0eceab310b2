"""
Подъем значений в IO.

Functions turning plain values, thunks, Result, Optional and
exception-based code into IO.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._types import FIO, Task, Thunk, UIO
from ..io import IO, Effect, EffectTotal, FailWith, Failed, SucceedWith, Succeeded


def succeed[T](value: T) -> UIO[T]:
    """
    Wrap a strict value as a successful IO.

    Example:
        import lazyio as lio

        user = lio.succeed(User(id=42))
        result = await user  # Ok(User(id=42))
    """
    return Succeeded(value)


# Classic FP name for succeed
pure = succeed


def succeed_with[T](thunk: Callable[[], T]) -> UIO[T]:
    """
    Wrap a thunk as a successful IO.

    NOTE: thunk is called once per evaluation, never at construction.
    """
    return SucceedWith(thunk)


def fail[E](error: E) -> FIO[E]:
    """
    Wrap a strict value as a failed IO. Dual of succeed().

    NOTE: Return type IO[Never, E] means "never produces a value".
    """
    return Failed(error)


def fail_with[E](thunk: Callable[[], E]) -> FIO[E]:
    """Wrap a thunk as a failed IO. thunk is called once per evaluation."""
    return FailWith(thunk)


def unit() -> UIO[None]:
    """IO succeeding with None."""
    return Succeeded(None)


def effect[T](fn: Thunk[T]) -> Task[T]:
    """
    Wrap a potentially raising function as a lazy IO.

    fn may be sync or async. Any Exception it raises becomes the error.

    Example:
        import lazyio as lio
        import httpx

        def fetch(url: str) -> lio.Task[httpx.Response]:
            return lio.effect(lambda: client.get(url))
    """
    return Effect(fn)


def effect_total[T](fn: Thunk[T]) -> UIO[T]:
    """
    Wrap an infallible function as a lazy IO.

    NOTE: if fn raises anyway, the exception is not captured.
    """
    return EffectTotal(fn)


def from_result[T, E](value: Result[T, E]) -> IO[T, E]:
    """
    Lift an already computed Result into IO.

    **When to use:** bridging a sync function returning Result into an IO chain.
    """
    match value:
        case Ok(v):
            return Succeeded(v)
        case Error(e):
            return Failed(e)
    raise TypeError(f"from_result(): expected Ok or Error, got {type(value).__name__}")


def from_optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> IO[T, E]:
    """
    Convert Optional to IO. None becomes Error(error()).

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return FailWith(error)
    return Succeeded(value)


def catching[T, E](
    thunk: Thunk[T],
    *,
    on_error: Callable[[Exception], E],
) -> IO[T, E]:
    """Run thunk, convert a raised exception with on_error."""
    return Effect(thunk).map_error(on_error)


__all__ = (
    "catching",
    "effect",
    "effect_total",
    "fail",
    "fail_with",
    "from_optional",
    "from_result",
    "pure",
    "succeed",
    "succeed_with",
    "unit",
)
