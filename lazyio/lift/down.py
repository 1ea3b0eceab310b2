"""
Опускание IO в значение.

Functions running an IO and extracting the outcome as Result or value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import UnwrapError
from .._types import ExecutionContext
from ..io import IO


async def to_result[T, E](io: IO[T, E]) -> Result[T, E]:
    """
    Run io and return Result.

    Example:
        result = await lio.down.to_result(lio.succeed(42))  # Ok(42)
    """
    return await io.run()


async def to_result_on[T, E](io: IO[T, E], context: ExecutionContext) -> Result[T, E]:
    """Run io on context and return Result."""
    return await io.run_on(context)


async def unsafe[T, E](io: IO[T, E]) -> T:
    """
    Run and unwrap, raises UnwrapError on Error.

    NOTE: Use only when you're certain of success or want to propagate errors.
    """
    match await io.run():
        case Ok(value):
            return value
        case Error(error):
            raise UnwrapError(error)
    raise AssertionError("unsafe(): unreachable")


async def or_else[T, E](io: IO[T, E], default: T) -> T:
    """Run and return value or default."""
    match await io.run():
        case Ok(value):
            return value
        case Error(_):
            return default
    raise AssertionError("or_else(): unreachable")


__all__ = (
    "or_else",
    "to_result",
    "to_result_on",
    "unsafe",
)
