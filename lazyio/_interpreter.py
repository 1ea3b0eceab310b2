"""
Interpreter for IO nodes.

Walks a node tree and produces a single Result. Sequencing nodes (FlatMap,
MapError, FlatMapError) never recurse: they are pushed on an explicit
continuation stack, so chains and retries of any length run in constant
Python stack depth. Every other node kind is handled in exactly one case of
_step; the heavier ones (deadline, context switch, fan-out, bracket)
delegate to their combinator modules, which take plain thunks and know
nothing about nodes.
"""

from __future__ import annotations

import typing
from typing import assert_never

from kungfu import Error, Ok, Result

from ._helpers import resolve
from .concurrency.parallel import run_par
from .concurrency.race import run_race
from .context import run_on_context
from .control.bracket import run_bracket
from .io import (
    IO,
    Bracket,
    Effect,
    EffectTotal,
    FailWith,
    Failed,
    FlatMap,
    FlatMapError,
    IONode,
    Interp,
    MapError,
    Par,
    Race,
    SucceedWith,
    Succeeded,
    WithContext,
    WithTimeout,
    Zip,
)
from .time.timeout import run_with_deadline

# Pending continuation waiting for the outcome of its underlying node
type Frame = (
    FlatMap[typing.Any, typing.Any, typing.Any]
    | MapError[typing.Any, typing.Any, typing.Any]
    | FlatMapError[typing.Any, typing.Any, typing.Any]
)


async def evaluate[T, E](io: IO[T, E]) -> Result[T, E]:
    """Run io and return its Result. Every call is an independent evaluation."""
    node: IO[typing.Any, typing.Any] = io
    stack: list[Frame] = []

    while True:
        match node:
            case FlatMap(underlying, _) | MapError(underlying, _) | FlatMapError(underlying, _):
                stack.append(node)
                node = underlying
                continue

        result = await _step(node)

        following: IO[typing.Any, typing.Any] | None = None
        while stack and following is None:
            result, following = _resume(stack.pop(), result)

        if following is None:
            return result
        node = following


def _resume(
    frame: Frame,
    result: Result[typing.Any, typing.Any],
) -> tuple[Result[typing.Any, typing.Any], IO[typing.Any, typing.Any] | None]:
    """Feed result to frame: either a new result or the next node to run."""
    match frame, result:
        case FlatMap(_, f), Ok(value):
            return result, f(value)
        case MapError(_, f), Error(error):
            return Error(f(error)), None
        case FlatMapError(_, f), Error(error):
            return result, f(error)
        case _:
            return result, None


async def _step(io: IO[typing.Any, typing.Any]) -> Result[typing.Any, typing.Any]:
    node = typing.cast(IONode, io)

    match node:
        case Succeeded(value):
            return Ok(value)

        case SucceedWith(thunk):
            return Ok(thunk())

        case Failed(error):
            return Error(error)

        case FailWith(thunk):
            return Error(thunk())

        case Effect(fn):
            try:
                return Ok(await resolve(fn))
            except Exception as exc:
                return Error(exc)

        case EffectTotal(fn):
            return Ok(await resolve(fn))

        case WithTimeout(underlying, seconds, on_timeout):
            return await run_with_deadline(
                lambda: evaluate(underlying),
                seconds=seconds,
                on_timeout=on_timeout,
            )

        case FlatMap() | MapError() | FlatMapError():
            raise AssertionError("_step(): sequencing nodes are unwound by evaluate()")

        case WithContext(underlying, context):
            return await run_on_context(lambda: evaluate(underlying), context)

        case Zip(left, right, f):
            match await evaluate(left):
                case Error(error):
                    return Error(error)
                case Ok(t):
                    match await evaluate(right):
                        case Error(error):
                            return Error(error)
                        case Ok(u):
                            return Ok(f(t, u))

        case Bracket(acquire, use, release):
            return await run_bracket(acquire, use=use, release=release)

        case Par(nodes):
            return await run_par(*(_interp(n) for n in nodes))

        case Race(nodes):
            return await run_race(*(_interp(n) for n in nodes))

        case _ as unreachable:
            assert_never(unreachable)

    raise AssertionError(f"_step(): {type(io).__name__} produced no result")


def _interp[T, E](io: IO[T, E]) -> Interp[T, E]:
    return lambda: evaluate(io)


__all__ = ("evaluate",)
