"""
IO: lazy, composable description of an async computation.

A value of type IO[T, E] describes an effect that may fail with an E,
run forever, or produce a single T. Nothing runs until the IO is awaited.

Architecture:
- IO[T, E] - base class carrying the combinator methods
- one frozen dataclass per node kind (Succeeded, FlatMap, Bracket, ...)
- _interpreter.evaluate - the only place that knows how to run a node

IO values are immutable; every combinator returns a new IO.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine, Generator
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from ._helpers import MISSING, const, identity
from ._types import ExecutionContext, FIO, Predicate, Thunk, UIO

if typing.TYPE_CHECKING:
    from .control.retry import RetryPolicy


class IO[T, E]:
    """
    Base of every IO node.

    Monadic laws:
    - Left identity: succeed(a).flat_map(f) ≡ f(a)
    - Right identity: m.flat_map(succeed) ≡ m
    - Associativity: m.flat_map(f).flat_map(g) ≡ m.flat_map(x => f(x).flat_map(g))
    """

    __slots__ = ()

    # Functor / monad

    def map[U](self, f: Callable[[T], U], /) -> IO[U, E]:
        """Apply f to the success value."""
        return FlatMap(self, lambda t: Succeeded(f(t)))

    def flat_map[U](self, f: Callable[[T], IO[U, E]], /) -> IO[U, E]:
        """Monadic bind: on success run the IO produced by f."""
        return FlatMap(self, f)

    def map_error[E2](self, f: Callable[[E], E2], /) -> IO[T, E2]:
        """Apply f to the error."""
        return MapError(self, f)

    def flat_map_error[E2](self, f: Callable[[E], FIO[E2]], /) -> IO[T, E2]:
        """On failure run the failure-only IO produced by f."""
        return FlatMapError(self, f)

    def as_[U](self, value: U, /) -> IO[U, E]:
        """Replace the success value."""
        return self.map(const(value))

    def void(self) -> IO[None, E]:
        """Discard the success value."""
        return self.as_(None)

    def attempt(self) -> UIO[Result[T, E]]:
        """Surface the outcome as a value. Never fails."""
        return FlatMapError(
            FlatMap(self, lambda t: Succeeded(Ok(t))),
            lambda e: Succeeded(Error(e)),
        )

    def swap(self) -> IO[E, T]:
        """Flip success and failure."""

        def flip(outcome: Result[T, E]) -> IO[E, T]:
            match outcome:
                case Ok(value):
                    return Failed(value)
                case Error(error):
                    return Succeeded(error)

        return self.attempt().flat_map(flip)

    def flatten[U](self: IO[Result[U, E], E]) -> IO[U, E]:
        """Collapse IO[Result[U, E], E] into IO[U, E]."""
        from .lift.up import from_result
        return self.flat_map(from_result)

    # Zip (sequential)

    def zip[U, V](self, other: IO[U, E], f: Callable[[T, U], V], /) -> IO[V, E]:
        """Run self then other, combine both values. Left-biased on failure."""
        from .transform.zip import zip
        return zip(self, other, f)

    def zip_left[V](self, other: IO[typing.Any, E], f: Callable[[T], V], /) -> IO[V, E]:
        from .transform.zip import zip_left
        return zip_left(self, other, f)

    def zip_right[U, V](self, other: IO[U, E], f: Callable[[U], V], /) -> IO[V, E]:
        from .transform.zip import zip_right
        return zip_right(self, other, f)

    # Side effects

    def for_each(self, effect: Callable[[T], typing.Any], /) -> IO[T, E]:
        from .transform.effects import for_each
        return for_each(self, effect)

    def tap(self, f: Callable[[T], IO[typing.Any, typing.Any]], /) -> IO[T, E]:
        from .transform.effects import tap
        return tap(self, f)

    def tap_error(self, f: Callable[[E], IO[typing.Any, typing.Any]], /) -> IO[T, E]:
        from .transform.effects import tap_error
        return tap_error(self, f)

    def brace[A](self, before: IO[A, E], after: Callable[[A], IO[typing.Any, E]]) -> IO[T, E]:
        from .control.bracket import brace
        return brace(self, before, after)

    # Guards and recovery

    def filter_or_fail(self, predicate: Predicate[T], otherwise: Callable[[T], E]) -> IO[T, E]:
        from .transform.filter import filter_or_fail
        return filter_or_fail(self, predicate=predicate, otherwise=otherwise)

    def recover(self, handler: Callable[[E], IO[T, E]], /) -> IO[T, E]:
        from .control.recover import recover
        return recover(self, handler)

    def recover_with(self, handler: Callable[[E], T], /) -> UIO[T]:
        from .control.recover import recover_with
        return recover_with(self, handler)

    def fail(self, if_success: Callable[[T], E] = identity) -> FIO[E]:
        from .control.guard import coalesce
        return coalesce(self, if_success)

    def refine_or_die[E2](self, kind: type[E2], /) -> FIO[E2]:
        from .control.guard import refine_or_die
        return refine_or_die(self, kind)

    def retry(
        self,
        *,
        policy: RetryPolicy[E] | None = None,
        times: int | None = None,
        delay_seconds: float = 0.0,
        retry_on: Predicate[E] | None = None,
    ) -> IO[T, E]:
        from .control.retry import RetryPolicy, retry
        if policy is None:
            if times is None:
                raise ValueError("retry(): must provide either 'policy' or 'times'")
            policy = RetryPolicy.fixed(times=times, delay_seconds=delay_seconds, retry_on=retry_on)
        return retry(self, policy=policy)

    # Time and context

    def timeout(
        self,
        seconds: float,
        *,
        error: typing.Any = MISSING,
        on_timeout: Callable[[TimeoutError], typing.Any] | None = None,
    ) -> IO[T, typing.Any]:
        from .time.timeout import timeout
        return timeout(self, seconds=seconds, error=error, on_timeout=on_timeout)

    def delay(self, seconds: float, /) -> IO[T, E]:
        from .time.delay import delay
        return delay(self, seconds=seconds)

    def on_context(self, context: ExecutionContext, /) -> IO[T, E]:
        """Evaluate this IO on another event loop or contextvars context."""
        return WithContext(self, context)

    # Running

    async def run(self) -> Result[T, E]:
        """Execute this IO in the current task."""
        from ._interpreter import evaluate
        return await evaluate(self)

    async def run_on(self, context: ExecutionContext, /) -> Result[T, E]:
        """Execute this IO on context. Shorthand for on_context(context).run()."""
        return await self.on_context(context).run()

    def __await__(self) -> Generator[typing.Any, None, Result[T, E]]:
        """Allow direct await on the IO."""
        return self.run().__await__()


# ============================================================================
# Nodes
# ============================================================================


@dataclass(frozen=True, slots=True)
class Succeeded[T](IO[T, typing.Never]):
    value: T


@dataclass(frozen=True, slots=True)
class SucceedWith[T](IO[T, typing.Never]):
    thunk: Callable[[], T]


@dataclass(frozen=True, slots=True)
class Failed[E](IO[typing.Never, E]):
    error: E


@dataclass(frozen=True, slots=True)
class FailWith[E](IO[typing.Never, E]):
    thunk: Callable[[], E]


@dataclass(frozen=True, slots=True)
class Effect[T](IO[T, Exception]):
    """Captured function that may raise; exceptions become Error."""

    fn: Thunk[T]


@dataclass(frozen=True, slots=True)
class EffectTotal[T](IO[T, typing.Never]):
    """Captured function that must not raise."""

    fn: Thunk[T]


@dataclass(frozen=True, slots=True)
class WithTimeout[T, E](IO[T, E]):
    underlying: IO[T, E]
    seconds: float
    on_timeout: Callable[[TimeoutError], E]


@dataclass(frozen=True, slots=True)
class FlatMap[T, U, E](IO[U, E]):
    underlying: IO[T, E]
    f: Callable[[T], IO[U, E]]


@dataclass(frozen=True, slots=True)
class MapError[T, E, E2](IO[T, E2]):
    underlying: IO[T, E]
    f: Callable[[E], E2]


@dataclass(frozen=True, slots=True)
class FlatMapError[T, E, E2](IO[T, E2]):
    underlying: IO[T, E]
    f: Callable[[E], IO[T, E2]]


@dataclass(frozen=True, slots=True)
class WithContext[T, E](IO[T, E]):
    underlying: IO[T, E]
    context: ExecutionContext


@dataclass(frozen=True, slots=True)
class Zip[T, U, V, E](IO[V, E]):
    left: IO[T, E]
    right: IO[U, E]
    f: Callable[[T, U], V]


@dataclass(frozen=True, slots=True)
class Bracket[R, U](IO[U, Exception]):
    acquire: Thunk[R]
    use: Callable[[R], U | Awaitable[U]]
    release: Callable[[R], typing.Any]


@dataclass(frozen=True, slots=True)
class Par[T, E](IO[list[T], E]):
    nodes: tuple[IO[T, E], ...]


@dataclass(frozen=True, slots=True)
class Race[T, E](IO[T, E]):
    nodes: tuple[IO[T, E], ...]


# Closed set of node kinds understood by the interpreter
type IONode = (
    Succeeded[typing.Any]
    | SucceedWith[typing.Any]
    | Failed[typing.Any]
    | FailWith[typing.Any]
    | Effect[typing.Any]
    | EffectTotal[typing.Any]
    | WithTimeout[typing.Any, typing.Any]
    | FlatMap[typing.Any, typing.Any, typing.Any]
    | MapError[typing.Any, typing.Any, typing.Any]
    | FlatMapError[typing.Any, typing.Any, typing.Any]
    | WithContext[typing.Any, typing.Any]
    | Zip[typing.Any, typing.Any, typing.Any, typing.Any]
    | Bracket[typing.Any, typing.Any]
    | Par[typing.Any, typing.Any]
    | Race[typing.Any, typing.Any]
)

# Thunk producing the evaluation of one node
type Interp[T, E] = Callable[[], Coroutine[typing.Any, typing.Any, Result[T, E]]]

__all__ = (
    "IO",
    "IONode",
    "Interp",
    # Nodes
    "Bracket",
    "Effect",
    "EffectTotal",
    "FailWith",
    "Failed",
    "FlatMap",
    "FlatMapError",
    "MapError",
    "Par",
    "Race",
    "SucceedWith",
    "Succeeded",
    "WithContext",
    "WithTimeout",
    "Zip",
)
