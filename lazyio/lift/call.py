"""
Вызов функций с автоматическим лифтингом.

Bridges from async code that already returns a kungfu.Result: wrap a
coroutine factory, call a function at the use site, or decorate it once.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from kungfu import Result

from ..io import IO, EffectTotal


def wrap_async[T, E](produce: Callable[[], Awaitable[Result[T, E]]]) -> IO[T, E]:
    """
    IO whose outcome is the Result awaited from produce().

    NOTE: pass the factory, not a coroutine object; a coroutine is already
          started work and could only be awaited once.
    """
    return EffectTotal(produce).flatten()


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> IO[T, E]:
    """
    Defer func(*args, **kwargs) into an IO.

    Example:
        user = lio.call(repo.fetch_user, 42).timeout(1.0)
    """
    return wrap_async(lambda: func(*args, **kwargs))


def lifted[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, IO[T, E]]:
    """
    Decorator: calling func builds an IO instead of starting a coroutine.

    Example:
        @lio.lifted
        async def fetch_user(user_id: int) -> Result[User, NotFound]:
            ...

        names = fetch_user(42).map(lambda u: u.name)
    """

    @wraps(func)
    def build(*args: P.args, **kwargs: P.kwargs) -> IO[T, E]:
        return call(func, *args, **kwargs)

    return build


__all__ = ("call", "lifted", "wrap_async")
