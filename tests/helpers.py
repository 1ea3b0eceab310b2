"""Shared assertions and test doubles."""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

from kungfu import Error, Ok, Result


def expect_ok[T](result: Result[T, typing.Any]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(error):
            raise AssertionError(f"expected Ok, got Error({error!r})")
    raise AssertionError(f"not a Result: {result!r}")


def expect_error[E](result: Result[typing.Any, E]) -> E:
    match result:
        case Error(error):
            return error
        case Ok(value):
            raise AssertionError(f"expected Error, got Ok({value!r})")
    raise AssertionError(f"not a Result: {result!r}")


@dataclass
class Counter:
    """Callable recording how many times it was invoked."""

    value: typing.Any = None
    calls: int = 0
    args: list[typing.Any] = field(default_factory=list)

    def __call__(self, *args: typing.Any) -> typing.Any:
        self.calls += 1
        self.args.extend(args)
        return self.value


def explode(*_: typing.Any) -> typing.NoReturn:
    raise AssertionError("must not be called")
