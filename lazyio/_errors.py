from __future__ import annotations

import typing


class TimeoutError(Exception):
    """IO took too long."""

    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Timed out after {seconds}s")


class UnwrapError(Exception):
    """unsafe() met an Error."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(f"Called unsafe() on a failed IO: {error!r}")


class RefinementError(BaseException):
    """
    refine_or_die() met an outcome that is not an instance of the expected kind.

    Derives from BaseException: effect() and bracket() capture Exception only,
    so the abort is never turned back into a typed failure.
    """

    expected: type
    actual: typing.Any

    def __init__(self, expected: type, actual: typing.Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Result not an instance of {expected.__qualname__}: {actual!r}")


class FailedNode(Exception):
    """Carrier for a typed error crossing the par() fan-out boundary."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(error)


__all__ = ("FailedNode", "RefinementError", "TimeoutError", "UnwrapError")
