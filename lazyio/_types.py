"""
Core type definitions for lazyio.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import asyncio
import contextvars
import typing
from collections.abc import Awaitable, Callable

if typing.TYPE_CHECKING:
    from .io import IO

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-arg callable, sync or async
type Thunk[T] = Callable[[], T | Awaitable[T]]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) means "this value cannot be created",
#       which is exactly an error that never happens.
type NoError = typing.Never

# Where an IO is evaluated: another event loop, or a contextvars snapshot
type ExecutionContext = asyncio.AbstractEventLoop | contextvars.Context

# ============================================================================
# IO shapes
# ============================================================================

# UIO = succeeds with T, cannot fail
type UIO[T] = IO[T, typing.Never]

# Task = succeeds with T, may fail with whatever the wrapped code raised
type Task[T] = IO[T, Exception]

# FIO = fails with E, cannot succeed
type FIO[E] = IO[typing.Never, E]

__all__ = (
    # Type aliases
    "Predicate",
    "Thunk",
    "NoError",
    "ExecutionContext",
    # IO shapes
    "UIO",
    "Task",
    "FIO",
)
