"""Context switching

Evaluate an IO somewhere else: on another event loop (typically one
running in a worker thread) or inside a contextvars.Context snapshot."""

from __future__ import annotations

import asyncio
import contextvars
import typing
from collections.abc import Callable, Coroutine

from ._types import ExecutionContext


async def run_on_context[R](
    interp: Callable[[], Coroutine[typing.Any, typing.Any, R]],
    context: ExecutionContext,
) -> R:
    """
    Await interp() on context.

    - contextvars.Context: run as a task created in that context
    - the running loop: plain await, nothing to switch
    - another loop: schedule there, await the result here; it must be
      running, a closed or stopped loop is rejected

    Cancelling the caller cancels the evaluation on the other side.
    """
    if isinstance(context, contextvars.Context):
        return await asyncio.create_task(interp(), context=context)

    if context is asyncio.get_running_loop():
        return await interp()

    if context.is_closed():
        raise RuntimeError("run_on_context(): target event loop is closed")
    if not context.is_running():
        raise RuntimeError("run_on_context(): target event loop is not running")

    future = asyncio.run_coroutine_threadsafe(interp(), context)
    return await asyncio.wrap_future(future)


__all__ = ("run_on_context",)
