"""
Parallel combinators
====================

Fan-out / fan-in: все IO запускаются конкурентно, результат собирается
в порядке входа.
"""

from __future__ import annotations

import asyncio
import logging
import typing

from kungfu import Error, Ok, Result

from .._errors import FailedNode
from ..io import IO, Interp, Par

log = logging.getLogger(__name__)


async def run_par[T, E](*interps: Interp[T, E]) -> Result[list[T], E]:
    """
    Run all concurrently, collect values in input order. Fail-fast on first error.

    Each typed failure is raised inside its own task as a FailedNode carrier.
    The task group then cancels the siblings still running and only exits
    once every task has settled. The first carrier observed is decoded back
    into Error here and nowhere else. Any other exception is a defect: the
    first one is re-raised as is, unwrapped from the task group.
    """

    async def settle(interp: Interp[T, E]) -> T:
        match await interp():
            case Ok(value):
                return value
            case Error(error):
                raise FailedNode(error)

    tasks: list[asyncio.Task[T]] = []
    failure: FailedNode | None = None
    try:
        try:
            async with asyncio.TaskGroup() as group:
                for interp in interps:
                    tasks.append(group.create_task(settle(interp)))
        except* FailedNode as group_error:
            failure = typing.cast(FailedNode, group_error.exceptions[0])
    except BaseExceptionGroup as defects:
        raise _first_leaf(defects) from None

    if failure is not None:
        log.debug("par(): node failed with %r, siblings cancelled", failure.error)
        return Error(failure.error)
    return Ok([task.result() for task in tasks])


def _first_leaf(group: BaseExceptionGroup[BaseException]) -> BaseException:
    first = group.exceptions[0]
    while isinstance(first, BaseExceptionGroup):
        first = first.exceptions[0]
    return first


def par[T, E](*ios: IO[T, E]) -> IO[list[T], E]:
    """
    Run all concurrently, collect results. Fail-fast on first error.

    par() with no arguments succeeds with an empty list.
    """
    return Par(tuple(ios))


__all__ = ("par", "run_par")
