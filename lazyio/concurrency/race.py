"""
Race combinators
================

Гонка между IO: побеждает первое завершившееся.
"""

from __future__ import annotations

import asyncio
import logging

from kungfu import Result

from ..io import IO, Interp, Race

log = logging.getLogger(__name__)


async def run_race[T, E](*interps: Interp[T, E]) -> Result[T, E]:
    """
    Return first completed result (Ok or Error, whichever finishes first).

    Always cancels the others and waits for them to settle before returning.
    Ties go to the earliest argument.
    """
    if not interps:
        raise ValueError("run_race() requires at least one interpretation")

    tasks = [asyncio.create_task(i()) for i in interps]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        winner = next(t for t in tasks if t in done)
        if pending:
            log.debug("race(): cancelling %d pending", len(pending))
        return winner.result()
    finally:
        for t in tasks:
            if not t.done():
                t.cancel()
        await asyncio.wait(tasks)


def race[T, E](*ios: IO[T, E]) -> IO[T, E]:
    """Return first completed result (Ok or Error)."""
    if not ios:
        raise ValueError("race() requires at least one IO")
    return Race(tuple(ios))


__all__ = ("race", "run_race")
