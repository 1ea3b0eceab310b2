"""
Retry combinators
=================

Explicit retry: an IO that re-invokes itself on Error. Nothing in lazyio
retries implicitly.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .._types import Predicate
from ..io import IO, Failed
from ..time.delay import sleep

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RetryPolicy[E]:
    """
    How often and how patiently to re-run a failing IO.

    times counts every run, the first one included. The pause before retry
    number n (0-based) is delay_seconds * multiplier**n, capped at
    max_delay_seconds, then spread by +/- jitter of itself.

    retry_on, when given, decides which errors are worth another run.
    """

    times: int
    delay_seconds: float = 0.0
    multiplier: float = 1.0
    max_delay_seconds: float = 60.0
    jitter: float = 0.0
    retry_on: Predicate[E] | None = None

    def __post_init__(self) -> None:
        if self.times < 1:
            raise ValueError("RetryPolicy.times must be >= 1")
        if self.delay_seconds < 0.0:
            raise ValueError("RetryPolicy.delay_seconds must be >= 0")
        if self.multiplier < 1.0:
            raise ValueError("RetryPolicy.multiplier must be >= 1.0")
        if self.max_delay_seconds < self.delay_seconds:
            raise ValueError("RetryPolicy.max_delay_seconds must be >= delay_seconds")
        if not 0.0 <= self.jitter <= 1.0:
            raise ValueError("RetryPolicy.jitter must be in [0, 1]")

    @classmethod
    def fixed(
        cls,
        times: int,
        delay_seconds: float = 0.0,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        """Same pause before every retry."""
        return cls(times=times, delay_seconds=delay_seconds, retry_on=retry_on)

    @classmethod
    def exponential(
        cls,
        times: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        """Pause grows by multiplier after each failure."""
        return cls(
            times=times,
            delay_seconds=initial,
            multiplier=multiplier,
            max_delay_seconds=max_delay,
            retry_on=retry_on,
        )

    @classmethod
    def jittered(
        cls,
        times: int,
        base: float = 1.0,
        jitter_factor: float = 0.5,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        """Randomised pauses around base, so callers do not retry in lockstep."""
        return cls(
            times=times,
            delay_seconds=base,
            max_delay_seconds=max(base, 60.0),
            jitter=jitter_factor,
            retry_on=retry_on,
        )

    def delay_for(self, retry: int) -> float:
        """Seconds to wait before retry number retry (0-based)."""
        pause = min(self.delay_seconds * self.multiplier**retry, self.max_delay_seconds)
        if self.jitter:
            pause *= 1.0 + random.uniform(-self.jitter, self.jitter)
        return max(0.0, pause)

    def allows(self, retry: int, error: E) -> bool:
        """Whether a run that failed with error may be followed by retry number retry."""
        if retry + 1 >= self.times:
            return False
        return self.retry_on is None or self.retry_on(error)


def retry[T, E](
    io: IO[T, E],
    *,
    policy: RetryPolicy[E],
) -> IO[T, E]:
    """
    Run io up to policy.times times until Ok, otherwise return the last Error.

    Each further run is built only once the previous one has failed, so the
    node graph stays finite however large times is.
    """

    def run(n: int) -> IO[T, E]:
        def on_error(error: E) -> IO[T, E]:
            if not policy.allows(n, error):
                return Failed(error)
            pause = policy.delay_for(n)
            log.debug("Run %d/%d failed with %r, retrying in %.3fs", n + 1, policy.times, error, pause)
            if pause == 0.0:
                return run(n + 1)
            return sleep(pause).flat_map(lambda _: run(n + 1))

        return io.flat_map_error(on_error)

    return run(0)


__all__ = ("RetryPolicy", "retry")
