"""
lazyio: deferred, composable async effects over kungfu.Result.

A value of type IO[T, E] describes an effect that may fail with an E, run
forever, or produce a single T. IO values are built by composition and do
nothing until awaited.

    import lazyio as lio

    pipeline = (
        lio.effect(lambda: fetch_user(42))
        .timeout(1.0)
        .retry(times=3, delay_seconds=0.1)
        .map(lambda user: user.name)
    )
    result = await pipeline  # Ok("...") or Error(...)

Architecture:
- io.py - IO base class and the closed set of node kinds
- _interpreter.py - evaluation of a node into a Result
- control/, concurrency/, time/, transform/ - combinators by concern
- lift/ - getting values into (up) and out of (down) IO
"""

import logging

# Core types
from ._types import FIO, UIO, ExecutionContext, NoError, Predicate, Task, Thunk
from .io import IO

# Interpreter
from ._interpreter import evaluate

# Context switching
from .context import run_on_context

# Lift helpers
from . import lift
from .lift import (
    call,
    catching,
    effect,
    effect_total,
    fail,
    fail_with,
    from_optional,
    from_result,
    lifted,
    pure,
    succeed,
    succeed_with,
    unit,
    wrap_async,
)

# Control flow
from .control import (
    RetryPolicy,
    brace,
    bracket,
    coalesce,
    cond,
    or_succeed,
    recover,
    recover_with,
    refine_or_die,
    retry,
)

# Concurrency
from .concurrency import par, race

# Time operations
from .time import delay, sleep, timeout

# Transform/effects
from .transform import filter_or_fail, for_each, tap, tap_error, zip, zip_left, zip_right

# Errors
from ._errors import FailedNode, RefinementError, TimeoutError, UnwrapError

# Silent unless the application configures logging
logging.getLogger("lazyio").addHandler(logging.NullHandler())

__all__ = (
    # Types
    "ExecutionContext",
    "FIO",
    "IO",
    "NoError",
    "Predicate",
    "Task",
    "Thunk",
    "UIO",
    # Running
    "evaluate",
    "run_on_context",
    # Lift module (namespace import)
    "lift",
    # Lift functions (direct import)
    "call",
    "catching",
    "effect",
    "effect_total",
    "fail",
    "fail_with",
    "from_optional",
    "from_result",
    "lifted",
    "pure",
    "succeed",
    "succeed_with",
    "unit",
    "wrap_async",
    # Control
    "RetryPolicy",
    "brace",
    "bracket",
    "coalesce",
    "cond",
    "or_succeed",
    "recover",
    "recover_with",
    "refine_or_die",
    "retry",
    # Concurrency
    "par",
    "race",
    # Time
    "delay",
    "sleep",
    "timeout",
    # Transform
    "filter_or_fail",
    "for_each",
    "tap",
    "tap_error",
    "zip",
    "zip_left",
    "zip_right",
    # Errors
    "FailedNode",
    "RefinementError",
    "TimeoutError",
    "UnwrapError",
)
