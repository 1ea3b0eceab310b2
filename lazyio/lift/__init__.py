"""
Lift helpers with semantic namespaces.

Architecture:
- up.*    - подъем значений в IO
- down.*  - опускание IO в значение
- call()  - вызов функций с лифтингом

Examples:
    from lazyio import lift as L

    user = L.up.succeed(User(id=42))
    error = L.up.fail(NotFoundError())
    maybe = L.up.from_optional(db_row, error=NotFoundError)

    result = L.call(fetch_user, 42)

    value = await L.down.unsafe(result)
"""

from __future__ import annotations

from . import down, up

from .call import call, lifted, wrap_async
from .down import or_else, to_result, to_result_on, unsafe
from .up import (
    catching,
    effect,
    effect_total,
    fail,
    fail_with,
    from_optional,
    from_result,
    pure,
    succeed,
    succeed_with,
    unit,
)

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "catching",
    "effect",
    "effect_total",
    "fail",
    "fail_with",
    "from_optional",
    "from_result",
    "pure",
    "succeed",
    "succeed_with",
    "unit",
    # Call
    "call",
    "lifted",
    "wrap_async",
    # Down
    "or_else",
    "to_result",
    "to_result_on",
    "unsafe",
)
