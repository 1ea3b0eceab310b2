from .bracket import brace, bracket, run_bracket
from .guard import coalesce, cond, refine_or_die
from .recover import or_succeed, recover, recover_with
from .retry import RetryPolicy, retry

__all__ = (
    # Policies
    "RetryPolicy",
    # Bracket
    "brace",
    "bracket",
    "run_bracket",
    # Guard
    "coalesce",
    "cond",
    "refine_or_die",
    # Recover
    "or_succeed",
    "recover",
    "recover_with",
    # Retry
    "retry",
)
