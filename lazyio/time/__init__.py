from .delay import delay, sleep
from .timeout import run_with_deadline, timeout

__all__ = (
    # Delay
    "delay",
    "sleep",
    # Timeout
    "run_with_deadline",
    "timeout",
)
