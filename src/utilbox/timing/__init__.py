from utilbox.timing.base import BaseLimiter
from utilbox.timing.debounce import Debounced
from utilbox.timing.registry import build_limiter
from utilbox.timing.throttle import Throttled

__all__ = [
    "BaseLimiter",
    "Debounced",
    "Throttled",
    "build_limiter",
]
