"""Maps each ``Mode`` enum member to a callable that builds a ``BaseLimiter``.

When you add a new mode:

1. Add a variant to the ``Mode`` enum in ``config.py``.
2. Add an entry to ``REGISTRY`` pointing to a factory function or lambda
   that wraps a target callable according to a :class:`TimingConfig`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from utilbox.config import Mode, TimingConfig
from utilbox.timing.base import BaseLimiter
from utilbox.timing.debounce import Debounced
from utilbox.timing.throttle import Throttled

LimiterFactory = Callable[[TimingConfig, Callable[..., Any]], BaseLimiter]

REGISTRY: dict[Mode, LimiterFactory] = {
    Mode.DEBOUNCE: lambda cfg, fn: Debounced(fn, delay=cfg.delay),
    Mode.THROTTLE: lambda cfg, fn: Throttled(fn, delay=cfg.delay),
}


def build_limiter(config: TimingConfig, fn: Callable[..., Any]) -> BaseLimiter:
    """Resolve *config.mode* to a concrete ``BaseLimiter`` wrapping *fn*."""
    factory = REGISTRY.get(config.mode)
    if not factory:
        raise ValueError(
            f"Unknown mode: {config.mode!r}. Registered: {', '.join(m.value for m in REGISTRY)}"
        )
    return factory(config, fn)
