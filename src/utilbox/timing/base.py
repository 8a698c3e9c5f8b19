"""Abstract base class shared by the call-timing limiters."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class BaseLimiter(ABC):
    """Base class for callables that control when a target function runs.

    A limiter wraps a single target and is itself called with the target's
    arguments. Subclasses decide whether, and when, each call reaches the
    target. The constructor validates the common ``delay`` parameter and
    sets up the lock guarding per-instance state.

    Args:
        fn: The target callable.
        delay: Quiet period or window length in seconds. Must be >= 0.
    """

    __slots__ = ("_closed", "_lock", "delay", "fn")

    def __init__(self, fn: Callable[..., Any], delay: float) -> None:
        if not callable(fn):
            raise TypeError(f"fn must be callable, got {type(fn).__name__}")

        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")

        self.fn = fn
        self.delay = delay
        self._lock = threading.Lock()
        self._closed = False

    @abstractmethod
    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Offer a call to the limiter."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop any state that would make a future call behave differently."""

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Cancel outstanding work and refuse further calls (idempotent)."""
        if self._closed:
            return
        self._closed = True
        self.cancel()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"{type(self).__name__} is closed")

    def __repr__(self) -> str:
        name = getattr(self.fn, "__qualname__", repr(self.fn))
        return f"{type(self).__name__}(fn={name}, delay={self.delay}, closed={self._closed})"
