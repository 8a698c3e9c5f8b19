"""Leading-edge throttle limiter."""

import inspect
import logging
import time
from collections.abc import Callable
from typing import Any

from utilbox.timing.base import BaseLimiter

logger = logging.getLogger(__name__)


async def _dropped() -> None:
    return None


class Throttled(BaseLimiter):
    """Leading-edge throttle: at most one call per ``delay`` seconds.

    The first call always runs. Later calls run only if at least ``delay``
    seconds have passed since the last call that ran; the rest are dropped
    and never replayed.

    Example::

        delay=100

        t=0   t("a")  -> runs
        t=50  t("b")  -> dropped
        t=100 t("c")  -> runs

    Accepted calls run synchronously in the caller and return the target's
    result. Dropped calls return ``None``, or, for ``async def`` targets, a
    coroutine resolving to ``None`` so every call can be awaited.

    Args:
        fn: The target callable.
        delay: Window length in seconds.
        clock: Monotonic time source, in seconds.
    """

    __slots__ = ("_clock", "_is_async", "_last_call")

    def __init__(
        self,
        fn: Callable[..., Any],
        delay: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(fn, delay)
        self._clock = clock
        self._last_call: float | None = None
        self._is_async = inspect.iscoroutinefunction(fn)

    @property
    def last_call(self) -> float | None:
        """Clock reading of the last accepted call, or ``None`` if none ran."""
        return self._last_call

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self._ensure_open()

        with self._lock:
            now = self._clock()
            if self._last_call is not None and now - self._last_call < self.delay:
                logger.debug("Throttled call to %r dropped", self.fn)
                return _dropped() if self._is_async else None
            self._last_call = now

        return self.fn(*args, **kwargs)

    def cancel(self) -> None:
        """Forget the last accepted call so the next one runs immediately."""
        with self._lock:
            self._last_call = None

    reset = cancel
