"""Trailing-edge debounce limiter."""

import asyncio
import inspect
import logging
from asyncio import AbstractEventLoop, Task, TimerHandle, get_running_loop
from collections.abc import Callable
from typing import Any

from utilbox._sync import get_shared_loop
from utilbox.timing.base import BaseLimiter

logger = logging.getLogger(__name__)


def _running_loop() -> AbstractEventLoop | None:
    try:
        return get_running_loop()
    except RuntimeError:
        return None


class Debounced(BaseLimiter):
    """Trailing-edge debounce: only the last call in a burst reaches the target.

    How it works:
        - Every call cancels the pending timer and remembers its arguments.
        - A new timer is started for ``delay`` seconds.
        - When a timer survives the whole quiet period, the target runs once
          with the remembered arguments.

    Example::

        delay=0.1

        t=0.00 d("a")  -> schedule at t=0.10
        t=0.01 d("b")  -> cancel, schedule at t=0.11
        t=0.02 d("c")  -> cancel, schedule at t=0.12
        t=0.12         -> fn("c")

    The wrapper returns ``None``; the target's result is discarded. If the
    target returns an awaitable (``async def`` targets), it is scheduled as a
    task on the owning loop. Errors raised while firing are logged, since no
    caller is left to receive them.

    Timers live on the event loop that is running at the first call. Calls
    made with no running loop use the shared background loop thread.

    Complexity:
        Time:   O(1) per call
        Memory: O(1), a single pending handle and argument set
    """

    __slots__ = ("_args", "_generation", "_handle", "_kwargs", "_loop", "_pending", "_tasks")

    def __init__(self, fn: Callable[..., Any], delay: float) -> None:
        super().__init__(fn, delay)
        self._handle: TimerHandle | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self._pending = False
        # Bumped on every state change; timers from older generations are stale.
        self._generation = 0
        self._loop: AbstractEventLoop | None = None
        self._tasks: set[Task[Any]] = set()

    def _get_loop(self) -> AbstractEventLoop:
        if self._loop is None or self._loop.is_closed():
            self._loop = _running_loop() or get_shared_loop().loop
        return self._loop

    @property
    def pending(self) -> bool:
        """Whether a call is waiting for its quiet period to end."""
        return self._pending

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """Record this call's arguments and restart the quiet period."""
        self._ensure_open()
        loop = self._get_loop()

        with self._lock:
            self._generation += 1
            generation = self._generation
            self._args, self._kwargs = args, kwargs
            self._pending = True

        if _running_loop() is loop:
            self._reschedule(generation)
        else:
            loop.call_soon_threadsafe(self._reschedule, generation)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        self._take_pending()

    def flush(self) -> Any:
        """Run the pending call now and return the target's result.

        Unlike a timer-driven call, the result (or exception) is handed to
        the caller. Returns ``None`` if nothing is pending.
        """
        call = self._take_pending()
        if call is None:
            return None

        args, kwargs = call
        return self.fn(*args, **kwargs)

    def _take_pending(self) -> tuple[tuple[Any, ...], dict[str, Any]] | None:
        with self._lock:
            self._generation += 1
            handle, self._handle = self._handle, None
            call = (self._args, self._kwargs) if self._pending else None
            self._args, self._kwargs = (), {}
            self._pending = False

        if handle is not None:
            self._cancel_handle(handle)
        return call

    def _reschedule(self, generation: int) -> None:
        loop = self._get_loop()
        with self._lock:
            if generation != self._generation:
                return
            if self._handle is not None:
                self._handle.cancel()
            self._handle = loop.call_later(self.delay, self._fire, generation)

    def _cancel_handle(self, handle: TimerHandle) -> None:
        loop = self._loop
        if loop is None or loop.is_closed() or _running_loop() is loop:
            handle.cancel()
        else:
            loop.call_soon_threadsafe(handle.cancel)

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._pending:
                return
            args, kwargs = self._args, self._kwargs
            self._handle = None
            self._args, self._kwargs = (), {}
            self._pending = False

        logger.debug("Debounced call to %r firing", self.fn)
        try:
            result = self.fn(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call to %r failed", self.fn)
            return

        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result, loop=self._loop)
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced call to %r failed", self.fn, exc_info=exc)
