"""Background event loop for callers without a running loop.

Debounced wrappers need a loop to own their timers. Code that calls them
from plain threads gets this shared loop, running in a daemon thread.
"""

import asyncio
import logging
import threading

logger = logging.getLogger(__name__)


class _LoopThread:
    """Owns an event loop running forever in a daemon thread."""

    __slots__ = ("_lock", "_loop", "_started", "_thread")

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._started = threading.Event()
        self._lock = threading.Lock()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The running background loop, started on first access."""
        self.start()
        assert self._loop is not None
        return self._loop

    def start(self) -> None:
        """Start the loop thread (idempotent)."""
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(target=self._run, name="utilbox-loop", daemon=True)
            self._thread.start()
            self._started.wait()
        logger.debug("Started background loop thread")

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        loop.call_soon(self._started.set)
        loop.run_forever()


_shared_loop = _LoopThread()


def get_shared_loop() -> _LoopThread:
    """Return the shared background loop thread, starting it if needed."""
    _shared_loop.start()
    return _shared_loop
