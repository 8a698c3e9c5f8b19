"""Function and decorator API for the call-timing limiters."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast, overload

from utilbox.config import Mode, TimingConfig
from utilbox.timing.debounce import Debounced
from utilbox.timing.registry import build_limiter

F = TypeVar("F", bound=Callable[..., Any])


def _wrap(fn: F, config: TimingConfig) -> F:
    limiter = build_limiter(config, fn)

    if inspect.iscoroutinefunction(fn):

        @wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = limiter(*args, **kwargs)
            if inspect.isawaitable(result):
                return await result
            return result

    else:

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return limiter(*args, **kwargs)

    wrapper.limiter = limiter  # type: ignore[attr-defined]
    wrapper.cancel = limiter.cancel  # type: ignore[attr-defined]
    wrapper.close = limiter.close  # type: ignore[attr-defined]
    if isinstance(limiter, Debounced):
        wrapper.flush = limiter.flush  # type: ignore[attr-defined]

    return cast("F", wrapper)


@overload
def debounce(func: F, /, delay: float = 0.0) -> F: ...


@overload
def debounce(*, delay: float = 0.0) -> Callable[[F], F]: ...


def debounce(func: F | None = None, /, delay: float = 0.0) -> F | Callable[[F], F]:
    """Collapse bursts of calls into one call with the last arguments.

    Each call restarts a ``delay``-second quiet period; the target runs once
    the quiet period ends. The wrapper always returns ``None``.
    For ``async def`` targets the wrapper is itself ``async``; the call is
    registered when it is awaited.

    Args:
        func: The function to wrap (direct call or bare decorator).
        delay: Quiet period in seconds. ``0`` defers to the next loop iteration.

    Examples:
    ```python
        save_later = debounce(save, 0.3)

        @debounce(delay=0.3)
        def on_resize(width: int, height: int) -> None:
            layout(width, height)

        on_resize.flush()   # run the pending call now
        on_resize.cancel()  # or drop it
    ```
    """
    config = TimingConfig(delay=delay, mode=Mode.DEBOUNCE)

    def decorator(fn: F) -> F:
        return _wrap(fn, config)

    if func is not None:
        return decorator(func)

    return decorator


@overload
def throttle(func: F, /, delay: float = 0.0) -> F: ...


@overload
def throttle(*, delay: float = 0.0) -> Callable[[F], F]: ...


def throttle(func: F | None = None, /, delay: float = 0.0) -> F | Callable[[F], F]:
    """Run at most one call per ``delay``-second window, dropping the rest.

    The first call of a window runs immediately and its result is returned.
    Calls inside the window return ``None`` and are never replayed.

    Args:
        func: The function to wrap (direct call or bare decorator).
        delay: Window length in seconds.

    Examples:
    ```python
        @throttle(delay=1.0)
        def report(progress: float) -> None:
            print(f"{progress:.0%}")
    ```
    """
    config = TimingConfig(delay=delay, mode=Mode.THROTTLE)

    def decorator(fn: F) -> F:
        return _wrap(fn, config)

    if func is not None:
        return decorator(func)

    return decorator
