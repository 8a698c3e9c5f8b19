"""Configuration types for the timing limiters."""

from dataclasses import dataclass
from enum import StrEnum


class Mode(StrEnum):
    """Available call-timing modes.

    DEBOUNCE: Trailing-edge debounce. Each call resets the timer and only
              the last call's arguments reach the target, once calls stop.
    THROTTLE: Leading-edge throttle. The first call of a window runs
              immediately; calls inside the window are dropped.
    """

    DEBOUNCE = "debounce"
    THROTTLE = "throttle"


@dataclass(frozen=True, slots=True)
class TimingConfig:
    """Configuration for a limiter instance.

    Attributes:
        delay: Quiet period (debounce) or window length (throttle) in seconds.
               Zero is allowed: a zero-delay debounce still defers to the
               next loop iteration.
        mode: Which limiter to build.
    """

    delay: float = 0.0
    mode: Mode = Mode.DEBOUNCE

    def __post_init__(self) -> None:
        if isinstance(self.delay, bool) or not isinstance(self.delay, int | float):
            raise TypeError(f"delay must be a number, got {type(self.delay).__name__}")

        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")
