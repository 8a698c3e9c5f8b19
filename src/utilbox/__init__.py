"""utilbox — small helpers for arrays, nested values, and call timing.

Basic usage:

    from utilbox import chunk_array, deep_merge, remove_duplicates

    chunk_array([1, 2, 3, 4, 5], 2)        # [[1, 2], [3, 4], [5]]
    remove_duplicates([1, 2, 2, 3, 3, 3])  # [1, 2, 3]
    deep_merge({"foo": {"a": 1}}, {"foo": {"b": 2}})  # {"foo": {"a": 1, "b": 2}}

Timing usage:

    from utilbox import debounce, throttle

    @debounce(delay=0.3)
    def save(text: str) -> None:
        ...

    @throttle(delay=1.0)
    def report(progress: float) -> None:
        ...
"""

from utilbox.arrays import chunk_array, flatten_array, remove_duplicates
from utilbox.config import Mode, TimingConfig
from utilbox.decorator import debounce, throttle
from utilbox.errors import CloneError, CyclicValueError, UnsupportedValueError, UtilboxError
from utilbox.helpers import (
    capitalize,
    generate_uuid,
    is_empty_object,
    random_in_range,
    safe_json_parse,
    sleep,
)
from utilbox.timing.base import BaseLimiter
from utilbox.timing.debounce import Debounced
from utilbox.timing.throttle import Throttled
from utilbox.values import ValueKind, deep_clone, deep_merge, kind_of, merged

__all__ = [
    "BaseLimiter",
    "CloneError",
    "CyclicValueError",
    "Debounced",
    "Mode",
    "Throttled",
    "TimingConfig",
    "UnsupportedValueError",
    "UtilboxError",
    "ValueKind",
    "capitalize",
    "chunk_array",
    "debounce",
    "deep_clone",
    "deep_merge",
    "flatten_array",
    "generate_uuid",
    "is_empty_object",
    "kind_of",
    "merged",
    "random_in_range",
    "remove_duplicates",
    "safe_json_parse",
    "sleep",
    "throttle",
]

__version__ = "0.1.0"
