"""List helpers: deduplicate, flatten, chunk."""

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def remove_duplicates(items: Iterable[T]) -> list[T]:
    """Drop repeated items, keeping the first occurrence of each.

    Hashable items are tracked in a set. Unhashable ones (dicts, lists)
    fall back to an equality scan over what has been kept so far. Booleans
    are kept apart from the numbers they compare equal to, so ``True`` and
    ``1`` both survive; ``1`` and ``1.0`` still collapse.

        >>> remove_duplicates([1, 2, 2, 3, 3, 3])
        [1, 2, 3]
        >>> remove_duplicates([1, True, 1.0])
        [1, True]
    """
    seen: set[Any] = set()
    result: list[T] = []
    for item in items:
        try:
            key = (isinstance(item, bool), item)
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            if item in result:
                continue
        result.append(item)
    return result


def flatten_array(items: Iterable[Iterable[T]]) -> list[T]:
    """Flatten exactly one level of nesting."""
    return [item for group in items for item in group]


def chunk_array(items: Sequence[T], size: int) -> list[list[T]]:
    """Split *items* into lists of *size*; the last one may be shorter.

    Raises:
        ValueError: *size* is less than 1.
    """
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
