"""Structural helpers for nested values: merge and clone.

Values are classified into three kinds (see :class:`ValueKind`):

- ``MAPPING``: any :class:`~collections.abc.Mapping`
- ``SEQUENCE``: ``list``, ``tuple``, ``set`` and ``frozenset``
- ``SCALAR``: everything else

Merging recurses into mappings only. Sequences are opaque and replace
wholesale, like scalars.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any, TypeVar

from utilbox.errors import CyclicValueError, UnsupportedValueError

T = TypeVar("T")

_SEQUENCE_TYPES = (list, tuple, set, frozenset)

# Immutable leaves that deep_clone may hand back as-is.
_CLONEABLE_SCALARS = (type(None), bool, int, float, complex, str, bytes)


class ValueKind(Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """Classify *value* for merge and clone dispatch."""
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, _SEQUENCE_TYPES):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def deep_merge(target: Any, source: Any) -> Any:
    """Recursively merge *source* into *target*, in place, and return *target*.

    For each key of *source*:

    - a mapping value is merged recursively into ``target[key]``. A
      read-only mapping there is first copied into a ``dict``; a missing or
      non-mapping value is first replaced by an empty ``dict``.
    - any other value (scalars, and sequences, which are not merged) is
      assigned to ``target[key]`` by reference, without copying.

    The returned object *is* ``target``. Use :func:`merged` for a copy.
    If *target* is not a mutable mapping or *source* is not a mapping,
    *source* is returned unchanged and nothing is merged.

    Example:
        >>> target = {"foo": {"a": 1}, "x": 1}
        >>> deep_merge(target, {"foo": {"b": 2}, "y": 2})
        {'foo': {'a': 1, 'b': 2}, 'x': 1, 'y': 2}
    """
    if not isinstance(target, MutableMapping) or not isinstance(source, Mapping):
        return source

    for key, value in source.items():
        match kind_of(value):
            case ValueKind.MAPPING:
                current = target.get(key)
                if not isinstance(current, MutableMapping):
                    target[key] = dict(current) if isinstance(current, Mapping) else {}
                deep_merge(target[key], value)
            case ValueKind.SEQUENCE | ValueKind.SCALAR:
                target[key] = value

    return target


def merged(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Non-mutating :func:`deep_merge`.

    Both arguments are deep-cloned first, so the result shares no containers
    with either input. Raises the same errors as :func:`deep_clone`.
    """
    return deep_merge(deep_clone(target), deep_clone(source))


def deep_clone(value: T) -> T:
    """Return a structural copy of *value*.

    Mappings become new ``dict`` objects; lists, tuples, sets and frozensets
    are rebuilt with the same type; immutable scalars (``None``, ``bool``,
    numbers including NaN and infinities, ``str``, ``bytes``) are returned
    as-is. Containers shared between branches are copied independently.

    Raises:
        UnsupportedValueError: *value* contains anything else, e.g. a
            function or an arbitrary object.
        CyclicValueError: a container contains itself.
    """
    return _clone(value, set(), "$")


def _clone(value: Any, active: set[int], path: str) -> Any:
    kind = kind_of(value)

    if kind is ValueKind.SCALAR:
        if not isinstance(value, _CLONEABLE_SCALARS):
            raise UnsupportedValueError(value, path)
        return value

    marker = id(value)
    if marker in active:
        raise CyclicValueError(path)

    active.add(marker)
    try:
        match kind:
            case ValueKind.MAPPING:
                return {key: _clone(item, active, f"{path}.{key}") for key, item in value.items()}
            case ValueKind.SEQUENCE:
                items = [_clone(item, active, f"{path}[{i}]") for i, item in enumerate(value)]
                return _rebuild(value, items)
    finally:
        active.discard(marker)


def _rebuild(original: Any, items: list[Any]) -> Any:
    cls = type(original)
    if cls is list:
        return items
    if isinstance(original, tuple) and hasattr(original, "_fields"):
        return cls(*items)
    return cls(items)
