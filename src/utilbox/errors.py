"""Errors raised by utilbox."""


class UtilboxError(Exception):
    """Base class for all utilbox errors."""


class CloneError(UtilboxError):
    """Base class for values that cannot be deep-cloned."""


class UnsupportedValueError(CloneError, TypeError):
    """Raised when a value is neither a scalar, a sequence, nor a mapping."""

    def __init__(self, value: object, path: str = "$") -> None:
        self.value = value
        self.path = path
        super().__init__(f"Cannot clone value of type {type(value).__name__} at {path}")


class CyclicValueError(CloneError, ValueError):
    """Raised when a container (directly or indirectly) contains itself."""

    def __init__(self, path: str = "$") -> None:
        self.path = path
        super().__init__(f"Cyclic reference detected at {path}")
