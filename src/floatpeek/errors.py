"""Errors raised by floatpeek."""

from __future__ import annotations


class Ieee754Error(Exception):
    """Base error for binary64 decomposition and reconstruction."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class FieldRangeError(Ieee754Error):
    """A raw field value does not fit in its bit width."""

    def __init__(self, field: str, value: int, limit: int):
        self.field: str = field
        self.value: int = value
        self.limit: int = limit
        super().__init__(
            field + " out of range: " + str(value) + " (expected 0.." + str(limit) + ")"
        )


class NonFiniteError(Ieee754Error):
    """Operation is only defined for finite values."""

    def __init__(self, value: float, operation: str):
        self.value: float = value
        self.operation: str = operation
        super().__init__(operation + " is undefined for non-finite value " + repr(value))
