"""Errors raised while decoding interval JSON.

File read/write failures are not wrapped: they surface as the ``OSError``
raised by the filesystem.
"""
from __future__ import annotations


class IntervalSerializationError(ValueError):
    """Base class for content errors in serialized intervals."""


class MalformedJSONError(IntervalSerializationError):
    """Input is not valid JSON or does not have the interval document shape."""


class InvalidLevelError(IntervalSerializationError):
    """A serialized level string does not name a known ConditionLevel."""

    def __init__(self, level: str) -> None:
        super().__init__(f"ERROR: invalid interval level {level!r}")
        self.level = level
