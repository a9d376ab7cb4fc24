"""Interval domain types produced by the event monitor.

Intervals are immutable once constructed.  ``to`` is ``None`` for an interval
that has no recorded end; an interval whose ``to`` equals ``from_`` is a
closed, zero-duration interval and is a different state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from pydantic import Field, RootModel


class ConditionLevel(IntEnum):
    """Severity of an interval, ordered from least to most severe."""

    Info = 0
    Warning = 1
    Error = 2

    def __str__(self) -> str:
        return self.name


def condition_level_from_string(level: str) -> ConditionLevel:
    """Return the ConditionLevel whose name is exactly *level*.

    Raises:
        ValueError: *level* is not a known severity.
    """
    try:
        return ConditionLevel[level]
    except KeyError:
        raise ValueError(f"ERROR: did not define event level string for {level!r}") from None


# Short category tag for where an interval came from, e.g. "NodeState".
IntervalSource = str


class StructuredLocator(RootModel[Any]):
    """Opaque structured locator; copied through, never interpreted."""

    root: Any = Field(default_factory=dict)


class StructuredMessage(RootModel[Any]):
    """Opaque structured message; copied through, never interpreted."""

    root: Any = Field(default_factory=dict)


def _is_aware(value: object) -> bool:
    return isinstance(value, datetime) and value.utcoffset() is not None


@dataclass(frozen=True)
class Interval:
    level: ConditionLevel
    locator: str
    message: str
    from_: datetime
    to: Optional[datetime] = None
    source: IntervalSource = ""
    structured_locator: StructuredLocator = field(default_factory=StructuredLocator)
    structured_message: StructuredMessage = field(default_factory=StructuredMessage)

    def __post_init__(self) -> None:
        if not _is_aware(self.from_):
            raise ValueError(f"ERROR: Interval.from_ must be a timezone-aware datetime, got {self.from_!r}")
        if self.to is not None and not _is_aware(self.to):
            raise ValueError(f"ERROR: Interval.to must be a timezone-aware datetime or None, got {self.to!r}")

    @property
    def is_open(self) -> bool:
        """True when no end instant was recorded."""
        return self.to is None

    @property
    def is_zero_duration(self) -> bool:
        """True for a closed interval whose end is explicitly equal to its start."""
        return self.to is not None and self.to == self.from_
