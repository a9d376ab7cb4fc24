"""Interval ⇄ EventInterval mapping.

Both directions are pure.  Every field is copied verbatim except ``level``,
which is rendered to its name on the way out and parsed back on the way in.
"""
from __future__ import annotations

from monitorapi import Interval, condition_level_from_string

from .errors import InvalidLevelError
from .models import EventInterval


def to_wire(interval: Interval) -> EventInterval:
    """Convert an Interval to its serialized form.  Never fails."""
    return EventInterval(
        level=str(interval.level),
        locator=interval.locator,
        message=interval.message,
        source=str(interval.source),
        structured_locator=interval.structured_locator,
        structured_message=interval.structured_message,
        from_=interval.from_,
        to=interval.to,
    )


def from_wire(record: EventInterval) -> Interval:
    """Convert a serialized interval back to an Interval.

    Raises:
        InvalidLevelError: record.level is not a known ConditionLevel name.
    """
    try:
        level = condition_level_from_string(record.level)
    except ValueError:
        raise InvalidLevelError(record.level) from None
    return Interval(
        level=level,
        locator=record.locator,
        message=record.message,
        from_=record.from_,
        to=record.to,
        source=record.source,
        structured_locator=record.structured_locator,
        structured_message=record.structured_message,
    )
