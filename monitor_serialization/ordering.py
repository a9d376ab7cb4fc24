"""Canonical ordering of serialized intervals.

Order: ``from`` ascending, then ``to`` ascending, then ``message``, then
``locator``.  An unset ``to`` sorts before every real instant and ties only
with another unset ``to``.  Sorting is stable, so records equal on all four
keys keep their input order.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .models import EventInterval

SortKey = Tuple[datetime, Tuple, str, str]


def _end_key(to: Optional[datetime]) -> Tuple:
    if to is None:
        return (0,)
    return (1, to)


def interval_sort_key(record: EventInterval) -> SortKey:
    return (record.from_, _end_key(record.to), record.message, record.locator)


def compare_intervals(a: EventInterval, b: EventInterval) -> int:
    """Three-way compare under the canonical order: -1, 0 or 1."""
    key_a, key_b = interval_sort_key(a), interval_sort_key(b)
    if key_a < key_b:
        return -1
    if key_b < key_a:
        return 1
    return 0


def sort_event_intervals(records: Iterable[EventInterval]) -> List[EventInterval]:
    """Return a new list of *records* in canonical order."""
    return sorted(records, key=interval_sort_key)
