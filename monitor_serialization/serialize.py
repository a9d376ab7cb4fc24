"""Interval JSON encode/decode.

Collections are written sorted into canonical order with a 4-space indent so
that the same set of intervals always produces byte-identical output, no
matter what order they were recorded in.  Single intervals are written as one
compact line.

Decoding is all-or-nothing: the first malformed record or unknown level
aborts the whole decode.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Union

from pydantic import ValidationError

from monitorapi import Interval

from .convert import from_wire, to_wire
from .errors import MalformedJSONError
from .models import EventInterval, EventIntervalList
from .ordering import sort_event_intervals

logger = logging.getLogger(__name__)

JSONInput = Union[str, bytes, bytearray]

_INDENT = 4
_COMPACT_SEPARATORS = (",", ":")


def interval_to_one_line_json(interval: Interval) -> bytes:
    """Serialize one Interval as a single-line JSON object (no insignificant whitespace)."""
    raw = to_wire(interval).to_json_dict()
    return json.dumps(raw, separators=_COMPACT_SEPARATORS, ensure_ascii=False).encode("utf-8")


def intervals_to_json(intervals: Iterable[Interval]) -> bytes:
    """Serialize every interval as an indented ``{"items": [...]}`` document in canonical order."""
    return _dump_list([to_wire(interval) for interval in intervals])


def intervals_to_json_filtered(intervals: Iterable[Interval]) -> bytes:
    """Like intervals_to_json, but drops closed intervals whose ``to`` equals ``from_``.

    An interval with no ``to`` is always kept.
    """
    records: List[EventInterval] = []
    dropped = 0
    for interval in intervals:
        if interval.is_zero_duration:
            dropped += 1
            continue
        records.append(to_wire(interval))
    if dropped:
        logger.debug("dropped %d zero-duration intervals", dropped)
    return _dump_list(records)


def intervals_from_json(data: JSONInput) -> List[Interval]:
    """Parse an ``{"items": [...]}`` document into Intervals.

    Raises:
        MalformedJSONError: not JSON, or not shaped like an interval list.
        InvalidLevelError: an item carries an unknown level.
    """
    raw = _parse(data)
    try:
        event_list = EventIntervalList.model_validate(raw)
    except ValidationError as exc:
        raise MalformedJSONError(f"ERROR: invalid interval list: {exc}") from exc
    return [from_wire(item) for item in event_list.items]


def interval_from_json(data: JSONInput) -> Interval:
    """Parse a single serialized interval, e.g. one produced by interval_to_one_line_json.

    Raises:
        MalformedJSONError: not JSON, or not shaped like an interval.
        InvalidLevelError: the level is unknown.
    """
    raw = _parse(data)
    try:
        record = EventInterval.model_validate(raw)
    except ValidationError as exc:
        raise MalformedJSONError(f"ERROR: invalid interval: {exc}") from exc
    return from_wire(record)


def _dump_list(records: List[EventInterval]) -> bytes:
    event_list = EventIntervalList(items=sort_event_intervals(records))
    return json.dumps(event_list.to_json_dict(), indent=_INDENT, ensure_ascii=False).encode("utf-8")


def _parse(data: JSONInput) -> Any:
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedJSONError(f"ERROR: invalid JSON: {exc}") from exc
    try:
        # \uXXXX escapes can decode to lone surrogates, which UTF-8 cannot carry
        json.dumps(raw, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedJSONError(f"ERROR: invalid JSON: unpaired surrogate in string: {exc}") from exc
    return raw
