# Monitor interval serialization — canonical JSON encode/decode and file I/O
from .convert import from_wire, to_wire
from .errors import IntervalSerializationError, InvalidLevelError, MalformedJSONError
from .interval_io import load_intervals, save_intervals, save_intervals_filtered
from .models import EventInterval, EventIntervalList
from .ordering import compare_intervals, interval_sort_key, sort_event_intervals
from .serialize import (
    interval_from_json,
    interval_to_one_line_json,
    intervals_from_json,
    intervals_to_json,
    intervals_to_json_filtered,
)

__all__ = [
    "EventInterval",
    "EventIntervalList",
    "IntervalSerializationError",
    "InvalidLevelError",
    "MalformedJSONError",
    "compare_intervals",
    "from_wire",
    "interval_from_json",
    "interval_sort_key",
    "interval_to_one_line_json",
    "intervals_from_json",
    "intervals_to_json",
    "intervals_to_json_filtered",
    "load_intervals",
    "save_intervals",
    "save_intervals_filtered",
    "sort_event_intervals",
    "to_wire",
]
