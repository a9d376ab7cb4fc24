# Monitor API — interval domain types consumed by the serializer
from .types import (
    ConditionLevel,
    Interval,
    IntervalSource,
    StructuredLocator,
    StructuredMessage,
    condition_level_from_string,
)

__all__ = [
    "ConditionLevel",
    "Interval",
    "IntervalSource",
    "StructuredLocator",
    "StructuredMessage",
    "condition_level_from_string",
]
