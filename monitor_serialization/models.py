"""EventInterval and EventIntervalList — the on-disk shape of monitor intervals.

Field order below is the key order of the written JSON.  The flat ``locator``
and ``message`` fields and their ``tempStructured*`` counterparts are both
written while consumers migrate; readers trust the flat fields and carry the
structured ones through untouched.

extra="ignore" on both models: unknown keys in a file are dropped rather than
rejected.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from monitorapi import StructuredLocator, StructuredMessage


def format_wire_time(value: Optional[datetime]) -> Optional[str]:
    """Render an instant as RFC 3339 in UTC; an unset instant renders as null.

    Whole-second instants carry no fraction; anything finer is written with
    six fractional digits so that no precision is lost.
    """
    if value is None:
        return None
    value = _as_utc(value).replace(tzinfo=None)
    timespec = "microseconds" if value.microsecond else "seconds"
    return value.isoformat(timespec=timespec) + "Z"


def _empty_as_unset(value: Any) -> Any:
    if value == "":
        return None
    return value


def _null_as_empty(value: Any) -> Any:
    if value is None:
        return []
    return value


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # naive instants are read as UTC
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Timestamps as they appear on the wire.  Parsing is pydantic's RFC 3339 parser.
WireTime = Annotated[
    datetime,
    AfterValidator(_as_utc),
    PlainSerializer(format_wire_time, return_type=str),
]
OptionalWireTime = Annotated[
    Optional[datetime],
    BeforeValidator(_empty_as_unset),
    AfterValidator(_as_utc),
    PlainSerializer(format_wire_time, return_type=Optional[str]),
]


class EventInterval(BaseModel):
    """One serialized interval."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    level: str = ""
    locator: str = ""
    message: str = ""
    source: str = Field(default="", alias="tempSource")
    sub_source: str = Field(default="", alias="tempSubSource")
    structured_locator: StructuredLocator = Field(
        default_factory=StructuredLocator, alias="tempStructuredLocator"
    )
    structured_message: StructuredMessage = Field(
        default_factory=StructuredMessage, alias="tempStructuredMessage"
    )
    from_: WireTime = Field(alias="from")
    to: OptionalWireTime = None

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready dict for this record.

        ``tempSource`` and ``tempSubSource`` are left out when empty.
        """
        exclude = {name for name in ("source", "sub_source") if not getattr(self, name)}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


class EventIntervalList(BaseModel):
    """Top-level document: ``{"items": [...]}``."""

    model_config = ConfigDict(extra="ignore")

    items: Annotated[List[EventInterval], BeforeValidator(_null_as_empty)] = []

    def to_json_dict(self) -> Dict[str, Any]:
        return {"items": [item.to_json_dict() for item in self.items]}
