import json
from pathlib import Path
from typing import Iterable, Union

import jsonschema

from monitorapi import Interval

from .schema_loader import load_schema
from .serialize import intervals_to_json

_SCHEMA_NAME = "EventIntervalList.v1.json"


def validate_interval_list(data: dict) -> None:
    """Validate a parsed interval document against EventIntervalList.v1.json.

    Raises jsonschema.ValidationError if non-conformant.
    """
    jsonschema.validate(data, load_schema(_SCHEMA_NAME))


def validate_interval_list_file(path: Union[str, Path]) -> None:
    """Load an interval JSON file and validate it against the schema.

    Raises:
        jsonschema.ValidationError: the document is non-conformant.
        json.JSONDecodeError: the file is not JSON.
        OSError: the file cannot be read.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    validate_interval_list(data)


def validate_intervals(intervals: Iterable[Interval]) -> None:
    """Serialize *intervals* and validate the resulting document.

    Raises jsonschema.ValidationError if the serialized form is non-conformant.
    """
    validate_interval_list(json.loads(intervals_to_json(intervals)))
