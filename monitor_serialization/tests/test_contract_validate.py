"""Schema-level tests: serialized intervals conform to EventIntervalList.v1.json."""
from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import jsonschema
import pytest

from monitorapi import ConditionLevel, Interval, StructuredMessage
from monitor_serialization.contract_validate import (
    validate_interval_list,
    validate_interval_list_file,
    validate_intervals,
)
from monitor_serialization.interval_io import save_intervals
from monitor_serialization.schema_loader import load_schema

T0 = datetime(2023, 3, 1, 10, 0, 0, tzinfo=timezone.utc)


def _intervals() -> list:
    return [
        Interval(ConditionLevel.Info, "pod/x", "started", from_=T0, to=T0 + timedelta(seconds=5)),
        Interval(ConditionLevel.Error, "pod/y", "failed", from_=T0, source="PodState",
                 structured_message=StructuredMessage({"reason": "Failed"})),
        Interval(ConditionLevel.Warning, "pod/z", "slow", from_=T0.replace(microsecond=250000),
                 to=T0.replace(microsecond=250000)),
    ]


class TestSchema:

    def test_schema_loads(self):
        schema = load_schema("EventIntervalList.v1.json")
        assert schema["title"] == "EventIntervalList"

    def test_missing_schema_raises(self):
        with pytest.raises(FileNotFoundError, match="Missing interval schema"):
            load_schema("Nope.v1.json")


class TestValidateIntervalList:

    def test_serialized_intervals_conform(self):
        validate_intervals(_intervals())

    def test_empty_document_conforms(self):
        validate_interval_list({"items": []})

    def test_missing_items_rejected(self):
        with pytest.raises(jsonschema.ValidationError):
            validate_interval_list({})

    def test_unknown_level_rejected(self):
        doc = {"items": [{"level": "bogus", "from": "2023-03-01T10:00:00Z"}]}
        with pytest.raises(jsonschema.ValidationError):
            validate_interval_list(doc)

    def test_bad_timestamp_rejected(self):
        doc = {"items": [{"level": "Info", "from": "March 1st"}]}
        with pytest.raises(jsonschema.ValidationError):
            validate_interval_list(doc)

    @pytest.mark.parametrize("to", [None, "", "2023-03-01T10:00:05Z", "2023-03-01T10:00:05.5+02:00"])
    def test_to_variants_accepted(self, to):
        validate_interval_list({"items": [{"level": "Info", "from": "2023-03-01T10:00:00Z", "to": to}]})


class TestValidateIntervalListFile:

    def test_saved_file_conforms(self, tmp_path: Path):
        path = tmp_path / "e2e-events.json"
        save_intervals(path, _intervals())
        validate_interval_list_file(path)

    def test_non_conformant_file_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"not": "intervals"}), encoding="utf-8")
        with pytest.raises(jsonschema.ValidationError):
            validate_interval_list_file(path)
