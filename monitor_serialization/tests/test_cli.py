"""Tests for the monitor-intervals CLI commands."""
from __future__ import annotations

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from monitorapi import ConditionLevel, Interval
from monitor_serialization import cli
from monitor_serialization.cli import canonicalize_file, show_file, validate_file
from monitor_serialization.interval_io import load_intervals, save_intervals
from monitor_serialization.serialize import intervals_to_json

T0 = datetime(2023, 3, 1, 10, 0, 0, tzinfo=timezone.utc)


def _intervals() -> list:
    return [
        Interval(ConditionLevel.Info, "pod/x", "started", from_=T0, to=T0 + timedelta(seconds=5)),
        Interval(ConditionLevel.Info, "pod/y", "ready", from_=T0, to=T0),
    ]


@pytest.fixture
def events_path(tmp_path: Path) -> Path:
    p = tmp_path / "e2e-events.json"
    save_intervals(p, _intervals())
    return p


class TestValidateFile:

    def test_valid_file(self, events_path: Path, capsys):
        assert validate_file(events_path) == 0
        assert capsys.readouterr().out.strip() == "OK: 2 intervals"

    def test_schema_violation(self, tmp_path: Path, capsys):
        p = tmp_path / "bad.json"
        p.write_text(json.dumps({"items": [{"level": "bogus", "from": "2023-03-01T10:00:00Z"}]}),
                     encoding="utf-8")
        assert validate_file(p) == 1
        assert capsys.readouterr().out.startswith("ERROR: invalid interval file")

    def test_not_json(self, tmp_path: Path, capsys):
        p = tmp_path / "bad.json"
        p.write_text("{", encoding="utf-8")
        assert validate_file(p) == 1
        assert capsys.readouterr().out.startswith("ERROR:")

    def test_missing_file(self, tmp_path: Path, capsys):
        assert validate_file(tmp_path / "nope.json") == 1
        assert capsys.readouterr().out.startswith("ERROR:")


class TestCanonicalizeFile:

    def test_rewrites_in_canonical_order(self, tmp_path: Path):
        src = tmp_path / "unordered.json"
        items = json.loads(intervals_to_json(_intervals()))["items"]
        src.write_text(json.dumps({"items": list(reversed(items))}), encoding="utf-8")
        out = tmp_path / "canonical.json"
        assert canonicalize_file(src, out) == 0
        assert out.read_bytes() == intervals_to_json(_intervals())

    def test_drop_zero_duration(self, events_path: Path, tmp_path: Path):
        out = tmp_path / "filtered.json"
        assert canonicalize_file(events_path, out, drop_zero_duration=True) == 0
        assert [i.locator for i in load_intervals(out)] == ["pod/x"]

    def test_output_not_written_on_bad_input(self, tmp_path: Path, capsys):
        src = tmp_path / "bad.json"
        src.write_text('{"items": [{"level": "bogus", "from": "2023-03-01T10:00:00Z"}]}',
                       encoding="utf-8")
        out = tmp_path / "canonical.json"
        assert canonicalize_file(src, out) == 1
        assert not out.exists()
        assert "bogus" in capsys.readouterr().out


    def test_unpaired_surrogate_reported_not_raised(self, tmp_path: Path, capsys):
        src = tmp_path / "surrogate.json"
        src.write_text(
            '{"items": [{"level": "Info", "message": "\\ud800", "from": "2023-03-01T10:00:00Z"}]}',
            encoding="utf-8",
        )
        out = tmp_path / "canonical.json"
        assert canonicalize_file(src, out) == 1
        assert not out.exists()
        assert "unpaired surrogate" in capsys.readouterr().out


class TestShowFile:

    def test_one_line_per_interval(self, events_path: Path, capsys):
        assert show_file(events_path) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert [json.loads(line)["locator"] for line in lines] == ["pod/y", "pod/x"]


class TestMain:

    @pytest.fixture(autouse=True)
    def _no_logging_setup(self, monkeypatch):
        monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)

    def test_no_command_prints_help(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["monitor-intervals"])
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 1

    def test_validate_command(self, events_path: Path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["monitor-intervals", "validate", "--file", str(events_path)])
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 0
        assert "OK: 2 intervals" in capsys.readouterr().out

    def test_verify_command(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["monitor-intervals", "verify"])
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.strip() == "OK: monitor-intervals verified"
