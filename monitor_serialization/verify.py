"""monitor-intervals verify — byte-identity check against committed goldens."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Dict, List

from monitorapi import ConditionLevel, Interval, StructuredLocator, StructuredMessage

from .serialize import intervals_from_json, intervals_to_json, intervals_to_json_filtered

logger = logging.getLogger(__name__)

_REPO_ROOT = Path(__file__).resolve().parent.parent
GOLDENS_DIR = _REPO_ROOT / "tests" / "contract_vectors" / "intervals" / "goldens"

T0 = datetime(2023, 3, 1, 10, 0, 0, tzinfo=timezone.utc)


# ── Vector intervals (pinned by the goldens) ──────────────────────────────────

def vector_intervals() -> List[Interval]:
    """Three intervals recorded out of canonical order.

    One open interval (no ``to``), one closed zero-duration interval and one
    five-second interval with structured payloads.
    """
    return [
        Interval(
            level=ConditionLevel.Info,
            locator="ns/e2e pod/x",
            message="started",
            from_=T0,
            to=T0 + timedelta(seconds=5),
            source="E2ETest",
            structured_locator=StructuredLocator(
                {"type": "Pod", "keys": {"namespace": "e2e", "pod": "x"}}
            ),
            structured_message=StructuredMessage(
                {"reason": "Started", "humanMessage": "started"}
            ),
        ),
        Interval(
            level=ConditionLevel.Warning,
            locator="ns/e2e pod/y",
            message="ready",
            from_=T0,
            to=T0,
        ),
        Interval(
            level=ConditionLevel.Error,
            locator="node/worker-1",
            message="node not ready",
            from_=T0 - timedelta(seconds=30),
            source="NodeState",
        ),
    ]


_VECTORS: Dict[str, Callable[[], bytes]] = {
    "intervals_full.json": lambda: intervals_to_json(vector_intervals()),
    "intervals_filtered.json": lambda: intervals_to_json_filtered(vector_intervals()),
}


def _run_vectors() -> Dict[str, bytes]:
    return {name: produce() for name, produce in _VECTORS.items()}


def _check_against_goldens(artifacts: Dict[str, bytes]) -> bool:
    """Return True iff every artifact matches its golden file and reloads cleanly."""
    for name, produced in artifacts.items():
        golden = (GOLDENS_DIR / name).read_bytes()
        if produced != golden:
            logger.error("vector %s does not match its golden", name)
            return False
        # the golden must survive a load/save cycle unchanged
        if intervals_to_json(intervals_from_json(golden)) != golden:
            logger.error("vector %s is not stable across a reload", name)
            return False
    return True


def run_verify() -> bool:
    """Run every vector twice; True only if both runs match the goldens and each other."""
    try:
        run1 = _run_vectors()
        run2 = _run_vectors()
        return _check_against_goldens(run1) and run1 == run2
    except FileNotFoundError as exc:
        logger.error("missing golden: %s", exc)
        return False
