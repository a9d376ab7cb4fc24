"""Logging setup for the monitor-intervals command line.

The library modules only create loggers; handlers are installed here, once,
by the CLI.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_CONFIGURED_FLAG = "_monitor_intervals_configured"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonLineFormatter(logging.Formatter):
    """Render log records as compact JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, separators=(",", ":"))


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Install a single stderr handler on the root logger; later calls are no-ops."""
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG, False):
        return

    handler = logging.StreamHandler(stream=sys.stderr)
    if json_output:
        handler.setFormatter(JsonLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
    setattr(root, _CONFIGURED_FLAG, True)
