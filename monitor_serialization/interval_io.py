"""
interval_io.py — Load and save interval JSON files.

Files hold exactly the bytes produced by intervals_to_json (or the filtered
variant), so identical interval sets always produce byte-identical files.
There is no partial-write recovery: a save that raises leaves no usable file.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from monitorapi import Interval

from .serialize import intervals_from_json, intervals_to_json, intervals_to_json_filtered

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_intervals(path: PathLike, intervals: Iterable[Interval]) -> None:
    """Write every interval to *path* in canonical order.

    Args:
        path: Destination file path (created or overwritten).
        intervals: Intervals to persist.

    Raises:
        OSError: If the file cannot be written.
    """
    _write(Path(path), intervals_to_json(intervals))


def save_intervals_filtered(path: PathLike, intervals: Iterable[Interval]) -> None:
    """Write intervals to *path*, leaving out closed zero-duration intervals.

    Raises:
        OSError: If the file cannot be written.
    """
    _write(Path(path), intervals_to_json_filtered(intervals))


def load_intervals(path: PathLike) -> List[Interval]:
    """Load intervals from a JSON file written by save_intervals.

    Args:
        path: Path to the JSON file.

    Returns:
        The intervals, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        MalformedJSONError: If the file is not a valid interval document.
        InvalidLevelError: If an interval has an unknown level.
    """
    data = Path(path).read_bytes()
    intervals = intervals_from_json(data)
    logger.debug("loaded %d intervals from %s", len(intervals), path)
    return intervals


def _write(path: Path, data: bytes) -> None:
    path.write_bytes(data)
    logger.debug("wrote %d bytes to %s", len(data), path)
