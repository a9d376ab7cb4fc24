"""monitor-intervals CLI entry point."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import get_settings
from .errors import IntervalSerializationError
from .logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="monitor-intervals",
        description="Canonical JSON persistence for monitor intervals",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.add_parser("verify", help="Run contract vector verification")
    validate_parser = sub.add_parser(
        "validate", help="Validate an interval JSON file against the schema and decode it",
    )
    validate_parser.add_argument(
        "--file", required=True, metavar="intervals.json",
        help="Path to an interval JSON file",
    )
    canonicalize_parser = sub.add_parser(
        "canonicalize", help="Rewrite an interval JSON file in canonical order",
    )
    canonicalize_parser.add_argument(
        "--input", required=True, metavar="intervals.json",
        help="Path to an interval JSON file",
    )
    canonicalize_parser.add_argument(
        "--output", required=True, metavar="intervals.json",
        help="Destination path for the canonical file",
    )
    canonicalize_parser.add_argument(
        "--drop-zero-duration", action="store_true",
        help="Leave out closed intervals whose end equals their start",
    )
    show_parser = sub.add_parser("show", help="Print each interval as one line of JSON")
    show_parser.add_argument(
        "--file", required=True, metavar="intervals.json",
        help="Path to an interval JSON file",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)

    if args.command == "verify":
        from .verify import run_verify
        if run_verify():
            print("OK: monitor-intervals verified")
            sys.exit(0)
        print("ERROR: monitor-intervals verification failed")
        sys.exit(1)
    elif args.command == "validate":
        sys.exit(validate_file(Path(args.file)))
    elif args.command == "canonicalize":
        sys.exit(canonicalize_file(Path(args.input), Path(args.output), args.drop_zero_duration))
    elif args.command == "show":
        sys.exit(show_file(Path(args.file)))
    else:
        parser.print_help()
        sys.exit(1)


def _print_error(exc: BaseException) -> None:
    message = str(exc)
    print(message if message.startswith("ERROR:") else f"ERROR: {message}")


def validate_file(path: Path) -> int:
    """Schema-check and fully decode *path*; print OK/ERROR and return the exit code."""
    import jsonschema
    from .contract_validate import validate_interval_list_file
    from .interval_io import load_intervals

    try:
        validate_interval_list_file(path)
        intervals = load_intervals(path)
    except jsonschema.ValidationError as exc:
        print(f"ERROR: invalid interval file: {exc.message}")
        return 1
    except (IntervalSerializationError, ValueError, OSError) as exc:
        logger.debug("validation of %s failed", path, exc_info=True)
        _print_error(exc)
        return 1
    print(f"OK: {len(intervals)} intervals")
    return 0


def canonicalize_file(input_path: Path, output_path: Path, drop_zero_duration: bool = False) -> int:
    """Load *input_path* and rewrite it to *output_path* in canonical order.

    The output file is never written when the input fails to load.
    """
    from .interval_io import load_intervals, save_intervals, save_intervals_filtered

    try:
        intervals = load_intervals(input_path)
    except (IntervalSerializationError, OSError) as exc:
        _print_error(exc)
        return 1
    save = save_intervals_filtered if drop_zero_duration else save_intervals
    try:
        save(output_path, intervals)
    except OSError as exc:
        _print_error(exc)
        return 1
    print(f"OK: wrote {output_path}")
    return 0


def show_file(path: Path) -> int:
    """Print every interval in *path*, in canonical order, one compact JSON object per line."""
    from .convert import to_wire
    from .interval_io import load_intervals
    from .ordering import interval_sort_key
    from .serialize import interval_to_one_line_json

    try:
        intervals = load_intervals(path)
    except (IntervalSerializationError, OSError) as exc:
        _print_error(exc)
        return 1
    for interval in sorted(intervals, key=lambda i: interval_sort_key(to_wire(i))):
        print(interval_to_one_line_json(interval).decode("utf-8"))
    return 0
