"""Command-line entry point.

Usage:
    lift-log QmVuY2ggUHJlc3M...          # base64 payload as argument
    pbpaste | lift-log --raw             # pasted cells on stdin
    lift-log --date 2024-03-01 --html PAYLOAD
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from lift_log.config import LOG_FORMAT, LOG_LEVEL
from lift_log.exceptions import PayloadDecodeError
from lift_log.pipeline import build_workout_log
from lift_log.serialization import to_html

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lift-log",
        description="Format copied spreadsheet cells as a dated workout log",
    )
    parser.add_argument(
        "payload",
        nargs="?",
        help="Base64 payload (read from stdin when omitted)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Input is pasted spreadsheet text rather than base64",
    )
    parser.add_argument("--html", action="store_true", help="Emit <br/> line breaks")
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Date for the log header (default: today, UTC)",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    data = args.payload if args.payload is not None else sys.stdin.read()

    try:
        workout = build_workout_log(data, args.date, encoded=not args.raw)
    except PayloadDecodeError as exc:
        logger.error("%s", exc)
        return 2

    sys.stdout.write(to_html(workout) if args.html else workout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
