"""Command-line interface for the boarding planner.

Reads a booking file (or stdin), prints the boarding sequence to stdout and
diagnostics to stderr.

Exit codes:
    0  sequence printed
    1  validation diagnostics in strict mode, nothing printed to stdout
    2  input could not be read or settings are invalid
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from boarding.errors import InputReadError
from boarding.logging_config import configure_logging
from boarding.models import BoardingSequenceEntry
from boarding.pipeline import BoardingPlan, plan_boarding
from boarding.settings import OUTPUT_FORMATS, get_settings

logger = logging.getLogger(__name__)


def read_booking_text(path: str, stdin: TextIO | None = None) -> str:
    """Read the whole booking file, or stdin for "-".

    Raises:
        InputReadError: if the file is missing, unreadable or not UTF-8
    """
    if path == "-":
        return (stdin if stdin is not None else sys.stdin).read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Cannot read booking file {path}", cause=e) from e


def format_table(sequence: list[BoardingSequenceEntry]) -> str:
    lines = ["Seq\tBooking_ID"]
    lines.extend(f"{entry.seq}\t{entry.booking_id}" for entry in sequence)
    return "\n".join(lines)


def format_json(plan: BoardingPlan) -> str:
    payload = {
        "sequence": [entry.model_dump() for entry in plan.sequence],
        "diagnostics": plan.diagnostics,
    }
    return json.dumps(payload, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boarding", description="Generate a bus boarding sequence from bookings.")
    parser.add_argument("path", nargs="?", default="-", help="Booking file path or '-' for stdin")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format (default: table)")
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Print a sequence even when validation reports problems",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    stdin: TextIO | None = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    configure_logging(source="cli", debug=args.debug or None, stream=err)

    try:
        settings = get_settings()
    except ValidationError as e:
        err.write(f"error: invalid BOARDING_* settings: {e.errors()[0]['msg']}\n")
        return 2

    output_format = args.format or settings.output_format
    strict = settings.strict and not args.no_strict

    try:
        text = read_booking_text(args.path, stdin=stdin)
    except InputReadError as e:
        err.write(f"error: {e}\n")
        return 2

    logger.debug(f"Read {len(text)} characters from {args.path}")
    plan = plan_boarding(text, strict=strict)

    for issue in plan.warnings:
        err.write(f"warning: {issue.message}\n")
    for diagnostic in plan.diagnostics:
        err.write(f"error: {diagnostic}\n")

    if strict and not plan.is_valid:
        return 1

    if output_format == "json":
        out.write(format_json(plan) + "\n")
    else:
        out.write(format_table(plan.sequence) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
