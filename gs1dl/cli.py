"""Command-line demonstrator: parse one Digital Link URI and print its renderings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from gs1dl.core.config import get_settings
from gs1dl.core.logging import configure_logging, get_logger
from gs1dl.digital_link import (
    DigitalLinkParseError,
    ParsedElements,
    format_bracketed,
    format_json,
    format_unbracketed,
    parse,
)

logger = get_logger(__name__)

EXAMPLE_URI = "https://id.gs1.org/01/09520123456788/10/ABC%2F123/21/12345?17=180426"

_LABEL_WIDTH = 59


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gs1dl",
        description="Extract the AI elements from an uncompressed GS1 Digital Link URI.",
        epilog=f"Example: gs1dl '{EXAMPLE_URI}'",
    )
    parser.add_argument("uri", help="Digital Link URI to parse.")
    parser.add_argument(
        "--format",
        choices=("all", "unbracketed", "bracketed", "json"),
        default="all",
        help="Print every rendering (default) or a single one.",
    )
    parser.add_argument(
        "--fixed-first",
        action="store_true",
        default=None,
        help="With a single --format, order fixed-length AIs ahead of the others.",
    )
    parser.add_argument(
        "--extra-separator",
        action="store_true",
        default=None,
        help="With --format unbracketed, emit an FNC1 after every element.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default=None,
        help="Override the configured log level.",
    )
    return parser.parse_args(argv)


def _renderings(parsed: ParsedElements) -> list[tuple[str, str]]:
    return [
        ("Unbracketed element string", format_unbracketed(parsed, False, False)),
        ("Unbracketed element string (extra FNC1s)", format_unbracketed(parsed, False, True)),
        ("Unbracketed element string (fixed AIs first)", format_unbracketed(parsed, True, False)),
        (
            "Unbracketed element string (fixed AIs first; extra FNC1s)",
            format_unbracketed(parsed, True, True),
        ),
        ("Bracketed element string", format_bracketed(parsed, False)),
        ("Bracketed element string (fixed AIs first)", format_bracketed(parsed, True)),
        ("JSON", format_json(parsed, False)),
        ("JSON (fixed AIs first)", format_json(parsed, True)),
    ]


def _render_single(parsed: ParsedElements, fmt: str, fixed_first: bool, extra: bool) -> str:
    if fmt == "unbracketed":
        return format_unbracketed(parsed, fixed_first, extra)
    if fmt == "bracketed":
        return format_bracketed(parsed, fixed_first)
    return format_json(parsed, fixed_first)


def _write_line(line: str) -> None:
    # Decoded values hold one octet per character; write the octets unchanged
    sys.stdout.flush()
    sys.stdout.buffer.write(line.encode("latin-1") + b"\n")
    sys.stdout.buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level)

    try:
        parsed = parse(args.uri)
    except DigitalLinkParseError as exc:
        _write_line(f"Error: {exc.message}")
        return 1

    if args.format != "all":
        fixed_first = settings.default_fixed_first if args.fixed_first is None else args.fixed_first
        extra = (
            settings.default_extra_separator
            if args.extra_separator is None
            else args.extra_separator
        )
        _write_line(_render_single(parsed, args.format, fixed_first, extra))
        return 0

    _write_line(f"{'Provided Digital Link URI:':<{_LABEL_WIDTH}}{args.uri}")
    for label, output in _renderings(parsed):
        _write_line(f"{label + ':':<{_LABEL_WIDTH}}{output}")
    logger.info("dl_cli_rendered", count=len(parsed))
    return 0


if __name__ == "__main__":
    sys.exit(main())
