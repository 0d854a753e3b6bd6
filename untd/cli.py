"""
Command-line argument parsing for untd.

Defaults for the timezone, format and clipboard options come from the
environment (see ``untd.config``) so they can be overridden per shell.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import NamedTuple

from untd import __version__
from untd.config import Config
from untd.utils.formatters import Preset

_NEGATIVE_OFFSET_RE = re.compile(r"^-\d+[a-zA-Z]*$")
_NEGATIVE_TZ_RE = re.compile(r"^-\d{1,2}(?::?\d{2})?$")
_NEGATIVE_VALUE_OPTIONS: dict[str, tuple[str, re.Pattern[str]]] = {
    "-o": ("--offset", _NEGATIVE_OFFSET_RE),
    "--offset": ("--offset", _NEGATIVE_OFFSET_RE),
    "-z": ("--timezone", _NEGATIVE_TZ_RE),
    "--timezone": ("--timezone", _NEGATIVE_TZ_RE),
}


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    timestamp: int | None
    format: str
    offset: str | None
    range_count: int
    timezone: str
    copy: bool
    verbose: bool


def create_argument_parser(config: Config) -> argparse.ArgumentParser:
    presets = ", ".join(preset.value for preset in Preset)
    parser = argparse.ArgumentParser(
        prog="untd",
        description="Print the current date/time (or a Unix timestamp) in a chosen format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  untd
    Today's date, e.g. 2025-03-24

  untd -f iso -z JST
    2025-03-24T09:38:29+0900

  untd -f jpwd -o -1d
    Yesterday in Japanese with weekday, e.g. 2025年03月23日(日)

  untd -f "%Y/%m/%d %H:%M" -r 7 --no-copy
    One line per day for the next week
""",
    )

    _ = parser.add_argument(
        "timestamp",
        nargs="?",
        type=int,
        default=None,
        help="Unix timestamp in seconds (default: now)",
    )
    _ = parser.add_argument(
        "-f",
        "--format",
        default=config.default_format,
        help=f"Output format: one of {presets}, or a strftime-style template (default: %(default)s)",
        metavar="FORMAT",
    )
    _ = parser.add_argument(
        "-o",
        "--offset",
        default=None,
        help="Relative offset such as 1d, -3h, 30m, -45s",
        metavar="OFFSET",
    )
    _ = parser.add_argument(
        "-r",
        "--range",
        dest="range_count",
        type=int,
        default=1,
        help="Number of consecutive days to print (default: %(default)s)",
        metavar="COUNT",
    )
    _ = parser.add_argument(
        "-z",
        "--timezone",
        default=config.default_timezone,
        help="local, UTC, JST, an IANA name or a fixed offset like +09:00 (default: %(default)s)",
        metavar="TZ",
    )
    _ = parser.add_argument(
        "-c",
        "--copy",
        action=argparse.BooleanOptionalAction,
        default=config.copy_to_clipboard,
        help="Copy the output to the clipboard",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def normalize_argv(argv: list[str]) -> list[str]:
    # argparse treats "-1d" or "-05:00" as an option flag; bind such values to their option explicitly.
    normalized: list[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        binding = _NEGATIVE_VALUE_OPTIONS.get(token)
        if binding is not None and index + 1 < len(argv):
            long_flag, value_re = binding
            value = argv[index + 1]
            if value_re.fullmatch(value):
                normalized.append(f"{long_flag}={value}")
                index += 2
                continue
        normalized.append(token)
        index += 1
    return normalized


def parse_arguments(argv: list[str] | None, config: Config) -> ParsedArgs:
    parser = create_argument_parser(config)
    if argv is None:
        argv = sys.argv[1:]
    parsed = parser.parse_args(normalize_argv(argv))
    return ParsedArgs(
        timestamp=parsed.timestamp,
        format=parsed.format,
        offset=parsed.offset,
        range_count=parsed.range_count,
        timezone=parsed.timezone,
        copy=parsed.copy,
        verbose=parsed.verbose,
    )
