"""Command line front end: ``valuecast FORMAT VALUE``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

import orjson

from .config import ConfigurationError
from .converters import convert, string, supported_formats
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_FAILED = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valuecast",
        description="Convert a value to an OpenAPI format representation.",
    )
    parser.add_argument("format", choices=supported_formats(), help="Target format")
    parser.add_argument("value", help="Value to convert (a plain string unless --json is given)")
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Parse VALUE as JSON first so numbers, booleans, null and objects can be supplied",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $VALUECAST_LOG_LEVEL or WARNING)")
    return parser


def _parse_input(parser: argparse.ArgumentParser, raw: str, as_json: bool) -> Any:
    if not as_json:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        parser.error(f"VALUE is not valid JSON: {exc}")


def _render_output(value: Any) -> str:
    if isinstance(value, str):
        return value
    return string(value).unwrap()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level, user_friendly=True)
    except ConfigurationError as exc:
        parser.error(str(exc))

    value = _parse_input(parser, args.value, args.as_json)
    result = convert(args.format, value)
    if not result.ok:
        print(result.error, file=sys.stderr)
        return EXIT_CONVERSION_FAILED

    logger.info("Converted %s input to %s", type(value).__name__, args.format)
    print(_render_output(result.value))
    return EXIT_OK
