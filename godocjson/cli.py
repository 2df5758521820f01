"""Command-line entry point: print a package model dump as documentation JSON."""

import argparse
import sys
from pathlib import Path

from godocjson.exceptions import GoDocJSONError
from godocjson.flatten import flatten_package
from godocjson.loader import load_dump, select_package
from godocjson.logging import get_logger, setup_logging
from godocjson.records import dump_package
from godocjson.settings import settings

logger = get_logger(__name__)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"unknown level {value!r} (choose from {', '.join(LOG_LEVELS)})")
    return level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godocjson",
        description="Convert a Go documentation model dump into godocjson JSON",
    )
    parser.add_argument("dump", nargs="?", help="Model dump file (.json, .yml/.yaml) or - for stdin")
    parser.add_argument(
        "-e",
        dest="exclude",
        default=settings.exclude_pattern,
        metavar="REGEX",
        help="Regex filter for excluding source files",
    )
    parser.add_argument(
        "--indent",
        type=_non_negative_int,
        default=settings.indent,
        help="JSON indentation, 0 for compact output (default: %(default)s)",
    )
    parser.add_argument("--log-level", type=_log_level, default=settings.log_level, help="Log level (default: %(default)s)")
    parser.add_argument("--logging-config", type=Path, help="YAML logging configuration file")
    return parser


def run(dump: str, exclude: str = "", indent: int = 2) -> str | None:
    """Load, filter and flatten a dump; return the JSON text or None if no package remains."""
    model = load_dump(dump)
    package = select_package(model, exclude)
    if package is None:
        logger.warning("No package left in %s", dump)
        return None
    return dump_package(flatten_package(package, model.fileset), indent=indent or None)


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.logging_config, level=args.log_level)

    if not args.dump:
        parser.print_usage(sys.stderr)
        print("Fatal: Please specify a model dump.", file=sys.stderr)
        return 1

    try:
        output = run(args.dump, args.exclude, args.indent)
    except GoDocJSONError as exc:
        logger.error("Failed to document %s: %s", args.dump, exc)
        print(f"Fatal: {exc}", file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0
