"""
Xpectate Command Line Interface.

Usage:
    xpectate /path/to/project --ext css --ext scss --command "make styles"
"""

import argparse
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from xpectate.utils.config import LoggingSettings, Settings, WatcherSettings
from xpectate.utils.logger import configure_logging, get_logger
from xpectate.watcher import SetupError, watch


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="xpectate",
        description="Watch a path and run a command when files change",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="File or directory to watch (recursively)",
    )
    parser.add_argument(
        "-e",
        "--ext",
        dest="extensions",
        action="append",
        default=None,
        metavar="EXT",
        help="Only react to files with this extension, without the dot (repeatable)",
    )
    parser.add_argument(
        "-c",
        "--command",
        default=None,
        help="Command line to run on change, split on whitespace",
    )
    parser.add_argument(
        "--debounce-ms",
        type=int,
        default=None,
        help="Minimum milliseconds between two command runs",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-format",
        choices=["console", "json"],
        default=None,
        help="Log output format",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build settings from the environment, overridden by command line flags."""
    watcher_overrides = {}
    if args.debounce_ms is not None:
        watcher_overrides["debounce_window_ms"] = args.debounce_ms

    logging_overrides = {}
    if args.log_level is not None:
        logging_overrides["level"] = args.log_level
    if args.log_format is not None:
        logging_overrides["format"] = args.log_format

    return Settings(
        watcher=WatcherSettings(**watcher_overrides),
        logging=LoggingSettings(**logging_overrides),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        error = e.errors()[0]
        parser.error(f"{error['loc'][-1]}: {error['msg']}")

    configure_logging(settings)
    logger = get_logger("xpectate")

    try:
        watch(args.path, args.extensions, args.command, settings=settings)
    except SetupError as e:
        logger.error("watch_setup_failed", path=str(args.path), error=str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("watch_interrupted")

    return 0
