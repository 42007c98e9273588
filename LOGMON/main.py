#!/usr/bin/env python3
"""
Log Monitor - Main Entry Point
Tail a log file in the terminal UI
"""
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from LOGMON.app_logging import configure_logging
from LOGMON.core.config import DEFAULT_LOG_PATH, MonitorSettings
from LOGMON.core.controller import LogMonitor
from LOGMON.core.errors import LogReadError
from LOGMON.UI import run_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser

    Options left unset fall back to LOGMON_* environment variables and
    then to the settings defaults.
    """
    parser = argparse.ArgumentParser(
        prog="logmon",
        description="Tail a log file with filtering, statistics and follow mode",
    )
    parser.add_argument("log_path", nargs="?", default=None,
                        help=f"Log file to monitor (default: {DEFAULT_LOG_PATH})")
    parser.add_argument("--max-entries", type=int, default=None,
                        help="Maximum entries kept in memory (default: 1000)")
    parser.add_argument("--initial-lines", type=int, default=None,
                        help="Lines loaded from the end of the file at startup (default: 100)")
    parser.add_argument("--interval", dest="poll_interval", type=float, default=None,
                        help="Seconds between file polls (default: 0.5)")
    parser.add_argument("--no-live-filter", dest="live_filter", action="store_false",
                        default=None,
                        help="Apply the filter only when Enter is pressed")
    parser.add_argument("--log-dir", default=None,
                        help="Directory for the monitor's own log (default: app_log)")
    parser.add_argument("--debug", action="store_true",
                        help="Write debug messages to the monitor's own log")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = MonitorSettings.from_env(
            args.log_path,
            max_entries=args.max_entries,
            initial_lines=args.initial_lines,
            poll_interval=args.poll_interval,
            live_filter=args.live_filter,
            log_dir=args.log_dir,
        )
    except ValidationError as e:
        print(f"Invalid settings:\n{e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_dir, logging.DEBUG if args.debug else logging.INFO)

    monitor = LogMonitor(settings)
    try:
        monitor.load()
    except LogReadError as e:
        logger.error("Startup failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        run_app(monitor)
    except KeyboardInterrupt:
        print("\nLog Monitor terminated by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
