"""
Command-line entry point.

Usage:
    access-log-analyzer app.log
    access-log-analyzer https://example.com/app.log
    cat app.log | access-log-analyzer
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import FETCH_TIMEOUT, setup_logging
from services.engine import analyze, format_report
from services.loader import STDIN_SOURCE, LogLoader, LogSourceError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="access-log-analyzer",
        description="Summarize traffic volume, status codes and endpoint latency from an access log.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=STDIN_SOURCE,
        help="http(s) URL, file path, or '-' for standard input (default)",
    )
    parser.add_argument("--timeout", type=float, default=FETCH_TIMEOUT, help="URL fetch timeout in seconds")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON instead of the text report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    args = parser.parse_args(argv)
    if args.timeout <= 0:
        parser.error("--timeout must be positive")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        data = LogLoader(timeout=args.timeout).load(args.source)
    except LogSourceError as e:
        logger.error("%s", e)
        return 1

    report = analyze(data)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        format_report(report, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
