"""
Command line entry point for the Student Report Card Generator.

Exit status is 0 after a completed session and 1 when console input
cannot be read.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from report_card import __version__
from report_card.controller import run_session
from report_card.errors import InputReadError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr so they never mix with the session on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-card",
        description="Collect a student's marks and print a report card",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        run_session()
    except InputReadError as e:
        logger.error(f"Aborting: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
