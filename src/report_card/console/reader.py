"""
Module: console.reader

Purpose:
    Read one trimmed line of console input. End of input and stream
    failures surface as InputReadError rather than an empty string, so
    callers never spin on a closed stdin.

Key Functions:
    - read_line(): Read and trim a single line

Used By:
    - console.prompts: Both prompt flavors
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from report_card.errors import InputReadError

logger = logging.getLogger(__name__)


def read_line(stream: Optional[TextIO] = None) -> str:
    """
    Read exactly one line and strip surrounding whitespace.

    Args:
        stream: Text stream to read from (defaults to sys.stdin)

    Returns:
        The line with leading/trailing whitespace and terminator removed

    Raises:
        InputReadError: If the stream is exhausted or cannot be read
    """
    if stream is None:
        stream = sys.stdin

    try:
        raw = stream.readline()
    except (OSError, ValueError) as e:
        logger.debug(f"Console read failed: {e}")
        raise InputReadError(f"Failed to read line: {e}") from e

    if raw == "":
        logger.debug("Console read hit end of input")
        raise InputReadError("Failed to read line: end of input")

    return raw.strip()
