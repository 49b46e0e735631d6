"""
Module: console.prompts

Purpose:
    Prompt until the user enters a valid value. Retry is unbounded: bad
    input prints a diagnostic and the prompt is shown again. A read
    failure is never retried; InputReadError propagates to the caller.

Key Functions:
    - prompt_string(): Non-empty text
    - prompt_non_negative_int(): Unsigned 32-bit integer
    - validate_non_empty(): Validator behind prompt_string
    - parse_non_negative_int(): Strict parser behind prompt_non_negative_int

Dependencies:
    - console.reader: read_line()

Used By:
    - controller.run_session: Collects the Student fields
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO

from .reader import read_line

logger = logging.getLogger(__name__)

U32_MAX = 4_294_967_295

EMPTY_INPUT_MESSAGE = "Input cannot be empty. Please try again."
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a valid number."

# ASCII digits only: no sign, separator, decimal point or Unicode digits
_DIGITS = re.compile(r"[0-9]+")


def validate_non_empty(text: str) -> str:
    """
    Trim text and reject it if nothing is left.

    Raises:
        ValueError: If text is empty or whitespace only
    """
    trimmed = text.strip()
    if not trimmed:
        raise ValueError("Input cannot be empty")
    return trimmed


def parse_non_negative_int(text: str) -> int:
    """
    Parse text as a non-negative base-10 integer that fits in 32 bits.

    Leading zeros are accepted. Signs, decimal points, underscores,
    whitespace and any other characters are rejected.

    Args:
        text: Already-trimmed input text

    Returns:
        Parsed integer in the range 0..U32_MAX

    Raises:
        ValueError: If text is not a valid number or exceeds U32_MAX

    Example:
        >>> parse_non_negative_int("4294967295")
        4294967295
        >>> parse_non_negative_int("-5")
        Traceback (most recent call last):
        ...
        ValueError: Not a non-negative integer: '-5'
    """
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"Not a non-negative integer: {text!r}")
    value = int(text)
    if value > U32_MAX:
        raise ValueError(f"Number exceeds {U32_MAX}: {text}")
    return value


def _show_prompt(prompt: str, stdout: TextIO) -> None:
    stdout.write(prompt)
    # Prompt must be visible before blocking on input
    stdout.flush()


def prompt_string(
    prompt: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """
    Prompt until a non-empty line is entered.

    Args:
        prompt: Text shown before reading
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)

    Returns:
        First non-empty trimmed line

    Raises:
        InputReadError: If input cannot be read
    """
    if stdout is None:
        stdout = sys.stdout
    while True:
        _show_prompt(prompt, stdout)
        line = read_line(stdin)
        try:
            return validate_non_empty(line)
        except ValueError:
            logger.debug(f"Rejected empty input for prompt {prompt.strip()!r}")
            print(EMPTY_INPUT_MESSAGE, file=stdout)


def prompt_non_negative_int(
    prompt: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Prompt until a valid non-negative integer is entered.

    Args:
        prompt: Text shown before reading
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)

    Returns:
        Parsed integer in the range 0..U32_MAX

    Raises:
        InputReadError: If input cannot be read
    """
    if stdout is None:
        stdout = sys.stdout
    while True:
        _show_prompt(prompt, stdout)
        line = read_line(stdin)
        try:
            return parse_non_negative_int(line)
        except ValueError as e:
            logger.debug(f"Rejected input for prompt {prompt.strip()!r}: {e}")
            print(INVALID_NUMBER_MESSAGE, file=stdout)
