"""
Module: console

Purpose:
    Console input for the report card session: raw line reading and
    validated, retrying prompts.

Key Functions:
    - read_line(): Read one trimmed line
    - prompt_string(): Prompt for non-empty text
    - prompt_non_negative_int(): Prompt for an unsigned 32-bit integer
"""

from .reader import read_line
from .prompts import (
    EMPTY_INPUT_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    U32_MAX,
    parse_non_negative_int,
    prompt_non_negative_int,
    prompt_string,
    validate_non_empty,
)

__all__ = [
    "read_line",
    "prompt_string",
    "prompt_non_negative_int",
    "validate_non_empty",
    "parse_non_negative_int",
    "U32_MAX",
    "EMPTY_INPUT_MESSAGE",
    "INVALID_NUMBER_MESSAGE",
]
