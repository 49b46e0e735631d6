"""
Module: errors

Purpose:
    Exception types raised by the report card package.

Key Classes:
    - ReportCardError: Base class for package errors
    - InputReadError: Console input could not be read

Used By:
    - console.reader: Raises InputReadError
    - cli: Maps InputReadError to a non-zero exit status
"""


class ReportCardError(Exception):
    """Base error for the report card package."""
    pass


class InputReadError(ReportCardError):
    """Console input could not be read (end of input or stream failure)."""
    pass
