"""Report card rendering."""

from .formatter import format_report, print_report

__all__ = [
    "format_report",
    "print_report",
]
