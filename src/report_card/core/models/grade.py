"""
Module: grade

Purpose:
    Provides the Grade enum - the fixed set of letter grades a report
    card can show, with the short label used for display.

Key Classes:
    - Grade: A/B/C/D plus INVALID for students with no subjects

Used By:
    - grading.calculator: assign_grade() returns a Grade
    - report.formatter: Renders Grade.label
"""

from __future__ import annotations

from enum import Enum


class Grade(Enum):
    """
    Letter grade derived from a student's average marks.

    Attributes:
        A: Average of 90 or above
        B: Average from 75 up to 90
        C: Average from 60 up to 75
        D: Average below 60
        INVALID: Grade cannot be determined (no subjects)

    Example:
        >>> Grade.INVALID.label
        'N/A'
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    INVALID = "N/A"

    @property
    def label(self) -> str:
        """Short display label for the report card."""
        return self.value

    def __str__(self) -> str:
        return self.label
