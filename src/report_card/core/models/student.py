"""
Module: student

Purpose:
    Provides the Student dataclass - the single value collected from the
    console for one report card run.

Key Classes:
    - Student: Immutable name/marks/subject-count record

Dependencies:
    - dataclasses (std)
    - grading.calculator (lazy, for the average/grade accessors)

Used By:
    - controller.run_session: Builds the Student from prompts
    - grading.calculator: Reads marks and subject count
    - report.formatter: Renders the fields
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grade import Grade


@dataclass(frozen=True, slots=True)
class Student:
    """
    One student's details as entered at the console.

    Attributes:
        name: Non-empty student name
        total_marks: Sum of marks across all subjects
        num_subjects: Number of subjects taken

    Invariants:
        - name is non-empty after trimming
        - total_marks >= 0
        - num_subjects >= 0

    No cross-field check is made: total_marks may exceed what
    num_subjects could plausibly produce.

    Example:
        >>> s = Student("Ada", 270, 3)
        >>> s.average
        90.0
    """

    name: str
    total_marks: int
    num_subjects: int

    def __post_init__(self) -> None:
        """Validate fields on construction."""
        if not self.name.strip():
            raise ValueError("Student name cannot be empty")
        if self.total_marks < 0:
            raise ValueError(f"total_marks cannot be negative: {self.total_marks}")
        if self.num_subjects < 0:
            raise ValueError(f"num_subjects cannot be negative: {self.num_subjects}")

    @property
    def average(self) -> float:
        """Average marks per subject (0.0 when there are no subjects)."""
        from report_card.grading.calculator import calculate_average
        return calculate_average(self)

    @property
    def grade(self) -> Grade:
        """Letter grade for this student."""
        from report_card.grading.calculator import assign_grade
        return assign_grade(self)
