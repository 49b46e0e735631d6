"""
Module: report.formatter

Purpose:
    Render the fixed-layout report card block for one Student.

Key Functions:
    - format_report(): Build the report text
    - print_report(): Write the report to the console

Dependencies:
    - grading.calculator: Average and grade
    - config.ReportConfig: Layout settings

Used By:
    - controller.run_session: Prints the report after input
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from report_card.config import ReportConfig
from report_card.core.models import Student
from report_card.grading.calculator import assign_grade, calculate_average


def _field(label: str, value: object, width: int) -> str:
    return f"{label:<{width}}: {value}"


def format_report(student: Student, config: Optional[ReportConfig] = None) -> str:
    """
    Build the report card text.

    The block starts and ends with a blank line. The average is always
    shown with config.decimals places and an INVALID grade as "N/A".

    Args:
        student: Student to report on
        config: Layout settings (defaults to ReportConfig())

    Returns:
        Report text, newline-terminated

    Example:
        >>> print(format_report(Student("Ada", 270, 3)), end="")
        <BLANKLINE>
        --- Student Report Card ---
        Name           : Ada
        Total Marks    : 270
        No. Subjects   : 3
        Average Marks  : 90.00
        Grade          : A
        ---------------------------
        <BLANKLINE>
    """
    config = config or ReportConfig()
    width = config.label_width
    average = calculate_average(student)
    grade = assign_grade(student)

    lines: List[str] = [
        "",
        config.header,
        _field("Name", student.name, width),
        _field("Total Marks", student.total_marks, width),
        _field("No. Subjects", student.num_subjects, width),
        _field("Average Marks", f"{average:.{config.decimals}f}", width),
        _field("Grade", grade.label, width),
        config.footer,
        "",
    ]
    return "\n".join(lines) + "\n"


def print_report(
    student: Student,
    stdout: Optional[TextIO] = None,
    config: Optional[ReportConfig] = None,
) -> None:
    """Write the report card for student to stdout."""
    if stdout is None:
        stdout = sys.stdout
    stdout.write(format_report(student, config))
    stdout.flush()
