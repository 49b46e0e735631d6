"""
Module: grading.calculator

Purpose:
    Derive average marks and a letter grade from a Student. Both
    operations are pure and total over valid Student values.

Key Functions:
    - calculate_average(): total_marks / num_subjects, 0.0 for no subjects
    - assign_grade(): Grade for a Student (INVALID for no subjects)
    - grade_for_average(): Band lookup for an average

Dependencies:
    - core.models: Student, Grade
    - common.thresholds: Band cut-offs

Used By:
    - controller.run_session: Reports the computed results
    - report.formatter: Renders average and grade
    - core.models.Student: average/grade accessors
"""

from __future__ import annotations

from report_card.common.thresholds import GRADE_THRESHOLDS, GradeThresholds
from report_card.core.models import Grade, Student


def calculate_average(student: Student) -> float:
    """
    Calculate the average marks per subject.

    Args:
        student: Student to calculate for

    Returns:
        total_marks / num_subjects as a float, or 0.0 when the student
        has no subjects

    Example:
        >>> calculate_average(Student("Ada", 179, 3))
        59.666666666666664
    """
    if student.num_subjects == 0:
        return 0.0
    return student.total_marks / student.num_subjects


def grade_for_average(
    average: float,
    thresholds: GradeThresholds = GRADE_THRESHOLDS,
) -> Grade:
    """Map an average onto its letter grade band."""
    if average >= thresholds.a_min:
        return Grade.A
    if average >= thresholds.b_min:
        return Grade.B
    if average >= thresholds.c_min:
        return Grade.C
    return Grade.D


def assign_grade(
    student: Student,
    thresholds: GradeThresholds = GRADE_THRESHOLDS,
) -> Grade:
    """
    Assign a letter grade from the student's average.

    A student with no subjects has no basis for a grade, so this is
    checked before any band even though the average would be 0.0.

    Args:
        student: Student to grade
        thresholds: Band cut-offs (defaults to GRADE_THRESHOLDS)

    Returns:
        Grade.INVALID if num_subjects is 0, otherwise A/B/C/D
    """
    if student.num_subjects == 0:
        return Grade.INVALID
    return grade_for_average(calculate_average(student), thresholds)
