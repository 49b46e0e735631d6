"""
Module: grading

Purpose:
    Average and letter grade calculation for a single Student.
"""

from .calculator import assign_grade, calculate_average, grade_for_average

__all__ = [
    "assign_grade",
    "calculate_average",
    "grade_for_average",
]
