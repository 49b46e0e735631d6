"""
Core Models Package

Immutable values shared by every stage of a report card run. Grade is
derived on demand from a Student and never stored.
"""

from .grade import Grade
from .student import Student

__all__ = [
    "Grade",
    "Student",
]
