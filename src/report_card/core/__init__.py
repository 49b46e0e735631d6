"""Shared data models for the report card generator."""

from .models import Grade, Student

__all__ = [
    "Grade",
    "Student",
]
