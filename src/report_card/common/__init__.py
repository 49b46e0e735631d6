"""Common constants shared across the package."""

from __future__ import annotations

from .thresholds import GRADE_THRESHOLDS, GradeThresholds

__all__ = [
    "GRADE_THRESHOLDS",
    "GradeThresholds",
]
