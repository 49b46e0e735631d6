"""Centralized grade band cut-offs.

The lower bound of each band is inclusive: an average exactly on a
cut-off belongs to the higher grade.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GradeThresholds:
    """Minimum average for each letter grade."""

    a_min: float = 90.0  # A: 90+
    b_min: float = 75.0  # B: 75-89
    c_min: float = 60.0  # C: 60-74, D below

    def __post_init__(self) -> None:
        if not self.a_min > self.b_min > self.c_min:
            raise ValueError(
                f"Grade thresholds must be strictly descending: "
                f"{self.a_min}, {self.b_min}, {self.c_min}"
            )


GRADE_THRESHOLDS = GradeThresholds()
