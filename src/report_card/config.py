"""
Module: config

Purpose:
    Configuration dataclasses for a report card session. Immutable
    settings with validation on construction.

Key Classes:
    - ReportConfig: Layout of the rendered report card
    - SessionConfig: Console texts for the interactive session

Dependencies:
    - dataclasses (std)

Used By:
    - controller.run_session: Prompts and messages
    - report.formatter: Label width, decimals, header/footer
"""

from __future__ import annotations

from dataclasses import dataclass, field

REPORT_LABELS = ("Name", "Total Marks", "No. Subjects", "Average Marks", "Grade")


@dataclass(frozen=True)
class ReportConfig:
    """
    Layout of the report card block (immutable).

    Attributes:
        label_width: Width each label is left-aligned within
        decimals: Decimal places shown for the average
        header: Line printed above the fields
        footer: Line printed below the fields

    Example:
        >>> ReportConfig(label_width=20).label_width
        20
    """

    label_width: int = 15
    decimals: int = 2
    header: str = "--- Student Report Card ---"
    footer: str = "---------------------------"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        longest = max(len(label) for label in REPORT_LABELS)
        if self.label_width < longest:
            raise ValueError(
                f"label_width must be at least {longest}: {self.label_width}"
            )
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative: {self.decimals}")


@dataclass(frozen=True)
class SessionConfig:
    """
    Console texts for one interactive session (immutable).

    Attributes:
        welcome: Printed before the first prompt
        farewell: Printed after the report card
        name_prompt: Prompt for the student's name
        marks_prompt: Prompt for total marks
        subjects_prompt: Prompt for number of subjects
        report: Layout of the report card block
    """

    welcome: str = "Welcome to the Student Report Card Generator!"
    farewell: str = "Thank you for using the Student Report Card Generator!"
    name_prompt: str = "Enter student's name: "
    marks_prompt: str = "Enter total marks: "
    subjects_prompt: str = "Enter number of subjects: "
    report: ReportConfig = field(default_factory=ReportConfig)
