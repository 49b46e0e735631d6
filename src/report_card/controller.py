"""
Module: controller

Purpose:
    Orchestrate one report card session.
    Welcome → Prompt → Build Student → Grade → Report → Farewell

Key Functions:
    - run_session(): Run the interactive session end to end

Key Classes:
    - SessionResult: Outcome of a completed session

Dependencies:
    - console.prompts: Validated input
    - grading.calculator: Average and grade
    - report.formatter: Report output

Used By:
    - cli.main: Command line entry point
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional, TextIO

from report_card.config import SessionConfig
from report_card.console.prompts import prompt_non_negative_int, prompt_string
from report_card.core.models import Grade, Student
from report_card.grading.calculator import assign_grade, calculate_average
from report_card.report.formatter import print_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    """
    Outcome of a completed session (immutable).

    Attributes:
        student: Student built from console input
        average: Average marks shown on the report
        grade: Grade shown on the report
        elapsed_s: Wall-clock duration of the session in seconds
    """
    student: Student
    average: float
    grade: Grade
    elapsed_s: float


def run_session(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    config: Optional[SessionConfig] = None,
) -> SessionResult:
    """
    Run one interactive report card session.

    Each prompt repeats until valid input is entered. A console read
    failure is not recovered here.

    Args:
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)
        config: Console texts and report layout

    Returns:
        SessionResult for the student that was reported

    Raises:
        InputReadError: If console input cannot be read

    Example:
        >>> import io
        >>> result = run_session(io.StringIO("Ada\\n270\\n3\\n"), io.StringIO())
        >>> result.grade
        <Grade.A: 'A'>
    """
    if stdout is None:
        stdout = sys.stdout
    config = config or SessionConfig()
    start_time = time.perf_counter()

    logger.debug("Starting report card session")
    print(config.welcome, file=stdout)

    name = prompt_string(config.name_prompt, stdin, stdout)
    total_marks = prompt_non_negative_int(config.marks_prompt, stdin, stdout)
    num_subjects = prompt_non_negative_int(config.subjects_prompt, stdin, stdout)

    student = Student(name, total_marks, num_subjects)
    average = calculate_average(student)
    grade = assign_grade(student)
    logger.debug(f"Computed average {average:.2f} and grade {grade.label} for {name!r}")

    print_report(student, stdout, config.report)
    print(config.farewell, file=stdout)
    stdout.flush()

    elapsed = time.perf_counter() - start_time
    logger.info(f"Report card session completed in {elapsed:.2f}s")

    return SessionResult(
        student=student,
        average=average,
        grade=grade,
        elapsed_s=elapsed,
    )
