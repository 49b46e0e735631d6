import io
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import report_card
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from report_card.core.models import Student


# Common test fixtures
@pytest.fixture
def ada() -> Student:
    """Return the sample student who lands exactly on the A boundary."""
    return Student("Ada", 270, 3)


@pytest.fixture
def console_input():
    """Build an input stream from lines of typed text."""
    def _make(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))
    return _make


@pytest.fixture
def console_output() -> io.StringIO:
    """Return an empty output stream to capture console text."""
    return io.StringIO()
