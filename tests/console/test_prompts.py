"""
Unit Tests for Console Prompts

Tests the validators and the retry-until-valid prompt loops.
"""

import io
import logging

import pytest

from report_card.console.prompts import (
    EMPTY_INPUT_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    U32_MAX,
    parse_non_negative_int,
    prompt_non_negative_int,
    prompt_string,
    validate_non_empty,
)
from report_card.errors import InputReadError


class _FlushCountingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class TestValidators:
    """Tests for validate_non_empty() and parse_non_negative_int()."""

    # ─────────────────────────────────────────────────────────────────────────
    # validate_non_empty
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("text", ["", " ", "\t \n"])
    def test_non_empty_when_blank_then_raises_error(self, text):
        """Empty and whitespace-only text should be rejected."""
        with pytest.raises(ValueError):
            validate_non_empty(text)

    @pytest.mark.parametrize("text, expected", [("Ada", "Ada"), ("  Ada  ", "Ada"), ("x", "x")])
    def test_non_empty_when_text_then_returns_trimmed(self, text, expected):
        """Any other text should be accepted and trimmed."""
        assert validate_non_empty(text) == expected

    # ─────────────────────────────────────────────────────────────────────────
    # parse_non_negative_int
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "text, expected",
        [("0", 0), ("7", 7), ("007", 7), ("270", 270), ("4294967295", U32_MAX)],
    )
    def test_parse_when_digits_then_returns_value(self, text, expected):
        """Plain ASCII digits within 32 bits should parse."""
        assert parse_non_negative_int(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-5",
            "+5",
            "3.14",
            "12a",
            "abc",
            "1_000",
            "1 000",
            " 5",
            "١٢",  # Arabic-Indic digits
            "4294967296",
            "99999999999999999999",
        ],
    )
    def test_parse_when_not_unsigned_int_then_raises_error(self, text):
        """Signs, decimals, separators, letters and overflow are rejected."""
        with pytest.raises(ValueError):
            parse_non_negative_int(text)

    def test_u32_max_when_checked_then_matches_32_bit_limit(self):
        """U32_MAX should be 2**32 - 1."""
        assert U32_MAX == 2**32 - 1


class TestPromptString:
    """Tests for prompt_string()."""

    def test_prompt_when_valid_then_returns_trimmed(self, console_input, console_output):
        """Valid input should be returned after one prompt."""
        result = prompt_string("Name: ", console_input("  Ada  "), console_output)
        assert result == "Ada"
        assert console_output.getvalue() == "Name: "

    def test_prompt_when_empty_then_retries(self, console_input, console_output):
        """Empty lines should print a diagnostic and prompt again."""
        result = prompt_string("Name: ", console_input("", "   ", "Ada"), console_output)
        assert result == "Ada"
        assert console_output.getvalue() == (
            f"Name: {EMPTY_INPUT_MESSAGE}\n"
            f"Name: {EMPTY_INPUT_MESSAGE}\n"
            "Name: "
        )

    def test_prompt_when_many_failures_then_keeps_retrying(self, console_input, console_output):
        """There is no attempt limit."""
        lines = [""] * 500 + ["Ada"]
        assert prompt_string("Name: ", console_input(*lines), console_output) == "Ada"
        assert console_output.getvalue().count(EMPTY_INPUT_MESSAGE) == 500

    def test_prompt_when_end_of_input_then_raises_error(self, console_output):
        """A read failure is fatal, not retried."""
        with pytest.raises(InputReadError):
            prompt_string("Name: ", io.StringIO(""), console_output)
        assert EMPTY_INPUT_MESSAGE not in console_output.getvalue()

    def test_prompt_when_empty_then_eof_raises_error(self, console_input, console_output):
        """Running out of input while retrying is still fatal."""
        with pytest.raises(InputReadError):
            prompt_string("Name: ", console_input(""), console_output)

    def test_prompt_when_shown_then_flushed_before_read(self, console_input):
        """Output should be flushed each time the prompt is shown."""
        out = _FlushCountingStream()
        prompt_string("Name: ", console_input("", "Ada"), out)
        assert out.flushes >= 2

    def test_prompt_when_default_streams_then_uses_stdio(self, monkeypatch, capsys):
        """Default streams should be sys.stdin and sys.stdout."""
        monkeypatch.setattr("sys.stdin", io.StringIO("Ada\n"))
        assert prompt_string("Name: ") == "Ada"
        assert capsys.readouterr().out == "Name: "


class TestPromptNonNegativeInt:
    """Tests for prompt_non_negative_int()."""

    def test_prompt_when_valid_then_returns_value(self, console_input, console_output):
        """Valid number should be returned after one prompt."""
        assert prompt_non_negative_int("Marks: ", console_input(" 270 "), console_output) == 270
        assert console_output.getvalue() == "Marks: "

    def test_prompt_when_invalid_then_retries(self, console_input, console_output):
        """Each invalid entry should print a diagnostic and prompt again."""
        stdin = console_input("", "-5", "3.14", "12a", "4294967296", "4294967295")
        assert prompt_non_negative_int("Marks: ", stdin, console_output) == U32_MAX
        out = console_output.getvalue()
        assert out.count(INVALID_NUMBER_MESSAGE) == 5
        assert out.count("Marks: ") == 6

    def test_prompt_when_zero_then_accepted(self, console_input, console_output):
        """Zero is a valid count."""
        assert prompt_non_negative_int("Subjects: ", console_input("0"), console_output) == 0

    def test_prompt_when_end_of_input_then_raises_error(self, console_output):
        """A read failure is fatal, not retried."""
        with pytest.raises(InputReadError):
            prompt_non_negative_int("Marks: ", io.StringIO(""), console_output)
        assert INVALID_NUMBER_MESSAGE not in console_output.getvalue()

    def test_prompt_when_rejected_then_logs_debug(self, console_input, console_output, caplog):
        """Rejected input should be logged at DEBUG."""
        caplog.set_level(logging.DEBUG, logger="report_card.console.prompts")
        prompt_non_negative_int("Marks: ", console_input("abc", "5"), console_output)
        assert "Rejected input" in caplog.text
