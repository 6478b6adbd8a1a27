"""Tests for whitespace, separator and comma-wsp tokens."""

from __future__ import annotations

import pytest

from svgattrib.syntax.cursor import Cursor
from svgattrib.syntax.parser.whitespace import (
    WHITESPACE_CHARS,
    advance_while,
    is_separator,
    is_whitespace,
    parse_comma_wsp,
    parse_separator,
    parse_whitespace,
    skip_separators,
    skip_whitespace,
)


class TestCharacterClasses:
    """Test whitespace and separator predicates."""

    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\x01", "\x1f", "\x20"])
    def test_whitespace_code_points(self, ch: str) -> None:
        """Code points 1..32 are whitespace."""
        assert is_whitespace(ch)

    @pytest.mark.parametrize("ch", ["\x00", "!", "a", ",", "\u00a0", "\u2003"])
    def test_non_whitespace(self, ch: str) -> None:
        """NUL, printable ASCII and Unicode spaces are not whitespace."""
        assert not is_whitespace(ch)

    def test_separators(self) -> None:
        """Separators are whitespace plus comma and semicolon."""
        assert is_separator(",")
        assert is_separator(";")
        assert is_separator(" ")
        assert not is_separator("-")
        assert not is_separator(".")

    def test_whitespace_chars_table(self) -> None:
        """WHITESPACE_CHARS lists exactly the whitespace code points."""
        assert len(WHITESPACE_CHARS) == 32
        assert all(is_whitespace(ch) for ch in WHITESPACE_CHARS)


class TestAdvanceWhile:
    """Test advance_while()."""

    def test_consumes_matching_run(self) -> None:
        """Advances past every character satisfying the predicate."""
        result = advance_while(Cursor("aab", 0), lambda ch: ch == "a")

        assert result is not None
        assert result.pos == 2

    def test_returns_none_when_nothing_consumed(self) -> None:
        """No match means None, not an unmoved cursor."""
        assert advance_while(Cursor("bab", 0), lambda ch: ch == "a") is None

    def test_stops_at_eof(self) -> None:
        """Runs to the end of input."""
        result = advance_while(Cursor("aaa", 1), lambda ch: ch == "a")

        assert result is not None
        assert result.is_eof


class TestWhitespaceTokens:
    """Test required and optional whitespace and separator tokens."""

    def test_parse_whitespace(self) -> None:
        """parse_whitespace consumes a run of whitespace."""
        result = parse_whitespace(Cursor(" \t\n1", 0))

        assert result is not None
        assert result.pos == 3

    def test_parse_whitespace_requires_one(self) -> None:
        """parse_whitespace fails without whitespace."""
        assert parse_whitespace(Cursor("1", 0)) is None

    def test_skip_whitespace_is_optional(self) -> None:
        """skip_whitespace returns the same position when nothing to skip."""
        assert skip_whitespace(Cursor("  \t1", 0)).pos == 3
        assert skip_whitespace(Cursor("1", 0)).pos == 0

    def test_parse_separator_mixes_classes(self) -> None:
        """A separator run mixes whitespace, commas and semicolons."""
        result = parse_separator(Cursor(" ,; x", 0))

        assert result is not None
        assert result.pos == 4

    def test_skip_separators_without_separator(self) -> None:
        """skip_separators leaves the cursor alone on non-separators."""
        assert skip_separators(Cursor("x", 0)).pos == 0


class TestCommaWsp:
    """Test the comma-wsp production."""

    @pytest.mark.parametrize(
        ("source", "expected_pos"),
        [
            (" , 2", 3),
            (",2", 1),
            (", 2", 2),
            ("  2", 2),
            ("\t,\t2", 3),
        ],
    )
    def test_accepted_forms(self, source: str, expected_pos: int) -> None:
        """Whitespace with an optional comma, or a comma with trailing whitespace."""
        result = parse_comma_wsp(Cursor(source, 0))

        assert result is not None
        assert result.pos == expected_pos

    def test_consumes_single_comma_only(self) -> None:
        """Two commas are not a single comma-wsp."""
        result = parse_comma_wsp(Cursor(",,2", 0))

        assert result is not None
        assert result.pos == 1

    @pytest.mark.parametrize("source", ["2", "-2", ";2", ""])
    def test_rejected_forms(self, source: str) -> None:
        """Nothing consumed means None."""
        assert parse_comma_wsp(Cursor(source, 0)) is None
