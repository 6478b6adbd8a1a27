"""Tests for the named color table."""

from __future__ import annotations

import pytest

from svgattrib.colors import NAMED_COLORS, find_named_color
from svgattrib.syntax.parser import SVGAttributeParser
from svgattrib.types import Color


class TestNamedColors:
    """Test the SVG 1.1 color keyword table."""

    def test_table_size(self) -> None:
        """SVG 1.1 defines 147 color keywords."""
        assert len(NAMED_COLORS) == 147

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("black", Color(0, 0, 0)),
            ("white", Color(255, 255, 255)),
            ("red", Color(255, 0, 0)),
            ("lime", Color(0, 255, 0)),
            ("green", Color(0, 128, 0)),
            ("rebeccapurple", None),
            ("gray", Color(128, 128, 128)),
            ("grey", Color(128, 128, 128)),
            ("yellowgreen", Color(0x9A, 0xCD, 0x32)),
        ],
    )
    def test_lookup(self, name: str, expected: Color | None) -> None:
        """Spot-check entries; the later CSS4 keyword is absent."""
        assert find_named_color(name) == expected

    def test_keys_are_lower_case_letters(self) -> None:
        """Every keyword is lower-case ASCII letters only."""
        for name in NAMED_COLORS:
            assert name.isascii()
            assert name.isalpha()
            assert name == name.lower()

    def test_all_opaque(self) -> None:
        """Keyword colors are fully opaque."""
        assert all(color.alpha == 255 for color in NAMED_COLORS.values())

    def test_every_keyword_parses(self) -> None:
        """The color grammar accepts every keyword in the table."""
        parser = SVGAttributeParser()
        for name, color in NAMED_COLORS.items():
            assert parser.parse_color(name) == color

    def test_table_is_read_only(self) -> None:
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            NAMED_COLORS["mauve"] = Color(0, 0, 0)  # type: ignore[index]
