"""Tests for color, paint, stop-color and clip-path grammars."""

from __future__ import annotations

import pytest

from svgattrib.enums import ClipType, StopColorType
from svgattrib.syntax.cursor import Cursor
from svgattrib.syntax.parser import SVGAttributeParser
from svgattrib.syntax.parser.rules import parse_color_component, parse_hex_color
from svgattrib.types import Clip, Color, Paint, StopColor

RED = Color(255, 0, 0)


@pytest.fixture
def parser() -> SVGAttributeParser:
    return SVGAttributeParser()


# ============================================================================
# COLORS
# ============================================================================


class TestHexColor:
    """Test #rgb and #rrggbb."""

    def test_long_form(self, parser: SVGAttributeParser) -> None:
        """Six digits give one byte per channel."""
        assert parser.parse_color("#ABCDEF") == Color(0xAB, 0xCD, 0xEF)

    def test_short_form_duplicates_nibbles(self, parser: SVGAttributeParser) -> None:
        """#abc expands to #aabbcc."""
        assert parser.parse_color("#abc") == Color(0xAA, 0xBB, 0xCC)
        assert parser.parse_color("#f00") == RED

    def test_parsed_colors_are_opaque(self, parser: SVGAttributeParser) -> None:
        """Parsed hex colors always carry alpha 255."""
        color = parser.parse_color("#000000")

        assert color is not None
        assert color.alpha == 255

    @pytest.mark.parametrize("source", ["#", "#f", "#ff", "#ff00", "#ff000", "#ff00000", "#ggg"])
    def test_wrong_digit_count(self, parser: SVGAttributeParser, source: str) -> None:
        """Only exactly 3 or 6 hex digits are colors."""
        assert parser.parse_color(source) is None

    def test_rule_stops_after_digits(self) -> None:
        """The hex rule leaves following input for the caller."""
        result = parse_hex_color(Cursor("#fff)", 0))

        assert result is not None
        assert result.cursor.pos == 4


class TestColorComponent:
    """Test single rgb() channels."""

    @pytest.mark.parametrize(
        ("source", "value"),
        [
            ("0", 0),
            ("128", 128),
            ("255", 255),
            ("300", 255),
            ("-5", 0),
            ("100%", 255),
            ("0%", 0),
            ("50%", 128),
            ("50.5%", 129),
            ("150%", 255),
        ],
    )
    def test_channel_values(self, source: str, value: int) -> None:
        """Integers clamp; percentages scale by 255/100 and round half up."""
        result = parse_color_component(Cursor(source, 0))

        assert result is not None
        assert result.value == value
        assert result.cursor.is_eof

    def test_fraction_requires_percent(self) -> None:
        """A plain fractional channel is rejected."""
        assert parse_color_component(Cursor("1.5", 0)) is None


class TestRgbColor:
    """Test rgb(r, g, b)."""

    @pytest.mark.parametrize(
        "source",
        [
            "rgb(255,0,0)",
            "rgb(255, 0, 0)",
            "rgb( 255 , 0 , 0 )",
            "rgb(255 0 0)",
            "rgb(100%, 0%, 0%)",
            "rgb(300, -20, 0)",
        ],
    )
    def test_red_spellings(self, parser: SVGAttributeParser, source: str) -> None:
        """Channel separators are flexible; values clamp."""
        assert parser.parse_color(source) == RED

    def test_mixed_channel_forms(self, parser: SVGAttributeParser) -> None:
        """Integer and percentage channels may be mixed."""
        assert parser.parse_color("rgb(0, 100%, 0)") == Color(0, 255, 0)

    @pytest.mark.parametrize(
        "source",
        [
            "rgb(255,0)",
            "rgb(255,0,0",
            "rgb(1.5, 0, 0)",
            "rgb(255,0,0,0)",
            "RGB(255,0,0)",
            "rgb()",
            "rgb(255-0-0)",
        ],
    )
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Malformed calls fail."""
        assert parser.parse_color(source) is None


class TestColor:
    """Test the combined color grammar."""

    def test_all_red_spellings_agree(self, parser: SVGAttributeParser) -> None:
        """#ff0000, rgb(255,0,0) and red parse to the same color."""
        spellings = ("#ff0000", "rgb(255,0,0)", "red", "#f00", "rgb(100%,0%,0%)")

        assert {parser.parse_color(s) for s in spellings} == {RED}

    def test_keywords(self, parser: SVGAttributeParser) -> None:
        """Color keywords come from the SVG 1.1 table."""
        assert parser.parse_color("cornflowerblue") == Color(0x64, 0x95, 0xED)
        assert parser.parse_color("  white ") == Color(255, 255, 255)

    @pytest.mark.parametrize("source", ["", "Red", "redish", "transparent", "none", "red blue"])
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Unknown or trailing words fail the whole string."""
        assert parser.parse_color(source) is None


# ============================================================================
# PAINT
# ============================================================================


class TestPaint:
    """Test fill / stroke values."""

    def test_color(self, parser: SVGAttributeParser) -> None:
        """A color becomes a COLOR paint."""
        assert parser.parse_paint("#00ff00") == Paint.from_color(Color(0, 255, 0))

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("none", Paint.none()),
            ("currentColor", Paint.current_color()),
            ("inherit", Paint.inherit()),
        ],
    )
    def test_keywords(self, parser: SVGAttributeParser, source: str, expected: Paint) -> None:
        """Keyword paints."""
        assert parser.parse_paint(source) == expected

    def test_iri(self, parser: SVGAttributeParser) -> None:
        """url(#id) references a paint server by fragment."""
        assert parser.parse_paint("url(#grad1)") == Paint.from_iri("grad1")
        assert parser.parse_paint(" url( #grad1) ") == Paint.from_iri("grad1")

    def test_iri_keeps_text_up_to_paren(self, parser: SVGAttributeParser) -> None:
        """The fragment runs to ')' and keeps any trailing whitespace."""
        assert parser.parse_paint("url(#a )") == Paint.from_iri("a ")

    @pytest.mark.parametrize(
        "source",
        ["", "None", "currentcolor", "url(#)", "url(grad)", "url(#a", "url(#a) red"],
    )
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Malformed paints fail."""
        assert parser.parse_paint(source) is None


class TestIri:
    """Test bare and functional IRIs."""

    def test_local_iri(self, parser: SVGAttributeParser) -> None:
        """#id yields the fragment."""
        assert parser.parse_iri("#marker") == "marker"

    def test_func_iri(self, parser: SVGAttributeParser) -> None:
        """url(#id) yields the fragment."""
        assert parser.parse_func_iri("url(#blur)") == "blur"

    def test_external_iri_rejected(self, parser: SVGAttributeParser) -> None:
        """Only same-document fragments are supported."""
        assert parser.parse_iri("other.svg#id") is None
        assert parser.parse_func_iri("url(other.svg#id)") is None


class TestClipPath:
    """Test clip-path values."""

    def test_values(self, parser: SVGAttributeParser) -> None:
        """none, inherit and url(#id)."""
        assert parser.parse_clip_path("none") == Clip(ClipType.NONE)
        assert parser.parse_clip_path("inherit") == Clip(ClipType.INHERIT)
        assert parser.parse_clip_path("url(#clip)") == Clip(ClipType.IRI, "clip")

    def test_color_is_not_a_clip(self, parser: SVGAttributeParser) -> None:
        """Colors are paints, not clips."""
        assert parser.parse_clip_path("red") is None


class TestStopColor:
    """Test stop-color values."""

    def test_values(self, parser: SVGAttributeParser) -> None:
        """color, currentColor and inherit."""
        assert parser.parse_stop_color("red") == StopColor(StopColorType.COLOR, RED)
        assert parser.parse_stop_color("currentColor") == StopColor(StopColorType.CURRENT_COLOR)
        assert parser.parse_stop_color("inherit") == StopColor(StopColorType.INHERIT)

    def test_none_rejected(self, parser: SVGAttributeParser) -> None:
        """'none' is not a stop color."""
        assert parser.parse_stop_color("none") is None
