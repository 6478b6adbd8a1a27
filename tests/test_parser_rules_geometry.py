"""Tests for numeric, length, transform, viewBox, points and dash-array grammars."""

from __future__ import annotations

import math

import pytest

from svgattrib.enums import DashArrayType, LengthUnit
from svgattrib.syntax.parser import SVGAttributeParser
from svgattrib.types import DashArray, Length, Matrix, Point, Rect


@pytest.fixture
def parser() -> SVGAttributeParser:
    return SVGAttributeParser()


# ============================================================================
# NUMBERS AND LENGTHS
# ============================================================================


class TestNumber:
    """Test <number>."""

    @pytest.mark.parametrize(
        ("source", "value"),
        [("0.5", 0.5), (" 1e2 ", 100.0), ("-3", -3.0), ("+.25", 0.25), ("7,", 7.0)],
    )
    def test_valid(self, parser: SVGAttributeParser, source: str, value: float) -> None:
        """Scalars with optional surrounding whitespace and trailing separators."""
        assert parser.parse_number(source) == value

    @pytest.mark.parametrize("source", ["", "abc", "1 2", "1px", "--1", "0x10"])
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Anything beyond one scalar fails."""
        assert parser.parse_number(source) is None


class TestLength:
    """Test <length>."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("50", Length(50.0)),
            ("50%", Length(50.0, LengthUnit.PERCENTAGE)),
            ("10px", Length(10.0, LengthUnit.PX)),
            ("1.5em", Length(1.5, LengthUnit.EMS)),
            ("2ex", Length(2.0, LengthUnit.EXS)),
            ("-3mm", Length(-3.0, LengthUnit.MM)),
            ("2.54cm", Length(2.54, LengthUnit.CM)),
            ("1in", Length(1.0, LengthUnit.IN)),
            ("12pt", Length(12.0, LengthUnit.PT)),
            ("1pc", Length(1.0, LengthUnit.PC)),
            ("1e2px", Length(100.0, LengthUnit.PX)),
            ("  5  ", Length(5.0)),
        ],
    )
    def test_valid(self, parser: SVGAttributeParser, source: str, expected: Length) -> None:
        """Scalar followed by an optional unit."""
        assert parser.parse_length(source) == expected

    @pytest.mark.parametrize("source", ["50xx", "10px extra", "50 %", "px", "", "10PX", "10p"])
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Unknown units and trailing garbage fail the whole string."""
        assert parser.parse_length(source) is None


# ============================================================================
# TRANSFORMS
# ============================================================================


class TestTransformFunctions:
    """Test individual transform functions."""

    def test_matrix(self, parser: SVGAttributeParser) -> None:
        """matrix() takes six coefficients in a..f order."""
        assert parser.parse_transform("matrix(1,2,3,4,5,6)") == Matrix(1, 2, 3, 4, 5, 6)
        assert parser.parse_transform("matrix(1 0 0 1 0 0)") == Matrix.identity()

    def test_translate(self, parser: SVGAttributeParser) -> None:
        """translate(tx [ty]); ty defaults to 0."""
        assert parser.parse_transform("translate(10,20)") == Matrix.translate(10, 20)
        assert parser.parse_transform("translate(10)") == Matrix(1, 0, 0, 1, 10, 0)

    def test_scale(self, parser: SVGAttributeParser) -> None:
        """scale(sx [sy]); sy defaults to sx."""
        assert parser.parse_transform("scale(2,3)") == Matrix(2, 0, 0, 3, 0, 0)
        assert parser.parse_transform("scale(2)") == Matrix(2, 0, 0, 2, 0, 0)
        assert parser.parse_transform("scale(1e1)") == Matrix(10, 0, 0, 10, 0, 0)

    def test_rotate_quarter_turn_is_exact(self, parser: SVGAttributeParser) -> None:
        """Near-zero sines and cosines snap to zero."""
        assert parser.parse_transform("rotate(90)") == Matrix(0, 1, -1, 0, 0, 0)

    def test_rotate_about_point(self, parser: SVGAttributeParser) -> None:
        """rotate(a cx cy) keeps the pivot fixed."""
        matrix = parser.parse_transform("rotate(90, 10, 10)")

        assert matrix == Matrix(0, 1, -1, 0, 20, 0)
        assert matrix.map_point(10, 10) == (10, 10)

    def test_rotate_requires_both_pivot_coordinates(self, parser: SVGAttributeParser) -> None:
        """A lone cx is rejected."""
        assert parser.parse_transform("rotate(90, 10)") is None

    def test_skews(self, parser: SVGAttributeParser) -> None:
        """skewX and skewY use the tangent of the angle."""
        skew_x = parser.parse_transform("skewX(45)")
        skew_y = parser.parse_transform("skewY(45)")

        assert skew_x is not None
        assert skew_y is not None
        assert skew_x.c == pytest.approx(1.0)
        assert skew_y.b == pytest.approx(1.0)
        assert (skew_x.a, skew_x.b, skew_x.d) == (1, 0, 1)

    def test_whitespace_before_parenthesis(self, parser: SVGAttributeParser) -> None:
        """Whitespace is allowed between the name and '('."""
        assert parser.parse_transform("translate (10, 20)") == Matrix.translate(10, 20)


class TestTransformList:
    """Test accumulation across a transform list."""

    def test_translate_then_scale(self, parser: SVGAttributeParser) -> None:
        """The first listed transform is outermost."""
        matrix = parser.parse_transform("translate(10,20) scale(2)")

        assert matrix == Matrix(2, 0, 0, 2, 10, 20)
        assert matrix.map_point(1, 1) == (12, 22)

    def test_order_matters(self, parser: SVGAttributeParser) -> None:
        """Swapping the functions changes the result."""
        assert parser.parse_transform("scale(2) translate(10,20)") == Matrix(2, 0, 0, 2, 20, 40)

    @pytest.mark.parametrize(
        "source",
        [
            "translate(10,20),scale(2)",
            "translate(10,20) , scale(2)",
            "translate(10,20)scale(2)",
            "  translate(10 20)\n\tscale(2)  ",
            "translate(10,20) scale(2),",
            "translate(10,20),scale(2) ,\n",
        ],
    )
    def test_separators_between_functions(self, parser: SVGAttributeParser, source: str) -> None:
        """Functions may be separated by comma-wsp or nothing, and followed by one."""
        assert parser.parse_transform(source) == Matrix(2, 0, 0, 2, 10, 20)

    def test_equals_explicit_product(self, parser: SVGAttributeParser) -> None:
        """A list equals the matrix product of its functions."""
        expected = Matrix.translate(5, 0) @ Matrix.rotate(30) @ Matrix.scale(2, 3)
        matrix = parser.parse_transform("translate(5) rotate(30) scale(2 3)")

        assert matrix is not None
        assert matrix.is_close(expected)

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "translate(10,20) foo",
            "Translate(1)",
            "matrix(1,2,3,4,5)",
            "translate()",
            "translate(1,2,3)",
            "translate(10,)",
            "rotate(45,)",
            "scale(2",
        ],
    )
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Malformed lists fail as a whole."""
        assert parser.parse_transform(source) is None


# ============================================================================
# VIEWBOX, POINTS, DASH ARRAYS
# ============================================================================


class TestViewBox:
    """Test viewBox rectangles."""

    @pytest.mark.parametrize("source", ["0 0 100 50", "0,0,100,50", " 0, 0 100,50 "])
    def test_valid(self, parser: SVGAttributeParser, source: str) -> None:
        """Four numbers separated by whitespace and/or commas."""
        assert parser.parse_view_box(source) == Rect(0, 0, 100, 50)

    @pytest.mark.parametrize("source", ["0 0 100", "0 0 100 50 7", "a b c d", ""])
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Exactly four numbers are required."""
        assert parser.parse_view_box(source) is None


class TestPoints:
    """Test polyline / polygon points lists."""

    def test_negative_adjacency(self, parser: SVGAttributeParser) -> None:
        """A minus sign separates coordinates without a separator."""
        assert parser.parse_points("0,0 10,10 -5-5") == (
            Point(0, 0),
            Point(10, 10),
            Point(-5, -5),
        )

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("10-5", (Point(10, -5),)),
            ("0 0", (Point(0, 0),)),
            ("0,0,1,1", (Point(0, 0), Point(1, 1))),
            ("1e2,3", (Point(100, 3),)),
            (" 1 , 2 \n 3 , 4 ", (Point(1, 2), Point(3, 4))),
            ("0,0,", (Point(0, 0),)),
            ("1,2 3,4 , ", (Point(1, 2), Point(3, 4))),
        ],
    )
    def test_valid(
        self, parser: SVGAttributeParser, source: str, expected: tuple[Point, ...]
    ) -> None:
        """Pairs separated by comma-wsp, with an optional trailing comma-wsp."""
        assert parser.parse_points(source) == expected

    @pytest.mark.parametrize("source", ["", "0", "0,0 10", "0,0,,", "0,,0", "a,b"])
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Dangling coordinates and empty lists fail."""
        assert parser.parse_points(source) is None


class TestDashArray:
    """Test stroke-dasharray values."""

    def test_keywords(self, parser: SVGAttributeParser) -> None:
        """none and inherit."""
        assert parser.parse_dash_array("none") == DashArray(DashArrayType.NONE)
        assert parser.parse_dash_array("inherit") == DashArray(DashArrayType.INHERIT)

    def test_lengths(self, parser: SVGAttributeParser) -> None:
        """One or more lengths separated by commas or whitespace."""
        assert parser.parse_dash_array("5,3") == DashArray(
            DashArrayType.DASH_ARRAY, (Length(5.0), Length(3.0))
        )
        assert parser.parse_dash_array("5px 10%") == DashArray(
            DashArrayType.DASH_ARRAY,
            (Length(5.0, LengthUnit.PX), Length(10.0, LengthUnit.PERCENTAGE)),
        )

    @pytest.mark.parametrize("source", ["", "5,x", "none 5"])
    def test_rejected(self, parser: SVGAttributeParser, source: str) -> None:
        """Non-lengths fail."""
        assert parser.parse_dash_array(source) is None


def test_rotation_keeps_lengths() -> None:
    """Rotation matrices preserve distances."""
    matrix = Matrix.rotate(33)
    x, y = matrix.map_point(3, 4)

    assert math.hypot(x, y) == pytest.approx(5.0)
