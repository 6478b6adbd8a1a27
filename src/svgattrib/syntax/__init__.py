"""SVG attribute syntax package.

Provides the cursor, the parser, and serialization. The module-level
functions below share one default-configured SVGAttributeParser; create
your own parser to change the input size limit.

Python 3.13+.
"""

from svgattrib.enums import (
    FillRule,
    FontStyle,
    FontWeight,
    GradientUnits,
    LineCap,
    LineJoin,
    SpreadMethod,
    ValueKind,
    Visibility,
)
from svgattrib.types import (
    Clip,
    Color,
    DashArray,
    FontFamily,
    FontSize,
    Length,
    Matrix,
    Paint,
    Point,
    PreserveAspectRatio,
    Rect,
    StopColor,
)
from svgattrib.values import SVGValue

from .cursor import Cursor, ParseResult
from .parser import SVGAttributeParser
from .serializer import serialize

# Note: SVGSerializer is intentionally NOT exported.
# Users should use the serialize() function instead of instantiating SVGSerializer directly.

__all__ = [
    "Cursor",
    "ParseResult",
    "SVGAttributeParser",
    "parse_clip_path",
    "parse_color",
    "parse_dash_array",
    "parse_fill_rule",
    "parse_font_family",
    "parse_font_size",
    "parse_font_style",
    "parse_font_weight",
    "parse_func_iri",
    "parse_gradient_units",
    "parse_iri",
    "parse_length",
    "parse_line_cap",
    "parse_line_join",
    "parse_number",
    "parse_paint",
    "parse_points",
    "parse_preserve_aspect_ratio",
    "parse_spread_method",
    "parse_stop_color",
    "parse_transform",
    "parse_value",
    "parse_view_box",
    "parse_visibility",
    "serialize",
]

# Stateless apart from its size limit, so one instance serves every thread.
_DEFAULT_PARSER = SVGAttributeParser()


def parse_value(kind: ValueKind, source: str) -> SVGValue | None:
    """Parse source as the given kind into an SVGValue.

    Convenience function for SVGAttributeParser.parse_value().

    Args:
        kind: The value kind the attribute is expected to hold
        source: Raw attribute text

    Returns:
        The matching SVGValue variant, or None if source is malformed

    Example:
        >>> from svgattrib.syntax import parse_value
        >>> parse_value(ValueKind.COLOR, "red")
        ColorValue(value=Color(red=255, green=0, blue=0, alpha=255))
    """
    return _DEFAULT_PARSER.parse_value(kind, source)


def parse_number(source: str) -> float | None:
    return _DEFAULT_PARSER.parse_number(source)


def parse_length(source: str) -> Length | None:
    return _DEFAULT_PARSER.parse_length(source)


def parse_color(source: str) -> Color | None:
    return _DEFAULT_PARSER.parse_color(source)


def parse_iri(source: str) -> str | None:
    return _DEFAULT_PARSER.parse_iri(source)


def parse_func_iri(source: str) -> str | None:
    return _DEFAULT_PARSER.parse_func_iri(source)


def parse_paint(source: str) -> Paint | None:
    return _DEFAULT_PARSER.parse_paint(source)


def parse_clip_path(source: str) -> Clip | None:
    return _DEFAULT_PARSER.parse_clip_path(source)


def parse_dash_array(source: str) -> DashArray | None:
    return _DEFAULT_PARSER.parse_dash_array(source)


def parse_fill_rule(source: str) -> FillRule | None:
    return _DEFAULT_PARSER.parse_fill_rule(source)


def parse_line_cap(source: str) -> LineCap | None:
    return _DEFAULT_PARSER.parse_line_cap(source)


def parse_line_join(source: str) -> LineJoin | None:
    return _DEFAULT_PARSER.parse_line_join(source)


def parse_visibility(source: str) -> Visibility | None:
    return _DEFAULT_PARSER.parse_visibility(source)


def parse_spread_method(source: str) -> SpreadMethod | None:
    return _DEFAULT_PARSER.parse_spread_method(source)


def parse_gradient_units(source: str) -> GradientUnits | None:
    return _DEFAULT_PARSER.parse_gradient_units(source)


def parse_stop_color(source: str) -> StopColor | None:
    return _DEFAULT_PARSER.parse_stop_color(source)


def parse_transform(source: str) -> Matrix | None:
    """Parse a transform list into one accumulated matrix.

    Example:
        >>> parse_transform("rotate(90)")
        Matrix(a=0.0, b=1.0, c=-1.0, d=0.0, e=0.0, f=0.0)
    """
    return _DEFAULT_PARSER.parse_transform(source)


def parse_view_box(source: str) -> Rect | None:
    return _DEFAULT_PARSER.parse_view_box(source)


def parse_points(source: str) -> tuple[Point, ...] | None:
    return _DEFAULT_PARSER.parse_points(source)


def parse_preserve_aspect_ratio(source: str) -> PreserveAspectRatio | None:
    return _DEFAULT_PARSER.parse_preserve_aspect_ratio(source)


def parse_font_family(source: str) -> FontFamily | None:
    return _DEFAULT_PARSER.parse_font_family(source)


def parse_font_size(source: str) -> FontSize | None:
    return _DEFAULT_PARSER.parse_font_size(source)


def parse_font_style(source: str) -> FontStyle | None:
    return _DEFAULT_PARSER.parse_font_style(source)


def parse_font_weight(source: str) -> FontWeight | None:
    return _DEFAULT_PARSER.parse_font_weight(source)
