"""Grammar rules for SVG attribute values.

This module provides one rule per value kind plus the sub-rules they share
(colors inside paints, lengths inside dash arrays, transform functions
inside transform lists).

Rules here are NOT anchored: each consumes its own production and returns
the cursor where it stopped. The whole-string discipline (leading
whitespace, trailing whitespace, end of input) is applied by
:class:`~svgattrib.syntax.parser.core.SVGAttributeParser`.

All grammar rules are co-located in a single module to:
1. Eliminate circular imports between interdependent rules
2. Keep the keyword tables next to the rules that use them

References:
    https://www.w3.org/TR/SVG11/types.html
    https://www.w3.org/TR/SVG11/coords.html
    https://www.w3.org/TR/SVG11/painting.html
"""

import math

from svgattrib.enums import (
    Align,
    ClipType,
    DashArrayType,
    FillRule,
    FontFamilyType,
    FontSizeType,
    FontStyle,
    FontWeight,
    GradientUnits,
    LengthUnit,
    LineCap,
    LineJoin,
    MeetOrSlice,
    SpreadMethod,
    StopColorType,
    Visibility,
)
from svgattrib.syntax.cursor import Cursor, ParseResult
from svgattrib.syntax.parser.combinators import (
    EnumTable,
    first_of,
    match_enum_table,
    parse_parenthesized,
)
from svgattrib.syntax.parser.primitives import (
    parse_hex,
    parse_literal,
    parse_named_color,
    parse_scalar,
    parse_signed_int,
)
from svgattrib.syntax.parser.whitespace import (
    WHITESPACE_CHARS,
    advance_while,
    parse_comma_wsp,
    parse_separator,
    skip_separators,
    skip_whitespace,
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

__all__ = [
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
    "parse_view_box",
    "parse_visibility",
]

_OPAQUE: int = 0xFF000000
_CHANNEL_MAX: int = 255

# "#" plus digit count
_SHORT_HEX_LEN: int = 4
_LONG_HEX_LEN: int = 7

_MATRIX_ARITY: int = 6


# =============================================================================
# Keyword tables
# =============================================================================

_LENGTH_UNITS: EnumTable[LengthUnit] = (
    ("%", LengthUnit.PERCENTAGE),
    ("em", LengthUnit.EMS),
    ("ex", LengthUnit.EXS),
    ("px", LengthUnit.PX),
    ("cm", LengthUnit.CM),
    ("mm", LengthUnit.MM),
    ("in", LengthUnit.IN),
    ("pt", LengthUnit.PT),
    ("pc", LengthUnit.PC),
)

_LINE_CAPS: EnumTable[LineCap] = (
    ("butt", LineCap.BUTT),
    ("round", LineCap.ROUND),
    ("square", LineCap.SQUARE),
    ("inherit", LineCap.INHERIT),
)

_LINE_JOINS: EnumTable[LineJoin] = (
    ("miter", LineJoin.MITER),
    ("round", LineJoin.ROUND),
    ("bevel", LineJoin.BEVEL),
    ("inherit", LineJoin.INHERIT),
)

_FILL_RULES: EnumTable[FillRule] = (
    ("nonzero", FillRule.NONZERO),
    ("evenodd", FillRule.EVENODD),
    ("inherit", FillRule.INHERIT),
)

_VISIBILITIES: EnumTable[Visibility] = (
    ("visible", Visibility.VISIBLE),
    ("hidden", Visibility.HIDDEN),
    ("collapse", Visibility.COLLAPSE),
    ("inherit", Visibility.INHERIT),
)

_SPREAD_METHODS: EnumTable[SpreadMethod] = (
    ("pad", SpreadMethod.PAD),
    ("reflect", SpreadMethod.REFLECT),
    ("repeat", SpreadMethod.REPEAT),
)

_GRADIENT_UNITS: EnumTable[GradientUnits] = (
    ("userSpaceOnUse", GradientUnits.USER_SPACE_ON_USE),
    ("objectBoundingBox", GradientUnits.OBJECT_BOUNDING_BOX),
)

_FONT_STYLES: EnumTable[FontStyle] = (
    ("normal", FontStyle.NORMAL),
    ("italic", FontStyle.ITALIC),
    ("oblique", FontStyle.OBLIQUE),
    ("inherit", FontStyle.INHERIT),
)

# "bolder" must precede "bold"
_FONT_WEIGHTS: EnumTable[FontWeight] = (
    ("normal", FontWeight.NORMAL),
    ("bolder", FontWeight.BOLDER),
    ("bold", FontWeight.BOLD),
    ("lighter", FontWeight.LIGHTER),
    ("100", FontWeight.W100),
    ("200", FontWeight.W200),
    ("300", FontWeight.W300),
    ("400", FontWeight.W400),
    ("500", FontWeight.W500),
    ("600", FontWeight.W600),
    ("700", FontWeight.W700),
    ("800", FontWeight.W800),
    ("900", FontWeight.W900),
    ("inherit", FontWeight.INHERIT),
)

_ALIGNS: EnumTable[Align] = (
    ("none", Align.NONE),
    ("xMinYMin", Align.X_MIN_Y_MIN),
    ("xMidYMin", Align.X_MID_Y_MIN),
    ("xMaxYMin", Align.X_MAX_Y_MIN),
    ("xMinYMid", Align.X_MIN_Y_MID),
    ("xMidYMid", Align.X_MID_Y_MID),
    ("xMaxYMid", Align.X_MAX_Y_MID),
    ("xMinYMax", Align.X_MIN_Y_MAX),
    ("xMidYMax", Align.X_MID_Y_MAX),
    ("xMaxYMax", Align.X_MAX_Y_MAX),
)

_MEET_OR_SLICE: EnumTable[MeetOrSlice] = (
    ("meet", MeetOrSlice.MEET),
    ("slice", MeetOrSlice.SLICE),
)


def _keyword[T](cursor: Cursor, literal: str, value: T) -> ParseResult[T] | None:
    after = parse_literal(cursor, literal)
    if after is None:
        return None
    return ParseResult(value, after)


# =============================================================================
# Numbers and lengths
# =============================================================================


def parse_number(cursor: Cursor) -> ParseResult[float] | None:
    """Parse <number>: separators? scalar separators?"""
    result = parse_scalar(skip_separators(cursor))
    if result is None:
        return None
    return ParseResult(result.value, skip_separators(result.cursor))


def parse_length(cursor: Cursor) -> ParseResult[Length] | None:
    """Parse <length>: scalar unit? separators?

    Without a unit the scalar must be followed by a separator or the end
    of input, so "50xx" is rejected instead of read as 50.

    Examples:
        50% -> Length(50.0, PERCENTAGE)
        50 -> Length(50.0, NUMBER)
        1.5em, -> Length(1.5, EMS), cursor past the comma
    """
    scalar = parse_scalar(cursor)
    if scalar is None:
        return None
    cursor = scalar.cursor

    unit = LengthUnit.NUMBER
    unit_result = match_enum_table(cursor, _LENGTH_UNITS)
    if unit_result is not None:
        unit = unit_result.value
        cursor = unit_result.cursor
    elif not cursor.is_eof and parse_separator(cursor) is None:
        return None

    return ParseResult(Length(scalar.value, unit), skip_separators(cursor))


# =============================================================================
# Colors
# =============================================================================


def _round_channel(value: float) -> int:
    """Clamp into 0..255, then round half up."""
    clamped = min(max(value, 0.0), float(_CHANNEL_MAX))
    return math.floor(clamped + 0.5)


def _percent_channel(percent: float) -> int:
    # 50% -> exactly 127.5 -> 128
    return _round_channel(percent * _CHANNEL_MAX / 100.0)


def parse_hex_color(cursor: Cursor) -> ParseResult[Color] | None:
    """Parse "#" followed by exactly 3 or 6 hex digits.

    The 3-digit form duplicates each nibble: #abc == #aabbcc.
    """
    after_hash = cursor.expect("#")
    if after_hash is None:
        return None
    hex_result = parse_hex(after_hash)
    if hex_result is None:
        return None

    value = hex_result.value
    matched_len = hex_result.cursor.pos - cursor.pos
    if matched_len == _SHORT_HEX_LEN:
        value = (
            ((value << 12) & 0x00F00000)
            | ((value << 8) & 0x000FF000)
            | ((value << 4) & 0x00000FF0)
            | (value & 0x0000000F)
        )
    elif matched_len != _LONG_HEX_LEN:
        return None

    return ParseResult(Color.from_argb(value | _OPAQUE), hex_result.cursor)


def parse_color_component(cursor: Cursor) -> ParseResult[int] | None:
    """Parse one rgb() channel: integer "%"? | scalar "%"

    A fractional value is only accepted as a percentage (CSS2 rgb-percent
    syntax): "50.5%" is valid, "50.5" is not.
    """
    integral = parse_signed_int(cursor)
    if integral is not None and integral.cursor.peek() != ".":
        after_percent = integral.cursor.expect("%")
        if after_percent is None:
            return ParseResult(_round_channel(integral.value), integral.cursor)
        return ParseResult(_percent_channel(integral.value), after_percent)

    fractional = parse_scalar(cursor)
    if fractional is None:
        return None
    after_percent = fractional.cursor.expect("%")
    if after_percent is None:
        return None
    return ParseResult(_percent_channel(fractional.value), after_percent)


def _parse_rgb_body(cursor: Cursor) -> ParseResult[Color] | None:
    channels: list[int] = []
    for index in range(3):
        if index:
            after_sep = parse_separator(cursor)
            if after_sep is None:
                return None
            cursor = after_sep
        component = parse_color_component(cursor)
        if component is None:
            return None
        channels.append(component.value)
        cursor = component.cursor

    red, green, blue = channels
    return ParseResult(Color(red, green, blue), cursor)


def parse_rgb_color(cursor: Cursor) -> ParseResult[Color] | None:
    """Parse rgb(r, g, b) with integer or percentage channels."""
    return parse_parenthesized(cursor, "rgb", _parse_rgb_body)


def parse_color(cursor: Cursor) -> ParseResult[Color] | None:
    """Parse <color>: hex | keyword | rgb()

    Examples:
        #ff0000, red, rgb(255,0,0), rgb(100%, 0%, 0%) -> Color(255, 0, 0)
    """
    return first_of(cursor, parse_hex_color, parse_named_color, parse_rgb_color)


# =============================================================================
# References
# =============================================================================


def parse_iri(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a local IRI: "#" fragment

    Only same-document fragments are supported; the fragment runs to the
    closing parenthesis or end of input and must not be empty.
    """
    after_hash = skip_whitespace(cursor).expect("#")
    if after_hash is None:
        return None
    end = advance_while(after_hash, lambda ch: ch != ")")
    if end is None:
        return None
    return ParseResult(after_hash.slice_to(end.pos), end)


def parse_func_iri(cursor: Cursor) -> ParseResult[str] | None:
    """Parse url(#fragment)."""
    return parse_parenthesized(cursor, "url", parse_iri)


def parse_paint(cursor: Cursor) -> ParseResult[Paint] | None:
    """Parse <paint>: color | none | currentColor | inherit | url(#id)"""
    color = parse_color(cursor)
    if color is not None:
        return ParseResult(Paint.from_color(color.value), color.cursor)

    keyword = first_of(
        cursor,
        lambda c: _keyword(c, "none", Paint.none()),
        lambda c: _keyword(c, "currentColor", Paint.current_color()),
        lambda c: _keyword(c, "inherit", Paint.inherit()),
    )
    if keyword is not None:
        return keyword

    iri = parse_func_iri(cursor)
    if iri is None:
        return None
    return ParseResult(Paint.from_iri(iri.value), iri.cursor)


def parse_clip_path(cursor: Cursor) -> ParseResult[Clip] | None:
    """Parse clip-path: none | inherit | url(#id)"""
    keyword = first_of(
        cursor,
        lambda c: _keyword(c, "none", Clip(ClipType.NONE)),
        lambda c: _keyword(c, "inherit", Clip(ClipType.INHERIT)),
    )
    if keyword is not None:
        return keyword

    iri = parse_func_iri(cursor)
    if iri is None:
        return None
    return ParseResult(Clip(ClipType.IRI, iri.value), iri.cursor)


# =============================================================================
# Transforms
# =============================================================================


def _parse_optional_scalar(cursor: Cursor) -> ParseResult[float] | None:
    """Parse separator + scalar as a unit; None leaves the separator unconsumed."""
    after_sep = parse_separator(cursor)
    if after_sep is None:
        return None
    return parse_scalar(after_sep)


def _parse_matrix_body(cursor: Cursor) -> ParseResult[Matrix] | None:
    scalars: list[float] = []
    for index in range(_MATRIX_ARITY):
        if index:
            after_sep = parse_separator(cursor)
            if after_sep is None:
                return None
            cursor = after_sep
        scalar = parse_scalar(cursor)
        if scalar is None:
            return None
        scalars.append(scalar.value)
        cursor = scalar.cursor

    return ParseResult(Matrix(*scalars), cursor)


def _parse_translate_body(cursor: Cursor) -> ParseResult[Matrix] | None:
    tx = parse_scalar(cursor)
    if tx is None:
        return None
    ty = _parse_optional_scalar(tx.cursor)
    if ty is None:
        return ParseResult(Matrix.translate(tx.value, 0.0), tx.cursor)
    return ParseResult(Matrix.translate(tx.value, ty.value), ty.cursor)


def _parse_scale_body(cursor: Cursor) -> ParseResult[Matrix] | None:
    sx = parse_scalar(cursor)
    if sx is None:
        return None
    sy = _parse_optional_scalar(sx.cursor)
    if sy is None:
        return ParseResult(Matrix.scale(sx.value, sx.value), sx.cursor)
    return ParseResult(Matrix.scale(sx.value, sy.value), sy.cursor)


def _parse_rotate_body(cursor: Cursor) -> ParseResult[Matrix] | None:
    angle = parse_scalar(cursor)
    if angle is None:
        return None

    # Optional pivot: both cx and cy, or neither
    cx = _parse_optional_scalar(angle.cursor)
    if cx is None:
        return ParseResult(Matrix.rotate(angle.value), angle.cursor)
    cy = _parse_optional_scalar(cx.cursor)
    if cy is None:
        return None
    return ParseResult(Matrix.rotate(angle.value, cx.value, cy.value), cy.cursor)


def _parse_skew_x_body(cursor: Cursor) -> ParseResult[Matrix] | None:
    angle = parse_scalar(cursor)
    if angle is None:
        return None
    return ParseResult(Matrix.skew_x(angle.value), angle.cursor)


def _parse_skew_y_body(cursor: Cursor) -> ParseResult[Matrix] | None:
    angle = parse_scalar(cursor)
    if angle is None:
        return None
    return ParseResult(Matrix.skew_y(angle.value), angle.cursor)


def parse_transform_function(cursor: Cursor) -> ParseResult[Matrix] | None:
    """Parse one of matrix() translate() scale() rotate() skewX() skewY()."""
    return first_of(
        cursor,
        lambda c: parse_parenthesized(c, "matrix", _parse_matrix_body),
        lambda c: parse_parenthesized(c, "translate", _parse_translate_body),
        lambda c: parse_parenthesized(c, "scale", _parse_scale_body),
        lambda c: parse_parenthesized(c, "rotate", _parse_rotate_body),
        lambda c: parse_parenthesized(c, "skewX", _parse_skew_x_body),
        lambda c: parse_parenthesized(c, "skewY", _parse_skew_y_body),
    )


def parse_transform(cursor: Cursor) -> ParseResult[Matrix] | None:
    """Parse a transform list: function (comma-wsp? function)* comma-wsp?

    Functions accumulate left to right by pre-concatenation, so the first
    listed transform is the outermost:

        "translate(10,20) scale(2)" -> translate(10,20) @ scale(2)

    A comma-wsp after each function is consumed, so "translate(10,20)," is
    accepted.
    """
    first = parse_transform_function(cursor)
    if first is None:
        return None
    matrix = Matrix.identity().pre_concat(first.value)
    cursor = parse_comma_wsp(first.cursor) or first.cursor

    while True:
        step = parse_transform_function(cursor)
        if step is None:
            break
        matrix = matrix.pre_concat(step.value)
        cursor = parse_comma_wsp(step.cursor) or step.cursor

    return ParseResult(matrix, cursor)


# =============================================================================
# Geometry lists
# =============================================================================


def parse_view_box(cursor: Cursor) -> ParseResult[Rect] | None:
    """Parse viewBox: min-x sep min-y sep width sep height"""
    scalars: list[float] = []
    for index in range(4):
        if index:
            after_sep = parse_separator(cursor)
            if after_sep is None:
                return None
            cursor = after_sep
        scalar = parse_scalar(cursor)
        if scalar is None:
            return None
        scalars.append(scalar.value)
        cursor = scalar.cursor

    x, y, width, height = scalars
    return ParseResult(Rect(x, y, width, height), cursor)


def _parse_coordinate_pair(cursor: Cursor) -> ParseResult[Point] | None:
    """Parse: coordinate comma-wsp coordinate | coordinate negative-coordinate

    The second form lets "10-5" mean (10, -5): a minus sign terminates the
    first coordinate without any separator.
    """
    x = parse_scalar(cursor)
    if x is None:
        return None
    cursor = x.cursor

    after_sep = parse_comma_wsp(cursor)
    if after_sep is not None:
        cursor = after_sep
    elif cursor.peek() != "-":
        return None

    y = parse_scalar(cursor)
    if y is None:
        return None
    return ParseResult(Point(x.value, y.value), y.cursor)


def parse_points(cursor: Cursor) -> ParseResult[tuple[Point, ...]] | None:
    """Parse a points list: pair (comma-wsp pair)* comma-wsp?

    At least one pair is required. A comma-wsp after the last pair is
    consumed ("1,2," is accepted). A coordinate without a partner is not
    consumed, which makes the enclosing whole-string parse fail.

    Example:
        "0,0 10,10 -5-5" -> (Point(0, 0), Point(10, 10), Point(-5, -5))
    """
    first = _parse_coordinate_pair(cursor)
    if first is None:
        return None
    points = [first.value]
    cursor = first.cursor

    while True:
        after_sep = parse_comma_wsp(cursor)
        if after_sep is None:
            break
        cursor = after_sep
        pair = _parse_coordinate_pair(cursor)
        if pair is None:
            break
        points.append(pair.value)
        cursor = pair.cursor

    return ParseResult(tuple(points), cursor)


def parse_dash_array(cursor: Cursor) -> ParseResult[DashArray] | None:
    """Parse stroke-dasharray: none | inherit | length+"""
    keyword = first_of(
        cursor,
        lambda c: _keyword(c, "none", DashArray(DashArrayType.NONE)),
        lambda c: _keyword(c, "inherit", DashArray(DashArrayType.INHERIT)),
    )
    if keyword is not None:
        return keyword

    dashes: list[Length] = []
    while True:
        # parse_length consumes its trailing separators
        dash = parse_length(cursor)
        if dash is None:
            break
        dashes.append(dash.value)
        cursor = dash.cursor

    if not dashes:
        return None
    return ParseResult(DashArray(DashArrayType.DASH_ARRAY, tuple(dashes)), cursor)


# =============================================================================
# Fonts
# =============================================================================


def parse_font_family(cursor: Cursor) -> ParseResult[FontFamily] | None:
    """Parse font-family: inherit | family ("," fallback)*

    Only the first family is kept; fallback entries are consumed and
    dropped. The family text is taken verbatim (quotes included) minus
    surrounding whitespace.
    """
    after_inherit = parse_literal(cursor, "inherit")
    if after_inherit is not None and skip_whitespace(after_inherit).is_eof:
        return ParseResult(FontFamily(FontFamilyType.INHERIT), after_inherit)

    remainder = cursor.slice_to(len(cursor.source))
    family = remainder.split(",", 1)[0].strip(WHITESPACE_CHARS)
    if not family:
        return None
    return ParseResult(
        FontFamily(FontFamilyType.FAMILY, family),
        cursor.advance(len(remainder)),
    )


def parse_font_size(cursor: Cursor) -> ParseResult[FontSize] | None:
    """Parse font-size: inherit | length"""
    inherit = _keyword(cursor, "inherit", FontSize(FontSizeType.INHERIT))
    if inherit is not None:
        return inherit

    length = parse_length(cursor)
    if length is None:
        return None
    return ParseResult(FontSize(FontSizeType.LENGTH, length.value), length.cursor)


def parse_font_style(cursor: Cursor) -> ParseResult[FontStyle] | None:
    return match_enum_table(cursor, _FONT_STYLES)


def parse_font_weight(cursor: Cursor) -> ParseResult[FontWeight] | None:
    """Parse font-weight: normal | bold | bolder | lighter | 100..900 | inherit"""
    return match_enum_table(cursor, _FONT_WEIGHTS)


# =============================================================================
# Keyword properties
# =============================================================================


def parse_fill_rule(cursor: Cursor) -> ParseResult[FillRule] | None:
    return match_enum_table(cursor, _FILL_RULES)


def parse_line_cap(cursor: Cursor) -> ParseResult[LineCap] | None:
    return match_enum_table(cursor, _LINE_CAPS)


def parse_line_join(cursor: Cursor) -> ParseResult[LineJoin] | None:
    return match_enum_table(cursor, _LINE_JOINS)


def parse_visibility(cursor: Cursor) -> ParseResult[Visibility] | None:
    return match_enum_table(cursor, _VISIBILITIES)


def parse_spread_method(cursor: Cursor) -> ParseResult[SpreadMethod] | None:
    return match_enum_table(cursor, _SPREAD_METHODS)


def parse_gradient_units(cursor: Cursor) -> ParseResult[GradientUnits] | None:
    return match_enum_table(cursor, _GRADIENT_UNITS)


def parse_stop_color(cursor: Cursor) -> ParseResult[StopColor] | None:
    """Parse stop-color: color | currentColor | inherit"""
    color = parse_color(cursor)
    if color is not None:
        return ParseResult(StopColor(StopColorType.COLOR, color.value), color.cursor)

    return first_of(
        cursor,
        lambda c: _keyword(c, "currentColor", StopColor(StopColorType.CURRENT_COLOR)),
        lambda c: _keyword(c, "inherit", StopColor(StopColorType.INHERIT)),
    )


def parse_preserve_aspect_ratio(cursor: Cursor) -> ParseResult[PreserveAspectRatio] | None:
    """Parse preserveAspectRatio: (defer wsp*)? align (wsp* meetOrSlice)?

    The alignment is mandatory; "slice" alone is rejected. "defer" is
    accepted and discarded. Whitespace between tokens is optional, so
    "xMidYMidslice" parses.
    """
    after_defer = parse_literal(cursor, "defer")
    if after_defer is not None:
        cursor = skip_whitespace(after_defer)

    align = match_enum_table(cursor, _ALIGNS)
    if align is None:
        return None
    cursor = align.cursor

    scale = MeetOrSlice.MEET
    scale_result = match_enum_table(skip_whitespace(cursor), _MEET_OR_SLICE)
    if scale_result is not None:
        scale = scale_result.value
        cursor = scale_result.cursor

    return ParseResult(PreserveAspectRatio(align.value, scale), cursor)
