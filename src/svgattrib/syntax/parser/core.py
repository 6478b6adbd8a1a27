"""Top-level SVG attribute value parser.

This module provides the SVGAttributeParser class that anchors the grammar
rules of :mod:`svgattrib.syntax.parser.rules` to whole attribute strings.

Architecture:
    Every public method follows the same discipline:

        whitespace* <rule> whitespace* EOF

    The rule sees an immutable :class:`~svgattrib.syntax.cursor.Cursor` and
    returns a :class:`~svgattrib.syntax.cursor.ParseResult` or None. The
    method returns the parsed payload only if the rule succeeded AND the
    remaining input is whitespace. Anything else (wrong token, incomplete
    input, trailing garbage) collapses to None: callers substitute a default
    or inherited value.

Security:
    Includes configurable input size limit to bound work on hostile
    documents.

See Also:
    - :mod:`svgattrib.types` - Payload types
    - :mod:`svgattrib.values` - Tagged SVGValue variants for parse_value()
"""

import logging
from collections.abc import Callable

from svgattrib.constants import MAX_VALUE_LENGTH
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
from svgattrib.errors import ValueKindError
from svgattrib.syntax.cursor import Cursor, ParseResult
from svgattrib.syntax.parser import rules
from svgattrib.syntax.parser.whitespace import WHITESPACE_CHARS, skip_whitespace
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
from svgattrib.values import SVGValue, make_value

__all__ = ["SVGAttributeParser"]

logger = logging.getLogger(__name__)


class SVGAttributeParser:
    """Whole-string parser for SVG attribute values.

    Design:
    - One method per value kind; the caller picks the method from the
      attribute it is reading (there is no guessing of kinds)
    - Immutable cursor: failed alternatives need no rollback
    - Stateless apart from configuration: safe to share between threads

    Attributes:
        max_value_length: Maximum accepted input length in characters
            (0 disables the limit)

    Example:
        >>> parser = SVGAttributeParser()
        >>> parser.parse_length("50%")
        Length(value=50.0, unit=<LengthUnit.PERCENTAGE: '%'>)
        >>> parser.parse_length("10px extra") is None
        True
    """

    __slots__ = ("_max_value_length",)

    def __init__(self, *, max_value_length: int | None = None) -> None:
        """Initialize parser with optional input size limit.

        Args:
            max_value_length: Maximum value length in characters (default: 1 MiB).
                              Set to 0 to disable the limit.

        Raises:
            ValueError: If max_value_length is negative
        """
        if max_value_length is not None and max_value_length < 0:
            msg = f"max_value_length must be non-negative, got {max_value_length}"
            raise ValueError(msg)
        self._max_value_length = (
            max_value_length if max_value_length is not None else MAX_VALUE_LENGTH
        )

    @property
    def max_value_length(self) -> int:
        """Maximum accepted input length in characters."""
        return self._max_value_length

    def _exceeds_limit(self, source: str, kind: ValueKind) -> bool:
        if self._max_value_length and len(source) > self._max_value_length:
            logger.warning(
                "Rejected %s value: %d characters exceeds limit of %d",
                kind,
                len(source),
                self._max_value_length,
            )
            return True
        return False

    def _parse_whole[T](
        self,
        source: str,
        kind: ValueKind,
        rule: Callable[[Cursor], ParseResult[T] | None],
    ) -> T | None:
        """Run rule over the entire source, allowing surrounding whitespace."""
        if self._exceeds_limit(source, kind):
            return None

        result = rule(skip_whitespace(Cursor(source, 0)))
        if result is None:
            logger.debug("Rejected %s value %.80r: no match", kind, source)
            return None

        end = skip_whitespace(result.cursor)
        if not end.is_eof:
            logger.debug(
                "Rejected %s value %.80r: unexpected input at position %d",
                kind,
                source,
                end.pos,
            )
            return None

        return result.value

    # -------------------------------------------------------------------------
    # Scalars
    # -------------------------------------------------------------------------

    def parse_number(self, source: str) -> float | None:
        """Parse <number>, e.g. opacity="0.5"."""
        return self._parse_whole(source, ValueKind.NUMBER, rules.parse_number)

    def parse_length(self, source: str) -> Length | None:
        """Parse <length>, e.g. width="50%" or x="10px"."""
        return self._parse_whole(source, ValueKind.LENGTH, rules.parse_length)

    def parse_color(self, source: str) -> Color | None:
        """Parse <color>: #rgb, #rrggbb, color keyword, or rgb(r, g, b).

        Example:
            >>> parser = SVGAttributeParser()
            >>> parser.parse_color("#f00") == parser.parse_color("red")
            True
        """
        return self._parse_whole(source, ValueKind.COLOR, rules.parse_color)

    def parse_iri(self, source: str) -> str | None:
        """Parse a local IRI ("#id"), e.g. xlink:href. Returns the fragment."""
        return self._parse_whole(source, ValueKind.STRING, rules.parse_iri)

    def parse_func_iri(self, source: str) -> str | None:
        """Parse url(#id), e.g. a filter or marker reference. Returns the fragment."""
        return self._parse_whole(source, ValueKind.STRING, rules.parse_func_iri)

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def parse_paint(self, source: str) -> Paint | None:
        """Parse fill / stroke: color | none | currentColor | inherit | url(#id)."""
        return self._parse_whole(source, ValueKind.PAINT, rules.parse_paint)

    def parse_clip_path(self, source: str) -> Clip | None:
        return self._parse_whole(source, ValueKind.CLIP, rules.parse_clip_path)

    def parse_dash_array(self, source: str) -> DashArray | None:
        return self._parse_whole(source, ValueKind.DASH_ARRAY, rules.parse_dash_array)

    def parse_fill_rule(self, source: str) -> FillRule | None:
        return self._parse_whole(source, ValueKind.FILL_RULE, rules.parse_fill_rule)

    def parse_line_cap(self, source: str) -> LineCap | None:
        return self._parse_whole(source, ValueKind.LINE_CAP, rules.parse_line_cap)

    def parse_line_join(self, source: str) -> LineJoin | None:
        return self._parse_whole(source, ValueKind.LINE_JOIN, rules.parse_line_join)

    def parse_visibility(self, source: str) -> Visibility | None:
        return self._parse_whole(source, ValueKind.VISIBILITY, rules.parse_visibility)

    # -------------------------------------------------------------------------
    # Gradients
    # -------------------------------------------------------------------------

    def parse_spread_method(self, source: str) -> SpreadMethod | None:
        return self._parse_whole(source, ValueKind.SPREAD_METHOD, rules.parse_spread_method)

    def parse_gradient_units(self, source: str) -> GradientUnits | None:
        return self._parse_whole(source, ValueKind.GRADIENT_UNITS, rules.parse_gradient_units)

    def parse_stop_color(self, source: str) -> StopColor | None:
        return self._parse_whole(source, ValueKind.STOP_COLOR, rules.parse_stop_color)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def parse_transform(self, source: str) -> Matrix | None:
        """Parse a transform list into one accumulated matrix.

        Example:
            >>> SVGAttributeParser().parse_transform("translate(10,20) scale(2)")
            Matrix(a=2.0, b=0.0, c=0.0, d=2.0, e=10.0, f=20.0)
        """
        return self._parse_whole(source, ValueKind.TRANSFORM, rules.parse_transform)

    def parse_view_box(self, source: str) -> Rect | None:
        return self._parse_whole(source, ValueKind.VIEW_BOX, rules.parse_view_box)

    def parse_points(self, source: str) -> tuple[Point, ...] | None:
        """Parse a polyline / polygon points list (at least one pair)."""
        return self._parse_whole(source, ValueKind.POINTS, rules.parse_points)

    def parse_preserve_aspect_ratio(self, source: str) -> PreserveAspectRatio | None:
        return self._parse_whole(
            source, ValueKind.PRESERVE_ASPECT_RATIO, rules.parse_preserve_aspect_ratio
        )

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def parse_font_family(self, source: str) -> FontFamily | None:
        """Parse font-family. Only the first family of a fallback list is kept."""
        return self._parse_whole(source, ValueKind.FONT_FAMILY, rules.parse_font_family)

    def parse_font_size(self, source: str) -> FontSize | None:
        return self._parse_whole(source, ValueKind.FONT_SIZE, rules.parse_font_size)

    def parse_font_style(self, source: str) -> FontStyle | None:
        return self._parse_whole(source, ValueKind.FONT_STYLE, rules.parse_font_style)

    def parse_font_weight(self, source: str) -> FontWeight | None:
        return self._parse_whole(source, ValueKind.FONT_WEIGHT, rules.parse_font_weight)

    # -------------------------------------------------------------------------
    # Typed dispatch
    # -------------------------------------------------------------------------

    def parse_value(self, kind: ValueKind, source: str) -> SVGValue | None:  # noqa: PLR0911, PLR0912
        """Parse source as the given kind and wrap it in its SVGValue variant.

        The caller states which kind it expects; nothing is inferred from
        the text.

        PATH values carry the (stripped) path data unparsed; STRING values
        carry the source verbatim.

        Raises:
            ValueKindError: If kind is not a ValueKind

        Example:
            >>> SVGAttributeParser().parse_value(ValueKind.LINE_CAP, "round")
            LineCapValue(value=<LineCap.ROUND: 'round'>)
        """
        if not isinstance(kind, ValueKind):
            msg = f"Unknown value kind: {kind!r}"
            raise ValueKindError(msg)

        payload: object | None
        match kind:
            case ValueKind.CLIP:
                payload = self.parse_clip_path(source)
            case ValueKind.COLOR:
                payload = self.parse_color(source)
            case ValueKind.DASH_ARRAY:
                payload = self.parse_dash_array(source)
            case ValueKind.FILL_RULE:
                payload = self.parse_fill_rule(source)
            case ValueKind.FONT_FAMILY:
                payload = self.parse_font_family(source)
            case ValueKind.FONT_SIZE:
                payload = self.parse_font_size(source)
            case ValueKind.FONT_STYLE:
                payload = self.parse_font_style(source)
            case ValueKind.FONT_WEIGHT:
                payload = self.parse_font_weight(source)
            case ValueKind.GRADIENT_UNITS:
                payload = self.parse_gradient_units(source)
            case ValueKind.LENGTH:
                payload = self.parse_length(source)
            case ValueKind.LINE_CAP:
                payload = self.parse_line_cap(source)
            case ValueKind.LINE_JOIN:
                payload = self.parse_line_join(source)
            case ValueKind.NUMBER:
                payload = self.parse_number(source)
            case ValueKind.PAINT:
                payload = self.parse_paint(source)
            case ValueKind.PATH:
                payload = self._parse_path_data(source)
            case ValueKind.POINTS:
                payload = self.parse_points(source)
            case ValueKind.PRESERVE_ASPECT_RATIO:
                payload = self.parse_preserve_aspect_ratio(source)
            case ValueKind.SPREAD_METHOD:
                payload = self.parse_spread_method(source)
            case ValueKind.STOP_COLOR:
                payload = self.parse_stop_color(source)
            case ValueKind.STRING:
                payload = self._parse_string(source)
            case ValueKind.TRANSFORM:
                payload = self.parse_transform(source)
            case ValueKind.VIEW_BOX:
                payload = self.parse_view_box(source)
            case ValueKind.VISIBILITY:
                payload = self.parse_visibility(source)
            case _:  # pragma: no cover
                msg = f"Unhandled value kind: {kind}"
                raise ValueKindError(msg)

        if payload is None:
            return None
        return make_value(kind, payload)

    def _parse_string(self, source: str) -> str | None:
        if self._exceeds_limit(source, ValueKind.STRING):
            return None
        return source

    def _parse_path_data(self, source: str) -> str | None:
        """Accept any non-blank text; path geometry is parsed elsewhere."""
        return self._parse_whole(source, ValueKind.PATH, _rest_of_input)


def _rest_of_input(cursor: Cursor) -> ParseResult[str] | None:
    end = len(cursor.source)
    text = cursor.slice_to(end).rstrip(WHITESPACE_CHARS)
    if not text:
        return None
    return ParseResult(text, cursor.advance(len(text)))
