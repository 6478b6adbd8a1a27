"""Serialize parsed values back to SVG attribute text.

Converts payloads and SVGValue variants to canonical attribute text.
Useful for:
- Writing normalized documents
- Property-based testing (roundtrip: parse -> serialize -> parse)

Canonical forms:
    Color               #rrggbb
    Length              <number><unit>
    Matrix              matrix(a,b,c,d,e,f)
    Rect                x y width height
    points              x,y x,y ...
    DashArray           none | inherit | d1,d2,...
    PreserveAspectRatio align [slice]

Python 3.13+.
"""

import math
from enum import StrEnum

from svgattrib.enums import (
    ClipType,
    DashArrayType,
    FillRule,
    FontFamilyType,
    FontSizeType,
    FontStyle,
    FontWeight,
    GradientUnits,
    LineCap,
    LineJoin,
    MeetOrSlice,
    PaintType,
    SpreadMethod,
    StopColorType,
    Visibility,
)
from svgattrib.errors import SerializationError
from svgattrib.syntax.parser.whitespace import WHITESPACE_CHARS
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
from svgattrib.values import is_svg_value

__all__ = ["serialize"]

_OPAQUE_ALPHA: int = 255

# Integral floats below this magnitude are written without a fraction
# or exponent ("10" rather than "10.0").
_PLAIN_INTEGER_LIMIT: float = 1e16

_KEYWORD_ENUMS: tuple[type, ...] = (
    FillRule,
    FontStyle,
    FontWeight,
    GradientUnits,
    LineCap,
    LineJoin,
    SpreadMethod,
    Visibility,
)


class SVGSerializer:
    """Renders payloads and SVGValue variants as attribute text.

    Output always parses back (with the parser method for the same kind)
    to a value equal to the input. Objects that have no such spelling
    raise SerializationError instead of producing lossy text.
    """

    __slots__ = ()

    def serialize(self, obj: object) -> str:  # noqa: PLR0911
        """Serialize obj to attribute text.

        Raises:
            SerializationError: If obj cannot be written as attribute text
        """
        if is_svg_value(obj):
            return self.serialize(obj.value)

        match obj:
            case bool():
                pass
            case int() | float():
                return self._number(obj)
            case _ if isinstance(obj, _KEYWORD_ENUMS):
                return str(obj)
            case StrEnum():
                pass
            case str():
                return obj
            case Color():
                return self._color(obj)
            case Length():
                return self._length(obj)
            case Matrix():
                return self._matrix(obj)
            case Rect():
                return " ".join(self._number(n) for n in (obj.x, obj.y, obj.width, obj.height))
            case tuple():
                return self._points(obj)
            case Paint():
                return self._paint(obj)
            case Clip():
                return self._clip(obj)
            case DashArray():
                return self._dash_array(obj)
            case StopColor():
                return self._stop_color(obj)
            case FontFamily():
                return self._font_family(obj)
            case FontSize():
                if obj.type is FontSizeType.INHERIT:
                    return "inherit"
                assert obj.size is not None  # FontSize invariant
                return self._length(obj.size)
            case PreserveAspectRatio():
                if obj.scale is MeetOrSlice.SLICE:
                    return f"{obj.align} {obj.scale}"
                return str(obj.align)

        msg = f"Cannot serialize {type(obj).__name__} as an attribute value"
        raise SerializationError(msg)

    def _number(self, value: float) -> str:
        if not math.isfinite(value):
            msg = f"Non-finite number has no attribute spelling: {value!r}"
            raise SerializationError(msg)
        if value == int(value) and abs(value) < _PLAIN_INTEGER_LIMIT:
            return str(int(value))
        # repr() is the shortest text that round-trips through float()
        return repr(float(value))

    def _color(self, color: Color) -> str:
        if color.alpha != _OPAQUE_ALPHA:
            msg = f"Translucent color has no attribute spelling: alpha={color.alpha}"
            raise SerializationError(msg)
        return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"

    def _length(self, length: Length) -> str:
        return f"{self._number(length.value)}{length.unit}"

    def _matrix(self, matrix: Matrix) -> str:
        return "matrix(" + ",".join(self._number(n) for n in matrix.as_tuple()) + ")"

    def _points(self, points: tuple[object, ...]) -> str:
        if not points:
            msg = "Points list must contain at least one point"
            raise SerializationError(msg)
        pairs: list[str] = []
        for point in points:
            if not isinstance(point, Point):
                msg = f"Cannot serialize tuple element {type(point).__name__} as a point"
                raise SerializationError(msg)
            pairs.append(f"{self._number(point.x)},{self._number(point.y)}")
        return " ".join(pairs)

    def _func_iri(self, iri: str) -> str:
        if not iri or ")" in iri:
            msg = f"IRI fragment has no url() spelling: {iri!r}"
            raise SerializationError(msg)
        return f"url(#{iri})"

    def _paint(self, paint: Paint) -> str:
        match paint.type:
            case PaintType.COLOR:
                assert paint.color is not None  # Paint invariant
                return self._color(paint.color)
            case PaintType.IRI:
                assert paint.iri is not None  # Paint invariant
                return self._func_iri(paint.iri)
            case _:
                return str(paint.type)

    def _clip(self, clip: Clip) -> str:
        if clip.type is ClipType.IRI:
            assert clip.iri is not None  # Clip invariant
            return self._func_iri(clip.iri)
        return str(clip.type)

    def _dash_array(self, dash_array: DashArray) -> str:
        if dash_array.type is DashArrayType.DASH_ARRAY:
            return ",".join(self._length(dash) for dash in dash_array.dashes)
        return str(dash_array.type)

    def _stop_color(self, stop_color: StopColor) -> str:
        if stop_color.type is StopColorType.COLOR:
            assert stop_color.color is not None  # StopColor invariant
            return self._color(stop_color.color)
        return str(stop_color.type)

    def _font_family(self, font_family: FontFamily) -> str:
        if font_family.type is FontFamilyType.INHERIT:
            return "inherit"
        family = font_family.family
        # Text that would re-parse differently: empty, padded, a list, or the keyword
        if (
            not family
            or family != family.strip(WHITESPACE_CHARS)
            or "," in family
            or family == "inherit"
        ):
            msg = f"Font family has no attribute spelling: {family!r}"
            raise SerializationError(msg)
        return family


def serialize(obj: object) -> str:
    """Serialize a payload or SVGValue to attribute text.

    Convenience function for SVGSerializer.serialize().

    Raises:
        SerializationError: If obj cannot be written as attribute text

    Example:
        >>> from svgattrib.types import Color, Length
        >>> from svgattrib.enums import LengthUnit
        >>> serialize(Color(255, 0, 0))
        '#ff0000'
        >>> serialize(Length(1.5, LengthUnit.EMS))
        '1.5em'
    """
    return SVGSerializer().serialize(obj)
