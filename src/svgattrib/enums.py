"""Enumerations for svgattrib type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
Keyword enums carry the exact SVG literal as their value, so
str(LineCap.ROUND) == "round" is also the serialized attribute text.

Python 3.13+.
"""

from enum import StrEnum

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Value tags
    "ValueKind",
    # Payload discriminators
    "LengthUnit",
    "PaintType",
    "ClipType",
    "DashArrayType",
    "StopColorType",
    "FontFamilyType",
    "FontSizeType",
    # Keyword sets
    "FillRule",
    "LineCap",
    "LineJoin",
    "Visibility",
    "SpreadMethod",
    "GradientUnits",
    "FontStyle",
    "FontWeight",
    "Align",
    "MeetOrSlice",
]


class ValueKind(StrEnum):
    """Tag of every SVGValue variant.

    StrEnum provides automatic string conversion: str(ValueKind.COLOR) == "color"
    """

    CLIP = "clip"
    COLOR = "color"
    DASH_ARRAY = "dash-array"
    FILL_RULE = "fill-rule"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_WEIGHT = "font-weight"
    GRADIENT_UNITS = "gradient-units"
    LENGTH = "length"
    LINE_CAP = "line-cap"
    LINE_JOIN = "line-join"
    NUMBER = "number"
    PAINT = "paint"
    PATH = "path"
    POINTS = "points"
    PRESERVE_ASPECT_RATIO = "preserve-aspect-ratio"
    SPREAD_METHOD = "spread-method"
    STOP_COLOR = "stop-color"
    STRING = "string"
    TRANSFORM = "transform"
    VIEW_BOX = "view-box"
    VISIBILITY = "visibility"


class LengthUnit(StrEnum):
    """Unit suffix of a <length>. NUMBER is the absent (user unit) suffix."""

    NUMBER = ""
    PERCENTAGE = "%"
    EMS = "em"
    EXS = "ex"
    PX = "px"
    CM = "cm"
    MM = "mm"
    IN = "in"
    PT = "pt"
    PC = "pc"


class PaintType(StrEnum):
    """Kind of <paint> value."""

    NONE = "none"
    CURRENT_COLOR = "currentColor"
    INHERIT = "inherit"
    COLOR = "color"
    IRI = "iri"


class ClipType(StrEnum):
    """Kind of clip-path value."""

    NONE = "none"
    INHERIT = "inherit"
    IRI = "iri"


class DashArrayType(StrEnum):
    """Kind of stroke-dasharray value."""

    NONE = "none"
    INHERIT = "inherit"
    DASH_ARRAY = "dash-array"


class StopColorType(StrEnum):
    """Kind of stop-color value."""

    COLOR = "color"
    CURRENT_COLOR = "currentColor"
    INHERIT = "inherit"


class FontFamilyType(StrEnum):
    """Kind of font-family value."""

    FAMILY = "family"
    INHERIT = "inherit"


class FontSizeType(StrEnum):
    """Kind of font-size value."""

    LENGTH = "length"
    INHERIT = "inherit"


class FillRule(StrEnum):
    """fill-rule / clip-rule keywords."""

    NONZERO = "nonzero"
    EVENODD = "evenodd"
    INHERIT = "inherit"


class LineCap(StrEnum):
    """stroke-linecap keywords."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"
    INHERIT = "inherit"


class LineJoin(StrEnum):
    """stroke-linejoin keywords."""

    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"
    INHERIT = "inherit"


class Visibility(StrEnum):
    """visibility keywords."""

    VISIBLE = "visible"
    HIDDEN = "hidden"
    COLLAPSE = "collapse"
    INHERIT = "inherit"


class SpreadMethod(StrEnum):
    """Gradient spreadMethod keywords."""

    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class GradientUnits(StrEnum):
    """gradientUnits / clipPathUnits keywords."""

    USER_SPACE_ON_USE = "userSpaceOnUse"
    OBJECT_BOUNDING_BOX = "objectBoundingBox"


class FontStyle(StrEnum):
    """font-style keywords."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"
    INHERIT = "inherit"


class FontWeight(StrEnum):
    """font-weight keywords, including the nine numeric weights."""

    NORMAL = "normal"
    BOLD = "bold"
    BOLDER = "bolder"
    LIGHTER = "lighter"
    W100 = "100"
    W200 = "200"
    W300 = "300"
    W400 = "400"
    W500 = "500"
    W600 = "600"
    W700 = "700"
    W800 = "800"
    W900 = "900"
    INHERIT = "inherit"


class Align(StrEnum):
    """preserveAspectRatio alignment keywords."""

    NONE = "none"
    X_MIN_Y_MIN = "xMinYMin"
    X_MID_Y_MIN = "xMidYMin"
    X_MAX_Y_MIN = "xMaxYMin"
    X_MIN_Y_MID = "xMinYMid"
    X_MID_Y_MID = "xMidYMid"
    X_MAX_Y_MID = "xMaxYMid"
    X_MIN_Y_MAX = "xMinYMax"
    X_MID_Y_MAX = "xMidYMax"
    X_MAX_Y_MAX = "xMaxYMax"


class MeetOrSlice(StrEnum):
    """preserveAspectRatio scaling keywords."""

    MEET = "meet"
    SLICE = "slice"
