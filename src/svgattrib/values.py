"""Tagged attribute values.

SVGValue is a closed union of one frozen dataclass per value kind. Each
variant carries exactly one payload in ``.value`` and a class-level
``kind`` tag. The payload type is checked at construction, so a variant
can never hold a payload of the wrong shape.

Recovering a payload:

    >>> match value:
    ...     case ColorValue(value=color):
    ...         use(color)
    ...     case PaintValue(value=paint):
    ...         use(paint)

or, when the expected kind is known statically:

    >>> color = value_as(value, ColorValue)      # Color | None
    >>> color = expect_value(value, ColorValue)  # Color, or ValueKindError

Values own their payloads and outlive the parse call that built them.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, TypeIs

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

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Variants
    "ClipValue",
    "ColorValue",
    "DashArrayValue",
    "FillRuleValue",
    "FontFamilyValue",
    "FontSizeValue",
    "FontStyleValue",
    "FontWeightValue",
    "GradientUnitsValue",
    "LengthValue",
    "LineCapValue",
    "LineJoinValue",
    "NumberValue",
    "PaintValue",
    "PathValue",
    "PointsValue",
    "PreserveAspectRatioValue",
    "SpreadMethodValue",
    "StopColorValue",
    "StringValue",
    "TransformValue",
    "ViewBoxValue",
    "VisibilityValue",
    # Union and helpers
    "SVGValue",
    "VARIANT_BY_KIND",
    "expect_value",
    "is_svg_value",
    "make_value",
    "value_as",
]


class _Variant[P]:
    """Shared construction check for all variants."""

    __slots__ = ()

    kind: ClassVar[ValueKind]
    payload_type: ClassVar[type | tuple[type, ...]]
    value: P

    def __post_init__(self) -> None:
        """Reject payloads whose type does not match the variant's kind."""
        payload = self.value
        if isinstance(payload, bool) or not isinstance(payload, self.payload_type):
            msg = f"{self.kind} value requires {self._payload_name()}, got {type(payload).__name__}"
            raise ValueKindError(msg)

    @classmethod
    def _payload_name(cls) -> str:
        if isinstance(cls.payload_type, tuple):
            return " | ".join(t.__name__ for t in cls.payload_type)
        return cls.payload_type.__name__


@dataclass(frozen=True, slots=True)
class ClipValue(_Variant[Clip]):
    kind: ClassVar[ValueKind] = ValueKind.CLIP
    payload_type: ClassVar[type] = Clip
    value: Clip


@dataclass(frozen=True, slots=True)
class ColorValue(_Variant[Color]):
    kind: ClassVar[ValueKind] = ValueKind.COLOR
    payload_type: ClassVar[type] = Color
    value: Color


@dataclass(frozen=True, slots=True)
class DashArrayValue(_Variant[DashArray]):
    kind: ClassVar[ValueKind] = ValueKind.DASH_ARRAY
    payload_type: ClassVar[type] = DashArray
    value: DashArray


@dataclass(frozen=True, slots=True)
class FillRuleValue(_Variant[FillRule]):
    kind: ClassVar[ValueKind] = ValueKind.FILL_RULE
    payload_type: ClassVar[type] = FillRule
    value: FillRule


@dataclass(frozen=True, slots=True)
class FontFamilyValue(_Variant[FontFamily]):
    kind: ClassVar[ValueKind] = ValueKind.FONT_FAMILY
    payload_type: ClassVar[type] = FontFamily
    value: FontFamily


@dataclass(frozen=True, slots=True)
class FontSizeValue(_Variant[FontSize]):
    kind: ClassVar[ValueKind] = ValueKind.FONT_SIZE
    payload_type: ClassVar[type] = FontSize
    value: FontSize


@dataclass(frozen=True, slots=True)
class FontStyleValue(_Variant[FontStyle]):
    kind: ClassVar[ValueKind] = ValueKind.FONT_STYLE
    payload_type: ClassVar[type] = FontStyle
    value: FontStyle


@dataclass(frozen=True, slots=True)
class FontWeightValue(_Variant[FontWeight]):
    kind: ClassVar[ValueKind] = ValueKind.FONT_WEIGHT
    payload_type: ClassVar[type] = FontWeight
    value: FontWeight


@dataclass(frozen=True, slots=True)
class GradientUnitsValue(_Variant[GradientUnits]):
    kind: ClassVar[ValueKind] = ValueKind.GRADIENT_UNITS
    payload_type: ClassVar[type] = GradientUnits
    value: GradientUnits


@dataclass(frozen=True, slots=True)
class LengthValue(_Variant[Length]):
    kind: ClassVar[ValueKind] = ValueKind.LENGTH
    payload_type: ClassVar[type] = Length
    value: Length


@dataclass(frozen=True, slots=True)
class LineCapValue(_Variant[LineCap]):
    kind: ClassVar[ValueKind] = ValueKind.LINE_CAP
    payload_type: ClassVar[type] = LineCap
    value: LineCap


@dataclass(frozen=True, slots=True)
class LineJoinValue(_Variant[LineJoin]):
    kind: ClassVar[ValueKind] = ValueKind.LINE_JOIN
    payload_type: ClassVar[type] = LineJoin
    value: LineJoin


@dataclass(frozen=True, slots=True)
class NumberValue(_Variant[float]):
    kind: ClassVar[ValueKind] = ValueKind.NUMBER
    payload_type: ClassVar[tuple[type, ...]] = (int, float)
    value: float


@dataclass(frozen=True, slots=True)
class PaintValue(_Variant[Paint]):
    kind: ClassVar[ValueKind] = ValueKind.PAINT
    payload_type: ClassVar[type] = Paint
    value: Paint


@dataclass(frozen=True, slots=True)
class PathValue(_Variant[str]):
    """Raw path data. Geometry parsing belongs to the path module, not here."""

    kind: ClassVar[ValueKind] = ValueKind.PATH
    payload_type: ClassVar[type] = str
    value: str


@dataclass(frozen=True, slots=True)
class PointsValue(_Variant[tuple[Point, ...]]):
    kind: ClassVar[ValueKind] = ValueKind.POINTS
    payload_type: ClassVar[type] = tuple
    value: tuple[Point, ...]

    def __post_init__(self) -> None:
        """Check the container, then every element."""
        _Variant.__post_init__(self)
        for point in self.value:
            if not isinstance(point, Point):
                msg = f"points value requires Point elements, got {type(point).__name__}"
                raise ValueKindError(msg)


@dataclass(frozen=True, slots=True)
class PreserveAspectRatioValue(_Variant[PreserveAspectRatio]):
    kind: ClassVar[ValueKind] = ValueKind.PRESERVE_ASPECT_RATIO
    payload_type: ClassVar[type] = PreserveAspectRatio
    value: PreserveAspectRatio


@dataclass(frozen=True, slots=True)
class SpreadMethodValue(_Variant[SpreadMethod]):
    kind: ClassVar[ValueKind] = ValueKind.SPREAD_METHOD
    payload_type: ClassVar[type] = SpreadMethod
    value: SpreadMethod


@dataclass(frozen=True, slots=True)
class StopColorValue(_Variant[StopColor]):
    kind: ClassVar[ValueKind] = ValueKind.STOP_COLOR
    payload_type: ClassVar[type] = StopColor
    value: StopColor


@dataclass(frozen=True, slots=True)
class StringValue(_Variant[str]):
    kind: ClassVar[ValueKind] = ValueKind.STRING
    payload_type: ClassVar[type] = str
    value: str


@dataclass(frozen=True, slots=True)
class TransformValue(_Variant[Matrix]):
    kind: ClassVar[ValueKind] = ValueKind.TRANSFORM
    payload_type: ClassVar[type] = Matrix
    value: Matrix


@dataclass(frozen=True, slots=True)
class ViewBoxValue(_Variant[Rect]):
    kind: ClassVar[ValueKind] = ValueKind.VIEW_BOX
    payload_type: ClassVar[type] = Rect
    value: Rect


@dataclass(frozen=True, slots=True)
class VisibilityValue(_Variant[Visibility]):
    kind: ClassVar[ValueKind] = ValueKind.VISIBILITY
    payload_type: ClassVar[type] = Visibility
    value: Visibility


type SVGValue = (
    ClipValue
    | ColorValue
    | DashArrayValue
    | FillRuleValue
    | FontFamilyValue
    | FontSizeValue
    | FontStyleValue
    | FontWeightValue
    | GradientUnitsValue
    | LengthValue
    | LineCapValue
    | LineJoinValue
    | NumberValue
    | PaintValue
    | PathValue
    | PointsValue
    | PreserveAspectRatioValue
    | SpreadMethodValue
    | StopColorValue
    | StringValue
    | TransformValue
    | ViewBoxValue
    | VisibilityValue
)

_VARIANTS: tuple[type, ...] = (
    ClipValue,
    ColorValue,
    DashArrayValue,
    FillRuleValue,
    FontFamilyValue,
    FontSizeValue,
    FontStyleValue,
    FontWeightValue,
    GradientUnitsValue,
    LengthValue,
    LineCapValue,
    LineJoinValue,
    NumberValue,
    PaintValue,
    PathValue,
    PointsValue,
    PreserveAspectRatioValue,
    SpreadMethodValue,
    StopColorValue,
    StringValue,
    TransformValue,
    ViewBoxValue,
    VisibilityValue,
)

# One variant per kind; import-time check keeps the table and ValueKind in sync.
VARIANT_BY_KIND: Mapping[ValueKind, type] = MappingProxyType(
    {variant.kind: variant for variant in _VARIANTS}
)
if set(VARIANT_BY_KIND) != set(ValueKind):  # pragma: no cover
    _missing = sorted(set(ValueKind) - set(VARIANT_BY_KIND))
    raise RuntimeError(f"SVGValue variants missing for kinds: {_missing}")


def is_svg_value(obj: object) -> TypeIs[SVGValue]:
    """Type guard for any SVGValue variant."""
    return isinstance(obj, _VARIANTS)


def make_value(kind: ValueKind, payload: object) -> SVGValue:
    """Build the variant for kind around payload.

    Raises:
        ValueKindError: If kind is not a ValueKind or payload has the wrong type
    """
    variant = VARIANT_BY_KIND.get(kind) if isinstance(kind, ValueKind) else None
    if variant is None:
        msg = f"Unknown value kind: {kind!r}"
        raise ValueKindError(msg)
    result: SVGValue = variant(payload)
    return result


def value_as[P](value: SVGValue, variant: type[_Variant[P]]) -> P | None:
    """Return value's payload if it is of the given variant, else None."""
    if isinstance(value, variant):
        return value.value
    return None


def expect_value[P](value: SVGValue, variant: type[_Variant[P]]) -> P:
    """Return value's payload, raising if it is not of the given variant.

    Raises:
        ValueKindError: If value is a different variant
    """
    if isinstance(value, variant):
        return value.value
    actual = value.kind if is_svg_value(value) else type(value).__name__
    msg = f"Expected {variant.kind} value, got {actual}"
    raise ValueKindError(msg)
