"""Payload types produced by the attribute grammars.

Plain immutable data: the parser builds them, callers own them.
Invariants are checked in __post_init__ so a payload can never hold an
inconsistent combination of fields (e.g. a color paint without a color).

Python 3.13+. Zero external dependencies.
"""

import math
from dataclasses import dataclass
from typing import Self

from svgattrib.constants import MATRIX_TOLERANCE, NEARLY_ZERO
from svgattrib.enums import (
    Align,
    ClipType,
    DashArrayType,
    FontFamilyType,
    FontSizeType,
    LengthUnit,
    MeetOrSlice,
    PaintType,
    StopColorType,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Geometry
    "Matrix",
    "Point",
    "Rect",
    # Scalars
    "Color",
    "Length",
    # Composite values
    "Clip",
    "DashArray",
    "FontFamily",
    "FontSize",
    "Paint",
    "PreserveAspectRatio",
    "StopColor",
]

_CHANNEL_MAX: int = 255


def _snap_to_zero(value: float) -> float:
    return 0.0 if abs(value) <= NEARLY_ZERO else value


# ============================================================================
# GEOMETRY
# ============================================================================


@dataclass(frozen=True, slots=True)
class Point:
    """Coordinate pair from a points list."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Rectangle in x/y/width/height form (viewBox)."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Matrix:
    """2-D affine transform in SVG matrix(a, b, c, d, e, f) order.

    Maps a point as:
        x' = a*x + c*y + e
        y' = b*x + d*y + f

    Composition uses the matrix product: (m1 @ m2) applies m2 first, then m1.
    A transform list "m1 m2" therefore accumulates to m1 @ m2.

    Example:
        >>> m = Matrix.translate(10, 20) @ Matrix.scale(2)
        >>> m.map_point(1, 1)
        (12.0, 22.0)
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Self:
        return cls()

    @classmethod
    def translate(cls, tx: float, ty: float = 0.0) -> Self:
        return cls(1.0, 0.0, 0.0, 1.0, tx, ty)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> Self:
        return cls(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)

    @classmethod
    def rotate(cls, degrees: float, cx: float = 0.0, cy: float = 0.0) -> Self:
        """Rotation by degrees about (cx, cy).

        Sine and cosine snap to zero near multiples of 90 degrees so that
        quarter turns are exact.
        """
        radians = math.radians(degrees)
        sin = _snap_to_zero(math.sin(radians))
        cos = _snap_to_zero(math.cos(radians))
        return cls(
            cos,
            sin,
            -sin,
            cos,
            cx - cos * cx + sin * cy,
            cy - sin * cx - cos * cy,
        )

    @classmethod
    def skew_x(cls, degrees: float) -> Self:
        return cls(1.0, 0.0, math.tan(math.radians(degrees)), 1.0, 0.0, 0.0)

    @classmethod
    def skew_y(cls, degrees: float) -> Self:
        return cls(1.0, math.tan(math.radians(degrees)), 0.0, 1.0, 0.0, 0.0)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    def pre_concat(self, other: "Matrix") -> "Matrix":
        """Return self @ other (other applies to points first)."""
        return self @ other

    def map_point(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def is_close(self, other: "Matrix", tolerance: float = MATRIX_TOLERANCE) -> bool:
        """Compare all six coefficients within an absolute tolerance."""
        return all(
            math.isclose(mine, theirs, rel_tol=tolerance, abs_tol=tolerance)
            for mine, theirs in zip(self.as_tuple(), other.as_tuple(), strict=True)
        )


# ============================================================================
# SCALARS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """Opaque-by-default sRGB color with 8-bit channels.

    Attributes:
        red, green, blue: Channel values in 0..255
        alpha: Alpha in 0..255 (parsed colors are always 255)

    Example:
        >>> Color(255, 0, 0).argb
        4294901760
        >>> Color.from_argb(0xFF00FF00)
        Color(red=0, green=255, blue=0, alpha=255)
    """

    red: int
    green: int
    blue: int
    alpha: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name in ("red", "green", "blue", "alpha"):
            channel = getattr(self, name)
            if not isinstance(channel, int) or isinstance(channel, bool):
                msg = f"Color {name} must be int, got {type(channel).__name__}"
                raise TypeError(msg)
            if not 0 <= channel <= _CHANNEL_MAX:
                msg = f"Color {name} must be in 0..255, got {channel}"
                raise ValueError(msg)

    @classmethod
    def from_argb(cls, argb: int) -> Self:
        return cls(
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
            (argb >> 24) & 0xFF,
        )

    @property
    def argb(self) -> int:
        """Packed 0xAARRGGBB integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue


@dataclass(frozen=True, slots=True)
class Length:
    """Number with a unit suffix. Relative units are not resolved here."""

    value: float
    unit: LengthUnit = LengthUnit.NUMBER

    def __post_init__(self) -> None:
        """Validate unit type."""
        if not isinstance(self.unit, LengthUnit):
            msg = f"Length unit must be LengthUnit, got {self.unit!r}"
            raise TypeError(msg)


# ============================================================================
# COMPOSITE VALUES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Paint:
    """fill / stroke value.

    Exactly one of the payload fields is meaningful, selected by type:
        COLOR -> color, IRI -> iri, others -> neither.
    Use the classmethods rather than the raw constructor.
    """

    type: PaintType
    color: Color | None = None
    iri: str | None = None

    def __post_init__(self) -> None:
        """Validate that payload fields match the paint type."""
        if (self.color is not None) != (self.type is PaintType.COLOR):
            msg = f"Paint color must be set iff type is COLOR (type={self.type})"
            raise ValueError(msg)
        if (self.iri is not None) != (self.type is PaintType.IRI):
            msg = f"Paint iri must be set iff type is IRI (type={self.type})"
            raise ValueError(msg)

    @classmethod
    def none(cls) -> Self:
        return cls(PaintType.NONE)

    @classmethod
    def current_color(cls) -> Self:
        return cls(PaintType.CURRENT_COLOR)

    @classmethod
    def inherit(cls) -> Self:
        return cls(PaintType.INHERIT)

    @classmethod
    def from_color(cls, color: Color) -> Self:
        return cls(PaintType.COLOR, color=color)

    @classmethod
    def from_iri(cls, iri: str) -> Self:
        return cls(PaintType.IRI, iri=iri)


@dataclass(frozen=True, slots=True)
class Clip:
    """clip-path value: none, inherit, or a local IRI."""

    type: ClipType
    iri: str | None = None

    def __post_init__(self) -> None:
        """Validate that iri is present exactly for IRI clips."""
        if (self.iri is not None) != (self.type is ClipType.IRI):
            msg = f"Clip iri must be set iff type is IRI (type={self.type})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class DashArray:
    """stroke-dasharray value."""

    type: DashArrayType
    dashes: tuple[Length, ...] = ()

    def __post_init__(self) -> None:
        """Validate that dashes are present exactly for DASH_ARRAY."""
        if bool(self.dashes) != (self.type is DashArrayType.DASH_ARRAY):
            msg = f"DashArray dashes must be non-empty iff type is DASH_ARRAY (type={self.type})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class StopColor:
    """stop-color value."""

    type: StopColorType
    color: Color | None = None

    def __post_init__(self) -> None:
        """Validate that color is present exactly for COLOR stops."""
        if (self.color is not None) != (self.type is StopColorType.COLOR):
            msg = f"StopColor color must be set iff type is COLOR (type={self.type})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FontFamily:
    """font-family value. Only the first family of a fallback list is kept."""

    type: FontFamilyType
    family: str = ""


@dataclass(frozen=True, slots=True)
class FontSize:
    """font-size value."""

    type: FontSizeType
    size: Length | None = None

    def __post_init__(self) -> None:
        """Validate that size is present exactly for LENGTH."""
        if (self.size is not None) != (self.type is FontSizeType.LENGTH):
            msg = f"FontSize size must be set iff type is LENGTH (type={self.type})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PreserveAspectRatio:
    """preserveAspectRatio value. The 'defer' keyword is not retained."""

    align: Align = Align.X_MID_Y_MID
    scale: MeetOrSlice = MeetOrSlice.MEET
