"""svgattrib - Whole-string parsers for SVG attribute values.

Turns the raw text of one SVG attribute (a transform list, a color, a
length, a points list, ...) into exactly one strongly typed value, or
None when the text is malformed. Partial matches never succeed.

Public API:
    SVGAttributeParser - Parser class (configurable input size limit)
    parse_value - Parse text as a given ValueKind into an SVGValue
    serialize - Render a parsed value back to canonical attribute text
    ValueKind - The kinds of attribute value
    SVGValue - Closed union of per-kind value variants

Exceptions:
    SVGAttributeError - Base exception class
    ValueKindError - Value variant / kind mismatch
    SerializationError - Value has no attribute spelling

Submodules:
    svgattrib.types - Payload types (Color, Length, Matrix, Paint, ...)
    svgattrib.values - SVGValue variants and payload accessors
    svgattrib.enums - Keyword enumerations
    svgattrib.syntax - Cursor, per-kind parse functions, serializer
"""

# Essential Public API - Minimal exports for clean namespace
from .enums import ValueKind
from .errors import SerializationError, SVGAttributeError, ValueKindError
from .syntax import SVGAttributeParser, parse_value, serialize
from .values import SVGValue, expect_value, value_as

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("svgattrib")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# SVG specification the grammars follow
__svg_spec_version__ = "1.1"
__spec_url__ = "https://www.w3.org/TR/SVG11/types.html"

__all__ = [
    "SVGAttributeError",
    "SVGAttributeParser",
    "SVGValue",
    "SerializationError",
    "ValueKind",
    "ValueKindError",
    "__spec_url__",
    "__svg_spec_version__",
    "__version__",
    "expect_value",
    "parse_value",
    "serialize",
    "value_as",
]
