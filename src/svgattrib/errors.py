"""svgattrib exception hierarchy.

Malformed attribute text is NOT an exception: every parse function returns
None on failure so callers can substitute a default or inherited value.
Exceptions here signal programming errors (mismatched value kinds,
unserializable objects).

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "SVGAttributeError",
    "SerializationError",
    "ValueKindError",
]


class SVGAttributeError(Exception):
    """Base exception for all svgattrib errors."""


class ValueKindError(SVGAttributeError, TypeError):
    """Value variant does not match the requested kind.

    Raised when:
    - An SVGValue variant is constructed with a payload of the wrong type
    - expect_value() is asked for a kind the value does not carry
    - parse_value() receives something that is not a ValueKind

    Example:
        >>> expect_value(ColorValue(Color(255, 0, 0)), LengthValue)
        Traceback (most recent call last):
        ...
        ValueKindError: Expected length value, got color
    """


class SerializationError(SVGAttributeError, ValueError):
    """Object cannot be rendered as attribute text.

    Common causes:
    - Non-finite numbers (inf, nan) have no SVG spelling
    - Objects that are not svgattrib payloads or values
    """
