"""Primitive tokens for attribute grammars.

This module provides the low-level tokenizers every grammar is built on:
literal keywords, locale-free numbers, hex digit runs, and color keywords.

Contract:
    Each function takes a Cursor and returns a ParseResult (or a bare
    Cursor for tokens without a value) positioned just past the token,
    or None. A primitive never skips leading whitespace and never
    partially advances: on None the caller's cursor is still valid.
"""

from svgattrib.colors import find_named_color
from svgattrib.constants import ASCII_DIGITS, HEX_DIGITS
from svgattrib.syntax.cursor import Cursor, ParseResult
from svgattrib.types import Color

__all__ = [
    "parse_hex",
    "parse_literal",
    "parse_named_color",
    "parse_scalar",
    "parse_signed_int",
]

# 32-bit value: at most 8 hex digits.
_MAX_HEX_DIGITS: int = 8

_SIGNS: str = "+-"
_EXPONENT_MARKERS: str = "eE"


def _skip_digits(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        cursor = cursor.advance()
    return cursor


def parse_literal(cursor: Cursor, text: str) -> Cursor | None:
    """Match text exactly (case-sensitive) at the cursor.

    Example:
        >>> parse_literal(Cursor("inherit", 0), "inherit").is_eof
        True
        >>> parse_literal(Cursor("Inherit", 0), "inherit") is None
        True
    """
    if not text or not cursor.starts_with(text):
        return None
    return cursor.advance(len(text))


def parse_scalar(cursor: Cursor) -> ParseResult[float] | None:
    """Parse a locale-free floating point number.

    Grammar:
        scalar   ::= sign? (digits ("." digits?)? | "." digits) exponent?
        exponent ::= ("e" | "E") sign? digits

    The exponent is only consumed when digits follow it, so "2em" yields
    2.0 and leaves "em" for the unit table.

    Examples:
        12 -> 12.0
        -.5 -> -0.5
        1e3 -> 1000.0
        3. -> 3.0
    """
    start_pos = cursor.pos

    if not cursor.is_eof and cursor.current in _SIGNS:
        cursor = cursor.advance()

    mantissa_start = cursor.pos
    cursor = _skip_digits(cursor)
    has_integer_digits = cursor.pos > mantissa_start

    if not cursor.is_eof and cursor.current == ".":
        fraction = _skip_digits(cursor.advance())
        has_fraction_digits = fraction.pos > cursor.pos + 1
        if has_integer_digits or has_fraction_digits:
            cursor = fraction
            has_integer_digits = True

    if not has_integer_digits:
        return None

    # Optional exponent, only if followed by at least one digit
    if not cursor.is_eof and cursor.current in _EXPONENT_MARKERS:
        exponent = cursor.advance()
        if not exponent.is_eof and exponent.current in _SIGNS:
            exponent = exponent.advance()
        digits_end = _skip_digits(exponent)
        if digits_end.pos > exponent.pos:
            cursor = digits_end

    # Out-of-range exponents saturate to +/-inf like strtod
    text = Cursor(cursor.source, start_pos).slice_to(cursor.pos)
    return ParseResult(float(text), cursor)


def parse_signed_int(cursor: Cursor) -> ParseResult[int] | None:
    """Parse an integer: sign? digits

    Example:
        >>> parse_signed_int(Cursor("-12.5", 0)).value
        -12
    """
    start_pos = cursor.pos
    if not cursor.is_eof and cursor.current in _SIGNS:
        cursor = cursor.advance()

    digits_start = cursor.pos
    cursor = _skip_digits(cursor)
    if cursor.pos == digits_start:
        return None

    text = Cursor(cursor.source, start_pos).slice_to(cursor.pos)
    return ParseResult(int(text), cursor)


def parse_hex(cursor: Cursor) -> ParseResult[int] | None:
    """Parse a run of 1 to 8 hex digits.

    A run longer than 8 digits does not fit 32 bits and fails as a whole.
    Callers that need a specific digit count compare cursor positions.
    """
    start_pos = cursor.pos
    while not cursor.is_eof and cursor.current in HEX_DIGITS:
        cursor = cursor.advance()

    digit_count = cursor.pos - start_pos
    if digit_count == 0 or digit_count > _MAX_HEX_DIGITS:
        return None

    text = Cursor(cursor.source, start_pos).slice_to(cursor.pos)
    return ParseResult(int(text, 16), cursor)


def parse_named_color(cursor: Cursor) -> ParseResult[Color] | None:
    """Parse a color keyword (e.g. "red", "cornflowerblue").

    The whole run of ASCII letters at the cursor must be a keyword, so
    "redish" is not read as "red" followed by "ish".
    """
    start_pos = cursor.pos
    while not cursor.is_eof and cursor.current.isascii() and cursor.current.isalpha():
        cursor = cursor.advance()
    if cursor.pos == start_pos:
        return None

    color = find_named_color(Cursor(cursor.source, start_pos).slice_to(cursor.pos))
    if color is None:
        return None
    return ParseResult(color, cursor)
