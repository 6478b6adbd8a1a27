"""Whitespace and separator handling for attribute grammars.

Two flavours per token class:
    parse_*  -> Cursor | None   (token required; None if nothing consumed)
    skip_*   -> Cursor          (token optional; always returns a cursor)

Character classes:
    whitespace ::= [\\x01-\\x20]
    separator  ::= whitespace | "," | ";"
    comma-wsp  ::= (whitespace+ ","? whitespace*) | ("," whitespace*)
"""

from collections.abc import Callable

from svgattrib.constants import SEPARATOR_CHARS, WHITESPACE_MAX_CODE_POINT
from svgattrib.syntax.cursor import Cursor

__all__ = [
    "WHITESPACE_CHARS",
    "advance_while",
    "is_separator",
    "is_whitespace",
    "parse_comma_wsp",
    "parse_separator",
    "parse_whitespace",
    "skip_separators",
    "skip_whitespace",
]

WHITESPACE_CHARS: str = "".join(chr(cp) for cp in range(1, WHITESPACE_MAX_CODE_POINT + 1))


def is_whitespace(ch: str) -> bool:
    """Whitespace is any code point in 1..32."""
    return 0 < ord(ch) <= WHITESPACE_MAX_CODE_POINT


def is_separator(ch: str) -> bool:
    return is_whitespace(ch) or ch in SEPARATOR_CHARS


def advance_while(cursor: Cursor, predicate: Callable[[str], bool]) -> Cursor | None:
    """Advance past characters satisfying predicate.

    Returns:
        New cursor if at least one character was consumed, None otherwise

    Design:
        Every iteration consumes one character, so the loop is bounded by
        input length.
    """
    start_pos = cursor.pos
    while not cursor.is_eof and predicate(cursor.current):
        cursor = cursor.advance()
    if cursor.pos == start_pos:
        return None
    return cursor


def parse_whitespace(cursor: Cursor) -> Cursor | None:
    return advance_while(cursor, is_whitespace)


def parse_separator(cursor: Cursor) -> Cursor | None:
    return advance_while(cursor, is_separator)


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip optional whitespace.

    Example:
        >>> skip_whitespace(Cursor("  \\t1", 0)).pos
        3
        >>> skip_whitespace(Cursor("1", 0)).pos
        0
    """
    return parse_whitespace(cursor) or cursor


def skip_separators(cursor: Cursor) -> Cursor:
    return parse_separator(cursor) or cursor


def parse_comma_wsp(cursor: Cursor) -> Cursor | None:
    """Parse the SVG comma-wsp token.

    Per SVG 1.1:
        comma-wsp ::= (wsp+ comma? wsp*) | (comma wsp*)

    At most one comma is consumed, so "1,,2" does not match as a single
    separator.

    Example:
        >>> parse_comma_wsp(Cursor(" , 2", 0)).pos
        3
        >>> parse_comma_wsp(Cursor("-2", 0)) is None
        True

    Returns:
        New cursor past the token, or None if neither form is present
    """
    start_pos = cursor.pos
    cursor = skip_whitespace(cursor)
    cursor = skip_whitespace(cursor.expect(",") or cursor)
    if cursor.pos == start_pos:
        return None
    return cursor
