"""Reusable grammar combinators.

Three shapes recur across the attribute grammars:
    - function call syntax:  name "(" body ")"   (rgb, url, matrix, ...)
    - keyword tables:        "butt" | "round" | "square" | ...
    - ordered alternatives:  color | "none" | "currentColor" | url(...)

Each is implemented once here. Alternatives are all tried against the
same immutable cursor, so a failed branch needs no explicit rollback.
"""

from collections.abc import Callable, Sequence

from svgattrib.syntax.cursor import Cursor, ParseResult
from svgattrib.syntax.parser.primitives import parse_literal
from svgattrib.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "EnumTable",
    "first_of",
    "match_enum_table",
    "parse_parenthesized",
]

type Rule[T] = Callable[[Cursor], ParseResult[T] | None]

# Ordered (literal, value) pairs. When one literal is a prefix of another,
# the longer literal must come first ("bolder" before "bold").
type EnumTable[E] = Sequence[tuple[str, E]]


def parse_parenthesized[T](cursor: Cursor, prefix: str, body: Rule[T]) -> ParseResult[T] | None:
    """Parse: wsp* prefix wsp* "(" wsp* body wsp* ")"

    Args:
        cursor: Current position in source
        prefix: Function name that must precede "(" (empty for none)
        body: Rule producing the result from the parenthesized content

    Returns:
        ParseResult with the body's value and a cursor past ")", or None

    Example:
        >>> parse_parenthesized(Cursor("url( #a )", 0), "url", parse_iri)
        ParseResult(value='a ', cursor=Cursor(source='url( #a )', pos=9))
    """
    cursor = skip_whitespace(cursor)
    if prefix:
        after_prefix = parse_literal(cursor, prefix)
        if after_prefix is None:
            return None
        cursor = after_prefix

    cursor = skip_whitespace(cursor)
    after_open = cursor.expect("(")
    if after_open is None:
        return None

    result = body(skip_whitespace(after_open))
    if result is None:
        return None

    after_close = skip_whitespace(result.cursor).expect(")")
    if after_close is None:
        return None
    return ParseResult(result.value, after_close)


def match_enum_table[E](cursor: Cursor, table: EnumTable[E]) -> ParseResult[E] | None:
    """Match the first literal in table that the input starts with.

    Example:
        >>> table = (("meet", MeetOrSlice.MEET), ("slice", MeetOrSlice.SLICE))
        >>> match_enum_table(Cursor("slice", 0), table).value
        <MeetOrSlice.SLICE: 'slice'>
    """
    for literal, value in table:
        after = parse_literal(cursor, literal)
        if after is not None:
            return ParseResult(value, after)
    return None


def first_of[T](cursor: Cursor, *rules: Rule[T]) -> ParseResult[T] | None:
    """Try rules in order from the same cursor; return the first success."""
    for rule in rules:
        result = rule(cursor)
        if result is not None:
            return result
    return None
