"""Immutable cursor infrastructure for attribute value parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Backtracking is free: a failed attempt simply discards its cursor and
      the caller keeps using the one it started from

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Cheap to create one per token
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed

    Example:
        >>> cursor = Cursor("10px", 0)
        >>> cursor.current
        '1'
        >>> new_cursor = cursor.advance(2)
        >>> new_cursor.current
        'p'
        >>> cursor.current  # Original unchanged (immutability)
        '1'
        >>> Cursor("px", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.slice_ahead(3)
            'hel'
            >>> cursor.slice_ahead(10)  # More than available
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def starts_with(self, text: str) -> bool:
        """Check whether the remaining input begins with text (exact, case-sensitive)."""
        return self.source.startswith(text, self.pos)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("(1)", 0).expect("(").pos
            1
            >>> Cursor("(1)", 0).expect(")") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Pattern:
        Every value-producing rule has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> cursor = Cursor("1 2", 0)
        >>> result = ParseResult(1.0, cursor.advance())
        >>> result.value
        1.0
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
