"""Shared constants for svgattrib.

This module provides centralized configuration constants used across
the syntax and value packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Character classes: Token boundaries shared by all grammars
- Numeric tolerances: Snapping thresholds for trigonometric results

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_VALUE_LENGTH",
    # Character classes
    "WHITESPACE_MAX_CODE_POINT",
    "SEPARATOR_CHARS",
    "HEX_DIGITS",
    "ASCII_DIGITS",
    # Numeric tolerances
    "NEARLY_ZERO",
    "MATRIX_TOLERANCE",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum attribute value length in characters (1 MiB).
# Attribute values are normally a few dozen characters; a points list for a
# dense polygon can reach a few hundred KB. Anything larger is rejected.
MAX_VALUE_LENGTH: int = 1024 * 1024

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Whitespace is any code point in 1..32 (space plus all C0 controls except NUL).
WHITESPACE_MAX_CODE_POINT: int = 32

# Separators are whitespace plus these list delimiters.
SEPARATOR_CHARS: str = ",;"

HEX_DIGITS: str = "0123456789abcdefABCDEF"

# ASCII digits only: str.isdigit() accepts superscripts and other Unicode digits.
ASCII_DIGITS: str = "0123456789"

# ============================================================================
# NUMERIC TOLERANCES
# ============================================================================

# Sines and cosines closer than this to zero are snapped to exactly zero,
# so rotate(90) yields an exact quarter turn.
NEARLY_ZERO: float = 1.0 / (1 << 12)

# Default tolerance for Matrix.is_close().
MATRIX_TOLERANCE: float = 1e-9
