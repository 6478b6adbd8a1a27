"""SVG attribute value parser module.

This module provides the main SVGAttributeParser class and the grammar
building blocks it is assembled from.

Module Organization:
- core.py: SVGAttributeParser class (whole-string entry points)
- primitives.py: Basic tokens (literals, numbers, hex digits, color keywords)
- whitespace.py: Whitespace, separator and comma-wsp tokens
- combinators.py: Function-call syntax, keyword tables, ordered alternatives
- rules.py: All grammar rules (colors, paints, transforms, lists, fonts)

Public API:
    SVGAttributeParser: Main parser class
"""

from svgattrib.syntax.parser.core import SVGAttributeParser

__all__ = ["SVGAttributeParser"]
