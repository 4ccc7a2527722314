"""Shared constants for spanreport.

Centralized configuration constants used by the source, render and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Header layout: severity token and error code widths
- Cache limits: bounds for the in-memory diagnostic queue
- Source layout: tab expansion
- Glyphs: box-drawing and ASCII character sets

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Header layout
    "CODE_WIDTH",
    "LEVEL_TOKEN_WIDTH",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    # Source layout
    "DEFAULT_TAB_WIDTH",
    "LINE_BREAK",
    # Glyphs
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
]

# ============================================================================
# HEADER LAYOUT
# ============================================================================

# Error codes render zero-padded: code 10 -> [000010]
CODE_WIDTH: int = 6

# Severity tokens are right-aligned to this width ("error", " warn", "  bug")
LEVEL_TOKEN_WIDTH: int = 5

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum queued diagnostics in InMemoryCache before new ones are dropped
DEFAULT_CACHE_SIZE: int = 1000

# ============================================================================
# SOURCE LAYOUT
# ============================================================================

# Only LF terminates a line; a CR before it stays part of the line text
LINE_BREAK: int = ord("\n")

DEFAULT_TAB_WIDTH: int = 4

# ============================================================================
# GLYPHS
# ============================================================================
#
# Keys:
#   border        - separates the gutter from the source text
#   file          - opens a snippet block, followed by the source name
#   lane          - vertical bar of an open multi-line label
#   open_corner   - starts a multi-line bracket
#   close_corner  - ends a multi-line bracket
#   horizontal    - connector between a corner and its column
#   open_tip      - marks the first column of a multi-line label
#   close_tip     - marks the last column of a multi-line label
#   note          - prefixes free-text notes
#   primary ... quaternary - underline glyph per label style

UNICODE_GLYPHS: dict[str, str] = {
    "border": "│",
    "file": "┌─",
    "lane": "│",
    "open_corner": "╭",
    "close_corner": "╰",
    "horizontal": "─",
    "open_tip": "'",
    "close_tip": "^",
    "note": "=",
    "primary": "^",
    "secondary": "-",
    "tertiary": "~",
    "quaternary": ".",
}

ASCII_GLYPHS: dict[str, str] = {
    "border": "|",
    "file": "-->",
    "lane": "|",
    "open_corner": ",",
    "close_corner": "`",
    "horizontal": "-",
    "open_tip": "'",
    "close_tip": "^",
    "note": "=",
    "primary": "^",
    "secondary": "-",
    "tertiary": "~",
    "quaternary": ".",
}
