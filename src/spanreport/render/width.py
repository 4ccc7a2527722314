"""Terminal display width of text.

Underlines must line up with what the terminal shows, not with byte or
code point counts: a combining accent takes no column, an East Asian wide
or fullwidth character takes two.
"""

import unicodedata
from functools import lru_cache

from spanreport.constants import DEFAULT_TAB_WIDTH

__all__ = ["char_width", "display_width", "expand_tabs"]

# General categories rendered without advancing the cursor
_ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf"})


@lru_cache(maxsize=4096)
def char_width(char: str) -> int:
    """Get the number of terminal columns one character occupies.

    Example:
        >>> char_width("a"), char_width("\\u0301"), char_width("語")
        (1, 0, 2)
    """
    if unicodedata.combining(char) or unicodedata.category(char) in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Get the number of terminal columns a string occupies.

    Tabs count as ``tab_width`` columns, matching ``expand_tabs``.
    """
    return sum(tab_width if char == "\t" else char_width(char) for char in text)


def expand_tabs(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Replace each tab with ``tab_width`` spaces."""
    return text.replace("\t", " " * tab_width)
