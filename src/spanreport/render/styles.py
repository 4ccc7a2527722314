"""Structured render output: styled text spans and glyph sets.

Renderers produce DisplayLines made of StyledSpans rather than raw strings,
so that the choice of colors, and whether to use any, stays with the
consumer. ``ANSI_PALETTE`` is the palette the terminal renderer applies.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from spanreport.constants import ASCII_GLYPHS, UNICODE_GLYPHS
from spanreport.enums import LabelStyle, Level

__all__ = [
    "ANSI_PALETTE",
    "ANSI_RESET",
    "DisplayLine",
    "Glyphs",
    "Style",
    "StyledSpan",
]


class Style(StrEnum):
    """Semantic style tag of a span of output text."""

    BUG = "bug"
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"
    MESSAGE = "message"  # Header message
    GUTTER = "gutter"  # Line numbers, borders, lanes, brackets, file names
    SOURCE = "source"  # Source text and note text
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    QUATERNARY = "quaternary"

    @classmethod
    def for_level(cls, level: Level) -> "Style":
        return _LEVEL_STYLES[level]

    @classmethod
    def for_label(cls, style: LabelStyle) -> "Style":
        return cls(style.value)


_LEVEL_STYLES: dict[Level, Style] = {
    Level.BUG: Style.BUG,
    Level.ERROR: Style.ERROR,
    Level.WARNING: Style.WARNING,
    Level.NOTE: Style.NOTE,
    Level.HELP: Style.HELP,
}

ANSI_RESET = "\033[0m"

ANSI_PALETTE: dict[Style, str] = {
    Style.BUG: "\033[1;35m",  # Bold magenta
    Style.ERROR: "\033[1;31m",  # Bold red
    Style.WARNING: "\033[1;33m",  # Bold yellow
    Style.NOTE: "\033[1;37m",  # Bold white
    Style.HELP: "\033[1;38;5;255m",
    Style.MESSAGE: "\033[1;37m",
    Style.GUTTER: "\033[34m",  # Blue
    Style.SOURCE: "\033[37m",
    Style.PRIMARY: "\033[31m",  # Red
    Style.SECONDARY: "\033[34m",
    Style.TERTIARY: "\033[36m",  # Cyan
    Style.QUATERNARY: "\033[32m",  # Green
}


@dataclass(frozen=True, slots=True)
class StyledSpan:
    """A run of text sharing one style."""

    text: str
    style: Style


@dataclass(frozen=True, slots=True)
class DisplayLine:
    """One output line as a sequence of styled spans.

    Example:
        >>> line = DisplayLine.of(("1", Style.GUTTER), (" │", Style.GUTTER))
        >>> line.plain()
        '1 │'
    """

    spans: tuple[StyledSpan, ...]

    @classmethod
    def of(cls, *parts: tuple[str, Style]) -> Self:
        """Build a line from ``(text, style)`` pairs, dropping empty text."""
        return cls(tuple(StyledSpan(text, style) for text, style in parts if text))

    def plain(self) -> str:
        """Get the line's text without styling."""
        return "".join(span.text for span in self.spans)

    def ansi(self, palette: dict[Style, str] = ANSI_PALETTE) -> str:
        """Get the line's text wrapped in ANSI escape codes."""
        return "".join(f"{palette[span.style]}{span.text}{ANSI_RESET}" for span in self.spans)

    def __str__(self) -> str:
        return self.plain()


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Characters used to draw gutters, brackets and underlines."""

    border: str
    file: str
    lane: str
    open_corner: str
    close_corner: str
    horizontal: str
    open_tip: str
    close_tip: str
    note: str
    primary: str
    secondary: str
    tertiary: str
    quaternary: str

    @classmethod
    def unicode(cls) -> "Glyphs":
        return cls(**UNICODE_GLYPHS)

    @classmethod
    def ascii(cls) -> "Glyphs":
        return cls(**ASCII_GLYPHS)

    def underline(self, style: LabelStyle) -> str:
        return getattr(self, style.value)
