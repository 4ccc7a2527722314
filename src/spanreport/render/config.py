"""Render configuration.

Provides a single frozen dataclass that encapsulates every presentation
parameter of the diagnostic renderers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO

from spanreport.constants import DEFAULT_TAB_WIDTH
from spanreport.enums import ColorChoice

from .styles import Glyphs

__all__ = ["RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable presentation settings for DiagnosticFormatter and TerminalRenderer.

    Attributes:
        color: When to emit ANSI color codes (default: NEVER for strings,
            AUTO is the usual choice for terminals)
        ascii: Draw with ASCII glyphs instead of box-drawing characters
        tab_width: Columns a tab in source text expands to (default: 4)

    Example:
        >>> config = RenderConfig(color=ColorChoice.AUTO, ascii=True)
        >>> config.glyphs.border
        '|'
    """

    color: ColorChoice = ColorChoice.NEVER
    ascii: bool = False
    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If tab_width is negative.
        """
        if self.tab_width < 0:
            msg = "tab_width must be >= 0"
            raise ValueError(msg)

    @property
    def glyphs(self) -> Glyphs:
        return Glyphs.ascii() if self.ascii else Glyphs.unicode()

    def use_color(self, stream: TextIO | None = None) -> bool:
        """Decide whether output to ``stream`` should be colored.

        AUTO colors only a TTY, and never when the NO_COLOR environment
        variable is set (https://no-color.org).
        """
        match self.color:
            case ColorChoice.ALWAYS:
                return True
            case ColorChoice.NEVER:
                return False
            case ColorChoice.AUTO:
                if os.environ.get("NO_COLOR"):
                    return False
                isatty = getattr(stream, "isatty", None)
                return bool(isatty is not None and isatty())
