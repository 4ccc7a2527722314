"""Snippet layout and rendering.

Data flows leaves first:

    LabelLayoutPlanner -> SnippetRenderer -> DiagnosticFormatter -> TerminalRenderer

Exports:
    DiagnosticFormatter: Diagnostic frame to display lines or text
    DisplayLine, StyledSpan, Style: Structured output
    LabelLayoutPlanner, RenderPlan: Per-file layout
    RenderConfig: Presentation settings
    SnippetRenderer: One file's annotated excerpt
    TerminalRenderer: Writes frames to a text stream
"""

from .config import RenderConfig
from .formatter import DiagnosticFormatter, format_code, level_token
from .plan import (
    InlineAnnotation,
    LabelLayoutPlanner,
    MarkerKind,
    MultilineMarker,
    RenderPlan,
    gutter_width,
)
from .snippet import SnippetRenderer
from .styles import ANSI_PALETTE, DisplayLine, Glyphs, Style, StyledSpan
from .terminal import TerminalRenderer
from .width import char_width, display_width, expand_tabs

__all__ = [
    "ANSI_PALETTE",
    "DiagnosticFormatter",
    "DisplayLine",
    "Glyphs",
    "InlineAnnotation",
    "LabelLayoutPlanner",
    "MarkerKind",
    "MultilineMarker",
    "RenderConfig",
    "RenderPlan",
    "SnippetRenderer",
    "Style",
    "StyledSpan",
    "TerminalRenderer",
    "char_width",
    "display_width",
    "expand_tabs",
    "format_code",
    "gutter_width",
    "level_token",
]
