"""Diagnostic formatting service.

Renders a whole diagnostic frame: the one-line header, one snippet block
per source file the labels point into, then the free-text notes.

Example output:
    error[000010]: type mismatch
      ┌─ demo.fun
    1 │  fizz : Nat -> String
      │  ^^^^ here
      = expected type `String`

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from spanreport.constants import CODE_WIDTH, LEVEL_TOKEN_WIDTH
from spanreport.diagnostics.diagnostic import Diagnostic
from spanreport.enums import Level
from spanreport.source.store import SourceStore

from .config import RenderConfig
from .plan import LabelLayoutPlanner
from .snippet import SnippetRenderer
from .styles import DisplayLine, Style

__all__ = ["DiagnosticFormatter", "format_code", "level_token"]

_LEVEL_TOKENS: dict[Level, str] = {
    Level.BUG: "bug",
    Level.ERROR: "error",
    Level.WARNING: "warn",
    Level.NOTE: "note",
    Level.HELP: "help",
}


def level_token(level: Level) -> str:
    """Get the fixed-width header token of a severity.

    Example:
        >>> level_token(Level.WARNING)
        ' warn'
    """
    return _LEVEL_TOKENS[level].rjust(LEVEL_TOKEN_WIDTH)


def format_code(code: int) -> str:
    """Format a diagnostic code for the header.

    Example:
        >>> format_code(10)
        '[000010]'
    """
    return f"[{code:0{CODE_WIDTH}d}]"


class DiagnosticFormatter:
    """Renders diagnostics against a SourceStore.

    Each call is a pure function of the diagnostic, the store and the
    configuration. Labels pointing outside their source, or at a source the
    store does not know, raise instead of producing a partial frame.

    Example:
        >>> sources = SourceStore()
        >>> file_id = sources.add("demo.fun", "fizz : Nat -> String\\n")
        >>> diagnostic = (
        ...     Diagnostic.error("type mismatch")
        ...     .with_code(10)
        ...     .with_label(Label.primary(file_id, 0, 4, "here"))
        ... )
        >>> print(DiagnosticFormatter(sources).format(diagnostic))
        error[000010]: type mismatch
          ┌─ demo.fun
        1 │  fizz : Nat -> String
          │  ^^^^ here
    """

    __slots__ = ("_config", "_planner", "_snippets", "_sources")

    def __init__(self, sources: SourceStore, config: RenderConfig | None = None) -> None:
        self._sources = sources
        self._config = config or RenderConfig()
        self._planner = LabelLayoutPlanner(sources)
        self._snippets = SnippetRenderer(sources, self._config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, diagnostic: Diagnostic) -> list[DisplayLine]:
        """Render a diagnostic into structured display lines.

        Raises:
            ContractViolationError: If a label points outside its source or
                at an unregistered source.
        """
        lines = [self._header(diagnostic)]

        plans = self._planner.plan_diagnostic(diagnostic)
        width = plans[0].gutter_width if plans else 0
        for plan in plans:
            lines.extend(self._snippets.render(plan, width))

        lines.extend(self._notes(diagnostic, width))
        return lines

    def format(self, diagnostic: Diagnostic, *, color: bool | None = None) -> str:
        """Format a single diagnostic as text.

        Args:
            diagnostic: Diagnostic to format
            color: Force ANSI color on or off; defaults to the configuration
                (``ColorChoice.AUTO`` means no color, as a string has no TTY)

        Returns:
            Newline-separated frame without a trailing newline
        """
        if color is None:
            color = self._config.use_color()
        rendered = self.render(diagnostic)
        return "\n".join(line.ansi() if color else line.plain() for line in rendered)

    def format_all(self, diagnostics: Iterable[Diagnostic], *, color: bool | None = None) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d, color=color) for d in diagnostics)

    def _header(self, diagnostic: Diagnostic) -> DisplayLine:
        level_style = Style.for_level(diagnostic.level)
        code = format_code(diagnostic.code) if diagnostic.code is not None else ""
        return DisplayLine.of(
            (level_token(diagnostic.level), level_style),
            (code, level_style),
            (f": {diagnostic.message}", Style.MESSAGE),
        )

    def _notes(self, diagnostic: Diagnostic, width: int) -> list[DisplayLine]:
        glyphs = self._config.glyphs
        indent = " " * (width + len(glyphs.note) + 2)
        lines: list[DisplayLine] = []

        for note in diagnostic.notes:
            first, *rest = note.splitlines() or [""]
            lines.append(
                DisplayLine.of(
                    (f"{' ' * width} {glyphs.note}", Style.GUTTER),
                    (f" {first}", Style.SOURCE),
                )
            )
            lines.extend(DisplayLine.of((f"{indent}{text}", Style.SOURCE)) for text in rest)

        return lines
