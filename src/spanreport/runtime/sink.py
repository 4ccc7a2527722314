"""Diagnostic sinks.

A sink is where reported diagnostics go. Callers depend only on the
DiagnosticSink protocol; the library ships a terminal variant that renders
immediately and an in-memory variant (``InMemoryCache``) that queues.

Python 3.13+.
"""

from typing import Protocol

from spanreport.diagnostics.diagnostic import Diagnostic, Stage
from spanreport.enums import Level
from spanreport.render.terminal import TerminalRenderer
from spanreport.source.store import SourceStore

from .filter import FilterConfig

__all__ = ["DiagnosticSink", "TerminalSink"]


class DiagnosticSink(Protocol):
    """Protocol for destinations of reported diagnostics."""

    def enabled(self, stage: Stage, level: Level) -> bool:
        """Whether a diagnostic of this stage and level would be accepted.

        Checked before the diagnostic is built, so disabled diagnostics cost
        nothing to report.
        """
        ...  # pragma: no cover  # Protocol stub - not executable

    def emit(self, stage: Stage, level: Level, diagnostic: Diagnostic) -> None:
        """Accept one diagnostic."""
        ...  # pragma: no cover  # Protocol stub - not executable


class TerminalSink:
    """Sink that renders each accepted diagnostic to a terminal stream.

    Example:
        >>> sources = SourceStore()
        >>> sink = TerminalSink(sources, filter_config=FilterConfig(level=Level.WARNING))
        >>> sink.enabled(Stage.parsing(), Level.NOTE)
        False
    """

    __slots__ = ("_filter", "_renderer", "_sources")

    def __init__(
        self,
        sources: SourceStore,
        renderer: TerminalRenderer | None = None,
        filter_config: FilterConfig | None = None,
    ) -> None:
        self._sources = sources
        self._renderer = renderer or TerminalRenderer()
        self._filter = filter_config or FilterConfig()

    @property
    def renderer(self) -> TerminalRenderer:
        return self._renderer

    def enabled(self, stage: Stage, level: Level) -> bool:
        return self._filter.allows(stage, level)

    def emit(self, stage: Stage, level: Level, diagnostic: Diagnostic) -> None:
        """Render the diagnostic now if the filter accepts it.

        Raises:
            ContractViolationError: If a label points outside its source.
            OSError: If writing to the stream fails.
        """
        if self.enabled(stage, level):
            self._renderer.render(self._sources, diagnostic)
