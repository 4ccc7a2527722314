"""Tests for runtime/registry.py and runtime/sink.py.

Python 3.13+.
"""

import io
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from spanreport import (
    Diagnostic,
    DiagnosticRegistry,
    FilterConfig,
    InMemoryCache,
    Label,
    Level,
    RegistryError,
    SourceStore,
    Stage,
    TerminalRenderer,
    TerminalSink,
)
from spanreport.runtime import DiagnosticSink

PARSING = Stage.parsing("SVG")


class _RecordingSink:
    """Minimal sink satisfying the DiagnosticSink protocol."""

    def __init__(self, enabled: bool = True) -> None:
        self.accept = enabled
        self.received: list[tuple[Stage, Level, Diagnostic]] = []

    def enabled(self, stage: Stage, level: Level) -> bool:
        return self.accept

    def emit(self, stage: Stage, level: Level, diagnostic: Diagnostic) -> None:
        self.received.append((stage, level, diagnostic))


class TestInstallation:
    """Test install-once semantics."""

    def test_install_then_use(self):
        """An installed sink is returned by the sink property."""
        sink = InMemoryCache()
        registry = DiagnosticRegistry()

        registry.install(sink)

        assert registry.installed
        assert registry.sink is sink

    def test_constructor_installs(self):
        """Passing the sink to the constructor installs it."""
        sink = InMemoryCache()

        assert DiagnosticRegistry(sink).sink is sink

    def test_second_install_fails(self):
        """A second installation raises instead of replacing the first sink."""
        first = InMemoryCache()
        registry = DiagnosticRegistry(first)

        with pytest.raises(RegistryError, match="already installed"):
            registry.install(InMemoryCache())

        assert registry.sink is first

    def test_use_before_install_fails(self):
        """Reporting without a sink is a programming error."""
        registry = DiagnosticRegistry()

        assert not registry.installed
        with pytest.raises(RegistryError, match="No diagnostic sink installed"):
            registry.error(PARSING, lambda: Diagnostic.error("x"))

    def test_concurrent_install_succeeds_once(self):
        """Racing installers: exactly one wins, the rest raise."""
        registry = DiagnosticRegistry()

        def attempt(_: int) -> bool:
            try:
                registry.install(InMemoryCache())
            except RegistryError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(32)))

        assert results.count(True) == 1

    def test_install_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Installation emits a debug record naming the sink type."""
        with caplog.at_level(logging.DEBUG, logger="spanreport.runtime.registry"):
            DiagnosticRegistry(InMemoryCache())

        assert "Installed diagnostic sink: InMemoryCache" in caplog.text


class TestReporting:
    """Test lazy diagnostic construction and level handling."""

    def test_builder_not_called_when_disabled(self):
        """Disabled diagnostics are never built."""
        registry = DiagnosticRegistry(
            InMemoryCache(filter_config=FilterConfig(level=Level.ERROR))
        )
        calls: list[int] = []

        def build() -> Diagnostic:
            calls.append(1)
            return Diagnostic.warning("expensive")

        assert registry.warn(PARSING, build) is False
        assert calls == []

    def test_builder_called_once_when_enabled(self):
        """Enabled diagnostics are built exactly once and emitted."""
        sink = _RecordingSink()
        registry = DiagnosticRegistry(sink)
        calls: list[int] = []

        def build() -> Diagnostic:
            calls.append(1)
            return Diagnostic.error("bad path data")

        assert registry.error(PARSING, build) is True
        assert calls == [1]
        assert sink.received[0][2].message == "bad path data"

    def test_reported_level_overrides_built_level(self):
        """The level passed to the registry wins over the built diagnostic's."""
        sink = _RecordingSink()
        registry = DiagnosticRegistry(sink)

        registry.bug(PARSING, lambda: Diagnostic.note("internal inconsistency"))

        stage, level, diagnostic = sink.received[0]
        assert stage == PARSING
        assert level is Level.BUG
        assert diagnostic.level is Level.BUG

    @pytest.mark.parametrize(
        ("method", "level"),
        [("bug", Level.BUG), ("error", Level.ERROR), ("warn", Level.WARNING)],
    )
    def test_shorthands(self, method: str, level: Level) -> None:
        """bug/error/warn report at their fixed levels."""
        sink = _RecordingSink()
        registry = DiagnosticRegistry(sink)

        getattr(registry, method)(PARSING, lambda: Diagnostic.error("x"))

        assert sink.received[0][1] is level

    def test_enabled_delegates_to_sink(self):
        """The registry's enabled check is the sink's."""
        assert not DiagnosticRegistry(_RecordingSink(enabled=False)).enabled(PARSING, Level.BUG)
        assert DiagnosticRegistry(_RecordingSink()).enabled(PARSING, Level.HELP)

    def test_cache_round_trip(self):
        """Diagnostics reported through the registry come out of the cache in order."""
        cache = InMemoryCache()
        registry = DiagnosticRegistry(cache)

        registry.error(PARSING, lambda: Diagnostic.error("one"))
        registry.diagnostic(PARSING, Level.NOTE, lambda: Diagnostic.note("two"))

        assert [(e.level, e.diagnostic.message) for e in cache.drain()] == [
            (Level.ERROR, "one"),
            (Level.NOTE, "two"),
        ]


class TestTerminalSink:
    """Test the immediately-rendering sink."""

    def test_renders_enabled_diagnostics(self, sources: SourceStore, demo_id: int) -> None:
        """Accepted diagnostics are written to the renderer's stream."""
        stream = io.StringIO()
        sink = TerminalSink(sources, TerminalRenderer(stream))
        registry = DiagnosticRegistry(sink)

        registry.error(
            PARSING,
            lambda: Diagnostic.error("type mismatch").with_label(
                Label.primary(demo_id, 0, 4, "here")
            ),
        )

        assert stream.getvalue().splitlines() == [
            "error: type mismatch",
            "  ┌─ demo.fun",
            "1 │  fizz : Nat -> String",
            "  │  ^^^^ here",
        ]

    def test_filtered_diagnostics_not_rendered(self, sources: SourceStore) -> None:
        """The sink's filter suppresses rendering."""
        stream = io.StringIO()
        sink = TerminalSink(
            sources, TerminalRenderer(stream), FilterConfig(level=Level.ERROR)
        )

        sink.emit(PARSING, Level.NOTE, Diagnostic.note("quiet"))

        assert stream.getvalue() == ""

    def test_renderer_property(self, sources: SourceStore) -> None:
        """A default renderer is created when none is given."""
        assert isinstance(TerminalSink(sources).renderer, TerminalRenderer)

    def test_sinks_satisfy_protocol(self, sources: SourceStore) -> None:
        """Both shipped sinks expose the protocol's methods."""
        sinks: list[DiagnosticSink] = [TerminalSink(sources), InMemoryCache()]

        for sink in sinks:
            assert sink.enabled(PARSING, Level.ERROR)
