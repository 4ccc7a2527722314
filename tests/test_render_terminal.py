"""Tests for render/terminal.py and RenderConfig color decisions.

Python 3.13+.
"""

import io

import pytest

from spanreport import ColorChoice, Diagnostic, Label, RenderConfig, SourceStore, TerminalRenderer
from spanreport.diagnostics.errors import OffsetOutOfRangeError


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


class _BrokenStream(io.StringIO):
    def write(self, text: str) -> int:
        msg = "stream closed by peer"
        raise BrokenPipeError(msg)


class TestTerminalRenderer:
    """Test writing frames to a stream."""

    def test_writes_frame_with_trailing_newlines(self, sources: SourceStore, demo_id: int) -> None:
        """Every rendered line is terminated by a newline."""
        stream = io.StringIO()
        diagnostic = (
            Diagnostic.error("type mismatch")
            .with_code(10)
            .with_label(Label.primary(demo_id, 0, 4, "here"))
        )

        TerminalRenderer(stream).render(sources, diagnostic)

        assert stream.getvalue() == (
            "error[000010]: type mismatch\n"
            "  ┌─ demo.fun\n"
            "1 │  fizz : Nat -> String\n"
            "  │  ^^^^ here\n"
        )

    def test_non_tty_is_uncolored_under_auto(self, sources: SourceStore) -> None:
        """The default AUTO configuration leaves plain streams uncolored."""
        stream = io.StringIO()

        TerminalRenderer(stream).render(sources, Diagnostic.warning("careful"))

        assert stream.getvalue() == " warn: careful\n"

    def test_tty_is_colored_under_auto(
        self, sources: SourceStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """AUTO colors a TTY when NO_COLOR is unset."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        stream = _TTY()

        TerminalRenderer(stream).render(sources, Diagnostic.warning("careful"))

        assert "\033[" in stream.getvalue()

    def test_no_color_disables_auto(
        self, sources: SourceStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """NO_COLOR wins over a TTY."""
        monkeypatch.setenv("NO_COLOR", "1")
        stream = _TTY()

        TerminalRenderer(stream).render(sources, Diagnostic.warning("careful"))

        assert stream.getvalue() == " warn: careful\n"

    def test_never_ignores_tty(self, sources: SourceStore) -> None:
        """ColorChoice.NEVER is uncolored even on a TTY."""
        stream = _TTY()
        renderer = TerminalRenderer(stream, RenderConfig(color=ColorChoice.NEVER))

        renderer.render(sources, Diagnostic.error("boom"))

        assert stream.getvalue() == "error: boom\n"

    def test_defaults_to_stdout(
        self, sources: SourceStore, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Without a stream the renderer writes to sys.stdout."""
        TerminalRenderer().render(sources, Diagnostic.help("try --verbose"))

        assert capsys.readouterr().out == " help: try --verbose\n"

    def test_stream_errors_propagate(self, sources: SourceStore) -> None:
        """Write failures are not swallowed."""
        with pytest.raises(OSError, match="stream closed"):
            TerminalRenderer(_BrokenStream()).render(sources, Diagnostic.error("boom"))

    def test_contract_violation_writes_nothing(self, sources: SourceStore, demo_id: int) -> None:
        """The frame is rendered completely before anything is written."""
        stream = io.StringIO()
        diagnostic = Diagnostic.error("x").with_label(Label.primary(demo_id, 0, 99))

        with pytest.raises(OffsetOutOfRangeError):
            TerminalRenderer(stream).render(sources, diagnostic)

        assert stream.getvalue() == ""


class TestRenderConfig:
    """Test configuration validation and color decisions."""

    def test_defaults(self):
        """Defaults: no color, Unicode glyphs, four-column tabs."""
        config = RenderConfig()

        assert config.color is ColorChoice.NEVER
        assert config.ascii is False
        assert config.tab_width == 4
        assert config.glyphs.border == "│"

    def test_negative_tab_width_rejected(self):
        """Tab width cannot be negative."""
        with pytest.raises(ValueError, match="tab_width"):
            RenderConfig(tab_width=-1)

    def test_always_colors_without_stream(self):
        """ALWAYS does not consult the stream."""
        assert RenderConfig(color=ColorChoice.ALWAYS).use_color() is True

    def test_auto_without_stream_is_uncolored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """AUTO with no stream to inspect means no color."""
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert RenderConfig(color=ColorChoice.AUTO).use_color() is False

    def test_ascii_glyphs(self):
        """ASCII glyph set uses only ASCII characters."""
        glyphs = RenderConfig(ascii=True).glyphs

        assert glyphs.file == "-->"
        assert glyphs.open_corner.isascii()
        assert glyphs.close_corner.isascii()
