"""Terminal renderer.

Writes formatted diagnostics to a text stream, with ANSI colors when the
configuration and the stream allow them.
"""

import sys
from typing import TextIO

from spanreport.diagnostics.diagnostic import Diagnostic
from spanreport.enums import ColorChoice
from spanreport.source.store import SourceStore

from .config import RenderConfig
from .formatter import DiagnosticFormatter

__all__ = ["TerminalRenderer"]


class TerminalRenderer:
    """Renders diagnostics to a terminal stream.

    Holds no state across diagnostics besides the stream and configuration.
    Errors raised by the stream (``OSError``) propagate unchanged; a failure
    part way through a frame leaves the frame truncated.

    Attributes:
        stream: Destination (default: ``sys.stdout`` at render time)
        config: Presentation settings (default: ``ColorChoice.AUTO``)
    """

    __slots__ = ("_config", "_stream")

    def __init__(self, stream: TextIO | None = None, config: RenderConfig | None = None) -> None:
        self._stream = stream
        self._config = config or RenderConfig(color=ColorChoice.AUTO)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, sources: SourceStore, diagnostic: Diagnostic) -> None:
        """Write one diagnostic frame followed by a newline per line.

        Raises:
            ContractViolationError: On labels outside their source; nothing
                is written in that case.
            OSError: If writing to the stream fails.
        """
        stream = self.stream
        color = self._config.use_color(stream)
        lines = DiagnosticFormatter(sources, self._config).render(diagnostic)

        for line in lines:
            stream.write((line.ansi() if color else line.plain()) + "\n")
        stream.flush()
