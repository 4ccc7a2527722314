"""Install-once diagnostic registry.

An application creates one DiagnosticRegistry at startup, installs its sink
exactly once and passes the registry to the components that report
diagnostics. There is no module-level instance.

Reporting is lazy: the builder callable runs only when the sink accepts
the stage and level, so disabled diagnostics incur no construction cost.

Thread Safety:
    Installation is serialized by a lock; a second installation raises
    RegistryError rather than replacing the first sink. After installation
    the registry is read-only.
"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import TypeAlias

from spanreport.diagnostics.diagnostic import Diagnostic, Stage
from spanreport.diagnostics.errors import RegistryError
from spanreport.enums import Level

from .sink import DiagnosticSink

__all__ = ["DiagnosticBuilder", "DiagnosticRegistry"]

logger = logging.getLogger(__name__)

DiagnosticBuilder: TypeAlias = Callable[[], Diagnostic]


class DiagnosticRegistry:
    """Holds the application's single diagnostic sink.

    Example:
        >>> registry = DiagnosticRegistry(InMemoryCache(100))
        >>> registry.error(Stage.parsing("SVG"), lambda: Diagnostic.error("bad path data"))
        True
        >>> registry.install(InMemoryCache(100))
        Traceback (most recent call last):
        ...
        spanreport.diagnostics.errors.RegistryError: Diagnostic sink already installed
    """

    __slots__ = ("_lock", "_sink")

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        """Initialize the registry, optionally installing its sink right away.

        Args:
            sink: Sink to install; equivalent to calling ``install(sink)``
        """
        self._lock = Lock()
        self._sink: DiagnosticSink | None = None
        if sink is not None:
            self.install(sink)

    def install(self, sink: DiagnosticSink) -> None:
        """Install the sink.

        Raises:
            RegistryError: If a sink is already installed.
        """
        with self._lock:
            if self._sink is not None:
                msg = "Diagnostic sink already installed"
                raise RegistryError(msg)
            self._sink = sink
        logger.debug("Installed diagnostic sink: %s", type(sink).__name__)

    @property
    def installed(self) -> bool:
        return self._sink is not None

    @property
    def sink(self) -> DiagnosticSink:
        """The installed sink.

        Raises:
            RegistryError: If no sink has been installed.
        """
        sink = self._sink
        if sink is None:
            msg = "No diagnostic sink installed; call install() first"
            raise RegistryError(msg)
        return sink

    def enabled(self, stage: Stage, level: Level) -> bool:
        return self.sink.enabled(stage, level)

    def diagnostic(self, stage: Stage, level: Level, builder: DiagnosticBuilder) -> bool:
        """Report a diagnostic built on demand.

        The reported level is authoritative: if the built diagnostic carries
        a different level it is replaced.

        Args:
            stage: Stage reporting the diagnostic
            level: Severity to report at
            builder: Called with no arguments, only when the sink is enabled

        Returns:
            True if the diagnostic was built and handed to the sink
        """
        sink = self.sink
        if not sink.enabled(stage, level):
            return False

        built = builder()
        if built.level is not level:
            built = built.with_level(level)
        sink.emit(stage, level, built)
        return True

    def bug(self, stage: Stage, builder: DiagnosticBuilder) -> bool:
        return self.diagnostic(stage, Level.BUG, builder)

    def error(self, stage: Stage, builder: DiagnosticBuilder) -> bool:
        return self.diagnostic(stage, Level.ERROR, builder)

    def warn(self, stage: Stage, builder: DiagnosticBuilder) -> bool:
        return self.diagnostic(stage, Level.WARNING, builder)
