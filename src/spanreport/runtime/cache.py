"""Thread-safe in-memory FIFO of diagnostics.

Collects diagnostics for later rendering (for example, after a parse pass
finishes, or inside tests).

Architecture:
    - Bounded deque guarded by threading.Lock
    - Strict FIFO: pop order is push order, regardless of severity
    - Backpressure is "drop newest": once full, offered diagnostics are
      logged at WARNING and discarded; nothing queued is ever evicted

Python 3.13+.
"""

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from threading import Lock

from spanreport.constants import DEFAULT_CACHE_SIZE
from spanreport.diagnostics.diagnostic import Diagnostic, Stage
from spanreport.enums import Level

from .filter import FilterConfig

__all__ = ["CachedDiagnostic", "InMemoryCache"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CachedDiagnostic:
    """A queued diagnostic with the stage and level it was reported at."""

    stage: Stage
    level: Level
    diagnostic: Diagnostic


class InMemoryCache:
    """Bounded FIFO diagnostic sink.

    Example:
        >>> cache = InMemoryCache(max_length=2)
        >>> stage = Stage.parsing("SVG")
        >>> for message in ("a", "b", "c"):
        ...     cache.emit(stage, Level.ERROR, Diagnostic.error(message))
        >>> [entry.diagnostic.message for entry in cache.drain()]
        ['a', 'b']
    """

    __slots__ = ("_fifo", "_filter", "_lock", "_max_length")

    def __init__(
        self, max_length: int = DEFAULT_CACHE_SIZE, filter_config: FilterConfig | None = None
    ) -> None:
        """Initialize the queue.

        Args:
            max_length: Maximum queued diagnostics (default: 1000)
            filter_config: Enablement filter (default: everything enabled)

        Raises:
            ValueError: If max_length is not positive.
        """
        if max_length <= 0:
            msg = "max_length must be positive"
            raise ValueError(msg)

        self._max_length = max_length
        self._filter = filter_config or FilterConfig()
        self._fifo: deque[CachedDiagnostic] = deque()
        self._lock = Lock()

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def filter_config(self) -> FilterConfig:
        return self._filter

    def enabled(self, stage: Stage, level: Level) -> bool:
        return self._filter.allows(stage, level)

    def emit(self, stage: Stage, level: Level, diagnostic: Diagnostic) -> None:
        """Queue a diagnostic if it passes the filter and there is room.

        Thread-safe. A full queue drops the diagnostic with a warning.
        """
        if not self.enabled(stage, level):
            return

        with self._lock:
            if len(self._fifo) < self._max_length:
                self._fifo.append(CachedDiagnostic(stage, level, diagnostic))
                return
            queued = len(self._fifo)

        logger.warning(
            "In-memory diagnostic cache is full (%d); dropping %s diagnostic: %s",
            queued,
            level.name.lower(),
            diagnostic.message,
        )

    def pop(self) -> CachedDiagnostic | None:
        """Remove and return the oldest queued diagnostic, or None if empty."""
        with self._lock:
            if not self._fifo:
                return None
            return self._fifo.popleft()

    def drain(self) -> Iterator[CachedDiagnostic]:
        """Pop every queued diagnostic, oldest first."""
        drained = 0
        while (entry := self.pop()) is not None:
            drained += 1
            yield entry
        logger.debug("Drained %d queued diagnostics", drained)

    def __len__(self) -> int:
        with self._lock:
            return len(self._fifo)
