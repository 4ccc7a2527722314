"""In-memory source store.

Ordered collection of named source contents. Each source is assigned a
stable integer id in insertion order (0, 1, 2, ...) and indexed once at
registration; renderers resolve names, positions and line text through
the store and nothing else.

Thread Safety:
    Registration is serialized by a lock. Registered sources are immutable,
    so lookups need no locking.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from threading import Lock

from spanreport.diagnostics.errors import UnknownSourceError

from .position import Location, PositionIndex

__all__ = ["Source", "SourceStore"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Source:
    """One registered source.

    Attributes:
        id: Stable id assigned by the store
        name: Display name (usually a file path)
        content: Full source text
        index: Line-break index built from content
    """

    id: int
    name: str
    content: str
    index: PositionIndex = field(repr=False, compare=False)


class SourceStore:
    """Registry of sources addressed by integer id.

    Example:
        >>> sources = SourceStore()
        >>> sources.add("demo.fun", "fizz : Nat -> String\\n")
        0
        >>> sources.name(0)
        'demo.fun'
        >>> sources.to_location(0, 0, 4)
        (Location(line=1, column=1), Location(line=1, column=5))
    """

    __slots__ = ("_lock", "_sources")

    def __init__(self) -> None:
        self._sources: list[Source] = []
        self._lock = Lock()

    def add(self, name: str, content: str) -> int:
        """Register a source and return its id.

        Args:
            name: Display name shown in snippet headers
            content: Source text; indexed immediately

        Returns:
            Id of the new source
        """
        index = PositionIndex(content)
        with self._lock:
            source_id = len(self._sources)
            self._sources.append(Source(source_id, name, content, index))
        logger.debug("Registered source %d: %s (%d lines)", source_id, name, index.line_count)
        return source_id

    def get(self, source_id: int) -> Source | None:
        """Get a source by id, or None if it was never registered."""
        if 0 <= source_id < len(self._sources):
            return self._sources[source_id]
        return None

    def source(self, source_id: int) -> Source:
        """Get a source by id.

        Raises:
            UnknownSourceError: If the id was never registered.
        """
        source = self.get(source_id)
        if source is None:
            msg = f"Source id {source_id} out of range ({len(self._sources)} sources registered)"
            raise UnknownSourceError(msg, source_id=source_id)
        return source

    def name(self, source_id: int) -> str:
        return self.source(source_id).name

    def index(self, source_id: int) -> PositionIndex:
        return self.source(source_id).index

    def to_location(self, source_id: int, start: int, end: int) -> tuple[Location, Location]:
        """Convert a byte range of a source into a Location range."""
        index = self.index(source_id)
        return index.to_location(start), index.to_location(end)

    def line_text(self, source_id: int, line: int) -> str:
        return self.index(source_id).line_text(line)

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[Source]:
        return iter(tuple(self._sources))
