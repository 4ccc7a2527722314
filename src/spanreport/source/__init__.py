"""Source text registration and byte-offset to line/column mapping.

Exports:
    Location: 1-based line/column pair
    PositionIndex: Line-break index of one source
    Source: A registered source
    SourceStore: Id-addressed collection of sources
"""

from .position import Location, PositionIndex
from .store import Source, SourceStore

__all__ = ["Location", "PositionIndex", "Source", "SourceStore"]
