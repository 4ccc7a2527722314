"""Label layout planning.

Turns a diagnostic's labels into one RenderPlan per source file: which
lines to print, which inline underline belongs to which line, where
multi-line brackets open and close, and how wide the gutter and lane area
must be. Plans are recomputed on every render call and never cached.

Layout rules:
    - A label whose start and end fall on the same line is inline. When two
      inline labels share a line, the one processed later replaces the
      earlier one.
    - Any other label is multi-line: an OPEN marker at its start line and a
      CLOSE marker carrying its message at its end line. Both markers share
      a lane, numbered in the order multi-line labels are seen in the file.
    - Only label endpoints are rendered. Lines in between are skipped, and
      the gap is not marked.
    - Gutter width is the digit count of the largest rendered line number.
    - Lane width is ``(multi-line label count + 1) * 2`` columns.

Python 3.13+.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum

from spanreport.diagnostics.diagnostic import Diagnostic, StyledRegion
from spanreport.diagnostics.errors import ContractViolationError
from spanreport.enums import LabelStyle
from spanreport.source.position import Location
from spanreport.source.store import SourceStore

__all__ = [
    "InlineAnnotation",
    "LabelLayoutPlanner",
    "MarkerKind",
    "MultilineMarker",
    "RenderPlan",
    "gutter_width",
]


class MarkerKind(StrEnum):
    """End of a multi-line label a marker stands for."""

    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class InlineAnnotation:
    """Underline for a label contained in one line.

    Attributes:
        start: Location of the first labelled byte
        end: Location one past the last labelled byte
        start_offset: Byte offset of start in the source
        end_offset: Byte offset of end in the source
        message: Text shown after the underline
        style: Underline style
    """

    start: Location
    end: Location
    start_offset: int
    end_offset: int
    message: str
    style: LabelStyle

    @property
    def line(self) -> int:
        return self.start.line


@dataclass(frozen=True, slots=True)
class MultilineMarker:
    """One end of a multi-line label.

    Attributes:
        kind: OPEN at the start line, CLOSE at the end line
        location: Position the bracket points at
        offset: Byte offset of location in the source
        lane: Horizontal slot of the bracket's vertical bar
        style: Label style
        message: Label message; always empty for OPEN markers
    """

    kind: MarkerKind
    location: Location
    offset: int
    lane: int
    style: LabelStyle
    message: str = ""

    @property
    def line(self) -> int:
        return self.location.line


@dataclass(frozen=True, slots=True)
class RenderPlan:
    """Layout of one source file's snippet for one diagnostic.

    Attributes:
        source_id: Source the plan renders
        source_name: Name shown in the snippet header
        lines: Rendered line numbers, ascending and deduplicated
        inline: Inline annotation per line
        multiline: Multi-line markers per line, in label order
        max_line: Largest rendered line number
        gutter_width: Columns reserved for line numbers
        lane_count: Number of multi-line labels in this file
    """

    source_id: int
    source_name: str
    lines: tuple[int, ...]
    inline: Mapping[int, InlineAnnotation]
    multiline: Mapping[int, tuple[MultilineMarker, ...]]
    max_line: int
    gutter_width: int
    lane_count: int

    @property
    def lane_width(self) -> int:
        """Columns between the gutter border and the source text."""
        return (self.lane_count + 1) * 2

    @staticmethod
    def lane_column(lane: int) -> int:
        """Column of a lane's vertical bar, relative to the lane area."""
        return lane * 2 + 1

    def markers(self, line: int, kind: MarkerKind) -> tuple[MultilineMarker, ...]:
        return tuple(m for m in self.multiline.get(line, ()) if m.kind is kind)


def gutter_width(max_line: int) -> int:
    """Get the decimal digit count of the largest line number.

    Example:
        >>> gutter_width(999), gutter_width(1000)
        (3, 4)
    """
    return len(str(max(max_line, 1)))


class LabelLayoutPlanner:
    """Computes RenderPlans from labelled regions.

    Borrows the SourceStore for position lookups; holds no other state, so
    one planner can serve any number of render calls.
    """

    __slots__ = ("_sources",)

    def __init__(self, sources: SourceStore) -> None:
        self._sources = sources

    def plan(self, source_id: int, regions: Iterable[StyledRegion]) -> RenderPlan:
        """Plan the snippet of one source file.

        Args:
            source_id: Source all regions point into
            regions: Flattened labels, in the order they were added

        Returns:
            RenderPlan whose gutter width covers this file only

        Raises:
            UnknownSourceError: If source_id was never registered.
            OffsetOutOfRangeError: If a region lies outside the source.
            ContractViolationError: If a region points into another source.
        """
        source = self._sources.source(source_id)
        index = source.index

        lines: set[int] = set()
        inline: dict[int, InlineAnnotation] = {}
        multiline: defaultdict[int, list[MultilineMarker]] = defaultdict(list)
        lane_count = 0
        max_line = 0

        for region in regions:
            if region.source_id != source_id:
                msg = f"Region of source {region.source_id} planned as source {source_id}"
                raise ContractViolationError(msg)

            start = index.to_location(region.start)
            end = index.to_location(region.end)

            lines.add(start.line)
            lines.add(end.line)
            max_line = max(max_line, end.line)

            if start.line == end.line:
                inline[start.line] = InlineAnnotation(
                    start, end, region.start, region.end, region.message, region.style
                )
                continue

            multiline[start.line].append(
                MultilineMarker(MarkerKind.OPEN, start, region.start, lane_count, region.style)
            )
            multiline[end.line].append(
                MultilineMarker(
                    MarkerKind.CLOSE, end, region.end, lane_count, region.style, region.message
                )
            )
            lane_count += 1

        return RenderPlan(
            source_id=source_id,
            source_name=source.name,
            lines=tuple(sorted(lines)),
            inline=inline,
            multiline={line: tuple(markers) for line, markers in multiline.items()},
            max_line=max_line,
            gutter_width=gutter_width(max_line),
            lane_count=lane_count,
        )

    def plan_diagnostic(self, diagnostic: Diagnostic) -> tuple[RenderPlan, ...]:
        """Plan every source file a diagnostic's labels point into.

        Files appear in the order their first label was added. All plans
        share one gutter width: the digit count of the largest rendered line
        across the whole diagnostic.
        """
        groups: dict[int, list[StyledRegion]] = {}
        for region in diagnostic.regions():
            groups.setdefault(region.source_id, []).append(region)

        plans = [self.plan(source_id, regions) for source_id, regions in groups.items()]
        width = max((plan.gutter_width for plan in plans), default=1)
        return tuple(replace(plan, gutter_width=width) for plan in plans)
