"""Snippet rendering.

Walks a RenderPlan's lines in ascending order and produces the annotated
source excerpt of one file:

      ┌─ demo.rs
    1 │    fn main() {
      │ ╭────'
    3 │ │    x + y
      │ │        - unknown
    4 │ │  }
      │ ╰───^ body

Per line, rows come in a fixed order: the source text, one row per
multi-line label opening on the line, the inline underline, then one row
per multi-line label closing on the line. A lane keeps its vertical bar on
every row between its opening and closing rows.

All horizontal positions are display widths, so multi-byte and wide
characters line up with the terminal's rendering of the source text.
"""

from spanreport.source.position import PositionIndex
from spanreport.source.store import SourceStore

from .config import RenderConfig
from .plan import InlineAnnotation, MarkerKind, MultilineMarker, RenderPlan
from .styles import DisplayLine, Style
from .width import display_width, expand_tabs

__all__ = ["SnippetRenderer"]


class SnippetRenderer:
    """Renders RenderPlans into DisplayLines.

    Stateless between calls; one renderer serves any number of plans.
    """

    __slots__ = ("_config", "_sources")

    def __init__(self, sources: SourceStore, config: RenderConfig | None = None) -> None:
        self._sources = sources
        self._config = config or RenderConfig()

    def render(self, plan: RenderPlan, gutter_width: int | None = None) -> list[DisplayLine]:
        """Render one file's snippet.

        Args:
            plan: Layout computed by LabelLayoutPlanner
            gutter_width: Override for plan.gutter_width, used when several
                files of one diagnostic share a gutter

        Returns:
            Header line followed by source and annotation rows
        """
        glyphs = self._config.glyphs
        width = plan.gutter_width if gutter_width is None else gutter_width
        index = self._sources.index(plan.source_id)
        margin = f"{' ' * width} {glyphs.border}"

        rows = [
            DisplayLine.of(
                (f"{' ' * width} {glyphs.file} ", Style.GUTTER),
                (plan.source_name, Style.GUTTER),
            )
        ]

        # Lanes whose opening row has been emitted and closing row has not
        active: list[int] = []

        for line in plan.lines:
            rows.append(
                DisplayLine.of(
                    (f"{line:>{width}} {glyphs.border}", Style.GUTTER),
                    (self._lanes(plan, active), Style.GUTTER),
                    (expand_tabs(index.line_text(line), self._config.tab_width), Style.SOURCE),
                )
            )

            for marker in plan.markers(line, MarkerKind.OPEN):
                rows.append(self._bracket_row(plan, index, margin, active, marker))
                active.append(marker.lane)

            annotation = plan.inline.get(line)
            if annotation is not None:
                rows.append(self._underline_row(plan, index, margin, active, annotation))

            for marker in plan.markers(line, MarkerKind.CLOSE):
                rows.append(self._bracket_row(plan, index, margin, active, marker))
                active.remove(marker.lane)

        return rows

    def _lanes(self, plan: RenderPlan, active: list[int]) -> str:
        cells = [" "] * plan.lane_width
        for lane in active:
            cells[plan.lane_column(lane)] = self._config.glyphs.lane
        return "".join(cells)

    def _column(self, index: PositionIndex, line: int, offset: int) -> int:
        """Display width of the line's text before ``offset``."""
        prefix = index.slice(index.line_start(line), offset)
        return display_width(prefix, self._config.tab_width)

    def _underline_row(
        self,
        plan: RenderPlan,
        index: PositionIndex,
        margin: str,
        active: list[int],
        annotation: InlineAnnotation,
    ) -> DisplayLine:
        glyphs = self._config.glyphs
        style = Style.for_label(annotation.style)
        column = self._column(index, annotation.line, annotation.start_offset)
        labelled = index.slice(annotation.start_offset, annotation.end_offset)
        underline = glyphs.underline(annotation.style) * display_width(
            labelled, self._config.tab_width
        )
        message = f" {annotation.message}" if annotation.message else ""

        return DisplayLine.of(
            (margin, Style.GUTTER),
            (self._lanes(plan, active), Style.GUTTER),
            (" " * column, Style.SOURCE),
            (underline, style),
            (message, style),
        )

    def _bracket_row(
        self,
        plan: RenderPlan,
        index: PositionIndex,
        margin: str,
        active: list[int],
        marker: MultilineMarker,
    ) -> DisplayLine:
        glyphs = self._config.glyphs
        style = Style.for_label(marker.style)
        lane_column = plan.lane_column(marker.lane)
        target = plan.lane_width + self._column(index, marker.line, marker.offset)

        if marker.kind is MarkerKind.OPEN:
            corner, tip = glyphs.open_corner, glyphs.open_tip
        else:
            corner, tip = glyphs.close_corner, glyphs.close_tip
        message = f" {marker.message}" if marker.message else ""

        return DisplayLine.of(
            (margin, Style.GUTTER),
            (self._lanes(plan, active)[:lane_column], Style.GUTTER),
            (corner + glyphs.horizontal * (target - lane_column - 1) + tip, style),
            (message, style),
        )
