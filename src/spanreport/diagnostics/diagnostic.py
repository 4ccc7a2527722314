"""Diagnostic data structures.

Defines severity-tagged diagnostics, labels pointing at byte ranges of a
registered source, and the pipeline stage a diagnostic originates from.
All values are frozen; the fluent ``with_*`` methods return updated copies
so a diagnostic handed to a renderer can never change under it.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Self

from spanreport.enums import LabelStyle, Level, StageKind

__all__ = [
    "Diagnostic",
    "Label",
    "LabelRegion",
    "Stage",
    "StyledRegion",
]


@dataclass(frozen=True, slots=True)
class Stage:
    """Pipeline phase a diagnostic originates from.

    Attributes:
        kind: Phase category
        name: Free-form phase name (e.g., the format being parsed)

    Example:
        >>> Stage.parsing("SVG")
        Stage(kind=<StageKind.PARSING: 'parsing'>, name='SVG')
    """

    kind: StageKind
    name: str = ""

    @classmethod
    def parsing(cls, name: str = "") -> "Stage":
        return cls(StageKind.PARSING, name)

    @classmethod
    def semantic(cls, name: str = "") -> "Stage":
        return cls(StageKind.SEMANTIC, name)

    @classmethod
    def codegen(cls, name: str = "") -> "Stage":
        return cls(StageKind.CODEGEN, name)

    @classmethod
    def custom(cls, name: str) -> "Stage":
        return cls(StageKind.CUSTOM, name)

    def __str__(self) -> str:
        return f"{self.kind}({self.name})" if self.name else str(self.kind)


def _check_range(owner: str, start: int, end: int) -> None:
    if start < 0:
        msg = f"{owner}.start must be >= 0, got {start}"
        raise ValueError(msg)
    if end < start:
        msg = f"{owner}.end ({end}) must be >= start ({start})"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LabelRegion:
    """Byte range ``[start, end)`` of a source plus a description.

    Whether ``end`` lies within the source is checked when the label is
    rendered, since the region does not know its source content.

    Attributes:
        start: First byte of the region (0-indexed)
        end: One past the last byte of the region
        message: Text shown next to the underline
    """

    start: int
    end: int
    message: str = ""

    def __post_init__(self) -> None:
        """Validate LabelRegion invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        _check_range("LabelRegion", self.start, self.end)


@dataclass(frozen=True, slots=True)
class StyledRegion:
    """One flattened label: source, byte range, style and message.

    The layout planner only ever sees this shape, whichever way the
    diagnostic's labels were built.
    """

    source_id: int
    start: int
    end: int
    message: str
    style: LabelStyle

    def __post_init__(self) -> None:
        _check_range("StyledRegion", self.start, self.end)

    @property
    def is_primary(self) -> bool:
        return self.style is LabelStyle.PRIMARY


@dataclass(frozen=True, slots=True)
class Label:
    """A labelled region of one source, with optional secondary regions.

    A label is either a primary region with supporting secondary regions
    (``Label.primary(...).with_secondary(...)``), or a single region with an
    explicit style from the four-style scheme (``Label.tertiary(...)``).
    Secondary regions always share the label's source.

    Attributes:
        source_id: Id returned by ``SourceStore.add``
        region: The label's main region
        style: Style of the main region
        secondary_regions: Supporting regions, rendered with ``LabelStyle.SECONDARY``

    Example:
        >>> label = Label.primary(0, 328, 331, "expected `String`, found `Nat`")
        >>> label = label.with_secondary(186, 192, "expected type `String` found here")
        >>> [r.style for r in label.regions()]
        [<LabelStyle.PRIMARY: 'primary'>, <LabelStyle.SECONDARY: 'secondary'>]
    """

    source_id: int
    region: LabelRegion
    style: LabelStyle = LabelStyle.PRIMARY
    secondary_regions: tuple[LabelRegion, ...] = ()

    @classmethod
    def new(
        cls, source_id: int, start: int, end: int, message: str = "",
        style: LabelStyle = LabelStyle.PRIMARY,
    ) -> "Label":
        """Create a label with one main region."""
        return cls(source_id, LabelRegion(start, end, message), style)

    @classmethod
    def primary(cls, source_id: int, start: int, end: int, message: str = "") -> "Label":
        return cls.new(source_id, start, end, message, LabelStyle.PRIMARY)

    @classmethod
    def secondary(cls, source_id: int, start: int, end: int, message: str = "") -> "Label":
        return cls.new(source_id, start, end, message, LabelStyle.SECONDARY)

    @classmethod
    def tertiary(cls, source_id: int, start: int, end: int, message: str = "") -> "Label":
        return cls.new(source_id, start, end, message, LabelStyle.TERTIARY)

    @classmethod
    def quaternary(cls, source_id: int, start: int, end: int, message: str = "") -> "Label":
        return cls.new(source_id, start, end, message, LabelStyle.QUATERNARY)

    def with_secondary(self, start: int, end: int, message: str = "") -> Self:
        """Append a secondary region in the same source."""
        region = LabelRegion(start, end, message)
        return replace(self, secondary_regions=(*self.secondary_regions, region))

    def regions(self) -> Iterator[StyledRegion]:
        """Flatten into styled regions: main region first, then secondaries."""
        yield StyledRegion(
            self.source_id, self.region.start, self.region.end, self.region.message, self.style
        )
        for region in self.secondary_regions:
            yield StyledRegion(
                self.source_id, region.start, region.end, region.message, LabelStyle.SECONDARY
            )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic report.

    Immutable once built. Notes and labels keep the order of the calls that
    added them.

    Attributes:
        level: Severity
        message: Main message shown in the header
        code: Optional numeric code, rendered zero-padded (``[000010]``)
        notes: Free-text notes shown after the snippets
        labels: Labelled source regions

    Example:
        >>> diagnostic = (
        ...     Diagnostic.error("type mismatch")
        ...     .with_code(10)
        ...     .with_label(Label.primary(0, 0, 4, "here"))
        ...     .with_note("expected type `String`")
        ... )
        >>> diagnostic.code
        10
    """

    level: Level
    message: str
    code: int | None = None
    notes: tuple[str, ...] = ()
    labels: tuple[Label, ...] = ()

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If code is negative.
        """
        if self.code is not None and self.code < 0:
            msg = f"Diagnostic.code must be >= 0, got {self.code}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def bug(cls, message: str) -> "Diagnostic":
        return cls(Level.BUG, message)

    @classmethod
    def error(cls, message: str) -> "Diagnostic":
        return cls(Level.ERROR, message)

    @classmethod
    def warning(cls, message: str) -> "Diagnostic":
        return cls(Level.WARNING, message)

    warn = warning

    @classmethod
    def note(cls, message: str) -> "Diagnostic":
        return cls(Level.NOTE, message)

    @classmethod
    def help(cls, message: str) -> "Diagnostic":
        return cls(Level.HELP, message)

    def with_level(self, level: Level) -> Self:
        return replace(self, level=level)

    def with_message(self, message: str) -> Self:
        return replace(self, message=message)

    def with_code(self, code: int) -> Self:
        return replace(self, code=code)

    def with_note(self, note: str) -> Self:
        return replace(self, notes=(*self.notes, note))

    def with_label(self, label: Label) -> Self:
        return replace(self, labels=(*self.labels, label))

    def with_labels(self, labels: Iterable[Label]) -> Self:
        return replace(self, labels=(*self.labels, *labels))

    def regions(self) -> Iterator[StyledRegion]:
        """Flatten every label into styled regions, in label order."""
        for label in self.labels:
            yield from label.regions()
