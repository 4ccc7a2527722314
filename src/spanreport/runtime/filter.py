"""Severity and stage filtering.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from spanreport.diagnostics.diagnostic import Stage
from spanreport.enums import Level

__all__ = ["FilterConfig"]


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Immutable enablement filter shared by every sink.

    Attributes:
        level: Least severe level still reported (default: HELP, i.e. all).
            Levels strictly less severe than this are suppressed.
        stages: Stages reported; None reports every stage.

    Example:
        >>> config = FilterConfig(level=Level.WARNING).with_stage(Stage.parsing("SVG"))
        >>> config.allows(Stage.parsing("SVG"), Level.ERROR)
        True
        >>> config.allows(Stage.parsing("SVG"), Level.NOTE)
        False
        >>> config.allows(Stage.codegen(), Level.ERROR)
        False
    """

    level: Level = Level.HELP
    stages: frozenset[Stage] | None = None

    def allows(self, stage: Stage, level: Level) -> bool:
        if level > self.level:
            return False
        return self.stages is None or stage in self.stages

    def with_level(self, level: Level) -> FilterConfig:
        return replace(self, level=level)

    def with_stage(self, stage: Stage) -> FilterConfig:
        """Restrict reporting to the given stage plus any already enabled."""
        return replace(self, stages=(self.stages or frozenset()) | {stage})
