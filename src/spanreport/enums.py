"""Enumerations for spanreport type-safe constants.

Level is an IntEnum: lower ordinal means more severe, which is the ordering
filters rely on. The remaining enums use StrEnum (Python 3.11+) for
automatic string conversion.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Level(IntEnum):
    """Severity of a diagnostic.

    Ordered from most to least severe. ``Level.WARN`` is an alias of
    ``Level.WARNING`` for callers using the reduced Bug/Error/Warn set.
    """

    BUG = 0
    """An unexpected internal bug."""

    ERROR = 1
    """An error that prevents further progress."""

    WARNING = 2
    """A warning."""

    WARN = 2

    NOTE = 3
    """A note."""

    HELP = 4
    """A help message."""


class LabelStyle(StrEnum):
    """Visual treatment of a labelled region.

    StrEnum provides automatic string conversion: str(LabelStyle.PRIMARY) == "primary"
    """

    PRIMARY = "primary"
    """Main cause of the diagnostic, underlined with carets."""

    SECONDARY = "secondary"
    """Supporting context, underlined with dashes."""

    TERTIARY = "tertiary"
    QUATERNARY = "quaternary"


class StageKind(StrEnum):
    """Pipeline phase a diagnostic originates from."""

    PARSING = "parsing"
    SEMANTIC = "semantic"
    CODEGEN = "codegen"
    CUSTOM = "custom"


class ColorChoice(StrEnum):
    """When terminal output uses ANSI color codes.

    StrEnum provides automatic string conversion: str(ColorChoice.AUTO) == "auto"
    """

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"
    """Color when the stream is a TTY and NO_COLOR is unset."""


__all__ = [
    "ColorChoice",
    "LabelStyle",
    "Level",
    "StageKind",
]
