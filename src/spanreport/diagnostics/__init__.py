"""Diagnostic values and the spanreport exception hierarchy.

Python 3.13+. Zero external dependencies.
"""

from .diagnostic import Diagnostic, Label, LabelRegion, Stage, StyledRegion
from .errors import (
    ContractViolationError,
    LineOutOfRangeError,
    OffsetOutOfRangeError,
    RegistryError,
    SpanReportError,
    UnknownSourceError,
)

__all__ = [
    "ContractViolationError",
    "Diagnostic",
    "Label",
    "LabelRegion",
    "LineOutOfRangeError",
    "OffsetOutOfRangeError",
    "RegistryError",
    "SpanReportError",
    "Stage",
    "StyledRegion",
    "UnknownSourceError",
]
