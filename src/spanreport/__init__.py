"""spanreport - rustc-style diagnostic reports rendered against source text.

Points precisely at byte ranges of registered sources and explains what is
wrong there: a severity header, underlined code excerpts with primary and
secondary labels, multi-line brackets, and trailing notes.

Public API:
    SourceStore - Register named sources, addressed by integer id
    Diagnostic, Label - Immutable diagnostic values with fluent builders
    DiagnosticFormatter - Render a diagnostic to display lines or text
    TerminalRenderer - Write rendered diagnostics to a terminal stream
    DiagnosticRegistry - Install-once holder of the application's sink
    InMemoryCache, TerminalSink - Sink implementations
    FilterConfig, RenderConfig - Configuration

Exceptions:
    SpanReportError - Base exception class
    ContractViolationError - Label or lookup outside the registered sources
    RegistryError - Sink installed twice or used before installation

Submodules:
    spanreport.source - Position index and source store
    spanreport.render - Layout planner, snippet renderer, styled output
    spanreport.runtime - Filtering, FIFO cache, sinks, registry
"""

from .diagnostics import (
    ContractViolationError,
    Diagnostic,
    Label,
    LabelRegion,
    LineOutOfRangeError,
    OffsetOutOfRangeError,
    RegistryError,
    SpanReportError,
    Stage,
    UnknownSourceError,
)
from .enums import ColorChoice, LabelStyle, Level, StageKind
from .render import DiagnosticFormatter, RenderConfig, TerminalRenderer
from .runtime import DiagnosticRegistry, FilterConfig, InMemoryCache, TerminalSink
from .source import Location, SourceStore

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("spanreport")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ColorChoice",
    "ContractViolationError",
    "Diagnostic",
    "DiagnosticFormatter",
    "DiagnosticRegistry",
    "FilterConfig",
    "InMemoryCache",
    "Label",
    "LabelRegion",
    "LabelStyle",
    "Level",
    "LineOutOfRangeError",
    "Location",
    "OffsetOutOfRangeError",
    "RegistryError",
    "RenderConfig",
    "SourceStore",
    "SpanReportError",
    "Stage",
    "StageKind",
    "TerminalRenderer",
    "TerminalSink",
    "UnknownSourceError",
    "__version__",
]
