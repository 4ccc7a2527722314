"""Diagnostic reporting runtime: filtering, queuing and the sink registry.

Exports:
    CachedDiagnostic: Queued (stage, level, diagnostic) entry
    DiagnosticRegistry: Install-once holder of the application's sink
    DiagnosticSink: Protocol implemented by every sink
    FilterConfig: Severity/stage enablement filter
    InMemoryCache: Bounded thread-safe FIFO sink
    TerminalSink: Sink rendering straight to a terminal stream

Python 3.13+.
"""

from .cache import CachedDiagnostic, InMemoryCache
from .filter import FilterConfig
from .registry import DiagnosticBuilder, DiagnosticRegistry
from .sink import DiagnosticSink, TerminalSink

__all__ = [
    "CachedDiagnostic",
    "DiagnosticBuilder",
    "DiagnosticRegistry",
    "DiagnosticSink",
    "FilterConfig",
    "InMemoryCache",
    "TerminalSink",
]
