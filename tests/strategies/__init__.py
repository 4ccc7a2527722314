"""Hypothesis strategies for spanreport property-based testing.

Strategies are organized by domain:

- sources: source text, byte offsets and byte ranges
- diagnostics: diagnostics with valid labels into generated sources

Usage:
    from tests.strategies import source_texts, labelled_diagnostics
"""

from .diagnostics import LabelledCase, label_styles, labelled_diagnostics, levels
from .sources import (
    char_boundaries,
    line_fragments,
    source_ranges,
    source_texts,
    valid_offsets,
)

__all__ = [
    "LabelledCase",
    "char_boundaries",
    "label_styles",
    "labelled_diagnostics",
    "levels",
    "line_fragments",
    "source_ranges",
    "source_texts",
    "valid_offsets",
]
