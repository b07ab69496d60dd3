"""Detect, locate and clean hidden Unicode characters in text."""

from .aggregate import FrequencyEntry, Report, Visualization, analyze, summarize, visualize
from .cleaner import CleanOptions, CleanRule, RULES, clean, default_options, strip_non_printable
from .codepoints import (
    CodePointInfo,
    InvalidCodePoint,
    classify_token,
    describe,
    general_category,
    hex_label,
    is_hidden,
    is_non_printable,
)
from .scanner import (
    Occurrence,
    PositionedOccurrence,
    find_non_printable,
    iter_positions,
    locate,
    scan,
    utf16_offset,
)

__all__ = [
    "CleanOptions",
    "CleanRule",
    "CodePointInfo",
    "FrequencyEntry",
    "InvalidCodePoint",
    "Occurrence",
    "PositionedOccurrence",
    "RULES",
    "Report",
    "Visualization",
    "analyze",
    "classify_token",
    "clean",
    "default_options",
    "describe",
    "find_non_printable",
    "general_category",
    "hex_label",
    "is_hidden",
    "is_non_printable",
    "iter_positions",
    "locate",
    "scan",
    "strip_non_printable",
    "summarize",
    "utf16_offset",
    "visualize",
]
