"""Derived views over a scan: frequency table and annotated markup."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .codepoints import classify_token, describe, hex_label, is_hidden
from .scanner import PositionedOccurrence, iter_positions, positioned_occurrence, scan

TOKEN_GLYPH = "&#9676;"


@dataclass(frozen=True)
class FrequencyEntry:
    code_point: int
    name: str
    category: str
    count: int

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {
            "code_point": self.code_point,
            "code": hex_label(self.code_point),
            "name": self.name,
            "category": self.category,
            "count": self.count,
        }


@dataclass(frozen=True)
class Visualization:
    markup: str
    count: int

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {"markup": self.markup, "count": self.count}


@dataclass(frozen=True)
class Report:
    occurrences: List[PositionedOccurrence]
    summary: List[FrequencyEntry]
    markup: str

    @property
    def count(self) -> int:
        return len(self.occurrences)

    def to_dict(self) -> Dict[str, object]:
        return {
            "count": self.count,
            "occurrences": [item.to_dict() for item in self.occurrences],
            "summary": [entry.to_dict() for entry in self.summary],
            "markup": self.markup,
        }


def escape_markup(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def token_title(occurrence: PositionedOccurrence) -> str:
    return (
        f"{occurrence.name} ({hex_label(occurrence.code_point)}) \u2014 "
        f"Category {occurrence.category} \u2014 at {occurrence.line}:{occurrence.column}"
    )


def render_token(occurrence: PositionedOccurrence) -> str:
    cls = classify_token(occurrence.code_point, occurrence.category)
    title = escape_markup(token_title(occurrence))
    return f'<span class="token {cls}" title="{title}">{TOKEN_GLYPH}</span>'


def _frequency_table(counts: Counter) -> List[FrequencyEntry]:
    entries = []
    for cp, count in counts.items():
        info = describe(cp)
        entries.append(
            FrequencyEntry(code_point=cp, name=info.name, category=info.category, count=int(count))
        )
    entries.sort(key=lambda entry: (-entry.count, entry.code_point))
    return entries


def summarize(text: str) -> List[FrequencyEntry]:
    """One entry per distinct hidden code point, most frequent first."""
    counts: Counter = Counter(item.code_point for item in scan(text))
    return _frequency_table(counts)


def _markup_parts(text: str) -> Iterator[Tuple[str, Optional[PositionedOccurrence]]]:
    # Code points the scanner consumes without visiting (the LF of a CRLF)
    # are still copied into the markup as plain text.
    cursor = 0
    for position in iter_positions(text):
        if position.index > cursor:
            yield escape_markup(text[cursor : position.index]), None
        cursor = position.index + 1
        if is_hidden(ord(position.char)):
            occurrence = positioned_occurrence(position)
            yield render_token(occurrence), occurrence
        else:
            yield escape_markup(position.char), None
    if cursor < len(text):
        yield escape_markup(text[cursor:]), None


def visualize(text: str) -> Visualization:
    parts: List[str] = []
    count = 0
    for part, occurrence in _markup_parts(text):
        parts.append(part)
        if occurrence is not None:
            count += 1
    return Visualization(markup="".join(parts), count=count)


def analyze(text: str) -> Report:
    """Occurrences, frequency table and markup from a single pass."""
    occurrences: List[PositionedOccurrence] = []
    counts: Counter = Counter()
    parts: List[str] = []
    for part, occurrence in _markup_parts(text):
        parts.append(part)
        if occurrence is None:
            continue
        occurrences.append(occurrence)
        counts[occurrence.code_point] += 1
    return Report(occurrences=occurrences, summary=_frequency_table(counts), markup="".join(parts))
