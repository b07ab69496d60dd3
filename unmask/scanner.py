"""Code point scanner with line/column tracking.

Offsets (``index``) are Python ``str`` offsets, i.e. one unit per code point,
so the matched span of an occurrence is always ``text[index:index + 1]``.
``utf16_index`` carries the same position in UTF-16 code units for callers
that select text in a browser.

Line breaks are LF, lone CR, LINE SEPARATOR and PARAGRAPH SEPARATOR. A CR
directly followed by LF is one break: the CR ends the line and the LF is
consumed with it, so the LF is never reported or addressed by ``locate``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Union

from .codepoints import CR, LF, LINE_SEPARATOR, PARAGRAPH_SEPARATOR, describe, hex_label, is_hidden

LINE_BREAKS = frozenset({LF, LINE_SEPARATOR, PARAGRAPH_SEPARATOR})


class Position(NamedTuple):
    index: int
    utf16_index: int
    char: str
    line: int
    column: int


@dataclass(frozen=True)
class Occurrence:
    index: int
    utf16_index: int
    character: str
    code_point: int
    name: str
    category: str

    @property
    def utf16_length(self) -> int:
        return 2 if self.code_point > 0xFFFF else 1

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {
            "index": self.index,
            "utf16_index": self.utf16_index,
            "utf16_length": self.utf16_length,
            "char": self.character,
            "code_point": self.code_point,
            "code": hex_label(self.code_point),
            "name": self.name,
            "category": self.category,
        }


@dataclass(frozen=True)
class PositionedOccurrence(Occurrence):
    line: int
    column: int

    def occurrence(self) -> Occurrence:
        return Occurrence(
            index=self.index,
            utf16_index=self.utf16_index,
            character=self.character,
            code_point=self.code_point,
            name=self.name,
            category=self.category,
        )

    def to_dict(self) -> Dict[str, Union[int, str]]:
        data = super().to_dict()
        data["line"] = self.line
        data["column"] = self.column
        return data


def _utf16_width(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def _crlf_at(text: str, index: int) -> bool:
    return text[index : index + 2] == "\r\n"


def breaks_line(text: str, index: int) -> bool:
    """Whether the code point at ``index`` ends its line.

    The LF of a CRLF pair does not: the CR already ended the line.
    """
    cp = ord(text[index])
    if cp == CR:
        return True
    if cp == LF and index > 0 and _crlf_at(text, index - 1):
        return False
    return cp in LINE_BREAKS


def iter_positions(text: str) -> Iterator[Position]:
    """Yield the position of every visited code point in ``text``, left to right.

    The LF of a CRLF pair is consumed together with its CR and never yielded.
    """
    line = 1
    column = 1
    utf16_index = 0
    for index, char in enumerate(text):
        if char == "\n" and index > 0 and _crlf_at(text, index - 1):
            utf16_index += 1
            continue
        yield Position(index, utf16_index, char, line, column)
        utf16_index += _utf16_width(char)
        if breaks_line(text, index):
            line += 1
            column = 1
        else:
            column += 1


def positioned_occurrence(position: Position) -> PositionedOccurrence:
    cp = ord(position.char)
    info = describe(cp)
    return PositionedOccurrence(
        index=position.index,
        utf16_index=position.utf16_index,
        character=position.char,
        code_point=cp,
        name=info.name,
        category=info.category,
        line=position.line,
        column=position.column,
    )


def scan(text: str) -> List[PositionedOccurrence]:
    """Every hidden code point in ``text`` with its 1-based line and column."""
    return [
        positioned_occurrence(position)
        for position in iter_positions(text)
        if is_hidden(ord(position.char))
    ]


def find_non_printable(text: str) -> List[Occurrence]:
    return [item.occurrence() for item in scan(text)]


def line_starts(text: str) -> List[int]:
    starts = [0]
    for index in range(len(text)):
        if breaks_line(text, index):
            starts.append(index + (2 if _crlf_at(text, index) else 1))
    return starts


def locate(text: str, line: int, column: int) -> int:
    """Map a 1-based ``(line, column)`` back to a ``str`` offset.

    Requests outside the text clamp to the nearest valid offset: a line past
    the end maps to ``len(text)``, a column past the end of a line maps to
    that line's terminator (or to ``len(text)`` on the last line).
    """
    starts = line_starts(text)
    line = max(1, int(line))
    column = max(1, int(column))
    if line > len(starts):
        return len(text)
    start = starts[line - 1]
    if line < len(starts):
        # Last valid column is the code point that breaks the line; for
        # CRLF that is the CR, the LF is never addressable.
        last = starts[line] - 1
        if last > start and _crlf_at(text, last - 1):
            last -= 1
    else:
        last = len(text)
    return min(start + column - 1, last)


def utf16_offset(text: str, index: int) -> int:
    index = max(0, min(int(index), len(text)))
    return sum(_utf16_width(char) for char in text[:index])
