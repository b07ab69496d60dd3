"""Code point classification, naming and presentation tags."""

from __future__ import annotations

import unicodedata as ud
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

MAX_CODE_POINT = 0x10FFFF

NON_PRINTABLE_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn"})
UNKNOWN_CATEGORY = "C*"

TAB = 0x09
LF = 0x0A
CR = 0x0D
NBSP = 0x00A0
SOFT_HYPHEN = 0x00AD
ZWSP = 0x200B
LINE_SEPARATOR = 0x2028
PARAGRAPH_SEPARATOR = 0x2029

BIDI_CONTROLS = frozenset(
    {
        0x200E,
        0x200F,
        0x202A,
        0x202B,
        0x202C,
        0x202D,
        0x202E,
        0x2066,
        0x2067,
        0x2068,
        0x2069,
    }
)


class InvalidCodePoint(ValueError):
    """Raised for values that are not Unicode code points."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid code point: {value!r} (expected an int in 0..0x10FFFF)")
        self.value = value


@dataclass(frozen=True)
class CodePointInfo:
    name: str
    category: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "category": self.category}


def _info(name: str, category: str) -> CodePointInfo:
    return CodePointInfo(name=name, category=category)


NAMED: Mapping[int, CodePointInfo] = MappingProxyType(
    {
        0x0000: _info("NULL", "Cc"),
        TAB: _info("TAB", "Cc"),
        LF: _info("LINE FEED", "Cc"),
        CR: _info("CARRIAGE RETURN", "Cc"),
        ZWSP: _info("ZERO WIDTH SPACE", "Cf"),
        0x200C: _info("ZERO WIDTH NON-JOINER", "Cf"),
        0x200D: _info("ZERO WIDTH JOINER", "Cf"),
        NBSP: _info("NO-BREAK SPACE", "Zs"),
        LINE_SEPARATOR: _info("LINE SEPARATOR", "Zl"),
        PARAGRAPH_SEPARATOR: _info("PARAGRAPH SEPARATOR", "Zp"),
        SOFT_HYPHEN: _info("SOFT HYPHEN", "Cf"),
        0x061C: _info("ARABIC LETTER MARK", "Cf"),
        0x200E: _info("LEFT-TO-RIGHT MARK", "Cf"),
        0x200F: _info("RIGHT-TO-LEFT MARK", "Cf"),
        0x202A: _info("LEFT-TO-RIGHT EMBEDDING", "Cf"),
        0x202B: _info("RIGHT-TO-LEFT EMBEDDING", "Cf"),
        0x202C: _info("POP DIRECTIONAL FORMATTING", "Cf"),
        0x202D: _info("LEFT-TO-RIGHT OVERRIDE", "Cf"),
        0x202E: _info("RIGHT-TO-LEFT OVERRIDE", "Cf"),
        0x2066: _info("LEFT-TO-RIGHT ISOLATE", "Cf"),
        0x2067: _info("RIGHT-TO-LEFT ISOLATE", "Cf"),
        0x2068: _info("FIRST STRONG ISOLATE", "Cf"),
        0x2069: _info("POP DIRECTIONAL ISOLATE", "Cf"),
    }
)

# Printable in the general-category sense but easy to miss on screen.
AMBIGUOUS = frozenset(
    cp for cp, info in NAMED.items() if info.category not in NON_PRINTABLE_CATEGORIES
)

_CATEGORY_TOKENS = (
    ("Cc", "token-cc"),
    ("Cf", "token-cf"),
    ("Cs", "token-cs"),
    ("Co", "token-co"),
    ("Cn", "token-cn"),
)


def _validate(code_point: object) -> int:
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        raise InvalidCodePoint(code_point)
    if code_point < 0 or code_point > MAX_CODE_POINT:
        raise InvalidCodePoint(code_point)
    return code_point


def hex_label(code_point: int) -> str:
    return f"U+{_validate(code_point):04X}"


def general_category(code_point: int) -> str:
    """Unicode general category from the interpreter's unicodedata tables.

    Surrogate halves are accepted and report ``Cs``.
    """
    return ud.category(chr(_validate(code_point)))


def is_non_printable(code_point: int) -> bool:
    return general_category(code_point) in NON_PRINTABLE_CATEGORIES


def is_hidden(code_point: int) -> bool:
    """True for code points a scan reports: non-printables plus ``AMBIGUOUS``."""
    return code_point in AMBIGUOUS or is_non_printable(code_point)


def describe(code_point: int) -> CodePointInfo:
    named = NAMED.get(_validate(code_point))
    if named is not None:
        return named
    return CodePointInfo(name=hex_label(code_point), category=UNKNOWN_CATEGORY)


def classify_token(code_point: int, category: str) -> str:
    """Presentation class used to group tokens in the annotated rendering."""
    if code_point == ZWSP:
        return "token-zwsp"
    if code_point == NBSP:
        return "token-nbsp"
    if code_point == SOFT_HYPHEN:
        return "token-soft"
    if code_point in BIDI_CONTROLS:
        return "token-bidi"
    for prefix, token in _CATEGORY_TOKENS:
        if category.startswith(prefix):
            return token
    return "token-cf"
