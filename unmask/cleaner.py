"""Rule-driven cleaning pass.

Each code point is rewritten by the first rule in ``RULES`` that returns a
replacement. A replacement is the empty string (drop) or a single code point,
so the cleaned text is never longer than the input.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .codepoints import CR, LF, NBSP, TAB, ZWSP, general_category, is_non_printable


@dataclass(frozen=True)
class CleanOptions:
    remove_cc: bool = True
    remove_cf: bool = True
    remove_cs: bool = True
    remove_co: bool = True
    remove_cn: bool = True
    preserve_tab: bool = True
    preserve_lf: bool = True
    preserve_cr: bool = False
    remove_zwsp: bool = True
    nbsp_to_space: bool = True
    normalize_dashes: bool = True
    normalize_quotes: bool = True

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "CleanOptions":
        """Build options from request data; absent keys keep their defaults.

        Keys may be snake_case (``remove_cc``) or camelCase (``removeCc``).
        """
        if not data:
            return cls()
        values: Dict[str, bool] = {}
        for item in fields(cls):
            for key in (item.name, camel_key(item.name)):
                if key in data:
                    values[item.name] = _flag(data[key])
                    break
        return cls(**values)


def default_options() -> CleanOptions:
    return CleanOptions()


# Matches the casing used by the browser UI (removeZWSP, preserveLF, preserveCR).
_ACRONYMS = frozenset({"zwsp", "lf", "cr"})


def camel_key(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.upper() if part in _ACRONYMS else part.capitalize() for part in rest)


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "1", "yes", "on"}


DASHES: Mapping[int, str] = MappingProxyType(
    {
        0x2010: "-",
        0x2011: "-",
        0x2012: "-",
        0x2013: "-",
        0x2014: "-",
        0x2212: "-",
    }
)

QUOTES: Mapping[int, str] = MappingProxyType(
    {
        0x2018: "'",
        0x2019: "'",
        0x201A: "'",
        0x201B: "'",
        0x2032: "'",
        0x201C: '"',
        0x201D: '"',
        0x201E: '"',
        0x201F: '"',
        0x2033: '"',
    }
)

REMOVE_FLAGS: Mapping[str, str] = MappingProxyType(
    {
        "Cc": "remove_cc",
        "Cf": "remove_cf",
        "Cs": "remove_cs",
        "Co": "remove_co",
        "Cn": "remove_cn",
    }
)

PRESERVE_FLAGS: Mapping[int, str] = MappingProxyType(
    {
        TAB: "preserve_tab",
        LF: "preserve_lf",
        CR: "preserve_cr",
    }
)

Replacement = Optional[str]


@dataclass(frozen=True)
class CleanRule:
    rule_id: str
    apply: Callable[[int, str, CleanOptions], Replacement]


def _nbsp_rule(cp: int, ch: str, options: CleanOptions) -> Replacement:
    if options.nbsp_to_space and cp == NBSP:
        return " "
    return None


def _dash_rule(cp: int, ch: str, options: CleanOptions) -> Replacement:
    if options.normalize_dashes:
        return DASHES.get(cp)
    return None


def _quote_rule(cp: int, ch: str, options: CleanOptions) -> Replacement:
    if options.normalize_quotes:
        return QUOTES.get(cp)
    return None


def _zwsp_rule(cp: int, ch: str, options: CleanOptions) -> Replacement:
    if options.remove_zwsp and cp == ZWSP:
        return ""
    return None


def _category_rule(cp: int, ch: str, options: CleanOptions) -> Replacement:
    if not is_non_printable(cp):
        return None
    preserve = PRESERVE_FLAGS.get(cp)
    if preserve and getattr(options, preserve):
        return ch
    remove = REMOVE_FLAGS.get(general_category(cp))
    if remove and getattr(options, remove):
        return ""
    return ch


RULES: Tuple[CleanRule, ...] = (
    CleanRule("nbsp_to_space", _nbsp_rule),
    CleanRule("normalize_dashes", _dash_rule),
    CleanRule("normalize_quotes", _quote_rule),
    CleanRule("remove_zwsp", _zwsp_rule),
    CleanRule("category", _category_rule),
)


def clean(
    text: str,
    options: Optional[CleanOptions] = None,
    *,
    rules: Tuple[CleanRule, ...] = RULES,
) -> str:
    """Rewrite ``text`` code point by code point; unmatched code points pass through."""
    if options is None:
        options = default_options()
    out = []
    for ch in text:
        cp = ord(ch)
        for rule in rules:
            replacement = rule.apply(cp, ch, options)
            if replacement is not None:
                out.append(replacement)
                break
        else:
            out.append(ch)
    return "".join(out)


def strip_non_printable(text: str) -> str:
    return "".join(ch for ch in text if not is_non_printable(ord(ch)))
