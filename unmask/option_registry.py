"""Clean option registry used to build the options panel."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

from .cleaner import CleanOptions, camel_key

GROUPS = ("remove", "preserve", "smart_replace")


@dataclass(frozen=True)
class CleanOption:
    option_id: str
    label: str
    group: str
    description: str = ""

    @property
    def form_key(self) -> str:
        return camel_key(self.option_id)

    @property
    def default(self) -> bool:
        return bool(getattr(CleanOptions(), self.option_id))


def _wrap(option: CleanOption) -> Dict[str, Any]:
    return {
        "id": option.option_id,
        "key": option.form_key,
        "label": option.label,
        "group": option.group,
        "description": option.description,
        "default": option.default,
    }


OPTIONS: Dict[str, CleanOption] = {
    "remove_cc": CleanOption(
        option_id="remove_cc",
        label="Remove Cc (Control)",
        group="remove",
        description="C0/C1 control characters such as NULL or ESC.",
    ),
    "remove_cf": CleanOption(
        option_id="remove_cf",
        label="Remove Cf (Format)",
        group="remove",
        description="Zero-width joiners, bidi controls, soft hyphens.",
    ),
    "remove_cs": CleanOption(
        option_id="remove_cs",
        label="Remove Cs (Surrogate)",
        group="remove",
        description="Unpaired surrogate halves.",
    ),
    "remove_co": CleanOption(
        option_id="remove_co",
        label="Remove Co (Private Use)",
        group="remove",
    ),
    "remove_cn": CleanOption(
        option_id="remove_cn",
        label="Remove Cn (Unassigned)",
        group="remove",
    ),
    "preserve_tab": CleanOption(
        option_id="preserve_tab",
        label="Preserve TAB",
        group="preserve",
    ),
    "preserve_lf": CleanOption(
        option_id="preserve_lf",
        label="Preserve LF (\\n)",
        group="preserve",
    ),
    "preserve_cr": CleanOption(
        option_id="preserve_cr",
        label="Preserve CR (\\r)",
        group="preserve",
    ),
    "remove_zwsp": CleanOption(
        option_id="remove_zwsp",
        label="Remove Zero Width Space",
        group="smart_replace",
    ),
    "nbsp_to_space": CleanOption(
        option_id="nbsp_to_space",
        label="NBSP to Space",
        group="smart_replace",
    ),
    "normalize_dashes": CleanOption(
        option_id="normalize_dashes",
        label="Normalize Dashes",
        group="smart_replace",
        description="Hyphen, figure/en/em dash and minus sign become '-'.",
    ),
    "normalize_quotes": CleanOption(
        option_id="normalize_quotes",
        label="Normalize Quotes",
        group="smart_replace",
        description="Curly quotes and primes become straight quotes.",
    ),
}


REGISTRY: List[Dict[str, Any]] = [_wrap(opt) for opt in OPTIONS.values()]


def get_registry() -> List[Dict[str, Any]]:
    return [dict(item) for item in REGISTRY]


def get_option(option_id: str) -> Optional[CleanOption]:
    return OPTIONS.get(option_id)


def option_ids() -> List[str]:
    return [item.name for item in fields(CleanOptions)]
