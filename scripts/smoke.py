#!/usr/bin/env python3
"""Quick smoke test: import the package and run every operation on a sample."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
try:
    import unmask  # type: ignore  # noqa: F401
except ModuleNotFoundError:
    sys.path.insert(0, str(ROOT))
    import unmask  # type: ignore  # noqa: F401

from unmask import analyze, clean, default_options, locate, scan, summarize, visualize

SAMPLE = "He said \u201chello\u201d\u200b\r\n2020\u20142021 ok\t\u202edone\u00a0end"


def main() -> int:
    occurrences = scan(SAMPLE)
    print(f"Found {len(occurrences)} hidden character(s):")
    for item in occurrences:
        print(f"  {item.line}:{item.column}  U+{item.code_point:04X}  {item.name} [{item.category}]")

    print("Frequency:")
    for entry in summarize(SAMPLE):
        print(f"  {entry.count:>3}  {entry.name}")

    rendering = visualize(SAMPLE)
    report = analyze(SAMPLE)
    if rendering.markup != report.markup or rendering.count != len(occurrences):
        print("Fused report disagrees with individual views")
        return 1

    for item in occurrences:
        if locate(SAMPLE, item.line, item.column) != item.index:
            print(f"Reverse mapping failed for {item.line}:{item.column}")
            return 1

    cleaned = clean(SAMPLE, default_options())
    print(f"Cleaned: {cleaned!r}")
    leftover = [o for o in scan(cleaned) if o.code_point not in {0x09, 0x0A}]
    if leftover:
        print("Cleaned text still carries hidden characters beyond TAB/LF")
        return 1

    print("Smoke test passed: all operations importable and consistent.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
