"""Differences between two versions of a dictionary of key-value pairs."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path


def parse_dictionary(line: str) -> dict[str, str]:
    """Read alternating keys and values from a line.

    A later key overwrites an earlier one. A trailing key without a value
    takes the last value read on the line, or the empty string.
    """
    table: dict[str, str] = {}
    tokens = iter(line.split())
    value = ""
    for key in tokens:
        value = next(tokens, value)
        table[key] = value
    return table


def diff_dictionaries(
    old: Mapping[str, str], new: Mapping[str, str]
) -> tuple[list[str], list[str], list[str]]:
    """Return the sorted keys added, removed and changed from old to new."""
    added = sorted(new.keys() - old.keys())
    removed = sorted(old.keys() - new.keys())
    changed = sorted(key for key in old.keys() & new.keys() if old[key] != new[key])
    return added, removed, changed


def format_diff(added: Sequence[str], removed: Sequence[str], changed: Sequence[str]) -> str:
    """Render a difference as ``+``, ``-`` and ``*`` lines, then ``---``."""
    if not (added or removed or changed):
        return "Sin cambios\n---\n"
    lines = [
        sign + "".join(f" {key}" for key in keys) + "\n"
        for sign, keys in (("+", added), ("-", removed), ("*", changed))
        if keys
    ]
    return "".join(lines) + "---\n"


def solve(text: str) -> str:
    """Read the number of cases, then two dictionary lines per case."""
    lines = iter(text.splitlines())
    count = None
    for line in lines:
        tokens = line.split()
        if tokens:
            count = int(tokens[0])
            break
    if count is None:
        return ""
    output = []
    for _ in range(count):
        old = parse_dictionary(next(lines, ""))
        new = parse_dictionary(next(lines, ""))
        output.append(format_diff(*diff_dictionaries(old, new)))
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())