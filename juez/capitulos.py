"""Longest run of consecutive episodes with no repetition."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path


def longest_unique_run(values: Iterable[int]) -> int:
    """Length of the longest contiguous stretch without repeated values."""
    last_seen: dict[int, int] = {}
    current = best = 0
    for position, value in enumerate(values):
        if value in last_seen:
            current = min(current, position - last_seen[value] - 1)
        last_seen[value] = position
        current += 1
        best = max(best, current)
    return best


def solve(text: str) -> str:
    """Read the number of cases, then each case's length and values."""
    numbers = map(int, text.split())
    cases = next(numbers, 0)
    output = []
    for _ in range(cases):
        length = next(numbers, None)
        if length is None:
            break
        values = list(islice(numbers, max(length, 0)))
        output.append(f"{longest_unique_run(values)}\n")
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())