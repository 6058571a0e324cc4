"""Cross-reference index: every word longer than two characters and its lines."""

from __future__ import annotations

import string
import sys
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from itertools import islice
from pathlib import Path

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def index_words(lines: Iterable[str]) -> dict[str, list[int]]:
    """Map each lowercased word of more than two bytes to its line numbers.

    Lines are numbered from 1; the result is ordered by word.
    """
    table: dict[str, list[int]] = {}
    for number, line in enumerate(lines, start=1):
        for word in line.split():
            if len(word.encode("utf-8")) > 2:
                numbers = table.setdefault(word.translate(_ASCII_LOWER), [])
                if not numbers or numbers[-1] != number:
                    numbers.append(number)
    return dict(sorted(table.items()))


def format_index(table: Mapping[str, Sequence[int]]) -> str:
    """Render an index as one line per word followed by a ``---`` line."""
    rows = (word + "".join(f" {n}" for n in numbers) + "\n" for word, numbers in table.items())
    return "".join(rows) + "---\n"


def _read_count(lines: Iterator[str]) -> int | None:
    """Read the integer that starts the next non-blank line, if any."""
    for line in lines:
        tokens = line.split()
        if tokens:
            try:
                return int(tokens[0])
            except ValueError:
                return None
    return None


def _take(lines: Iterator[str], count: int) -> list[str]:
    """Take count lines, padding with empty lines if the input runs out."""
    wanted = max(count, 0)
    block = list(islice(lines, wanted))
    return block + [""] * (wanted - len(block))


def _run(solve_fn: Callable[[str], str], argv: Sequence[str] | None) -> int:
    """Solve the file named in argv, or standard input, and print the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve_fn(text))
    return 0


def solve(text: str) -> str:
    """Process every case of the input until a count of 0 or the end."""
    lines = iter(text.splitlines())
    output = []
    while (count := _read_count(lines)) not in (None, 0):
        output.append(format_index(index_words(_take(lines, count))))
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    return _run(solve, argv)


if __name__ == "__main__":
    raise SystemExit(main())