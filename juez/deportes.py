"""Count the students signed up to each sport."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import chain
from pathlib import Path

_END = "_FIN_"


def _is_sport(token: str) -> bool:
    return "A" <= token[0] <= "Z"


def rank_sports(tokens: Iterable[str]) -> list[tuple[str, int]]:
    """Process tokens up to ``_FIN_`` and rank sports by number of students.

    A capitalised token names a sport; any other token is a student who
    signs up to the current sport. A student who turns up under a second
    sport is dropped from the first. Ties are broken by sport name.
    """
    members: dict[str, set[str]] = {}
    enrolled: dict[str, str] = {}
    sport: str | None = None
    for token in tokens:
        if token == _END:
            break
        if _is_sport(token):
            sport = token
            members.setdefault(sport, set())
            continue
        previous = enrolled.get(token)
        if previous is not None and previous != sport:
            members[previous].discard(token)
        else:
            if sport is None:
                raise ValueError(f"alumno {token!r} sin deporte")
            members[sport].add(token)
            enrolled.setdefault(token, sport)
    counts = ((name, len(students)) for name, students in members.items())
    return sorted(counts, key=lambda item: (-item[1], item[0]))


def solve(text: str) -> str:
    """Process every case of the input until it runs out."""
    tokens = iter(text.split())
    output = []
    while (first := next(tokens, None)) is not None:
        ranking = rank_sports(chain([first], tokens))
        output.extend(f"{sport} {count}\n" for sport, count in ranking)
        output.append("---\n")
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())