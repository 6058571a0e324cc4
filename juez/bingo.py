"""Find the first players to complete their bingo cards."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path


def bingo_winners(
    cards: Iterable[tuple[str, Iterable[int]]], draws: Iterable[int]
) -> list[str]:
    """Return, sorted, the players who complete their card on the same first draw.

    Draws are consumed only until a winner appears.
    """
    remaining: dict[str, int] = {}
    holders: dict[int, list[str]] = {}
    for name, numbers in cards:
        for number in numbers:
            remaining[name] = remaining.get(name, 0) + 1
            holders.setdefault(number, []).append(name)
    for drawn in draws:
        winners = []
        for name in holders.get(drawn, ()):
            remaining[name] -= 1
            if remaining[name] == 0:
                winners.append(name)
        if winners:
            return sorted(winners)
    raise ValueError("no hay ganador")


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("entrada incompleta")
    return int(token)


def _read_card(tokens: Iterator[str]) -> tuple[str, list[int]]:
    name = next(tokens, None)
    if name is None:
        raise ValueError("entrada incompleta")
    numbers = []
    while (number := _next_int(tokens)) != 0:
        numbers.append(number)
    return name, numbers


def _draws(tokens: Iterator[str]) -> Iterator[int]:
    for token in tokens:
        yield int(token)


def solve(text: str) -> str:
    """Process every game until a player count of 0 or the end."""
    tokens = iter(text.split())
    output = []
    while (players := next(tokens, None)) is not None and int(players) != 0:
        cards = [_read_card(tokens) for _ in range(int(players))]
        output.append(" ".join(bingo_winners(cards, _draws(tokens))) + "\n")
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())