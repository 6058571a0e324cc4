"""Presidential election count by states and electors."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path


class ElectionError(Exception):
    """Raised on an invalid operation on the vote count."""


class VoteCount:
    """Votes per party and state; each state's electors go to its leader."""

    def __init__(self) -> None:
        self._electors: dict[str, int] = {}
        self._votes: dict[str, dict[str, int]] = {}
        self._won: dict[str, int] = {}
        self._leaders: dict[str, tuple[str, int]] = {}
        self._winners: set[str] = set()

    def _check_state(self, state: str) -> None:
        if state not in self._electors:
            raise ElectionError("Estado no encontrado")

    def new_state(self, name: str, electors: int) -> None:
        """Register a state with its number of electors."""
        if name in self._electors:
            raise ElectionError("Estado ya existente")
        self._electors[name] = electors
        self._leaders[name] = ("", -1)

    def add_votes(self, state: str, party: str, votes: int) -> None:
        """Add votes for a party in a state, updating the state's leader."""
        self._check_state(state)
        by_state = self._votes.setdefault(party, {})
        total = by_state.get(state, 0) + votes
        by_state[state] = total
        self._won.setdefault(party, 0)
        leader, leader_votes = self._leaders[state]
        if total <= leader_votes:
            return
        if leader != party:
            gained = self._electors[state]
            self._won[party] += gained
            self._winners.add(party)
            if leader_votes > 0:
                self._won[leader] -= gained
                if self._won[leader] == 0:
                    self._winners.discard(leader)
        self._leaders[state] = (party, total)

    def winner_in(self, state: str) -> str:
        """The leading party in a state, or the empty string if none."""
        self._check_state(state)
        return self._leaders[state][0]

    def results(self) -> list[tuple[str, int]]:
        """Parties holding electors with their counts, ordered by name."""
        return [(party, self._won[party]) for party in sorted(self._winners)]


class _EndOfInput(Exception):
    pass


def _word(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return token


def _apply(count: VoteCount, op: str, tokens: Iterator[str]) -> str:
    if op == "nuevo_estado":
        name, electors = _word(tokens), int(_word(tokens))
        count.new_state(name, electors)
    elif op == "sumar_votos":
        state, party, votes = _word(tokens), _word(tokens), int(_word(tokens))
        count.add_votes(state, party, votes)
    elif op == "ganador_en":
        state = _word(tokens)
        return f"Ganador en {state}: {count.winner_in(state)}\n"
    elif op == "resultados":
        return "".join(f"{party} {n}\n" for party, n in count.results())
    return ""


def solve(text: str) -> str:
    """Run the commands of every case, each ending with ``FIN``."""
    tokens = iter(text.split())
    output: list[str] = []
    try:
        while (op := next(tokens, None)) is not None:
            count = VoteCount()
            while op != "FIN":
                try:
                    output.append(_apply(count, op, tokens))
                except ElectionError as error:
                    output.append(f"{error}\n")
                op = _word(tokens)
            output.append("---\n")
    except _EndOfInput:
        pass
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())