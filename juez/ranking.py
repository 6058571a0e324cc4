"""Contest ranking from a log of submissions."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

_PENALTY = 20
_ACCEPTED = "AC"
_END = "FIN"


@dataclass(frozen=True)
class TeamResult:
    """A team's number of solved problems and total time."""

    team: str
    solved: int
    time: int


def rank_teams(submissions: Iterable[tuple[str, str, int, str]]) -> list[TeamResult]:
    """Rank teams from (team, problem, time, verdict) submissions.

    An accepted problem adds its time plus the penalties of the earlier
    rejections; submissions after acceptance are ignored. Teams are ordered
    by problems solved, then time, then name.
    """
    totals: dict[str, list[int]] = {}
    problems: dict[tuple[str, str], tuple[int, bool]] = {}
    for team, problem, time, verdict in submissions:
        total = totals.setdefault(team, [0, 0])
        elapsed, accepted = problems.get((team, problem), (0, False))
        if accepted:
            continue
        if verdict == _ACCEPTED:
            total[0] += 1
            total[1] += elapsed + time
            problems[team, problem] = (elapsed + time, True)
        else:
            problems[team, problem] = (elapsed + _PENALTY, False)
    results = (TeamResult(team, solved, time) for team, (solved, time) in totals.items())
    return sorted(results, key=lambda r: (-r.solved, r.time, r.team))


def _submissions(tokens: Iterator[str]) -> Iterator[tuple[str, str, int, str]]:
    for team in tokens:
        if team == _END:
            return
        problem = next(tokens, "")
        time = int(next(tokens, "0"))
        verdict = next(tokens, "")
        yield team, problem, time, verdict


def solve(text: str) -> str:
    """Read the number of cases, then submissions up to ``FIN`` for each."""
    tokens = iter(text.split())
    cases = int(next(tokens, "0"))
    output = []
    for _ in range(cases):
        for result in rank_teams(_submissions(tokens)):
            output.append(f"{result.team} {result.solved} {result.time}\n")
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