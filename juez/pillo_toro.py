"""Net score of each student from a list of corrections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from juez.referencias import _read_count, _run, _take


def tally_corrections(pairs: Iterable[tuple[str, str]]) -> dict[str, int]:
    """Sum +1 for ``CORRECTO`` and -1 otherwise; drop students left at 0.

    The result is ordered by student name.
    """
    table: dict[str, int] = {}
    for student, verdict in pairs:
        score = table.get(student, 0) + (1 if verdict == "CORRECTO" else -1)
        if score:
            table[student] = score
        else:
            table.pop(student, None)
    return dict(sorted(table.items()))


def solve(text: str) -> str:
    """Process every case of the input until a count of 0 or the end."""
    lines = iter(text.splitlines())
    output = []
    while (count := _read_count(lines)) not in (None, 0):
        block = _take(lines, 2 * count)
        table = tally_corrections(zip(block[::2], block[1::2]))
        output.extend(f"{student}, {score}\n" for student, score in table.items())
        output.append("---\n")
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    return _run(solve, argv)


if __name__ == "__main__":
    raise SystemExit(main())