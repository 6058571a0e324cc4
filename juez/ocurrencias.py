"""Answer queries for the position of the k-th occurrence of a value."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from juez.referencias import _run


def build_index(values: Iterable[int]) -> dict[int, list[int]]:
    """Map each value to the 1-based positions where it appears."""
    index: dict[int, list[int]] = {}
    for position, value in enumerate(values, start=1):
        index.setdefault(value, []).append(position)
    return index


def kth_occurrence(index: Mapping[int, Sequence[int]], k: int, value: int) -> int | None:
    """Position of the k-th occurrence of value, or None if there is none."""
    positions = index.get(value)
    if positions is None or not 1 <= k <= len(positions):
        return None
    return positions[k - 1]


def solve(text: str) -> str:
    """Process every case of the input until it runs out."""
    numbers = map(int, text.split())
    output = []
    while True:
        try:
            n, m = next(numbers), next(numbers)
            index = build_index([next(numbers) for _ in range(n)])
            queries = [(next(numbers), next(numbers)) for _ in range(m)]
        except (StopIteration, ValueError):
            break
        for k, value in queries:
            position = kth_occurrence(index, k, value)
            output.append("NO HAY\n" if position is None else f"{position}\n")
        output.append("---\n")
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    return _run(solve, argv)


if __name__ == "__main__":
    raise SystemExit(main())