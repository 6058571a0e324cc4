"""Towers on a grid: placement, lookup and nearest neighbour along an axis."""

from __future__ import annotations

import sys
from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterator, Sequence
from enum import Enum
from pathlib import Path


class DesertError(Exception):
    """Raised on an invalid operation on the desert."""


class Direction(Enum):
    """Compass direction in which to look for a tower."""

    NORTH = "Norte"
    SOUTH = "Sur"
    EAST = "Este"
    WEST = "Oeste"


def parse_direction(text: str) -> Direction:
    """Map a direction name to a Direction; any unknown name means west."""
    try:
        return Direction(text)
    except ValueError:
        return Direction.WEST


class _Line:
    """Towers along one row or column, ordered by coordinate."""

    __slots__ = ("_coords", "_names")

    def __init__(self) -> None:
        self._coords: list[int] = []
        self._names: dict[int, str] = {}

    def __contains__(self, coord: int) -> bool:
        return coord in self._names

    def __getitem__(self, coord: int) -> str:
        return self._names[coord]

    def add(self, coord: int, name: str) -> None:
        insort(self._coords, coord)
        self._names[coord] = name

    def remove(self, coord: int) -> str:
        """Drop the tower at ``coord`` and return its name."""
        index = bisect_left(self._coords, coord)
        self._coords.pop(index)
        return self._names.pop(coord)

    def after(self, coord: int) -> str | None:
        index = bisect_right(self._coords, coord)
        return self._names[self._coords[index]] if index < len(self._coords) else None

    def before(self, coord: int) -> str | None:
        index = bisect_left(self._coords, coord)
        return self._names[self._coords[index - 1]] if index > 0 else None


class Desert:
    """Named towers at distinct integer positions."""

    def __init__(self) -> None:
        self._towers: dict[str, tuple[int, int]] = {}
        self._columns: dict[int, _Line] = {}
        self._rows: dict[int, _Line] = {}

    def _position(self, name: str) -> tuple[int, int]:
        try:
            return self._towers[name]
        except KeyError:
            raise DesertError("Torre no existente") from None

    def add_tower(self, name: str, x: int, y: int) -> None:
        """Place a new tower at (x, y)."""
        if name in self._towers:
            raise DesertError("Torre ya existente")
        if self.tower_at(x, y) is not None:
            raise DesertError("Posicion ocupada")
        self._towers[name] = (x, y)
        self._columns.setdefault(x, _Line()).add(y, name)
        self._rows.setdefault(y, _Line()).add(x, name)

    def remove_tower(self, name: str) -> None:
        """Remove a tower."""
        x, y = self._position(name)
        del self._towers[name]
        self._columns[x].remove(y)
        self._rows[y].remove(x)

    def position(self, name: str) -> tuple[int, int]:
        """The (x, y) position of a tower."""
        return self._position(name)

    def tower_at(self, x: int, y: int) -> str | None:
        """Name of the tower at (x, y), or None if the position is free."""
        column = self._columns.get(x)
        if column is not None and y in column:
            return column[y]
        return None

    def nearest_tower(self, name: str, direction: Direction) -> str:
        """The closest tower from the named one in the given direction."""
        x, y = self._position(name)
        if direction is Direction.NORTH:
            found = self._columns[x].after(y)
        elif direction is Direction.SOUTH:
            found = self._columns[x].before(y)
        elif direction is Direction.EAST:
            found = self._rows[y].after(x)
        else:
            found = self._rows[y].before(x)
        if not found:
            raise DesertError("No hay torres en esa direccion")
        return found


class _EndOfInput(Exception):
    pass


def _word(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return token


def _apply(desert: Desert, op: str, tokens: Iterator[str]) -> str:
    if op == "anyadir_torre":
        name, x, y = _word(tokens), int(_word(tokens)), int(_word(tokens))
        desert.add_tower(name, x, y)
        return ""
    if op == "eliminar_torre":
        desert.remove_tower(_word(tokens))
        return ""
    if op == "posicion":
        x, y = desert.position(_word(tokens))
        return f"{x} {y}\n"
    if op == "torre_en_posicion":
        x, y = int(_word(tokens)), int(_word(tokens))
        found = desert.tower_at(x, y)
        return "NO\n" if found is None else f"SI {found}\n"
    name, direction = _word(tokens), _word(tokens)
    return desert.nearest_tower(name, parse_direction(direction)) + "\n"


def solve(text: str) -> str:
    """Run the commands of every case, each ending with ``FIN``."""
    tokens = iter(text.split())
    output: list[str] = []
    try:
        while (op := next(tokens, None)) is not None:
            desert = Desert()
            while op != "FIN":
                try:
                    output.append(_apply(desert, op, tokens))
                except DesertError as error:
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