"""Restaurant orders: tables, pending dishes and serving in arrival order."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence
from itertools import count
from pathlib import Path


class RestaurantError(Exception):
    """Raised on an invalid operation on the restaurant."""


class Restaurant:
    """Pending orders per table, served oldest first."""

    def __init__(self) -> None:
        self._orders: dict[int, tuple[int, str]] = {}
        self._tables: dict[int, dict[str, deque[int]]] = {}
        self._ids = count()

    def _table(self, table: int) -> dict[str, deque[int]]:
        try:
            return self._tables[table]
        except KeyError:
            raise RestaurantError("Mesa vacia") from None

    def new_table(self, table: int) -> None:
        """Seat a new table."""
        if table in self._tables:
            raise RestaurantError("Mesa ocupada")
        self._tables[table] = {}

    def new_order(self, table: int, dish: str) -> None:
        """Add an order for a dish at a table."""
        dishes = self._table(table)
        order = next(self._ids)
        self._orders[order] = (table, dish)
        dishes.setdefault(dish, deque()).append(order)

    def cancel_order(self, table: int, dish: str) -> None:
        """Cancel the most recent pending order of a dish at a table."""
        dishes = self._table(table)
        pending = dishes.get(dish)
        if not pending:
            raise RestaurantError("Producto no pedido por la mesa")
        del self._orders[pending.pop()]
        if not pending:
            del dishes[dish]

    def serve(self) -> tuple[int, str]:
        """Serve the oldest pending order; return its (table, dish)."""
        if not self._orders:
            raise RestaurantError("No hay pedidos pendientes")
        order = next(iter(self._orders))
        table, dish = self._orders.pop(order)
        dishes = self._tables[table]
        dishes[dish].popleft()
        if not dishes[dish]:
            del dishes[dish]
        return table, dish

    def pending(self, table: int) -> list[str]:
        """Sorted dishes still pending at a table."""
        return sorted(self._table(table))


class _EndOfInput(Exception):
    pass


def _word(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return token


def _apply(restaurant: Restaurant, op: str, tokens: Iterator[str]) -> str:
    if op == "nueva_mesa":
        restaurant.new_table(int(_word(tokens)))
    elif op == "nuevo_pedido":
        table, dish = int(_word(tokens)), _word(tokens)
        restaurant.new_order(table, dish)
    elif op == "cancelar_pedido":
        table, dish = int(_word(tokens)), _word(tokens)
        restaurant.cancel_order(table, dish)
    elif op == "servir":
        table, dish = restaurant.serve()
        return f"{dish} {table}\n"
    elif op == "que_falta":
        table = int(_word(tokens))
        dishes = restaurant.pending(table)
        return f"En la mesa {table} falta:\n" + "".join(f"  {d}\n" for d in dishes)
    return ""


def solve(text: str) -> str:
    """Run the commands of every case, each ending with ``FIN``."""
    tokens = iter(text.split())
    output: list[str] = []
    try:
        while (op := next(tokens, None)) is not None:
            restaurant = Restaurant()
            while op != "FIN":
                try:
                    output.append(_apply(restaurant, op, tokens))
                except RestaurantError as error:
                    output.append(f"ERROR: {error}\n")
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