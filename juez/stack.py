"""LIFO stack on a growable array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Stack:
    """Last-in first-out stack. Iteration runs from bottom to top."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def push(self, elem: Any) -> None:
        """Push an element onto the top."""
        self._items.append(elem)

    def top(self) -> Any:
        """Return the element on top."""
        if not self._items:
            raise IndexError("la pila vacia no tiene cima")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the element on top."""
        if not self._items:
            raise IndexError("desapilando de la pila vacia")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __copy__(self) -> Stack:
        return type(self)(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"