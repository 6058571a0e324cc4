"""FIFO queue on linked nodes with references to the first and last."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from juez.linked import LinkedList, _Container


class Queue(_Container):
    """First-in first-out queue."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = LinkedList()
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, elem: Any) -> None:
        """Add an element at the back."""
        self._items.push_back(elem)
        self._size += 1

    def front(self) -> Any:
        """Return the element at the front."""
        if not self._items:
            raise IndexError("la cola vacia no tiene primero")
        return next(iter(self._items))

    def pop(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise IndexError("eliminando de una cola vacia")
        self._size -= 1
        return self._items.pop_front()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __copy__(self) -> Queue:
        return type(self)(self)