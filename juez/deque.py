"""Double-ended queue on a circular doubly linked list, and a list with cursors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Any = None) -> None:
        self.elem = elem
        self.prev: _Node = self
        self.next: _Node = self


class Deque:
    """Double-ended queue with a sentinel node and an element count."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._sentinel = _Node()
        self._size = 0
        for item in items:
            self.push_back(item)

    def _insert(self, elem: Any, before: _Node, after: _Node) -> _Node:
        node = _Node(elem)
        node.prev = before
        node.next = after
        before.next = node
        after.prev = node
        self._size += 1
        return node

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.elem

    def push_front(self, elem: Any) -> None:
        """Insert an element at the front."""
        self._insert(elem, self._sentinel, self._sentinel.next)

    def push_back(self, elem: Any) -> None:
        """Append an element at the back."""
        self._insert(elem, self._sentinel.prev, self._sentinel)

    def front(self) -> Any:
        """Return the first element."""
        if not self._size:
            raise IndexError("la dcola vacia no tiene primero")
        return self._sentinel.next.elem

    def back(self) -> Any:
        """Return the last element."""
        if not self._size:
            raise IndexError("la dcola vacia no tiene ultimo")
        return self._sentinel.prev.elem

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("eliminando el primero de una dcola vacia")
        return self._unlink(self._sentinel.next)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("eliminando el ultimo de una dcola vacia")
        return self._unlink(self._sentinel.prev)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.elem
            node = node.next

    def __copy__(self) -> Deque:
        return type(self)(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Cursor:
    """Position within a List; the end position sits on the sentinel."""

    __slots__ = ("_node", "_sentinel")

    def __init__(self, node: _Node, sentinel: _Node) -> None:
        self._node = node
        self._sentinel = sentinel

    def value(self) -> Any:
        """Return the element under the cursor."""
        if self._node is self._sentinel:
            raise IndexError("fuera de la lista")
        return self._node.elem

    def advance(self) -> Cursor:
        """Move to the next position and return this cursor."""
        if self._node is self._sentinel:
            raise IndexError("fuera de la lista")
        self._node = self._node.next
        return self

    def at_end(self) -> bool:
        """Whether the cursor is past the last element."""
        return self._node is self._sentinel

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is other._node and self._sentinel is other._sentinel

    __hash__ = None  # type: ignore[assignment]


class List(Deque):
    """Deque with positional access and cursor-based insertion and removal."""

    def at(self, index: int) -> Any:
        """Return the element at position index, counted from 0."""
        if index < 0 or index >= len(self):
            raise IndexError("posicion fuera de la lista")
        node = self._sentinel.next
        for _ in range(index):
            node = node.next
        return node.elem

    def begin(self) -> Cursor:
        """Cursor at the first element."""
        return Cursor(self._sentinel.next, self._sentinel)

    def end(self) -> Cursor:
        """Cursor past the last element."""
        return Cursor(self._sentinel, self._sentinel)

    def _check_owner(self, cursor: Cursor) -> None:
        if cursor._sentinel is not self._sentinel:
            raise ValueError("el iterador no pertenece a esta lista")

    def insert(self, cursor: Cursor, elem: Any) -> Cursor:
        """Insert elem before the cursor; return a cursor to the new element."""
        self._check_owner(cursor)
        node = self._insert(elem, cursor._node.prev, cursor._node)
        return Cursor(node, self._sentinel)

    def erase(self, cursor: Cursor) -> Cursor:
        """Remove the element under the cursor; return a cursor to the next one."""
        self._check_owner(cursor)
        if cursor._node is self._sentinel:
            raise IndexError("fuera de la lista")
        following = Cursor(cursor._node.next, self._sentinel)
        self._unlink(cursor._node)
        return following