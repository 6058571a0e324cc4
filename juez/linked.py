"""Singly and doubly linked lists built from explicit nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Container:
    """Shared representation for containers that iterate over their elements."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __iter__(self) -> Iterator[Any]:  # pragma: no cover - overridden
        raise NotImplementedError


class _Node:
    __slots__ = ("elem", "next")

    def __init__(self, elem: Any, next: _Node | None = None) -> None:
        self.elem = elem
        self.next = next


class LinkedList(_Container):
    """Singly linked list with references to its first and last nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        for item in items:
            self.push_back(item)

    def push_back(self, elem: Any) -> None:
        """Append an element at the end."""
        node = _Node(elem)
        if self._last is not None:
            self._last.next = node
        self._last = node
        if self._first is None:
            self._first = node

    def push_front(self, elem: Any) -> None:
        """Insert an element at the beginning."""
        self._first = _Node(elem, self._first)
        if self._last is None:
            self._last = self._first

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._first is None:
            raise IndexError("eliminando de una lista enlazada vacia")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        return node.elem

    def __bool__(self) -> bool:
        return self._first is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.elem
            node = node.next

    def __copy__(self) -> LinkedList:
        return type(self)(self)


class _DNode:
    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Any = None) -> None:
        self.elem = elem
        self.prev: _DNode = self
        self.next: _DNode = self


class DoublyLinkedList(_Container):
    """Circular doubly linked list with a sentinel node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._sentinel = _DNode()
        for item in items:
            self.push_back(item)

    def _insert(self, elem: Any, before: _DNode, after: _DNode) -> _DNode:
        node = _DNode(elem)
        node.prev, node.next = before, after
        before.next = node
        after.prev = node
        return node

    @staticmethod
    def _unlink(node: _DNode) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        return node.elem

    def _edge(self, first: bool, message: str) -> _DNode:
        if not self:
            raise IndexError(message)
        return self._sentinel.next if first else self._sentinel.prev

    def push_front(self, elem: Any) -> None:
        """Insert an element at the beginning."""
        self._insert(elem, self._sentinel, self._sentinel.next)

    def push_back(self, elem: Any) -> None:
        """Append an element at the end."""
        self._insert(elem, self._sentinel.prev, self._sentinel)

    def front(self) -> Any:
        """Return the first element."""
        return self._edge(True, "la lista vacia no tiene primero").elem

    def back(self) -> Any:
        """Return the last element."""
        return self._edge(False, "la lista vacia no tiene ultimo").elem

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        return self._unlink(self._edge(True, "eliminando el primero de una lista vacia"))

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        return self._unlink(self._edge(False, "eliminando el ultimo de una lista vacia"))

    def __bool__(self) -> bool:
        return self._sentinel.next is not self._sentinel

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.elem
            node = node.next

    def __copy__(self) -> DoublyLinkedList:
        return type(self)(self)