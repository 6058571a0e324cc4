"""Dictionary as an open hash table with chained buckets and cursors."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Hashable, Iterator
from typing import Any

_INITIAL_CAPACITY = 17
_MAX_LOAD_PERCENT = 75
_MISSING = object()


def next_prime(n: int) -> int:
    """Return the smallest number greater than n with no divisor in 2..sqrt."""
    candidate = n
    while True:
        candidate += 1
        limit = math.isqrt(candidate) if candidate > 0 else 0
        if all(candidate % d != 0 for d in range(2, limit + 1)):
            return candidate


class _Node:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: Any, value: Any, next: _Node | None = None) -> None:
        self.key = key
        self.value = value
        self.next = next


class HashMapCursor:
    """Position within a HashMap; the end position holds no entry."""

    __slots__ = ("_table", "_index", "_node")

    def __init__(self, table: HashMap, index: int, node: _Node | None) -> None:
        self._table = table
        self._index = index
        self._node = node

    def _entry(self) -> _Node:
        if self._node is None:
            raise IndexError("No hay elemento a consultar")
        return self._node

    def key(self) -> Any:
        """Key of the entry under the cursor."""
        return self._entry().key

    def value(self) -> Any:
        """Value of the entry under the cursor."""
        return self._entry().value

    def set_value(self, value: Any) -> None:
        """Replace the value of the entry under the cursor."""
        self._entry().value = value

    def at_end(self) -> bool:
        """Whether the cursor is past the last entry."""
        return self._node is None

    def advance(self) -> HashMapCursor:
        """Move to the next entry and return this cursor."""
        if self._node is None:
            raise IndexError("El iterador no puede avanzar")
        buckets = self._table._buckets
        self._node = self._node.next
        while self._node is None:
            self._index += 1
            if self._index >= len(buckets):
                break
            self._node = buckets[self._index]
        return self

    def _clone(self) -> HashMapCursor:
        return HashMapCursor(self._table, self._index, self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMapCursor):
            return NotImplemented
        return self._node is other._node

    __hash__ = None  # type: ignore[assignment]


class HashMap:
    """Key-value map on a chained hash table that grows past 75 % load."""

    def __init__(
        self,
        capacity: int = _INITIAL_CAPACITY,
        hash_fn: Callable[[Any], int] = hash,
        equal: Callable[[Any, Any], bool] = operator.eq,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("la tabla necesita al menos una posicion")
        self._buckets: list[_Node | None] = [None] * capacity
        self._size = 0
        self._hash = hash_fn
        self._equal = equal
        self._default_factory = default_factory

    def _index_of(self, key: Any) -> int:
        return self._hash(key) % len(self._buckets)

    def _locate(self, key: Any) -> tuple[int, _Node | None, _Node | None]:
        index = self._index_of(key)
        prev: _Node | None = None
        node = self._buckets[index]
        while node is not None:
            if self._equal(key, node.key):
                break
            prev, node = node, node.next
        return index, prev, node

    def _too_full(self) -> bool:
        return 100.0 * self._size / len(self._buckets) > _MAX_LOAD_PERCENT

    def _grow(self) -> None:
        fresh: list[_Node | None] = [None] * next_prime(len(self._buckets) * 2)
        for head in self._buckets:
            node = head
            while node is not None:
                moving, node = node, node.next
                index = self._hash(moving.key) % len(fresh)
                moving.next = fresh[index]
                fresh[index] = moving
        self._buckets = fresh

    def _new_value(self) -> Any:
        return self._default_factory() if self._default_factory is not None else None

    def _add(self, key: Any, value: Any) -> _Node:
        if self._too_full():
            self._grow()
        index = self._index_of(key)
        node = _Node(key, value, self._buckets[index])
        self._buckets[index] = node
        self._size += 1
        return node

    def _node_for(self, key: Any) -> _Node:
        _, _, node = self._locate(key)
        if node is None:
            node = self._add(key, self._new_value())
        return node

    def insert(self, key: Any, value: Any = _MISSING) -> bool:
        """Add key with value unless the key is present; return whether added."""
        _, _, node = self._locate(key)
        if node is not None:
            return False
        self._add(key, self._new_value() if value is _MISSING else value)
        return True

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._locate(key)[2] is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._locate(key)[2]
        if node is None:
            raise KeyError("La clave no se puede consultar")
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self._node_for(key).value = value

    def get_or_create(self, key: Any) -> Any:
        """Return the value of key, adding a default value first if absent."""
        return self._node_for(key).value

    def erase(self, key: Any) -> bool:
        """Remove key; return whether it was present."""
        index, prev, node = self._locate(key)
        if node is None:
            return False
        if prev is None:
            self._buckets[index] = node.next
        else:
            prev.next = node.next
        self._size -= 1
        return True

    def begin(self) -> HashMapCursor:
        """Cursor at the first entry in table order."""
        for index, head in enumerate(self._buckets):
            if head is not None:
                return HashMapCursor(self, index, head)
        return self.end()

    def end(self) -> HashMapCursor:
        """Cursor past the last entry."""
        return HashMapCursor(self, len(self._buckets), None)

    def find(self, key: Any) -> HashMapCursor:
        """Cursor at key's entry, or the end cursor if absent."""
        index, _, node = self._locate(key)
        if node is None:
            return self.end()
        return HashMapCursor(self, index, node)

    def erase_at(self, cursor: HashMapCursor) -> HashMapCursor:
        """Remove the entry under the cursor; return a cursor to the next one."""
        if cursor._table is not self:
            raise ValueError("el iterador no pertenece a esta tabla")
        if cursor._node is None:
            raise IndexError("El iterador no apunta a nada")
        target = cursor._node
        index = cursor._index
        following = cursor._clone().advance()
        head = self._buckets[index]
        if head is target:
            self._buckets[index] = target.next
        else:
            prev = head
            while prev is not None and prev.next is not target:
                prev = prev.next
            if prev is None:
                raise ValueError("el iterador no es valido")
            prev.next = target.next
        self._size -= 1
        return following

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in table order."""
        for head in self._buckets:
            node = head
            while node is not None:
                yield node.key, node.value
                node = node.next

    def __iter__(self) -> Iterator[Hashable]:
        return (key for key, _ in self.items())

    def __copy__(self) -> HashMap:
        clone = type(self)(len(self._buckets), self._hash, self._equal, self._default_factory)
        for index, head in enumerate(self._buckets):
            node = head
            while node is not None:
                clone._buckets[index] = _Node(node.key, node.value, clone._buckets[index])
                node = node.next
        clone._size = self._size
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"