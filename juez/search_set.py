"""Ordered set on an unbalanced binary search tree."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from juez.bintree import _inorder, _Node, _preorder
from juez.linked import _Container


class SearchSet(_Container):
    """Set kept in a binary search tree ordered by a strict ``less`` relation."""

    def __init__(
        self,
        items: Iterable[Any] = (),
        less: Callable[[Any, Any], bool] = operator.lt,
    ) -> None:
        self._root: _Node | None = None
        self._size = 0
        self._less = less
        for item in items:
            self.add(item)

    def _locate(self, elem: Any) -> tuple[_Node | None, bool, _Node | None]:
        """Return the parent, the side taken and the node holding elem (or None)."""
        parent: _Node | None = None
        went_left = False
        node = self._root
        while node is not None:
            if self._less(elem, node.elem):
                parent, node, went_left = node, node.left, True
            elif self._less(node.elem, elem):
                parent, node, went_left = node, node.right, False
            else:
                break
        return parent, went_left, node

    def _attach(self, parent: _Node | None, went_left: bool, node: _Node | None) -> None:
        if parent is None:
            self._root = node
        elif went_left:
            parent.left = node
        else:
            parent.right = node

    def add(self, elem: Any) -> bool:
        """Insert elem; return whether it was not already present."""
        parent, went_left, node = self._locate(elem)
        if node is not None:
            return False
        self._attach(parent, went_left, _Node(None, elem, None))
        self._size += 1
        return True

    def discard(self, elem: Any) -> bool:
        """Remove elem; return whether it was present."""
        parent, went_left, node = self._locate(elem)
        if node is None:
            return False
        if node.left is None or node.right is None:
            replacement = node.right if node.left is None else node.left
        else:
            replacement = node.right
            successor_parent: _Node | None = None
            while replacement.left is not None:
                successor_parent = replacement
                replacement = replacement.left
            if successor_parent is not None:
                successor_parent.left = replacement.right
                replacement.right = node.right
            replacement.left = node.left
        self._attach(parent, went_left, replacement)
        self._size -= 1
        return True

    def __contains__(self, elem: Any) -> bool:
        return self._locate(elem)[2] is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __copy__(self) -> SearchSet:
        # Inserting in pre-order rebuilds the same tree shape.
        return type(self)(_preorder(self._root), self._less)