"""Immutable binary trees with shared nodes, traversals and in-order iteration."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("left", "elem", "right")

    def __init__(self, left: _Node | None, elem: Any, right: _Node | None) -> None:
        self.left = left
        self.elem = elem
        self.right = right


def _preorder(root: _Node | None) -> Iterator[Any]:
    """Yield the elements below root in pre-order."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.elem
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _inorder(root: _Node | None) -> Iterator[Any]:
    """Yield the elements below root in in-order, with a stack of pending ancestors."""
    ancestors: list[_Node] = []
    node = root
    while node is not None or ancestors:
        while node is not None:
            ancestors.append(node)
            node = node.left
        node = ancestors.pop()
        yield node.elem
        node = node.right


class BinTree:
    """Binary tree whose subtrees may be shared between several trees.

    ``BinTree()`` is the empty tree, ``BinTree(e)`` a leaf and
    ``BinTree(left, e, right)`` a tree with two children.
    """

    __slots__ = ("_root",)

    def __init__(self, *args: Any) -> None:
        if not args:
            self._root: _Node | None = None
        elif len(args) == 1:
            self._root = _Node(None, args[0], None)
        elif len(args) == 3:
            left, elem, right = args
            if not isinstance(left, BinTree) or not isinstance(right, BinTree):
                raise TypeError("los hijos deben ser arboles binarios")
            self._root = _Node(left._root, elem, right._root)
        else:
            raise TypeError("BinTree takes 0, 1 or 3 arguments")

    @classmethod
    def _wrap(cls, node: _Node | None) -> BinTree:
        tree = cls.__new__(cls)
        tree._root = node
        return tree

    def _node(self, message: str) -> _Node:
        if self._root is None:
            raise ValueError(message)
        return self._root

    def __bool__(self) -> bool:
        return self._root is not None

    def root(self) -> Any:
        """Return the element at the root."""
        return self._node("El arbol vacio no tiene raiz.").elem

    def left(self) -> BinTree:
        """Return the left subtree."""
        return self._wrap(self._node("El arbol vacio no tiene hijo izquierdo.").left)

    def right(self) -> BinTree:
        """Return the right subtree."""
        return self._wrap(self._node("El arbol vacio no tiene hijo derecho.").right)

    def preorder(self) -> list[Any]:
        """Elements in pre-order: root, left, right."""
        return list(_preorder(self._root))

    def inorder(self) -> list[Any]:
        """Elements in in-order: left, root, right."""
        return list(self)

    def postorder(self) -> list[Any]:
        """Elements in post-order: left, right, root."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.elem)
            stack.extend(child for child in (node.left, node.right) if child is not None)
        result.reverse()
        return result

    def levelorder(self) -> list[Any]:
        """Elements level by level, left to right."""
        result = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.elem)
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(preorder={self.preorder()!r})"


def read_tree(tokens: Iterable[Any], empty: Any) -> BinTree:
    """Build a tree from tokens in pre-order, where ``empty`` marks an empty tree."""
    stream = iter(tokens)

    def read() -> BinTree:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("entrada incompleta al leer el arbol") from None
        if token == empty:
            return BinTree()
        left = read()
        right = read()
        return BinTree(left, token, right)

    return read()