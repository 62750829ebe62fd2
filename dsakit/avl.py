"""A keyword dictionary kept in a height-balanced (AVL) search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    key: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _refresh(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLDictionary:
    """Maps string keywords to meanings in a self-balancing search tree.

    By default inserting an existing keyword replaces its meaning; with
    ``update_duplicates=False`` the existing entry is kept unchanged.
    """

    def __init__(self, update_duplicates: bool = True) -> None:
        self._root: _Node | None = None
        self._size = 0
        self._update_duplicates = update_duplicates

    def insert(self, key: str, meaning: str) -> bool:
        """Insert ``key``; return ``True`` if it was not present before."""
        added = False

        def walk(node: _Node | None) -> _Node:
            nonlocal added
            if node is None:
                added = True
                return _Node(key, meaning)
            if key < node.key:
                node.left = walk(node.left)
            elif key > node.key:
                node.right = walk(node.right)
            else:
                if self._update_duplicates:
                    node.meaning = meaning
                return node
            return _rebalance(node)

        self._root = walk(self._root)
        if added:
            self._size += 1
        return added

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        removed = False

        def walk(node: _Node | None, target: str) -> _Node | None:
            nonlocal removed
            if node is None:
                return None
            if target < node.key:
                node.left = walk(node.left, target)
            elif target > node.key:
                node.right = walk(node.right, target)
            else:
                removed = True
                if node.left is None or node.right is None:
                    return node.left if node.left is not None else node.right
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.key, node.meaning = successor.key, successor.meaning
                node.right = walk(node.right, successor.key)
            return _rebalance(node)

        self._root = walk(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def _find(self, key: str) -> tuple[_Node | None, int]:
        comparisons = 0
        node = self._root
        while node is not None:
            comparisons += 1
            if key == node.key:
                return node, comparisons
            node = node.left if key < node.key else node.right
        return None, comparisons

    def update(self, key: str, meaning: str) -> None:
        """Replace the meaning of ``key``; raise ``KeyError`` if it is absent."""
        node, _ = self._find(key)
        if node is None:
            raise KeyError(key)
        node.meaning = meaning

    def search(self, key: str) -> tuple[str | None, int]:
        """Return ``(meaning, comparisons)``; the meaning is ``None`` if absent."""
        node, comparisons = self._find(key)
        return (node.meaning if node is not None else None), comparisons

    def _walk(self, node: _Node | None, reverse: bool) -> Iterator[tuple[str, str]]:
        if node is None:
            return
        first, second = (node.right, node.left) if reverse else (node.left, node.right)
        yield from self._walk(first, reverse)
        yield node.key, node.meaning
        yield from self._walk(second, reverse)

    def ascending(self) -> list[tuple[str, str]]:
        """Return ``(key, meaning)`` pairs in ascending key order."""
        return list(self._walk(self._root, reverse=False))

    def descending(self) -> list[tuple[str, str]]:
        """Return ``(key, meaning)`` pairs in descending key order."""
        return list(self._walk(self._root, reverse=True))

    def max_comparisons(self) -> int:
        """Return the worst-case number of comparisons for a lookup (tree height)."""
        return _height(self._root)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key)[0] is not None

    def __len__(self) -> int:
        return self._size