"""A string-to-string dictionary stored in a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    key: str
    value: str
    left: _Node | None = None
    right: _Node | None = None


class StringDictionary:
    """Binary search tree keyed by string; re-inserting a key keeps the first value."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: str, value: str) -> None:
        new = _Node(key, value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                return

    def search(self, key: str) -> str:
        """Return the value for ``key``; raise ``KeyError`` if it is absent."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node.value
            node = node.left if key < node.key else node.right
        raise KeyError(key)