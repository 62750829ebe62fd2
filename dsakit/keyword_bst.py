"""A keyword dictionary mapping integer keys to one-character meanings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    key: int
    meaning: str
    left: _Node | None = None
    right: _Node | None = None


class KeywordDictionary:
    """Unbalanced binary search tree; equal keys are placed to the right."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _find(self, key: int) -> _Node | None:
        node = self._root
        while node is not None and node.key != key:
            node = node.left if node.key > key else node.right
        return node

    def insert(self, key: int, meaning: str) -> None:
        new = _Node(key, meaning)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if node.key > key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def update(self, key: int, meaning: str) -> None:
        """Replace the meaning of ``key``; raise ``KeyError`` if it is absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        node.meaning = meaning

    def delete(self, key: int) -> None:
        """Remove ``key`` if present; an absent key leaves the tree unchanged."""
        self._root = self._delete(self._root, key)

    def _delete(self, node: _Node | None, key: int) -> _Node | None:
        if node is None:
            return None
        if node.key > key:
            node.left = self._delete(node.left, key)
        elif node.key < key:
            node.right = self._delete(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.meaning = successor.key, successor.meaning
            node.right = self._delete(node.right, successor.key)
        return node

    def ascending(self) -> list[tuple[int, str]]:
        """Return ``(key, meaning)`` pairs in ascending key order."""
        result: list[tuple[int, str]] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append((node.key, node.meaning))
            node = node.right
        return result

    def preorder(self) -> list[tuple[int, str]]:
        """Return ``(key, meaning)`` pairs in preorder."""
        result: list[tuple[int, str]] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append((node.key, node.meaning))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result