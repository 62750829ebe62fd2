"""Binary search tree of integers built from plain linked nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert(root: TreeNode | None, key: int, allow_duplicates: bool = False) -> TreeNode:
    """Insert ``key`` and return the (possibly new) root.

    With ``allow_duplicates`` an equal key goes to the right subtree;
    otherwise an equal key is ignored.
    """
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if key < node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        elif key > node.data or allow_duplicates:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            return root


def search(root: TreeNode | None, key: int) -> TreeNode | None:
    """Return the node holding ``key``, or ``None``."""
    node = root
    while node is not None and node.data != key:
        node = node.right if key > node.data else node.left
    return node


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def minimum(root: TreeNode | None) -> int:
    """Return the smallest value stored anywhere in the tree."""
    values = preorder(root)
    if not values:
        raise ValueError("tree is empty")
    return min(values)


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Return a new tree with left and right swapped at every node."""
    if root is None:
        return None
    return TreeNode(root.data, left=mirror(root.right), right=mirror(root.left))


def bfs(root: TreeNode | None) -> list[int]:
    """Return the values in level order."""
    if root is None:
        return []
    result: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def dfs(root: TreeNode | None) -> list[int]:
    """Return the values in depth-first (preorder) order using an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in inorder (sorted for a search tree)."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in preorder."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]