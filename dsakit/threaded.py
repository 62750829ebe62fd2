"""Threaded binary trees and stackless traversals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ThreadedNode:
    """Tree node whose right link may be a thread to its inorder successor."""

    data: int
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    is_threaded: bool = False


def make_threaded(root: ThreadedNode | None) -> ThreadedNode | None:
    """Turn empty right links into inorder-successor threads, in place."""
    prev: ThreadedNode | None = None

    def populate(node: ThreadedNode | None) -> None:
        nonlocal prev
        if node is None:
            return
        populate(node.left)
        if prev is not None and prev.right is None:
            prev.right = node
            prev.is_threaded = True
        prev = node
        if not node.is_threaded:
            populate(node.right)

    populate(root)
    return root


def _leftmost(node: ThreadedNode | None) -> ThreadedNode | None:
    while node is not None and node.left is not None:
        node = node.left
    return node


def threaded_inorder(root: ThreadedNode | None) -> list[int]:
    """Return the inorder sequence of a threaded tree without a stack."""
    result: list[int] = []
    node = _leftmost(root)
    while node is not None:
        result.append(node.data)
        node = node.right if node.is_threaded else _leftmost(node.right)
    return result


def morris_preorder(root: ThreadedNode | None) -> list[int]:
    """Return the preorder sequence using temporary threads; the tree is restored."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        pred = current.left
        while pred.right is not None and pred.right is not current:
            pred = pred.right
        if pred.right is None:
            pred.right = current
            result.append(current.data)
            current = current.left
        else:
            pred.right = None
            current = current.right
    return result