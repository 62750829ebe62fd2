"""Arithmetic expression trees built from prefix or postfix notation."""

from __future__ import annotations

from dataclasses import dataclass

_PREFIX_OPERATORS = frozenset("+-*/^")


@dataclass(eq=False)
class ExprNode:
    """A node of an expression tree."""

    value: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def is_operator(ch: str) -> bool:
    """Return whether ``ch`` is one of ``+ - * /``."""
    return ch in ("+", "-", "*", "/")


def precedence(op: str) -> int:
    """Return 1 for ``+``/``-``, 2 for ``*``/``/`` and 0 otherwise."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def from_prefix(expression: str) -> ExprNode:
    """Build a tree from a prefix expression such as ``+--a*bc/def``.

    ``^`` is accepted as an operator as well; every other character is an operand.
    """
    stack: list[ExprNode] = []
    for ch in reversed(expression):
        if ch in _PREFIX_OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            left = stack.pop()
            right = stack.pop()
            stack.append(ExprNode(ch, left, right))
        else:
            stack.append(ExprNode(ch))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix (left-associative, no parentheses)."""
    ops: list[str] = []
    out: list[str] = []
    for ch in infix:
        if ch.isspace():
            continue
        if ch.isalnum():
            out.append(ch)
        elif is_operator(ch):
            while ops and precedence(ops[-1]) >= precedence(ch):
                out.append(ops.pop())
            ops.append(ch)
    out.extend(reversed(ops))
    return "".join(out)


def from_postfix(postfix: str) -> ExprNode:
    """Build a tree from a postfix expression of single-character operands."""
    stack: list[ExprNode] = []
    for ch in postfix:
        if ch.isalnum():
            stack.append(ExprNode(ch))
        elif is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(ExprNode(ch, left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def inorder(root: ExprNode | None) -> list[str]:
    """Return the node values in inorder."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def parenthesized(root: ExprNode | None) -> str:
    """Return the infix form with every operator node wrapped in parentheses."""
    if root is None:
        return ""
    body = parenthesized(root.left) + root.value + parenthesized(root.right)
    return f"({body})" if is_operator(root.value) else body


def postorder(root: ExprNode | None) -> list[str]:
    """Return the node values in postorder, computed without recursion."""
    if root is None:
        return []
    pending = [root]
    reversed_order: list[ExprNode] = []
    while pending:
        node = pending.pop()
        reversed_order.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(reversed_order)]