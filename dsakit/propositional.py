"""Binary trees for simple propositional formulas such as ``p|q&r``."""

from __future__ import annotations

from dataclasses import dataclass

_CONNECTIVES = frozenset("|&^!")


@dataclass(eq=False)
class FormulaNode:
    """A variable (leaf) or a connective joining two subformulas."""

    value: str
    left: FormulaNode | None = None
    right: FormulaNode | None = None


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def parse_formula(formula: str) -> FormulaNode | None:
    """Parse ``formula`` left to right into a left-leaning tree.

    A connective joins the tree built so far with the single variable that
    follows it. A connective with nothing before it or no variable after it is
    ignored, as are all other characters. Returns ``None`` if no variable is found.
    """
    stack: list[FormulaNode] = []
    chars = iter(enumerate(formula))
    for i, ch in chars:
        if _is_letter(ch):
            stack.append(FormulaNode(ch))
        elif ch in _CONNECTIVES and stack:
            left = stack.pop()
            following = formula[i + 1 : i + 2]
            if following and _is_letter(following):
                next(chars)
                stack.append(FormulaNode(ch, left, FormulaNode(following)))
            else:
                stack.append(left)
    return stack[-1] if stack else None


def to_infix(node: FormulaNode | None) -> str:
    """Return the fully parenthesised infix form of the tree."""
    if node is None:
        return ""
    opening = "(" if node.left is not None else ""
    closing = ")" if node.right is not None else ""
    return f"{opening}{to_infix(node.left)}{node.value}{to_infix(node.right)}{closing}"