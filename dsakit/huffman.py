"""Huffman coding of the letters in a text."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count


@dataclass(eq=False)
class HuffmanNode:
    """A Huffman tree node; internal and padding nodes carry no symbol."""

    symbol: str | None
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def build_tree(text: str) -> HuffmanNode:
    """Build a Huffman tree from the frequencies of the ASCII letters in ``text``.

    A text with a single distinct letter gets a zero-weight padding leaf so
    that the letter still receives a one-bit code.
    """
    freq = Counter(ch for ch in text if _is_letter(ch))
    if not freq:
        raise ValueError("text contains no letters")
    order = count()
    heap = [(weight, next(order), HuffmanNode(ch, weight)) for ch, weight in freq.items()]
    heapq.heapify(heap)
    if len(heap) == 1:
        heapq.heappush(heap, (0, next(order), HuffmanNode(None, 0)))
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(None, total, left, right)))
    return heap[0][2]


def build_codes(root: HuffmanNode | None) -> dict[str, str]:
    """Return the bit string assigned to every symbol in the tree."""
    codes: dict[str, str] = {}

    def walk(node: HuffmanNode | None, prefix: str) -> None:
        if node is None:
            return
        if node.symbol is not None:
            codes[node.symbol] = prefix or "0"
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


def encode(text: str, codes: dict[str, str]) -> str:
    """Concatenate the codes of the letters in ``text``; other characters are skipped."""
    return "".join(codes[ch] for ch in text if _is_letter(ch))


def decode(bits: str, root: HuffmanNode) -> str:
    """Decode ``bits``, stopping early if a bit leads off the tree."""
    out: list[str] = []
    node: HuffmanNode | None = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node is None:
            break
        if node.symbol is not None:
            out.append(node.symbol)
            node = root
    return "".join(out)