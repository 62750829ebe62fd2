"""A skip list of integers with a closest-value query."""

from __future__ import annotations

import random
from collections.abc import Iterator


class _Node:
    __slots__ = ("value", "forward")

    def __init__(self, value: int | None, level: int) -> None:
        self.value = value
        self.forward: list[_Node | None] = [None] * (level + 1)


class SkipList:
    """Sorted multiset of integers kept in a probabilistic skip list."""

    def __init__(self, max_level: int = 16, rng: random.Random | None = None) -> None:
        if max_level < 0:
            raise ValueError("max_level must not be negative")
        self._max_level = max_level
        self._level = 0
        self._rng = rng or random.Random()
        self._header = _Node(None, max_level)

    def _random_level(self) -> int:
        level = 0
        while self._rng.getrandbits(1) and level < self._max_level:
            level += 1
        return level

    def insert(self, value: int) -> None:
        update = [self._header] * (self._max_level + 1)
        current = self._header
        for lvl in range(self._level, -1, -1):
            nxt = current.forward[lvl]
            while nxt is not None and nxt.value < value:
                current = nxt
                nxt = current.forward[lvl]
            update[lvl] = current

        new_level = self._random_level()
        self._level = max(self._level, new_level)

        node = _Node(value, new_level)
        for lvl in range(new_level + 1):
            node.forward[lvl] = update[lvl].forward[lvl]
            update[lvl].forward[lvl] = node

    def find_closest(self, target: int) -> int | None:
        """Return the stored value nearest ``target``; ties go to the smaller.

        Returns ``None`` for an empty list.
        """
        current = self._header
        for lvl in range(self._level, -1, -1):
            nxt = current.forward[lvl]
            while nxt is not None and nxt.value <= target:
                current = nxt
                nxt = current.forward[lvl]

        prev = None if current is self._header else current.value
        after = current.forward[0]
        nxt_value = None if after is None else after.value

        if prev is None:
            return nxt_value
        if nxt_value is None:
            return prev
        diff_prev = abs(prev - target)
        diff_next = abs(nxt_value - target)
        if diff_prev != diff_next:
            return prev if diff_prev < diff_next else nxt_value
        return min(prev, nxt_value)

    def __iter__(self) -> Iterator[int]:
        node = self._header.forward[0]
        while node is not None:
            yield node.value
            node = node.forward[0]