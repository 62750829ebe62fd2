"""Optimal binary search trees by dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ObstResult:
    """Cost and root tables of an optimal search tree.

    ``cost[i][j]`` is the least weighted search cost for keys ``i .. j``
    (1-based) and ``root[i][j]`` the key chosen as their root.
    """

    cost: list[list[float]]
    root: list[list[int]]

    @property
    def size(self) -> int:
        return len(self.root) - 1

    @property
    def min_cost(self) -> float:
        """The least expected search cost over all keys."""
        return self.cost[1][self.size]


def optimal_bst(probabilities: Iterable[float]) -> ObstResult:
    """Build the cost and root tables for keys with the given probabilities.

    Probabilities belong to the keys in sorted order. Among equally good roots
    the smallest key is chosen.
    """
    p = list(probabilities)
    n = len(p)
    cost = [[0.0] * (n + 1) for _ in range(n + 2)]
    root = [[0] * (n + 1) for _ in range(n + 1)]
    for i, prob in enumerate(p, start=1):
        cost[i][i] = prob
        root[i][i] = i
    for span in range(1, n):
        for i in range(1, n - span + 1):
            j = i + span
            weight = sum(p[i - 1 : j])
            best_cost, best_root = min(
                ((cost[i][k - 1] + cost[k + 1][j] + weight, k) for k in range(i, j + 1)),
                key=lambda candidate: candidate[0],
            )
            cost[i][j] = best_cost
            root[i][j] = best_root
    return ObstResult(cost, root)


def min_search_cost(probabilities: Iterable[float]) -> float:
    """Return the least expected search cost for the given key probabilities."""
    return optimal_bst(probabilities).min_cost