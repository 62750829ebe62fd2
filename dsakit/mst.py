"""Minimum spanning trees by Prim's algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

from dsakit.graph import WeightedGraph


def prim_dense(
    matrix: Iterable[Iterable[float]],
) -> tuple[float, list[tuple[int, int, float]]]:
    """Run Prim's algorithm on an adjacency matrix (zero means no edge).

    Returns the total cost and the chosen edges as ``(parent, vertex, weight)``
    ordered by vertex. Raises ``ValueError`` if the graph is not connected.
    """
    rows = [list(row) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("adjacency matrix must be square")
    dist: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    if n:
        dist[0] = 0
    total: float = 0
    for _ in range(n):
        v = min((i for i in range(n) if not in_tree[i]), key=dist.__getitem__)
        if math.isinf(dist[v]):
            raise ValueError("graph is not connected")
        in_tree[v] = True
        total += dist[v]
        for u, weight in enumerate(rows[v]):
            if weight and not in_tree[u] and weight < dist[u]:
                dist[u] = weight
                parent[u] = v
    edges = [
        (p, vertex, rows[p][vertex])
        for vertex, p in enumerate(parent)
        if vertex > 0 and p is not None
    ]
    return total, edges


def prim(graph: WeightedGraph, start: int = 0) -> tuple[float, list[tuple[int, float]]]:
    """Run Prim's algorithm with a heap from ``start``.

    Returns the total cost and the vertices in the order they joined the tree,
    each with the cost of the connection that brought it in. Only the component
    containing ``start`` is spanned.
    """
    n = graph.num_vertices
    if not 0 <= start < n:
        raise ValueError(f"vertex {start} out of range")
    visited = [False] * n
    heap: list[tuple[float, int]] = [(0, start)]
    total: float = 0
    included: list[tuple[int, float]] = []
    while heap:
        price, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        total += price
        included.append((u, price))
        for v, weight in graph.neighbors(u):
            if not visited[v]:
                heapq.heappush(heap, (weight, v))
    return total, included