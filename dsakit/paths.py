"""Single-source shortest paths."""

from __future__ import annotations

import heapq
import math

from dsakit.graph import WeightedGraph


def dijkstra(graph: WeightedGraph, start: int) -> list[float]:
    """Return the shortest distance from ``start`` to every vertex.

    Unreachable vertices get ``math.inf``. Weights must not be negative.
    """
    n = graph.num_vertices
    if not 0 <= start < n:
        raise ValueError(f"vertex {start} out of range")
    dist: list[float] = [math.inf] * n
    dist[start] = 0
    done = [False] * n
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, weight in graph.neighbors(u):
            if not done[v] and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist