"""Undirected graphs stored as adjacency lists, with traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _square_rows(matrix: Iterable[Iterable[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


class Graph:
    """Unweighted graph on vertices ``0 .. num_vertices - 1``.

    Neighbours are visited in the order their edges were added.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    @classmethod
    def from_matrix(cls, matrix: Iterable[Iterable[float]]) -> Graph:
        """Build a graph with an arc ``i -> j`` for every non-zero entry."""
        rows = _square_rows(matrix)
        graph = cls(len(rows))
        for adj, row in zip(graph._adj, rows):
            adj.extend(j for j, weight in enumerate(row) if weight)
        return graph

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adj[start])]
        while stack:
            for u in stack[-1]:
                if u not in visited:
                    visited.add(u)
                    order.append(u)
                    stack.append(iter(self._adj[u]))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            v = queue.popleft()
            order.append(v)
            for u in self._adj[v]:
                if u not in visited:
                    visited.add(u)
                    queue.append(u)
        return order

    def is_connected(self) -> bool:
        """Return whether every vertex is reachable from vertex 0."""
        if not self._adj:
            return True
        return len(self.dfs(0)) == len(self._adj)


class WeightedGraph:
    """Graph whose edges carry a weight such as a distance or a cost."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[tuple[int, float]]] = [[] for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Add an undirected edge of the given weight."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, weight))
        self._adj[v].append((u, weight))

    def neighbors(self, u: int) -> list[tuple[int, float]]:
        """Return ``(vertex, weight)`` pairs for the edges leaving ``u``."""
        self._check(u)
        return list(self._adj[u])

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]]) -> WeightedGraph:
        """Build a graph with an arc ``i -> j`` for every non-zero entry."""
        rows = _square_rows(matrix)
        graph = cls(len(rows))
        for adj, row in zip(graph._adj, rows):
            adj.extend((j, weight) for j, weight in enumerate(row) if weight)
        return graph