"""Graph traversals, connectivity, topological order and minimum spanning trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = ["Graph", "dfs_tree", "is_connected", "Edge", "kruskal"]


class Graph:
    """Directed graph on vertices ``0 .. vertex_count - 1`` kept as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def topological_sort(self) -> list[int]:
        """All vertices, each placed before the vertices its edges lead to."""
        visited = [False] * self.vertex_count
        finished: list[int] = []
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = True
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                vertex, neighbours = stack[-1]
                for neighbour in neighbours:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(self._adjacency[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(vertex)
        finished.reverse()
        return finished


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def _dfs(matrix: Sequence[Sequence[int]], start: int) -> tuple[list[tuple[int, int]], list[bool]]:
    size = _check_square(matrix)
    if not 0 <= start < size:
        raise ValueError(f"vertex {start} is out of range")
    reached = [False] * size
    reached[start] = True
    edges: list[tuple[int, int]] = []
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(size)))]
    while stack:
        vertex, candidates = stack[-1]
        for candidate in candidates:
            if matrix[vertex][candidate] and not reached[candidate]:
                reached[candidate] = True
                edges.append((vertex, candidate))
                stack.append((candidate, iter(range(size))))
                break
        else:
            stack.pop()
    return edges, reached


def dfs_tree(matrix: Sequence[Sequence[int]], start: int = 0) -> list[tuple[int, int]]:
    """Tree edges, in discovery order, of a depth-first search over an adjacency matrix."""
    edges, _ = _dfs(matrix, start)
    return edges


def is_connected(matrix: Sequence[Sequence[int]]) -> bool:
    """True if every vertex is reached by a depth-first search from vertex 0."""
    if _check_square(matrix) == 0:
        return True
    _, reached = _dfs(matrix, 0)
    return all(reached)


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge."""

    source: int
    target: int
    weight: int


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning tree, in the order Kruskal's method picks them.

    Each returned edge has its smaller endpoint as ``source``.
    """
    parent = list(range(vertex_count))

    def root_of(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    chosen: list[Edge] = []
    needed = vertex_count - 1
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(chosen) >= needed:
            break
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        first, second = root_of(edge.source), root_of(edge.target)
        if first != second:
            parent[first] = second
            low, high = sorted((edge.source, edge.target))
            chosen.append(Edge(low, high, edge.weight))
    if len(chosen) < max(needed, 0):
        raise ValueError("graph is not connected")
    return chosen