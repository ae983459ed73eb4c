"""Graph algorithms over adjacency matrices: spanning trees, shortest paths, ordering."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INF = 99999
"""Sentinel distance meaning "unreachable" for shortest-path routines."""

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """A weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    w: int


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    for row in matrix:
        if len(row) != size:
            raise ValueError("adjacency matrix must be square")
    return size


def spanning_tree_cost(edges: Iterable[Edge]) -> int:
    """Return the total weight of ``edges``."""
    return sum(edge.w for edge in edges)


def kruskal(matrix: Matrix) -> list[Edge]:
    """Return a minimum spanning forest of an undirected graph using Kruskal's method.

    Only the lower triangle of ``matrix`` is read; a zero entry means no edge.
    Edges of equal weight keep the order in which the lower triangle lists them.
    """
    size = _check_square(matrix)
    candidates = [
        Edge(i, j, matrix[i][j])
        for i in range(1, size)
        for j in range(i)
        if matrix[i][j] != 0
    ]
    candidates.sort(key=lambda edge: edge.w)

    component = list(range(size))
    tree: list[Edge] = []
    for edge in candidates:
        first, second = component[edge.u], component[edge.v]
        if first != second:
            tree.append(edge)
            component = [first if label == second else label for label in component]
    return tree


def prim(matrix: Matrix) -> list[Edge]:
    """Return a minimum spanning tree grown from vertex 0 using Prim's method.

    Entry ``matrix[i][j]`` is the weight of the edge from ``i`` to ``j``; zero
    means no edge. Raises ``ValueError`` if some vertex cannot be reached.
    """
    size = _check_square(matrix)
    if size == 0:
        return []
    selected = [False] * size
    selected[0] = True
    tree: list[Edge] = []
    while len(tree) < size - 1:
        best: Edge | None = None
        best_weight = math.inf
        for i, row in enumerate(matrix):
            if not selected[i]:
                continue
            for j, weight in enumerate(row):
                if not selected[j] and weight and weight < best_weight:
                    best_weight = weight
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        tree.append(best)
        selected[best.v] = True
    return tree


def floyd_warshall(matrix: Matrix, inf: int = INF) -> list[list[int]]:
    """Return all-pairs shortest distances; ``inf`` marks a missing edge."""
    _check_square(matrix)
    dist = [list(row) for row in matrix]
    size = len(dist)
    for k in range(size):
        through_k = dist[k]
        for row in dist:
            via = row[k]
            for j in range(size):
                candidate = via + through_k[j]
                if candidate < row[j]:
                    row[j] = candidate
    return dist


def format_distance_matrix(dist: Matrix, inf: int = INF) -> str:
    """Render a distance matrix, writing ``INF`` for unreachable entries."""
    lines = []
    for row in dist:
        cells = ("INF " if value == inf else f"{value:3d} " for value in row)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def dijkstra(matrix: Matrix, source: int) -> list[int]:
    """Return shortest distances from ``source``; unreachable vertices get ``INF``.

    A zero entry in ``matrix`` means no edge.
    """
    size = _check_square(matrix)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} out of range")
    dist = [INF] * size
    done = [False] * size
    dist[source] = 0
    for _ in range(size - 1):
        u = -1
        smallest = INF
        for v in range(size):
            if not done[v] and dist[v] <= smallest:
                smallest = dist[v]
                u = v
        done[u] = True
        if dist[u] == INF:
            continue
        for v, weight in enumerate(matrix[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the vertices of a directed acyclic graph in topological order.

    Depth-first search starts from vertices in ascending order and follows
    successors in ascending order.
    """
    successors: list[set[int]] = [set() for _ in range(vertex_count)]
    for src, dest in edges:
        if not (0 <= src < vertex_count and 0 <= dest < vertex_count):
            raise ValueError(f"edge ({src}, {dest}) out of range")
        successors[src].add(dest)

    visited = [False] * vertex_count
    finished: list[int] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        for nxt in sorted(successors[vertex]):
            if not visited[nxt]:
                visit(nxt)
        finished.append(vertex)

    for vertex in range(vertex_count):
        if not visited[vertex]:
            visit(vertex)
    return finished[::-1]