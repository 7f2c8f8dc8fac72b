"""Vertex reordering, complements, shortest paths and structural checks on graphs."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from edgebound.graph import Graph, build_graph


def _shell_sort(
    items: Iterable[int],
    scores: Iterable[float],
    out_of_order: Callable[[float, float], bool],
) -> tuple[list[int], list[float]]:
    """Shell sort ``items`` by ``scores`` with halving gaps.

    The gap sequence fixes how ties end up ordered, so it is kept exactly.
    """
    items = list(items)
    scores = list(scores)
    if len(items) != len(scores):
        raise ValueError("items and scores must have the same length")
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            j = i - gap
            while j >= 0 and out_of_order(scores[j], scores[j + gap]):
                scores[j], scores[j + gap] = scores[j + gap], scores[j]
                items[j], items[j + gap] = items[j + gap], items[j]
                j -= gap
        gap //= 2
    return items, scores


def sort_non_increasing(items: Iterable[int], scores: Iterable[float]) -> tuple[list[int], list[float]]:
    """Return ``(items, scores)`` sorted by non-increasing score."""
    return _shell_sort(items, scores, lambda a, b: a < b)


def sort_non_decreasing(items: Iterable[int], scores: Iterable[float]) -> tuple[list[int], list[float]]:
    """Return ``(items, scores)`` sorted by non-decreasing score."""
    return _shell_sort(items, scores, lambda a, b: a > b)


def reorder(graph: Graph, order: Sequence[int]) -> Graph:
    """Relabel nodes so that old node ``order[i]`` becomes node ``i``.

    Every arc is stored with the smaller new label as tail. Arc weights keep
    their positions; node weights move with their nodes. The result always
    carries an adjacency matrix.
    """
    order = [int(v) for v in order]
    if sorted(order) != list(range(graph.n)):
        raise ValueError(f"order must be a permutation of 0..{graph.n - 1}")
    position = {old: new for new, old in enumerate(order)}

    tails: list[int] = []
    heads: list[int] = []
    for tail, head in zip(graph.tails, graph.heads):
        a, b = position[tail], position[head]
        tails.append(min(a, b))
        heads.append(max(a, b))

    node_weights = [graph.node_weights[old] for old in order]
    return build_graph(graph.n, tails, heads, node_weights, graph.arc_weights, True)


def reorder_by_degree(graph: Graph, descending: bool = True) -> Graph:
    """Relabel nodes by total degree, highest first unless ``descending`` is false."""
    sorter = sort_non_increasing if descending else sort_non_decreasing
    order, _ = sorter(range(graph.n), graph.total_degree)
    return reorder(graph, order)


def _require_matrix(graph: Graph) -> list[list[int]]:
    if graph.matrix is None:
        raise ValueError("adjacency matrix was not built for this graph")
    return graph.matrix


def complement_directed(graph: Graph) -> Graph:
    """Directed complement without self loops; every weight is 1."""
    matrix = _require_matrix(graph)
    n = graph.n
    expected = n * n - n - graph.m
    pairs = [
        (i, j)
        for i in range(n)
        for j in range(n)
        if i != j and matrix[i][j] != 1
    ]
    if len(pairs) != expected:
        raise ValueError(f"complement has {len(pairs)} arcs, expected {expected}")
    tails = [i for i, _ in pairs]
    heads = [j for _, j in pairs]
    return build_graph(n, tails, heads, [1.0] * n, [1.0] * len(pairs), True)


def complement_undirected(graph: Graph) -> Graph:
    """Undirected complement (tail below head); every weight is 0."""
    matrix = _require_matrix(graph)
    n = graph.n
    expected = (n * (n - 1)) // 2 - graph.m
    pairs = [
        (i, j)
        for i in range(n)
        for j in range(i + 1, n)
        if matrix[i][j] != 1 and matrix[j][i] != 1
    ]
    if len(pairs) != expected:
        raise ValueError(f"complement has {len(pairs)} edges, expected {expected}")
    tails = [i for i, _ in pairs]
    heads = [j for _, j in pairs]
    return build_graph(n, tails, heads, [0.0] * n, [0.0] * len(pairs), True)


def floyd_warshall(weight: Sequence[Sequence[float]]) -> tuple[list[list[float]], list[list[int]]]:
    """All-pairs shortest paths for non-negative weights.

    Returns ``(dist, pred)`` where ``pred[i][j]`` is the node before ``j`` on
    the shortest path from ``i``.
    """
    dist = [[float(w) for w in row] for row in weight]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("weight matrix must be square")
    pred = [[i] * n for i in range(n)]
    for h in range(n):
        dist_h = dist[h]
        pred_h = pred[h]
        for i in range(n):
            dist_i = dist[i]
            pred_i = pred[i]
            via = dist_i[h]
            for j in range(n):
                candidate = via + dist_h[j]
                if dist_i[j] > candidate:
                    dist_i[j] = candidate
                    pred_i[j] = pred_h[j]
    return dist, pred


def is_undirected(tails: Sequence[int], heads: Sequence[int]) -> bool:
    """False when some arc also appears reversed (a self loop counts as such)."""
    arcs = set(zip(tails, heads))
    return not any((head, tail) in arcs for tail, head in zip(tails, heads))


def is_connected(n: int, tails: Sequence[int], heads: Sequence[int]) -> bool:
    """Whether the edges, taken without direction, connect all ``n`` nodes."""
    if n <= 1:
        return True
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for tail, head in zip(tails, heads):
        neighbours[tail].append(head)
        neighbours[head].append(tail)
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for other in neighbours[node]:
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return len(seen) == n


@dataclass(frozen=True)
class GraphInfo:
    """Summary of an instance: structure checks, size, density and degree range."""

    name: str
    undirected: bool
    connected: bool
    vertices: int
    edges: int
    density: float
    basic: bool
    min_degree: int
    max_degree: int

    def __str__(self) -> str:
        fields = [
            self.name,
            str(int(self.undirected)),
            str(int(self.connected)),
            str(self.vertices),
            str(self.edges),
            f"{self.density:.6f}",
            str(int(self.basic)),
            str(self.min_degree),
            str(self.max_degree),
        ]
        return "\t".join(fields) + "\t"


def graph_info(
    graph: Graph,
    name: str,
    tails: Sequence[int],
    heads: Sequence[int],
    basic: bool = False,
) -> GraphInfo:
    """Summarise ``graph``; with ``basic`` the direction and connectivity checks are skipped."""
    vertices = graph.n
    edges = len(tails)
    undirected = True if basic else is_undirected(tails, heads)
    connected = True if basic else is_connected(vertices, tails, heads)

    pairs = (vertices * (vertices - 1)) // 2
    if pairs:
        density = edges / pairs
    else:
        density = math.inf if edges else math.nan

    return GraphInfo(
        name=name,
        undirected=undirected,
        connected=connected,
        vertices=vertices,
        edges=edges,
        density=density,
        basic=bool(basic),
        min_degree=min(graph.total_degree, default=graph.n),
        max_degree=max(graph.total_degree, default=0),
    )