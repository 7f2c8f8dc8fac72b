"""Graph with arc lists, forward/backward stars, degrees and an optional adjacency matrix."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


def _star_layout(n: int, endpoints: Sequence[int]) -> tuple[list[int], list[int]]:
    """Group arc indices by endpoint, keeping arc order within each group.

    Returns ``(offsets, arcs)`` where the arcs touching node ``i`` are
    ``arcs[offsets[i]:offsets[i + 1]]``.
    """
    buckets: list[list[int]] = [[] for _ in range(n)]
    for arc, node in enumerate(endpoints):
        buckets[node].append(arc)
    offsets = [0, *accumulate(len(bucket) for bucket in buckets)]
    arcs = [arc for bucket in buckets for arc in bucket]
    return offsets, arcs


class Graph:
    """A graph stored as arc lists with forward and backward stars.

    Arc ``e`` goes from ``tails[e]`` to ``heads[e]`` and carries
    ``arc_weights[e]``; node ``v`` carries ``node_weights[v]``.
    """

    def __init__(
        self,
        n: int,
        tails: Iterable[int],
        heads: Iterable[int],
        node_weights: Iterable[float],
        arc_weights: Iterable[float],
        with_matrix: bool = True,
    ) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.n = n
        self.tails = [int(t) for t in tails]
        self.heads = [int(h) for h in heads]
        self.arc_weights = [float(p) for p in arc_weights]
        self.node_weights = [float(w) for w in node_weights]

        if len(self.tails) != len(self.heads):
            raise ValueError("tails and heads must have the same length")
        if len(self.arc_weights) != len(self.tails):
            raise ValueError("one weight is needed for every arc")
        if len(self.node_weights) != n:
            raise ValueError("one weight is needed for every node")
        for arc, (tail, head) in enumerate(zip(self.tails, self.heads)):
            if not (0 <= tail < n and 0 <= head < n):
                raise ValueError(f"arc {arc}=({tail},{head}) has an endpoint outside 0..{n - 1}")

        self.m = len(self.tails)
        self.forward_offsets, self.forward_arcs = _star_layout(n, self.tails)
        self.backward_offsets, self.backward_arcs = _star_layout(n, self.heads)

        self.out_degree = [self.forward_offsets[i + 1] - self.forward_offsets[i] for i in range(n)]
        self.in_degree = [self.backward_offsets[i + 1] - self.backward_offsets[i] for i in range(n)]
        self.total_degree = [out + inn for out, inn in zip(self.out_degree, self.in_degree)]

        self.matrix: list[list[int]] | None = None
        if with_matrix:
            self.matrix = [[0] * n for _ in range(n)]
            for tail, head in zip(self.tails, self.heads):
                self.matrix[tail][head] = 1

    def __repr__(self) -> str:
        return f"Graph(n={self.n}, m={self.m}, matrix={'yes' if self.matrix is not None else 'no'})"

    @property
    def has_matrix(self) -> bool:
        """Whether the adjacency matrix was built."""
        return self.matrix is not None

    def forward_star(self, node: int) -> list[int]:
        """Indices of the arcs leaving ``node``."""
        return self.forward_arcs[self.forward_offsets[node]:self.forward_offsets[node + 1]]

    def backward_star(self, node: int) -> list[int]:
        """Indices of the arcs entering ``node``."""
        return self.backward_arcs[self.backward_offsets[node]:self.backward_offsets[node + 1]]

    def has_arc(self, tail: int, head: int) -> bool:
        """Whether an arc runs from ``tail`` to ``head``."""
        if self.matrix is not None:
            return self.matrix[tail][head] == 1
        return any(self.heads[arc] == head for arc in self.forward_star(tail))

    def _check_star(self, offsets: list[int], arcs: list[int], endpoints: list[int],
                    label: str, role: str, first: list[int], second: list[int]) -> list[str]:
        counts = [0] * self.m
        errors: list[str] = []
        for node in range(self.n):
            for arc in arcs[offsets[node]:offsets[node + 1]]:
                counts[arc] += 1
                if endpoints[arc] != node:
                    errors.append(f"ERROR: Arc {arc} in {label}({node}), {role}={endpoints[arc]}")
        errors.extend(
            f"ERROR: Arc {arc}=({first[arc]},{second[arc]}) counted {count} times"
            for arc, count in enumerate(counts)
            if count != 1
        )
        return errors

    def check_forward_star(self) -> list[str]:
        """Consistency errors of the forward star; empty when it is sound."""
        return self._check_star(self.forward_offsets, self.forward_arcs, self.tails,
                                "FS", "tail", self.tails, self.heads)

    def check_backward_star(self) -> list[str]:
        """Consistency errors of the backward star; empty when it is sound."""
        return self._check_star(self.backward_offsets, self.backward_arcs, self.heads,
                                "BS", "head", self.heads, self.tails)

    def describe(self) -> str:
        """Arcs with their weights, then nodes with their weights and degrees."""
        lines = [f"Number of nodes\t{self.n}", f"Number of arcs\t{self.m}"]
        lines.extend(
            f"tail\t{t}\thead\t{h}\tweights\t{p:g}"
            for t, h, p in zip(self.tails, self.heads, self.arc_weights)
        )
        lines.append("")
        lines.extend(
            f"Node\t{i}\t weight\t{self.node_weights[i]:g}"
            f"\tneighbours total\t{self.total_degree[i]}"
            f"\t neighbours +\t{self.out_degree[i]}"
            f"\t neighbours -\t{self.in_degree[i]}"
            for i in range(self.n)
        )
        return "\n".join(lines) + "\n"

    def _describe_star(self, title: str, star) -> str:
        lines: list[str] = []
        for node in range(self.n):
            lines.append(f"{title}\t{node}")
            lines.extend(
                f"Arc\t{arc}\ttail\t{self.tails[arc]}\thead\t{self.heads[arc]}"
                for arc in star(node)
            )
        return "\n".join(lines) + ("\n" if lines else "")

    def describe_forward_star(self) -> str:
        """The arcs of every forward star."""
        return self._describe_star("Forward star of", self.forward_star)

    def describe_backward_star(self) -> str:
        """The arcs of every backward star."""
        return self._describe_star("Backward star of", self.backward_star)

    def describe_matrix(self) -> str:
        """The adjacency matrix, one row of digits per node."""
        if self.matrix is None:
            raise ValueError("adjacency matrix was not built for this graph")
        rows = ["".join(str(cell) for cell in row) for row in self.matrix]
        return "Adjacency Matrix\n" + "".join(row + "\n" for row in rows) + "\n"


def build_graph(
    n: int,
    tails: Iterable[int],
    heads: Iterable[int],
    node_weights: Iterable[float],
    arc_weights: Iterable[float],
    with_matrix: bool = True,
) -> Graph:
    """Build a graph with ``n`` nodes from parallel arc lists."""
    return Graph(n, tails, heads, node_weights, arc_weights, with_matrix)