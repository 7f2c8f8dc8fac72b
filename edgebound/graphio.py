"""Reading DIMACS edge files and weight files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator, Union

from edgebound.graph import Graph

PathLike = Union[str, "os.PathLike[str]"]


class DimacsError(ValueError):
    """Raised when a DIMACS file is malformed."""


@dataclass
class GraphData:
    """Node count, declared edge count and edge endpoints read from a file.

    Endpoints are zero-based and every edge is stored with the smaller
    endpoint as tail.
    """

    nodes: int
    edges: int
    tails: list[int] = field(default_factory=list)
    heads: list[int] = field(default_factory=list)


def _read_text(path: PathLike) -> str:
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise DimacsError(f"expected an integer for {what}, got {token!r}") from None


def _ordered_edge(a: int, b: int) -> tuple[int, int]:
    return min(a - 1, b - 1), max(a - 1, b - 1)


def read_dimacs(path: PathLike) -> GraphData:
    """Read a DIMACS graph leniently.

    Lines before the ``p`` line are ignored, as are lines that do not start
    with ``e``; reading stops once the declared number of edges is reached.
    """
    lines = iter(_read_text(path).splitlines())

    header: list[str] | None = None
    for line in lines:
        words = line.split()
        if words and words[0] == "p":
            header = words
            break
    if header is None:
        raise DimacsError("no problem line ('p') found")
    if len(header) < 4:
        raise DimacsError(f"incomplete problem line: {' '.join(header)!r}")
    nodes = _parse_int(header[2], "the number of vertices")
    edges = _parse_int(header[3], "the number of edges")

    data = GraphData(nodes, edges)
    if edges <= 0:
        return data
    for line in lines:
        words = line.split()
        if not words or words[0] != "e":
            continue
        if len(words) < 3:
            raise DimacsError(f"incomplete edge line: {line.strip()!r}")
        a = _parse_int(words[1], "an edge endpoint")
        b = _parse_int(words[2], "an edge endpoint")
        tail, head = _ordered_edge(a, b)
        data.tails.append(tail)
        data.heads.append(head)
        if len(data.tails) == edges:
            break
    if len(data.tails) < edges:
        raise DimacsError(f"file declares {edges} edges but holds only {len(data.tails)}")
    return data


def _tokens_after_comments(text: str) -> list[str]:
    """All tokens from the first line whose first token does not start with ``c``."""
    lines = text.splitlines()
    for index, line in enumerate(lines):
        words = line.split()
        if not words or words[0].startswith("c"):
            continue
        return words + [word for rest in lines[index + 1:] for word in rest.split()]
    return []


def _take(tokens: Iterator[str], message: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise DimacsError(message) from None


def read_dimacs_strict(path: PathLike) -> GraphData:
    """Read a DIMACS graph strictly.

    Leading comment lines are skipped; then come the problem line and exactly
    the declared edges, with nothing after them. At least two vertices and
    one edge are required.
    """
    tokens = iter(_tokens_after_comments(_read_text(path)))

    _take(tokens, "missing problem line")
    _take(tokens, "incomplete problem line")
    nodes = _parse_int(_take(tokens, "incomplete problem line"), "the number of vertices")
    edges = _parse_int(_take(tokens, "incomplete problem line"), "the number of edges")
    if nodes < 2 or edges < 1:
        raise DimacsError(f"invalid problem size: {nodes} vertices, {edges} edges")

    data = GraphData(nodes, edges)
    missing = "error in the input data while reading the edges"
    for _ in range(edges):
        _take(tokens, missing)
        a = _parse_int(_take(tokens, missing), "an edge endpoint")
        b = _parse_int(_take(tokens, missing), "an edge endpoint")
        tail, head = _ordered_edge(a, b)
        data.tails.append(tail)
        data.heads.append(head)

    if next(tokens, None) is not None:
        raise DimacsError("the file holds further data after the last edge")
    return data


def _read_numbers(path: PathLike, count: int, what: str) -> list[float]:
    words = _read_text(path).split()
    if len(words) < count:
        raise ValueError(f"expected {count} {what} weights, found {len(words)}")
    try:
        return [float(word) for word in words[:count]]
    except ValueError as exc:
        raise ValueError(f"invalid {what} weight: {exc}") from None


def read_node_weights(graph: Graph, path: PathLike) -> None:
    """Replace the node weights of ``graph`` with the first ``n`` numbers in ``path``."""
    graph.node_weights = _read_numbers(path, graph.n, "node")


def read_edge_weights(graph: Graph, path: PathLike) -> None:
    """Replace the arc weights of ``graph`` with the first ``m`` numbers in ``path``."""
    graph.arc_weights = _read_numbers(path, graph.m, "arc")


def read_weights(graph: Graph, complement: Graph, path: PathLike) -> None:
    """Read node weights from ``path`` into both ``graph`` and ``complement``."""
    if complement.n != graph.n:
        raise ValueError("the complement must have as many nodes as the graph")
    weights = _read_numbers(path, graph.n, "node")
    graph.node_weights = list(weights)
    complement.node_weights = list(weights)