"""Random graph generators and writers for DOT and GML drawings."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Sequence, Union

from edgebound.graph import Graph, build_graph

PathLike = Union[str, "os.PathLike[str]"]


def _weights(count: int, min_weight: int, max_weight: int, rng: random.Random) -> list[float]:
    """Weights drawn in ``0 .. max_weight - min_weight - 1``, or all ``max_weight``.

    The range does not start at ``min_weight``; only the width of the
    interval is used, as the instance format expects.
    """
    if max_weight > min_weight:
        return [float(rng.randrange(max_weight - min_weight)) for _ in range(count)]
    return [float(max_weight)] * count


def _finish(
    nodes: int,
    tails: list[int],
    heads: list[int],
    min_weight: int,
    max_weight: int,
    rng: random.Random,
) -> Graph:
    arc_weights = _weights(len(tails), min_weight, max_weight, rng)
    node_weights = _weights(nodes, min_weight, max_weight, rng)
    return build_graph(nodes, tails, heads, node_weights, arc_weights, True)


def _check_nodes(nodes: int) -> None:
    if nodes < 0:
        raise ValueError(f"node count must be non-negative, got {nodes}")


def _check_density(density: float) -> None:
    if density > 1.0:
        raise ValueError(f"density {density} is too high; it must not exceed 1")


def random_undirected_by_density(
    nodes: int,
    density: float,
    min_weight: int,
    max_weight: int,
    rng: random.Random | None = None,
) -> Graph:
    """Keep each pair ``i < j`` as edge ``(i, j)`` with probability ``density``."""
    _check_nodes(nodes)
    _check_density(density)
    rng = rng or random.Random()
    pairs = [
        (i, j)
        for i in range(nodes)
        for j in range(i + 1, nodes)
        if rng.random() <= density
    ]
    tails = [i for i, _ in pairs]
    heads = [j for _, j in pairs]
    return _finish(nodes, tails, heads, min_weight, max_weight, rng)


def random_undirected(
    nodes: int,
    edges: int,
    min_weight: int,
    max_weight: int,
    rng: random.Random | None = None,
) -> Graph:
    """Draw ``edges`` distinct undirected edges; each has the larger endpoint as tail."""
    _check_nodes(nodes)
    if edges > (nodes * (nodes - 1)) // 2:
        raise ValueError(f"too many edges: {edges} for {nodes} nodes")
    rng = rng or random.Random()
    seen: set[tuple[int, int]] = set()
    tails: list[int] = []
    heads: list[int] = []
    while len(tails) < edges:
        a = rng.randrange(nodes)
        b = rng.randrange(nodes)
        if a == b:
            continue
        low, high = min(a, b), max(a, b)
        if (low, high) in seen:
            continue
        seen.add((low, high))
        heads.append(low)
        tails.append(high)
    return _finish(nodes, tails, heads, min_weight, max_weight, rng)


def random_directed_by_density(
    nodes: int,
    density: float,
    min_weight: int,
    max_weight: int,
    rng: random.Random | None = None,
) -> Graph:
    """Keep each ordered pair ``i != j`` as arc ``(i, j)`` with probability ``density``."""
    _check_nodes(nodes)
    _check_density(density)
    rng = rng or random.Random()
    pairs = [
        (i, j)
        for i in range(nodes)
        for j in range(nodes)
        if i != j and rng.random() <= density
    ]
    tails = [i for i, _ in pairs]
    heads = [j for _, j in pairs]
    return _finish(nodes, tails, heads, min_weight, max_weight, rng)


def random_directed(
    nodes: int,
    arcs: int,
    min_weight: int,
    max_weight: int,
    rng: random.Random | None = None,
) -> Graph:
    """Draw ``arcs`` distinct arcs without self loops."""
    _check_nodes(nodes)
    if arcs > nodes * (nodes - 1):
        raise ValueError(f"too many arcs: {arcs} for {nodes} nodes")
    rng = rng or random.Random()
    seen: set[tuple[int, int]] = set()
    tails: list[int] = []
    heads: list[int] = []
    while len(tails) < arcs:
        head = rng.randrange(nodes)
        tail = rng.randrange(nodes)
        if head == tail or (tail, head) in seen:
            continue
        seen.add((tail, head))
        heads.append(head)
        tails.append(tail)
    return _finish(nodes, tails, heads, min_weight, max_weight, rng)


def write_dot(
    path: PathLike,
    n_vertex: int,
    n_layer: int,
    n_out: Sequence[int],
    nxt_out: Sequence[int],
    head: Sequence[int],
) -> Path:
    """Write a layered DOT drawing to ``<path>_dot_graph.txt`` and return that file.

    ``n_out[i]`` successors of vertex ``i`` are read in turn from ``nxt_out``;
    vertices sharing ``head[j]`` are put on the same rank.
    """
    target = Path(f"{os.fspath(path)}_dot_graph.txt")
    lines = ["digraph G {", '\tranksep = 30; size = "7.5, 10";', "\trankdir = LR;"]

    successors = iter(nxt_out)
    for vertex in range(n_vertex - 1):
        count = n_out[vertex]
        if count == 0:
            continue
        targets = [str(next(successors)) for _ in range(count)]
        lines.append(f"\t{vertex} -> {{ {'; '.join(targets)}}}")

    for layer in range(n_layer):
        members = "".join(f"; {j}" for j in range(n_vertex) if head[j] == layer)
        lines.append(f"\t{{ rank = same{members};}}")

    lines.append("}")
    target.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return target


def _gml_nodes(xs: Sequence[float], ys: Sequence[float], scale: float, first_label: int) -> list[str]:
    return [
        f"node  [ id  {i}  graphics  [ x {x * scale:f}   y {y * scale:f}  w 11 h 11 "
        f'type "roundrectangle" ]  LabelGraphics  [ text   {i + first_label}  fontSize  7 ]  ]  '
        for i, (x, y) in enumerate(zip(xs, ys))
    ]


def _write_gml(target: Path, body: list[str]) -> Path:
    text = "graph  [ hierarchic  1  directed  1 \n\n\n" + "".join(line + "\n" for line in body) + "\n] \n\n\n"
    target.write_text(text, encoding="utf-8")
    return target


def _check_points(xs: Sequence[float], ys: Sequence[float]) -> None:
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")


def write_gml(
    path: PathLike,
    xs: Sequence[float],
    ys: Sequence[float],
    scale: float,
    distances: Sequence[Sequence[float]],
    draw_arcs: bool,
) -> Path:
    """Write points, and arcs where ``distances[i][j] > 0``, to ``<path>.gml``."""
    _check_points(xs, ys)
    body = _gml_nodes(xs, ys, scale, 0)
    if draw_arcs:
        count = len(xs)
        body.extend(
            f" edge   [ source  {i}  target  {j}  graphics  [ targetArrow \"delta\" Line  [ "
            f"point  [ x {xs[i] * scale:.2f}  y {ys[i] * scale:.2f}  ]  "
            f"point  [ x {xs[j] * scale:.2f}  y {ys[j] * scale:.2f}  ]  ]  ]  ]  "
            for i in range(count)
            for j in range(count)
            if distances[i][j] > 0
        )
    return _write_gml(Path(f"{os.fspath(path)}.gml"), body)


def write_gml_undirected(
    path: PathLike,
    xs: Sequence[float],
    ys: Sequence[float],
    scale: float,
    distances: Sequence[Sequence[float]],
    draw_arcs: bool,
) -> Path:
    """Write points labelled from 1, and one edge per linked pair, to ``<path>.gml``."""
    _check_points(xs, ys)
    body = _gml_nodes(xs, ys, scale, 1)
    if draw_arcs:
        count = len(xs)
        body.extend(
            f' edge   [ source  {i}  target  {j}  graphics  [ fill\t"#000000" ]  ]'
            for i in range(count)
            for j in range(i + 1, count)
            if distances[i][j] > 0 or distances[j][i] > 0
        )
    return _write_gml(Path(f"{os.fspath(path)}.gml"), body)