"""The San Segundo linear-programming bound for a coloured, edge-weighted graph."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from scipy.optimize import linprog
from scipy.sparse import coo_matrix

from edgebound.graph import Graph


@dataclass
class SanSegundoResult:
    """Outcome of the bound's linear program.

    ``rho[e]`` splits the weight of arc ``e`` between its tail and its head;
    ``pi[h]`` is the load charged to colour ``h``.
    """

    value: float
    best_bound: float
    status: str
    time: float
    rho: list[tuple[float, float]] = field(default_factory=list)
    pi: list[float] = field(default_factory=list)


_STATUS = {0: "Optimal", 1: "Feasible", 2: "Infeasible", 3: "Unbounded", 4: "Error"}


def san_segundo_bound(
    graph: Graph,
    colors: Sequence[int],
    num_colors: int,
    time_limit: float | None = None,
) -> SanSegundoResult:
    """Minimise the total colour load over all ways of splitting arc weights.

    Each arc's weight must be covered by the parts given to its two ends; a
    node's load is the sum of its parts, and every colour pays for the
    heaviest node load among its nodes.
    """
    colors = [int(c) for c in colors]
    if len(colors) != graph.n:
        raise ValueError(f"expected {graph.n} colours, got {len(colors)}")
    if any(not 0 <= c < num_colors for c in colors):
        raise ValueError(f"colours must lie in 0..{num_colors - 1}")
    if time_limit is not None and time_limit < 0:
        raise ValueError("time limit must be non-negative")

    m = graph.m
    n_vars = 2 * m + num_colors
    if n_vars == 0:
        return SanSegundoResult(0.0, 0.0, "Optimal", 0.0)

    cost = np.zeros(n_vars)
    cost[2 * m:] = 1.0

    rows: list[int] = []
    cols: list[int] = []
    vals: list[float] = []
    for e in range(m):
        rows += [e, e]
        cols += [2 * e, 2 * e + 1]
        vals += [-1.0, -1.0]
    for u in range(graph.n):
        row = m + u
        for e in graph.forward_star(u):
            rows.append(row)
            cols.append(2 * e)
            vals.append(1.0)
        for e in graph.backward_star(u):
            rows.append(row)
            cols.append(2 * e + 1)
            vals.append(1.0)
        rows.append(row)
        cols.append(2 * m + colors[u])
        vals.append(-1.0)

    a_ub = coo_matrix((vals, (rows, cols)), shape=(m + graph.n, n_vars)).tocsr()
    b_ub = np.concatenate([-np.asarray(graph.arc_weights, dtype=float), np.zeros(graph.n)])

    options = {} if time_limit is None else {"time_limit": float(time_limit)}
    start = time.process_time()
    result = linprog(cost, A_ub=a_ub, b_ub=b_ub, bounds=(0, None), method="highs-ipm", options=options)
    elapsed = time.process_time() - start

    status = _STATUS.get(result.status, "Error")
    if result.x is None:
        raise RuntimeError(f"no solution to the bound's linear program ({status}): {result.message}")

    x = result.x
    value = float(result.fun)
    return SanSegundoResult(
        value=value,
        best_bound=value,
        status=status,
        time=elapsed,
        rho=[(float(x[2 * e]), float(x[2 * e + 1])) for e in range(m)],
        pi=[float(v) for v in x[2 * m:]],
    )