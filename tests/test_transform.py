import math

import pytest

from edgebound.graph import build_graph
from edgebound.transform import (
    GraphInfo,
    complement_directed,
    complement_undirected,
    floyd_warshall,
    graph_info,
    is_connected,
    is_undirected,
    reorder,
    reorder_by_degree,
    sort_non_decreasing,
    sort_non_increasing,
)


def _graph(n, edges, node_weights=None, arc_weights=None, with_matrix=True):
    tails = [t for t, _ in edges]
    heads = [h for _, h in edges]
    node_weights = node_weights if node_weights is not None else [float(i) for i in range(n)]
    arc_weights = arc_weights if arc_weights is not None else [float(10 + e) for e in range(len(edges))]
    return build_graph(n, tails, heads, node_weights, arc_weights, with_matrix)


def _star_plus():
    # node 0 has degree 3, node 1 degree 2, nodes 2 and 3 lower
    return _graph(5, [(0, 1), (0, 2), (0, 3), (1, 4)])


SCORES = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0]


def test_sort_non_increasing_orders_and_permutes():
    items, scores = sort_non_increasing(range(len(SCORES)), SCORES)
    assert scores == sorted(SCORES, reverse=True)
    assert sorted(items) == list(range(len(SCORES)))
    assert [SCORES[i] for i in items] == scores


def test_sort_non_decreasing_orders_and_permutes():
    items, scores = sort_non_decreasing(range(len(SCORES)), SCORES)
    assert scores == sorted(SCORES)
    assert [SCORES[i] for i in items] == scores


def test_sort_does_not_modify_inputs():
    scores = list(SCORES)
    sort_non_increasing(list(range(len(scores))), scores)
    assert scores == SCORES


def test_sort_length_mismatch():
    with pytest.raises(ValueError):
        sort_non_increasing([0, 1], [1.0])


def test_sort_empty():
    assert sort_non_decreasing([], []) == ([], [])


def test_reorder_moves_node_weights_and_edges():
    g = _graph(3, [(0, 1), (1, 2)], node_weights=[5.0, 6.0, 7.0])
    r = reorder(g, [2, 0, 1])
    assert r.node_weights == [7.0, 5.0, 6.0]
    # old 0 -> 1, old 1 -> 2, old 2 -> 0
    assert list(zip(r.tails, r.heads)) == [(1, 2), (0, 2)]
    assert r.arc_weights == g.arc_weights
    assert r.has_matrix


def test_reorder_rejects_non_permutation():
    g = _graph(3, [(0, 1)])
    with pytest.raises(ValueError):
        reorder(g, [0, 0, 1])


def test_reorder_by_degree_descending():
    g = _star_plus()
    r = reorder_by_degree(g, True)
    assert r.total_degree == sorted(g.total_degree, reverse=True)
    assert r.m == g.m
    assert all(t <= h for t, h in zip(r.tails, r.heads))
    assert sorted(r.node_weights) == sorted(g.node_weights)
    # the hub keeps its weight at its new label
    assert r.node_weights[0] == g.node_weights[0]


def test_reorder_by_degree_ascending():
    g = _star_plus()
    r = reorder_by_degree(g, False)
    assert r.total_degree == sorted(g.total_degree)
    assert r.node_weights[-1] == g.node_weights[0]


def test_complement_undirected_of_path():
    g = _graph(3, [(0, 1), (1, 2)])
    c = complement_undirected(g)
    assert list(zip(c.tails, c.heads)) == [(0, 2)]
    assert c.arc_weights == [0.0]
    assert c.node_weights == [0.0, 0.0, 0.0]


def test_complement_undirected_edge_count_invariant():
    g = _star_plus()
    c = complement_undirected(g)
    assert c.m + g.m == g.n * (g.n - 1) // 2
    for t, h in zip(c.tails, c.heads):
        assert not g.has_arc(t, h) and not g.has_arc(h, t)


def test_complement_directed():
    g = _graph(3, [(0, 1), (1, 2)])
    c = complement_directed(g)
    assert c.m == 3 * 3 - 3 - g.m
    pairs = set(zip(c.tails, c.heads))
    assert (0, 1) not in pairs and (1, 2) not in pairs
    assert (1, 0) in pairs
    assert all(t != h for t, h in pairs)
    assert set(c.arc_weights) == {1.0}
    assert set(c.node_weights) == {1.0}


def test_complement_requires_matrix():
    g = _graph(3, [(0, 1)], with_matrix=False)
    with pytest.raises(ValueError):
        complement_directed(g)
    with pytest.raises(ValueError):
        complement_undirected(g)


def test_complement_dimension_mismatch_raises():
    # duplicate arcs make the expected count wrong
    g = _graph(3, [(0, 1), (0, 1)])
    with pytest.raises(ValueError):
        complement_undirected(g)


def test_floyd_warshall_path_and_predecessor():
    big = 1e9
    weight = [[0, 1, 5], [big, 0, 1], [big, big, 0]]
    dist, pred = floyd_warshall(weight)
    assert dist[0][2] == 2
    assert pred[0][2] == 1
    assert dist[2][0] == big
    assert pred[2][0] == 2


def test_floyd_warshall_triangle_inequality():
    weight = [[0, 4, 1, 9], [4, 0, 2, 3], [1, 2, 0, 7], [9, 3, 7, 0]]
    dist, _ = floyd_warshall(weight)
    n = len(weight)
    for i in range(n):
        for j in range(n):
            assert dist[i][j] <= weight[i][j]
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_requires_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_is_undirected():
    assert is_undirected([0, 1], [1, 2])
    assert not is_undirected([0, 1], [1, 0])
    assert not is_undirected([2], [2])


def test_is_connected():
    assert is_connected(3, [0, 1], [1, 2])
    assert not is_connected(4, [0, 2], [1, 3])
    assert is_connected(3, [1, 2], [0, 1])


def test_graph_info_triangle():
    edges = [(0, 1), (0, 2), (1, 2)]
    g = _graph(3, edges)
    info = graph_info(g, "tri", g.tails, g.heads)
    assert info == GraphInfo("tri", True, True, 3, 3, 1.0, False, 2, 2)
    assert str(info) == "tri\t1\t1\t3\t3\t1.000000\t0\t2\t2\t"


def test_graph_info_disconnected_and_basic():
    g = _graph(4, [(0, 1), (2, 3)])
    full = graph_info(g, "two", g.tails, g.heads, False)
    assert not full.connected
    assert full.density == pytest.approx(2 / 6)
    basic = graph_info(g, "two", g.tails, g.heads, True)
    assert basic.connected and basic.undirected and basic.basic
    assert basic.min_degree == 1 and basic.max_degree == 1


def test_graph_info_single_node_density():
    g = _graph(1, [])
    info = graph_info(g, "one", [], [], True)
    assert math.isnan(info.density)
    assert info.min_degree == 0