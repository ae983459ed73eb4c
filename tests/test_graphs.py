import pytest

from algolab.graphs import (
    INF,
    Edge,
    dijkstra,
    floyd_warshall,
    format_distance_matrix,
    kruskal,
    prim,
    spanning_tree_cost,
    topological_sort,
)

KRUSKAL_GRAPH = [
    [0, 4, 4, 0, 0, 0],
    [4, 0, 2, 0, 0, 0],
    [4, 2, 0, 3, 4, 2],
    [0, 0, 3, 0, 3, 0],
    [0, 0, 4, 3, 0, 3],
    [0, 0, 2, 0, 3, 0],
]

PRIM_GRAPH = [
    [0, 10, 15, 0, 0],
    [4, 0, 45, 18, 32],
    [50, 34, 0, 51, 48],
    [0, 32, 23, 0, 33],
    [0, 36, 65, 34, 0],
]

FLOYD_GRAPH = [
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
]

DIJKSTRA_GRAPH = [
    [0, 8, 0, 0, 0, 0],
    [2, 0, 5, 0, 0, 0],
    [0, 3, 0, 5, 0, 7],
    [0, 0, 9, 0, 8, 10],
    [0, 0, 0, 10, 0, 9],
    [0, 0, 5, 12, 13, 0],
]


def _connects_all(size, edges):
    reached = {0}
    changed = True
    while changed:
        changed = False
        for e in edges:
            if (e.u in reached) != (e.v in reached):
                reached |= {e.u, e.v}
                changed = True
    return reached == set(range(size))


def test_kruskal_builds_spanning_tree():
    tree = kruskal(KRUSKAL_GRAPH)
    assert len(tree) == len(KRUSKAL_GRAPH) - 1
    assert _connects_all(len(KRUSKAL_GRAPH), tree)
    for e in tree:
        assert KRUSKAL_GRAPH[e.u][e.v] == e.w


def test_kruskal_takes_edges_in_weight_order():
    weights = [e.w for e in kruskal(KRUSKAL_GRAPH)]
    assert weights == sorted(weights)


def test_kruskal_and_prim_agree_on_cost_for_symmetric_graph():
    assert spanning_tree_cost(kruskal(KRUSKAL_GRAPH)) == spanning_tree_cost(
        prim(KRUSKAL_GRAPH)
    )


def test_kruskal_cost_of_sample_graph():
    assert spanning_tree_cost(kruskal(KRUSKAL_GRAPH)) == 14


def test_kruskal_forest_on_disconnected_graph():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert kruskal(matrix) == [Edge(1, 0, 1)]


def test_spanning_tree_cost_sums_weights():
    assert spanning_tree_cost([Edge(0, 1, 3), Edge(1, 2, 7)]) == 10
    assert spanning_tree_cost([]) == 0


def test_prim_grows_from_vertex_zero():
    tree = prim(PRIM_GRAPH)
    assert len(tree) == len(PRIM_GRAPH) - 1
    seen = {0}
    for e in tree:
        assert e.u in seen
        assert e.v not in seen
        assert PRIM_GRAPH[e.u][e.v] == e.w
        seen.add(e.v)
    assert seen == set(range(len(PRIM_GRAPH)))
    assert tree[0] == Edge(0, 1, 10)


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim([[0, 0], [0, 0]])


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        kruskal([[0, 1], [1]])


def test_floyd_warshall_matches_dijkstra_from_every_source():
    dist = floyd_warshall(FLOYD_GRAPH)
    as_zero = [
        [0 if value == INF else value for value in row] for row in FLOYD_GRAPH
    ]
    for source in range(len(FLOYD_GRAPH)):
        assert dijkstra(as_zero, source) == dist[source]


def test_floyd_warshall_triangle_inequality_and_input_untouched():
    original = [row[:] for row in FLOYD_GRAPH]
    dist = floyd_warshall(FLOYD_GRAPH)
    assert FLOYD_GRAPH == original
    size = len(dist)
    for i in range(size):
        assert dist[i][i] == 0
        for j in range(size):
            for k in range(size):
                if dist[i][k] != INF and dist[k][j] != INF:
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_format_distance_matrix_layout():
    text = format_distance_matrix([[0, INF], [7, 0]])
    assert text == "  0 INF \n  7   0 \n"


def test_format_distance_matrix_custom_inf():
    assert format_distance_matrix([[-1, 2]], inf=-1) == "INF   2 \n"


def test_dijkstra_symmetry_with_floyd_on_sample():
    floyd_input = [
        [0 if i == j else (w if w else INF) for j, w in enumerate(row)]
        for i, row in enumerate(DIJKSTRA_GRAPH)
    ]
    assert dijkstra(DIJKSTRA_GRAPH, 0) == floyd_warshall(floyd_input)[0]


def test_dijkstra_unreachable_vertex_is_inf():
    assert dijkstra([[0, 0], [3, 0]], 0) == [0, INF]


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(DIJKSTRA_GRAPH, 6)


def test_topological_sort_sample():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    assert topological_sort(6, edges) == [5, 4, 2, 3, 1, 0]


def test_topological_sort_respects_edges():
    edges = [(0, 3), (3, 2), (1, 2), (4, 0), (4, 1)]
    order = topological_sort(5, edges)
    assert sorted(order) == list(range(5))
    position = {v: i for i, v in enumerate(order)}
    for src, dest in edges:
        assert position[src] < position[dest]


def test_topological_sort_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        topological_sort(2, [(0, 2)])