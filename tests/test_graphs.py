import math

import pytest

from algoteca.graphs import Edge, bfs, dfs, dijkstra, floyd_warshall, kruskal


def _adjacency(count, edges):
    matrix = [[0] * count for _ in range(count)]
    for u, v, weight in edges:
        matrix[u][v] = weight
    return matrix


def _distances(count, edges):
    matrix = [[0 if i == j else math.inf for j in range(count)] for i in range(count)]
    for u, v, weight in edges:
        matrix[u][v] = weight
    return matrix


CYCLE = _adjacency(5, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 0, 1)])
STAR_EDGES = [(0, 1, 1), (0, 2, 1), (1, 3, 1)]
CHAIN_EDGES = [(0, 1, 10), (1, 2, 20), (2, 3, 30), (3, 4, 40)]
SOURCE_MST_EDGES = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]


def test_bfs_on_cycle():
    assert bfs(CYCLE, 0) == [0, 1, 2, 3, 4]


def test_dfs_goes_deep_first():
    assert dfs(_adjacency(4, STAR_EDGES), 0) == [0, 1, 3, 2]


def test_bfs_visits_in_order_of_hop_count():
    order = bfs(_adjacency(4, STAR_EDGES), 0)
    hops = floyd_warshall(_distances(4, STAR_EDGES))[0]
    levels = [hops[node] for node in order]
    assert levels == sorted(levels)
    assert sorted(order) == [0, 1, 2, 3]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversals_visit_only_reachable_nodes_once(traverse):
    graph = _adjacency(4, [(0, 1, 1), (1, 2, 1), (2, 0, 1)])
    order = traverse(graph, 1)
    assert order[0] == 1
    assert len(order) == len(set(order))
    assert set(order) == {0, 1, 2}


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversals_reject_bad_start(traverse):
    with pytest.raises(ValueError):
        traverse(CYCLE, 5)


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        bfs([[0, 1], [1]], 0)


def test_dijkstra_agrees_with_floyd_on_chain():
    shortest = dijkstra(_adjacency(5, CHAIN_EDGES), 0)
    assert shortest == floyd_warshall(_distances(5, CHAIN_EDGES))[0]
    assert shortest == sorted(shortest)


def test_dijkstra_direct_edge():
    dist = dijkstra(_adjacency(3, [(0, 1, 10)]), 0)
    assert dist[0] == 0
    assert dist[1] == 10
    assert dist[2] == math.inf


def test_dijkstra_prefers_shorter_detour():
    dist = dijkstra(_adjacency(3, [(0, 1, 10), (0, 2, 1), (2, 1, 2)]), 0)
    assert dist[1] < 10
    assert dist[1] == dist[2] + 2


def test_dijkstra_rejects_bad_start():
    with pytest.raises(ValueError):
        dijkstra(_adjacency(2, []), 3)


def test_floyd_satisfies_triangle_inequality():
    dist = floyd_warshall(_distances(5, CHAIN_EDGES + [(4, 0, 3), (1, 3, 100)]))
    for i in range(5):
        assert dist[i][i] == 0
        for j in range(5):
            for k in range(5):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_keeps_unreachable_pairs_infinite_and_input_untouched():
    original = _distances(5, CHAIN_EDGES)
    snapshot = [row[:] for row in original]
    dist = floyd_warshall(original)
    assert dist[4][0] == math.inf
    assert dist[0][1] == 10
    assert original == snapshot


def test_kruskal_source_example():
    tree = kruskal(4, SOURCE_MST_EDGES)
    assert tree.total_weight == 19
    assert len(tree.edges) == 3
    assert tree.total_weight == sum(edge.weight for edge in tree.edges)


def test_kruskal_takes_edges_in_weight_order_from_input():
    tree = kruskal(4, [Edge(*edge) for edge in SOURCE_MST_EDGES])
    weights = [edge.weight for edge in tree.edges]
    assert weights == sorted(weights)
    assert set(tree.edges) <= {Edge(*edge) for edge in SOURCE_MST_EDGES}


def test_kruskal_skips_cycle_closing_edge():
    tree = kruskal(3, [(0, 1, 4), (1, 2, 6), (0, 2, 5)])
    assert len(tree.edges) == 2
    assert all(edge.weight != 6 for edge in tree.edges)


def test_kruskal_on_disconnected_graph_gives_forest():
    tree = kruskal(4, [(0, 1, 1), (2, 3, 2)])
    assert len(tree.edges) == 2
    assert tree.total_weight == 3


def test_kruskal_rejects_unknown_node():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 5, 1)])