import math

import pytest

from dynsssp.incremental import (
    EdgeChange,
    SSSPResult,
    dijkstra,
    format_shortest_paths,
    read_changes,
    read_matrix_market,
    single_change,
    update_vertex,
)
from dynsssp.metis import GraphFormatError


def _edges(adj):
    for u, edges in enumerate(adj):
        for v, w in edges:
            yield u, v, w


def _assert_shortest_path_invariants(adj, result, start):
    assert result.dist[start] == 0
    for u, v, w in _edges(adj):
        if result.dist[u] != math.inf:
            assert result.dist[v] <= result.dist[u] + w
    for node, parent in enumerate(result.parent):
        if parent != -1:
            assert (node, ) and any(v == node and result.dist[parent] + w == result.dist[node]
                                    for v, w in adj[parent])


def _sample():
    return [[], [(2, 4), (3, 1)], [(4, 2)], [(2, 1)], [], []]


def test_dijkstra_satisfies_invariants():
    adj = _sample()
    result = dijkstra(adj, 1)
    _assert_shortest_path_invariants(adj, result, 1)
    assert result.path_to(2) == [1, 3, 2]


def test_dijkstra_unreachable_node():
    result = dijkstra(_sample(), 1)
    assert result.dist[5] == math.inf
    assert result.parent[5] == -1
    with pytest.raises(ValueError):
        result.path_to(5)


def test_path_to_start_is_itself():
    result = dijkstra(_sample(), 1)
    assert result.path_to(1) == [1]


def test_path_to_detects_cycle():
    result = SSSPResult(dist=[math.inf, 1, 1], parent=[-1, 2, 1])
    with pytest.raises(ValueError):
        result.path_to(1)


def test_update_vertex_improves_and_reports():
    adj = [[], [(2, 3)], []]
    result = SSSPResult(dist=[math.inf, 0, math.inf], parent=[-1, -1, -1])
    assert update_vertex(2, adj, result) is True
    assert result.dist[2] == 3
    assert result.parent[2] == 1
    assert update_vertex(2, adj, result) is False


def test_insertion_shortcut_matches_recomputation():
    adj = [[], [(2, 10), (3, 1)], [], []]
    result = dijkstra(adj, 1)
    single_change("I", 3, 2, 1, adj, result)
    assert (3 in [v for v, _ in adj[3]]) is False
    assert (2, 1) in adj[3]
    fresh = dijkstra(adj, 1)
    assert result.dist == fresh.dist
    assert result.parent == fresh.parent


def test_insertion_reaches_unreachable_node():
    adj = [[], [(2, 5)], [], []]
    result = dijkstra(adj, 1)
    single_change("I", 2, 3, 4, adj, result)
    fresh = dijkstra(adj, 1)
    assert result.dist == fresh.dist
    assert result.path_to(3) == [1, 2, 3]


def test_deletion_with_alternative_path():
    adj = [[], [(2, 1), (3, 1)], [], [(2, 5)]]
    result = dijkstra(adj, 1)
    single_change("D", 1, 2, 1, adj, result)
    assert all(v != 2 for v, _ in adj[1])
    fresh = dijkstra(adj, 1)
    assert result.dist == fresh.dist
    assert result.path_to(2) == [1, 3, 2]


def test_deletion_disconnects_node():
    adj = [[], [(2, 1), (3, 5)], [(3, 1)], []]
    result = dijkstra(adj, 1)
    single_change("D", 1, 2, 1, adj, result)
    assert result.dist[2] == math.inf
    assert result.parent[2] == -1
    assert adj[1] == [(3, 5)]


def test_deleting_non_tree_edge_keeps_result():
    adj = [[], [(2, 1), (3, 1)], [], [(2, 5)]]
    result = dijkstra(adj, 1)
    before = (list(result.dist), list(result.parent))
    single_change("D", 3, 2, 5, adj, result)
    assert (result.dist, result.parent) == before
    assert adj[3] == []


def test_read_matrix_market(tmp_path):
    path = tmp_path / "g.mtx"
    path.write_text("%%MatrixMarket matrix coordinate\n% comment\n3 3 3\n1 2 7\n2 9 1\n3 1 2\n")
    nrows, adj = read_matrix_market(path)
    assert nrows == 3
    assert adj[1] == [(2, 7)]
    assert adj[2] == []
    assert adj[3] == [(1, 2)]


def test_read_matrix_market_bad_header(tmp_path):
    path = tmp_path / "g.mtx"
    path.write_text("% comment\nthree rows\n")
    with pytest.raises(GraphFormatError):
        read_matrix_market(path)


def test_read_matrix_market_stops_at_non_integer(tmp_path):
    path = tmp_path / "g.mtx"
    path.write_text("2 2 2\n1 2 3\n2 x 1\n2 1 1\n")
    _, adj = read_matrix_market(path)
    assert adj[1] == [(2, 3)]
    assert adj[2] == []


def test_read_changes(tmp_path):
    path = tmp_path / "changes.txt"
    path.write_text("% header\n\nI 1 2 3\nD 4 5 6\nbad line\nI 1 2\n")
    assert read_changes(path) == [EdgeChange("I", 1, 2, 3), EdgeChange("D", 4, 5, 6)]


def test_format_shortest_paths():
    adj = [[], [(2, 7)], [], []]
    result = dijkstra(adj, 1)
    text = format_shortest_paths(1, 3, result)
    assert text == (
        "\nShortest paths from node 1:\n"
        "To node 2: Distance = 7, Path = 1 -> 2\n"
        "To node 3: Unreachable\n"
    )