import pytest

from dynsssp.metis import (
    Edge,
    GraphFormatError,
    apply_changes,
    parse_metis_graph,
    read_metis_graph,
)

WEIGHTED = ["% a comment\n", "3 2 1\n", "2 5\n", "1 5 3 7\n", "2 7\n"]


def test_weighted_graph_is_zero_based():
    adj = parse_metis_graph(WEIGHTED)
    assert len(adj) == 3
    assert [e.to + 1 for e in adj[1]] == [1, 3]
    assert [e.weight for e in adj[1]] == [5, 7]
    assert [e.to + 1 for e in adj[2]] == [2]


def test_unweighted_graph_has_unit_weights():
    adj = parse_metis_graph(["3 2\n", "2 3\n", "1\n", "1\n"])
    assert [e.to + 1 for e in adj[0]] == [2, 3]
    assert all(e.weight == 1 for edges in adj for e in edges)


@pytest.mark.parametrize("fmt, weighted", [(1, True), (10, True), (11, True), (0, False), (100, False)])
def test_format_code_controls_weights(fmt, weighted):
    adj = parse_metis_graph([f"2 1 {fmt}\n", "2 9\n", "\n"])
    if weighted:
        assert adj[0] == [Edge(adj[0][0].to, 9)]
        assert adj[0][0].to + 1 == 2
    else:
        assert [e.to + 1 for e in adj[0]] == [2, 9]


def test_empty_vertex_line_means_no_edges():
    adj = parse_metis_graph(["2 0\n", "\n", "\n"])
    assert adj == [[], []]


def test_missing_adjacency_line_raises():
    with pytest.raises(GraphFormatError):
        parse_metis_graph(["3 2 1\n", "2 5\n"])


def test_missing_weight_raises():
    with pytest.raises(GraphFormatError):
        parse_metis_graph(["2 1 1\n", "2\n", "1 4\n"])


def test_missing_header_raises():
    with pytest.raises(GraphFormatError):
        parse_metis_graph(["% only comments\n"])


def test_non_integer_raises():
    with pytest.raises(GraphFormatError):
        parse_metis_graph(["2 1\n", "x\n", "\n"])


def test_read_matches_parse(tmp_path):
    path = tmp_path / "g.graph"
    path.write_text("".join(WEIGHTED))
    assert read_metis_graph(path) == parse_metis_graph(WEIGHTED)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_metis_graph(tmp_path / "absent.graph")


def test_apply_changes_insert_and_delete(tmp_path):
    adj = parse_metis_graph(WEIGHTED)
    changes = tmp_path / "changes.txt"
    changes.write_text("I 0 2 4\nD 1 2 7\nD 1 0 99\ngarbage\nI 2\n")
    apply_changes(adj, changes)
    assert Edge(2, 4) in adj[0]
    assert Edge(2, 7) not in adj[1]
    assert [e.to for e in adj[1]] == [0]
    assert adj[2] == parse_metis_graph(WEIGHTED)[2]


def test_delete_requires_matching_weight(tmp_path):
    adj = parse_metis_graph(WEIGHTED)
    before = list(adj[1])
    changes = tmp_path / "changes.txt"
    changes.write_text("D 1 0 6\n")
    apply_changes(adj, changes)
    assert adj[1] == before


def test_apply_changes_unknown_vertex_raises(tmp_path):
    adj = parse_metis_graph(WEIGHTED)
    changes = tmp_path / "changes.txt"
    changes.write_text("I 7 0 1\n")
    with pytest.raises(GraphFormatError):
        apply_changes(adj, changes)