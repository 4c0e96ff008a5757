import io

import pytest

from dsaworks.graph import Graph, adjacency_with_self, main


def test_undirected_edge_stored_both_ways():
    g = Graph()
    g.add_edge(1, 2, False)
    assert g.adj == {1: [2], 2: [1]}


def test_directed_edge_stored_once():
    g = Graph()
    g.add_edge(1, 2, True)
    assert g.adj == {1: [2]}


def test_neighbours_keep_insertion_order():
    g = Graph()
    g.add_edge(0, 3, True)
    g.add_edge(0, 1, True)
    g.add_edge(0, 2, True)
    assert g.adj[0] == [3, 1, 2]


def test_format_adjacency_layout():
    g = Graph()
    g.add_edge(1, 2, False)
    assert g.format_adjacency() == "1->2 ,  \n2->1 ,  \n"


def test_format_adjacency_empty_graph():
    assert Graph().format_adjacency() == ""


def test_graph_with_string_nodes():
    g = Graph()
    g.add_edge("a", "b", False)
    g.add_edge("a", "c", False)
    assert g.adj["a"] == ["b", "c"]
    assert g.adj["c"] == ["a"]


def test_adjacency_with_self_worked_example():
    edges = [[0, 1], [1, 2], [2, 3]]
    assert adjacency_with_self(4, edges) == [[0, 1], [1, 0, 2], [2, 1, 3], [3, 2]]


def test_adjacency_with_self_ignores_out_of_range():
    result = adjacency_with_self(2, [(0, 1), (1, 5)])
    assert result == [[0, 1], [1, 0]]


def test_adjacency_with_self_each_list_starts_with_node():
    result = adjacency_with_self(6, [(0, 5), (2, 3)])
    assert [row[0] for row in result] == list(range(6))


def test_main_prints_adjacency(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2\n0 1\n1 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "0->1 ,  \n" in out
    assert "1->0 ,  2 ,  \n" in out
    assert out.startswith("Enter the number of nodes : \n")


def test_main_rejects_missing_edges(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2 0 1"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_non_integer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 x"))
    assert main([]) == 1
    assert "invalid integer" in capsys.readouterr().err


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])