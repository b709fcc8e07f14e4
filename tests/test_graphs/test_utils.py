"""Tests for graph utility functions."""

import pytest

from graphalgo.graphs import (
    Graph,
    GraphBuilder,
    Vertex,
    format_path,
    path_weight,
    reconstruct_path,
    resolve_vertex,
)


class TestResolveVertex:
    """Tests for resolve_vertex."""

    def test_by_id_and_vertex(self):
        G = Graph()
        stored = G.add_vertex(2, label="B")

        assert resolve_vertex(G, 2) is stored
        assert resolve_vertex(G, Vertex(2, "other")) is stored

    def test_missing(self):
        G = Graph()
        assert resolve_vertex(G, None) is None
        assert resolve_vertex(G, 0) is None
        assert resolve_vertex(G, Vertex(0)) is None


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_reconstruct_path_simple(self):
        a, b, c, d = (Vertex(i, name) for i, name in enumerate("ABCD"))
        parent = {a: None, b: a, c: b, d: c}

        path = reconstruct_path(parent, a, d)
        assert [v.label for v in path] == ["A", "B", "C", "D"]

    def test_reconstruct_path_same_node(self):
        a = Vertex(0, "A")
        assert reconstruct_path({a: None}, a, a) == [a]

    def test_reconstruct_path_broken_chain(self):
        a, b, c = (Vertex(i) for i in range(3))
        assert reconstruct_path({c: b}, a, c) == []

    def test_reconstruct_path_loop_terminates(self):
        a, b, c = (Vertex(i) for i in range(3))
        assert reconstruct_path({b: c, c: b}, a, c) == []


class TestPathWeight:
    """Tests for path_weight."""

    def test_sums_first_edges(self):
        G = GraphBuilder().edge("A", "B", 1.5).edge("B", "C", 2.0).edge("B", "C", 0.5).build()
        path = [G.find_vertex(name) for name in "ABC"]
        assert path_weight(G, path) == 3.5

    def test_trivial_paths(self):
        G = GraphBuilder().edge("A", "B").build()
        assert path_weight(G, []) == 0.0
        assert path_weight(G, [G.find_vertex("A")]) == 0.0

    def test_missing_edge(self):
        G = GraphBuilder(directed=True).edge("A", "B").build()
        with pytest.raises(ValueError, match="No edge"):
            path_weight(G, [G.find_vertex("B"), G.find_vertex("A")])


def test_format_path():
    a, b, c = (Vertex(i, name) for i, name in enumerate("ABC"))
    assert format_path([a, b, c]) == "A -> B -> C"
    assert format_path([a, b], separator="->") == "A->B"
    assert format_path([]) == ""
