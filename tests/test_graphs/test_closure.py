"""Tests for transitive closure."""

from graphalgo.diagnostics import debug_context
from graphalgo.graphs import Graph, GraphBuilder, generate_random_graph, transitive_closure


def labels(vertices):
    return [v.label for v in vertices]


def test_closure_on_dag(dag):
    result = transitive_closure(dag, dag.find_vertex("A"))

    assert sorted(labels(result.direct)) == ["B", "C", "D", "E"]
    assert result.inverse == []


def test_closure_middle_vertex(dag):
    result = transitive_closure(dag, dag.find_vertex("D"))

    assert labels(result.direct) == ["E"]
    assert sorted(labels(result.inverse)) == ["A", "B", "C"]


def test_closure_discovery_order(dag):
    """Later neighbors are explored first by the explicit stack."""
    result = transitive_closure(dag, dag.find_vertex("A"))
    assert labels(result.direct) == ["C", "D", "E", "B"]


def test_closure_isolated_vertex(dag):
    result = transitive_closure(dag, dag.find_vertex("F"))
    assert result.direct == []
    assert result.inverse == []


def test_closure_excludes_start_on_cycle():
    G = GraphBuilder(directed=True).edge("A", "B").edge("B", "C").edge("C", "A").build()
    result = transitive_closure(G, G.find_vertex("A"))

    assert sorted(labels(result.direct)) == ["B", "C"]
    assert sorted(labels(result.inverse)) == ["B", "C"]


def test_closure_undirected_both_directions_equal(square):
    result = transitive_closure(square, square.find_vertex("B"))

    assert sorted(labels(result.direct)) == ["A", "C", "D"]
    assert result.direct == result.inverse


def test_closure_undirected_ignores_edge_orientation():
    """Edges stored as B-A still make B reachable from A."""
    G = GraphBuilder().edge("B", "A").edge("C", "B").build()
    result = transitive_closure(G, G.find_vertex("A"))
    assert sorted(labels(result.direct)) == ["B", "C"]


def test_closure_missing_vertex(square):
    assert transitive_closure(square, None).direct == []
    assert transitive_closure(square, 99).inverse == []
    assert transitive_closure(Graph(), 0).direct == []


def test_closure_is_reachability(rng):
    """Direct closure of u contains v exactly when the inverse closure of v contains u."""
    for _ in range(10):
        G = generate_random_graph(7, 9, True, False, rng=rng)
        closures = {v: transitive_closure(G, v) for v in G.vertices}
        for u in G.vertices:
            for v in G.vertices:
                if u == v:
                    continue
                assert (v in closures[u].direct) == (u in closures[v].inverse)


def test_closure_in_debug_mode(dag):
    with debug_context(True):
        result = transitive_closure(dag, dag.find_vertex("B"))
    assert sorted(labels(result.direct)) == ["D", "E"]
