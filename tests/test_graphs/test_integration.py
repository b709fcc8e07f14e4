"""Integration tests for the graphs package within graphalgo."""

import graphalgo


def test_graphs_import_from_main():
    """Graph types and algorithms are importable from the top-level package."""
    from graphalgo import Graph, GraphBuilder, bfs, detect_cycles, shortest_path

    assert Graph is not None
    assert GraphBuilder is not None
    assert bfs is not None
    assert detect_cycles is not None
    assert shortest_path is not None


def test_graphs_in_all_exports():
    graph_exports = {
        "Vertex", "Edge", "Graph", "GraphBuilder",
        "bfs", "dfs", "shortest_path", "minimum_spanning_tree",
        "detect_cycles", "canonical_cycle_key", "transitive_closure",
        "degree_sequence", "generate_random_graph", "list_algorithms",
    }
    assert graph_exports.issubset(set(graphalgo.__all__)), "Graph exports missing from __all__"


def test_all_names_resolve():
    for name in graphalgo.__all__:
        assert hasattr(graphalgo, name), name


def test_version():
    assert graphalgo.__version__ == "0.1.0"


def test_end_to_end_on_generated_graph():
    """Run every algorithm on one generated graph and cross-check the results."""
    G = graphalgo.generate_random_graph(8, 12, False, True, seed=5)
    start = G.vertex(0)

    with graphalgo.debug_context(True):
        reached = graphalgo.bfs(G, start)
        forest = graphalgo.dfs(G, start)
        closure = graphalgo.transitive_closure(G, start)
        mst = graphalgo.minimum_spanning_tree(G)
        degrees = graphalgo.degree_sequence(G)
        cycles = graphalgo.detect_cycles(G)

    assert set(reached.order) - {start} == set(closure.direct)
    assert len(forest.order) == G.number_of_vertices()
    assert sum(degrees.sequence) == 2 * G.number_of_edges()
    assert len(mst) <= G.number_of_vertices() - 1
    # 12 edges on 8 vertices cannot be a forest
    assert cycles.has_cycle

    for target in reached.order:
        result = graphalgo.shortest_path(G, start, target)
        assert result.exists
        assert len(result.path) - 1 >= reached.distance[target]
        graphalgo.assert_path_weight(G, result)


def test_describe_results_with_labels():
    G = (
        graphalgo.GraphBuilder(directed=True)
        .edge("A", "B", 1.0)
        .edge("B", "C", 2.0)
        .edge("A", "C", 5.0)
        .build()
    )
    result = graphalgo.shortest_path(G, G.find_vertex("A"), G.find_vertex("C"))
    assert graphalgo.format_path(result.path) == "A -> B -> C"
    assert [G.describe_edge(e) for e in graphalgo.minimum_spanning_tree(G)] == [
        "A -> B (1.0)",
        "B -> C (2.0)",
    ]
