"""Tests for the shortest path algorithm."""

import math
from itertools import permutations

import pytest

from graphalgo.diagnostics import assert_path_weight, debug_context
from graphalgo.graphs import Graph, GraphBuilder, generate_random_graph, shortest_path


def labels(vertices):
    return [v.label for v in vertices]


def brute_force_distance(graph, source, target):
    """Minimum weight over all simple paths, by enumeration."""
    if source == target:
        return 0.0
    others = [v for v in graph.vertices if v != source and v != target]
    best = math.inf
    for k in range(len(others) + 1):
        for middle in permutations(others, k):
            path = [source, *middle, target]
            total = 0.0
            for u, v in zip(path, path[1:]):
                edge = graph.edge_between(u, v)
                if edge is None:
                    break
                total += edge.weight
            else:
                best = min(best, total)
    return best


class TestShortestPath:
    """Tests for Dijkstra between two vertices."""

    def test_shortest_path_simple(self):
        """A->B->C beats the direct A->C edge."""
        G = (
            GraphBuilder(directed=True)
            .edge("A", "B", 1.0)
            .edge("B", "C", 2.0)
            .edge("A", "C", 5.0)
            .build()
        )

        result = shortest_path(G, G.find_vertex("A"), G.find_vertex("C"))

        assert result.exists is True
        assert labels(result.path) == ["A", "B", "C"]
        assert result.total_weight == 3.0

    def test_shortest_path_undirected_uses_both_orientations(self):
        G = GraphBuilder().edge("B", "A", 2.0).edge("C", "B", 2.0).build()
        result = shortest_path(G, G.find_vertex("A"), G.find_vertex("C"))

        assert labels(result.path) == ["A", "B", "C"]
        assert result.total_weight == 4.0

    def test_shortest_path_directed_respects_direction(self):
        G = GraphBuilder(directed=True).edge("B", "A", 1.0).build()
        result = shortest_path(G, G.find_vertex("A"), G.find_vertex("B"))

        assert result.exists is False
        assert result.path == []
        assert math.isinf(result.total_weight)

    def test_shortest_path_unreachable(self, dag):
        result = shortest_path(dag, dag.find_vertex("A"), dag.find_vertex("F"))
        assert result.exists is False
        assert result.path == []
        assert result.total_weight == float("inf")

    def test_shortest_path_source_equals_target(self, square):
        a = square.find_vertex("A")
        result = shortest_path(square, a, a)
        assert result.exists is True
        assert result.path == [a]
        assert result.total_weight == 0.0

    def test_shortest_path_parallel_edges_first_wins(self):
        """The first edge inserted between two vertices supplies the weight."""
        G = Graph()
        G.add_vertex(0)
        G.add_vertex(1)
        G.add_edge(0, 1, 5.0)
        G.add_edge(1, 0, 1.0)

        result = shortest_path(G, 0, 1)
        assert result.total_weight == 5.0

    def test_shortest_path_tie_break_by_vertex_order(self):
        """Equal-cost paths resolve through the vertex settled first."""
        G = Graph()
        for i in range(4):
            G.add_vertex(i)
        G.add_edge(0, 2, 1.0)
        G.add_edge(0, 1, 1.0)
        G.add_edge(2, 3, 1.0)
        G.add_edge(1, 3, 1.0)

        result = shortest_path(G, 0, 3)
        assert [v.id for v in result.path] == [0, 1, 3]
        assert result.total_weight == 2.0

    def test_shortest_path_missing_endpoints(self, square):
        assert shortest_path(square, None, 1).exists is False
        assert shortest_path(square, 0, None).exists is False
        assert shortest_path(square, 0, 42).exists is False
        assert shortest_path(Graph(), 0, 1).exists is False

    def test_shortest_path_negative_weights_error(self):
        G = GraphBuilder(directed=True).edge("A", "B", -1.0).build()

        with pytest.raises(ValueError, match="non-negative"):
            shortest_path(G, 0, 1)

    def test_square_scenario(self, square):
        result = shortest_path(square, square.find_vertex("A"), square.find_vertex("C"))
        assert result.total_weight == 2.0
        assert labels(result.path) == ["A", "B", "C"]

    @pytest.mark.parametrize("directed", [False, True])
    def test_matches_brute_force(self, rng, directed):
        """No alternative simple path is strictly lighter."""
        for _ in range(15):
            G = generate_random_graph(6, 9, directed, True, rng=rng)
            for target in G.vertices:
                result = shortest_path(G, G.vertex(0), target)
                expected = brute_force_distance(G, G.vertex(0), target)

                if math.isinf(expected):
                    assert result.exists is False
                else:
                    assert result.exists is True
                    assert result.total_weight == pytest.approx(expected)
                    assert result.path[0] == G.vertex(0)
                    assert result.path[-1] == target
                    assert_path_weight(G, result)

    def test_shortest_path_in_debug_mode(self, square):
        with debug_context(True):
            result = shortest_path(square, 0, 2)
        assert result.exists
