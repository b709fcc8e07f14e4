"""Invariant checks for graphs and algorithm results.

Each ``assert_*`` function raises ``ValueError`` describing the first
violation it finds. They are used by the algorithms in debug mode and by the
test suite.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..graphs.closure import ClosureResult
    from ..graphs.core import Edge, Graph
    from ..graphs.degree import DegreeResult
    from ..graphs.shortest import PathResult
    from ..graphs.traversal import BFSResult, DFSResult


def assert_bfs_consistent(graph: Graph, result: BFSResult) -> None:
    """
    Assert that a BFS result forms a valid breadth-first tree.

    Parameters
    ----------
    graph:
        Graph the search ran on.
    result:
        Result of ``bfs``.

    Raises
    ------
    ValueError
        If a vertex is visited twice, the root is inconsistent, or a
        distance does not equal its parent's distance plus one.
    """
    if not result.order:
        return

    if len(set(result.order)) != len(result.order):
        raise ValueError("BFS visited a vertex more than once.")
    if set(result.order) != set(result.distance) or set(result.order) != set(result.parent):
        raise ValueError("BFS order, distance and parent cover different vertices.")

    root = result.order[0]
    if result.distance[root] != 0 or result.parent[root] is not None:
        raise ValueError(f"BFS root {root} must have distance 0 and no parent.")

    for vertex in result.order[1:]:
        parent = result.parent[vertex]
        if parent is None:
            raise ValueError(f"BFS vertex {vertex} has no parent.")
        if result.distance[vertex] != result.distance[parent] + 1:
            raise ValueError(
                f"BFS distance of {vertex} ({result.distance[vertex]}) is not "
                f"parent {parent} distance + 1."
            )
        if graph.edge_between(parent, vertex) is None:
            raise ValueError(f"BFS tree edge {parent} -> {vertex} is not in the graph.")


def assert_dfs_nested(graph: Graph, result: DFSResult) -> None:
    """
    Assert the DFS covers every vertex and its intervals nest.

    Parameters
    ----------
    graph:
        Graph the search ran on.
    result:
        Result of ``dfs``.

    Raises
    ------
    ValueError
        If a vertex is missing, ``discovery >= finish`` for some vertex, or
        two intervals partially overlap.
    """
    if not result.order:
        return

    if len(result.order) != graph.number_of_vertices() or set(result.order) != set(graph.vertices):
        raise ValueError("DFS did not visit every vertex exactly once.")

    intervals = []
    for vertex in result.order:
        start = result.discovery_time[vertex]
        end = result.finish_time[vertex]
        if start >= end:
            raise ValueError(f"DFS discovery of {vertex} is not before its finish.")
        intervals.append((start, end, vertex))

    # Sorted by discovery, an interval must either close before the next one
    # opens or contain it entirely.
    intervals.sort()
    open_intervals: list = []
    for start, end, vertex in intervals:
        while open_intervals and open_intervals[-1][1] < start:
            open_intervals.pop()
        if open_intervals and end > open_intervals[-1][1]:
            raise ValueError(
                f"DFS intervals of {open_intervals[-1][2]} and {vertex} partially overlap."
            )
        open_intervals.append((start, end, vertex))


def assert_path_weight(graph: Graph, result: PathResult, atol: float = 1e-9) -> None:
    """
    Assert that a shortest-path result is internally consistent.

    Parameters
    ----------
    graph:
        Graph the search ran on.
    result:
        Result of ``shortest_path``.
    atol:
        Absolute tolerance for the weight comparison.

    Raises
    ------
    ValueError
        If the path is broken or its weight does not match ``total_weight``.
    """
    if not result.exists:
        if result.path or not math.isinf(result.total_weight):
            raise ValueError("Missing path must be empty with infinite weight.")
        return

    if not result.path:
        raise ValueError("Existing path must not be empty.")

    total = 0.0
    for u, v in zip(result.path, result.path[1:]):
        edge = graph.edge_between(u, v)
        if edge is None:
            raise ValueError(f"Path step {u} -> {v} is not an edge.")
        total += edge.weight

    if abs(total - result.total_weight) > atol:
        raise ValueError(
            f"Path weight {total} does not match reported total {result.total_weight}."
        )


def assert_spanning_forest(graph: Graph, edges: Sequence[Edge]) -> None:
    """
    Assert that edges form a spanning forest of the underlying graph.

    Parameters
    ----------
    graph:
        Graph the tree was computed for (directed graphs are checked
        against their underlying graph).
    edges:
        Result of ``minimum_spanning_tree``.

    Raises
    ------
    ValueError
        If the edges close a cycle or leave two connected vertices apart.
    """
    from ..graphs.mst import UnionFind

    working = graph.underlying_graph() if graph.directed else graph
    vertex_ids = [vertex.id for vertex in working.vertices]

    forest = UnionFind(vertex_ids)
    for edge in edges:
        if not forest.union(edge.source, edge.target):
            raise ValueError(f"Spanning forest edge {edge} closes a cycle.")

    components = UnionFind(vertex_ids)
    for edge in working.edges:
        components.union(edge.source, edge.target)

    expected = len(vertex_ids) - components.count_sets()
    if len(edges) != expected:
        raise ValueError(
            f"Spanning forest has {len(edges)} edges, expected {expected}."
        )


def assert_degree_sum(graph: Graph, result: DegreeResult) -> None:
    """
    Assert the handshake identities for a degree result.

    Parameters
    ----------
    graph:
        Graph the degrees were computed for.
    result:
        Result of ``degree_sequence``.

    Raises
    ------
    ValueError
        If the degree sum is not twice the edge count, or in/out degree sums
        differ from the edge count on a directed graph.
    """
    edge_count = graph.number_of_edges()
    if graph.directed:
        if sum(result.out_degrees.values()) != edge_count:
            raise ValueError("Out-degree sum does not equal the edge count.")
        if sum(result.in_degrees.values()) != edge_count:
            raise ValueError("In-degree sum does not equal the edge count.")
        edge_count = graph.underlying_graph().number_of_edges()

    if sum(result.degrees.values()) != 2 * edge_count:
        raise ValueError(
            f"Degree sum {sum(result.degrees.values())} is not twice the edge count {edge_count}."
        )
    if result.sequence != sorted(result.degrees.values(), reverse=True):
        raise ValueError("Degree sequence is not the sorted degree multiset.")


def assert_closure_excludes_start(result: ClosureResult, vertex: object) -> None:
    """Raise ``ValueError`` if a closure contains its start vertex or repeats."""
    for name, members in (("direct", result.direct), ("inverse", result.inverse)):
        if vertex in members:
            raise ValueError(f"{name} closure contains its start vertex {vertex}.")
        if len(set(members)) != len(members):
            raise ValueError(f"{name} closure lists a vertex twice.")


def assert_simple_graph(graph: Graph) -> None:
    """
    Assert a graph has no self-loops and no duplicate endpoint pairs.

    Pairs are compared order-insensitively on undirected graphs.

    Raises
    ------
    ValueError
        On the first self-loop or duplicate pair.
    """
    seen = set()
    for edge in graph.edges:
        if edge.source == edge.target:
            raise ValueError(f"Self-loop on vertex {edge.source}.")
        if graph.directed:
            key = (edge.source, edge.target)
        else:
            key = (min(edge.source, edge.target), max(edge.source, edge.target))
        if key in seen:
            raise ValueError(f"Duplicate edge {key}.")
        seen.add(key)
