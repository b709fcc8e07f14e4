"""
Graph traversal algorithms: BFS and DFS.

Provides breadth-first and depth-first search. Neighbors are visited in edge
insertion order, so results are reproducible for a given graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..diagnostics import assert_bfs_consistent, assert_dfs_nested, is_debug_enabled
from ..logging import get_logger
from .core import Graph, Vertex, VertexRef
from .descriptor import algorithm
from .utils import resolve_vertex

logger = get_logger(__name__)


@dataclass
class BFSResult:
    """
    Result of a breadth-first search.

    Attributes:
        order: Vertices in visitation order.
        distance: Vertex -> number of edges from the start.
        parent: Vertex -> predecessor in the BFS tree (None for the start).
    """

    order: List[Vertex] = field(default_factory=list)
    distance: Dict[Vertex, int] = field(default_factory=dict)
    parent: Dict[Vertex, Optional[Vertex]] = field(default_factory=dict)


@dataclass
class DFSResult:
    """
    Result of a depth-first search over the whole graph.

    Attributes:
        order: Vertices in discovery order (every vertex of the graph).
        discovery_time: Vertex -> timestamp on entry.
        finish_time: Vertex -> timestamp on exit.
    """

    order: List[Vertex] = field(default_factory=list)
    discovery_time: Dict[Vertex, int] = field(default_factory=dict)
    finish_time: Dict[Vertex, int] = field(default_factory=dict)


@algorithm("Breadth-first search", "Visit vertices level by level from a start vertex")
def bfs(graph: Graph, start: Optional[VertexRef]) -> BFSResult:
    """
    Breadth-first search from a start vertex.

    Directed graphs follow out-edges; undirected graphs follow edges in
    both orientations. Vertices unreachable from ``start`` do not appear in
    the result.

    Args:
        graph: Graph to traverse.
        start: Start vertex (Vertex or id).

    Returns:
        BFSResult with visitation order, distances and parents. Empty if
        the graph is empty or ``start`` is missing.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph()
        >>> for i in range(3):
        ...     _ = G.add_vertex(i)
        >>> _ = G.add_edge(0, 1)
        >>> _ = G.add_edge(0, 2)
        >>> [v.id for v in bfs(G, 0).order]
        [0, 1, 2]
    """
    result = BFSResult()
    source = resolve_vertex(graph, start)
    if source is None:
        return result

    result.distance[source] = 0
    result.parent[source] = None
    queue = deque([source])

    while queue:
        u = queue.popleft()
        result.order.append(u)

        for v in graph.neighbors(u):
            if v not in result.distance:
                result.distance[v] = result.distance[u] + 1
                result.parent[v] = u
                queue.append(v)

    logger.debug("bfs from %s reached %d of %d vertices", source, len(result.order), len(graph))

    if is_debug_enabled():
        assert_bfs_consistent(graph, result)

    return result


@algorithm("Depth-first search", "Visit every vertex depth first, recording discovery and finish times")
def dfs(graph: Graph, start: Optional[VertexRef]) -> DFSResult:
    """
    Depth-first search building a DFS forest over the whole graph.

    The first tree is rooted at ``start``; further trees are started from
    the remaining unvisited vertices in vertex order. A single counter is
    incremented on every discovery and every finish, so intervals
    ``[discovery, finish]`` of two vertices are either disjoint or nested.

    Uses an explicit stack of neighbor iterators, which visits neighbors in
    the same order as the recursive formulation without its depth limit.

    Args:
        graph: Graph to traverse.
        start: Root of the first DFS tree (Vertex or id).

    Returns:
        DFSResult covering every vertex. Empty if the graph is empty or
        ``start`` is missing.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    result = DFSResult()
    root = resolve_vertex(graph, start)
    if root is None:
        return result

    time = 0

    def visit(vertex: Vertex) -> None:
        nonlocal time
        result.order.append(vertex)
        result.discovery_time[vertex] = time
        time += 1
        stack: List[Tuple[Vertex, Iterator[Vertex]]] = [(vertex, iter(graph.neighbors(vertex)))]

        while stack:
            u, neighbors = stack[-1]
            for v in neighbors:
                if v not in result.discovery_time:
                    result.order.append(v)
                    result.discovery_time[v] = time
                    time += 1
                    stack.append((v, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                result.finish_time[u] = time
                time += 1

    visit(root)
    trees = 1
    for vertex in graph.vertices:
        if vertex not in result.discovery_time:
            visit(vertex)
            trees += 1

    logger.debug("dfs from %s built a forest of %d trees", root, trees)

    if is_debug_enabled():
        assert_dfs_nested(graph, result)

    return result
