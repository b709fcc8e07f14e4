"""
Shortest path algorithm: Dijkstra between a source and a target.

Uses a linear scan for the closest unvisited vertex, O(V^2), which keeps the
tie-break exact: among equally close vertices the one that comes first in the
graph's vertex order is settled first.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..diagnostics import assert_path_weight, is_debug_enabled
from ..logging import get_logger
from .core import Graph, Vertex, VertexRef
from .descriptor import algorithm
from .utils import reconstruct_path, resolve_vertex

logger = get_logger(__name__)


@dataclass
class PathResult:
    """
    Result of a shortest-path query.

    Attributes:
        path: Vertices from source to target, empty if no path exists.
        total_weight: Sum of edge weights along ``path`` (inf if none).
        exists: True if the target is reachable from the source.
    """

    path: List[Vertex] = field(default_factory=list)
    total_weight: float = math.inf
    exists: bool = False


@algorithm("Shortest path (Dijkstra)", "Find the minimum-weight path between two vertices")
def shortest_path(
    graph: Graph, source: Optional[VertexRef], target: Optional[VertexRef]
) -> PathResult:
    """
    Dijkstra's algorithm from source to target.

    Each round settles the unvisited vertex with the smallest distance.
    The search stops once that vertex is unreachable or is the target.
    Relaxation uses the first edge (by insertion order) joining the two
    vertices, in either orientation on undirected graphs.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start vertex (Vertex or id).
        target: End vertex (Vertex or id).

    Returns:
        PathResult. ``exists`` is False (empty path, infinite weight) when
        the graph is empty, an endpoint is missing, or the target is
        unreachable.

    Raises:
        ValueError: If the graph contains a negative edge weight.

    Complexity: O(V^2 + E) per query.

    Example:
        >>> G = Graph(directed=True)
        >>> for i in range(3):
        ...     _ = G.add_vertex(i)
        >>> _ = G.add_edge(0, 1, 1.0)
        >>> _ = G.add_edge(1, 2, 2.0)
        >>> shortest_path(G, 0, 2).total_weight
        3.0
    """
    result = PathResult()
    start = resolve_vertex(graph, source)
    goal = resolve_vertex(graph, target)
    if start is None or goal is None:
        return result

    for edge in graph.edges:
        if edge.weight < 0:
            raise ValueError(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {edge.weight} on edge ({edge.source}, {edge.target})"
            )

    dist: Dict[Vertex, float] = {vertex: math.inf for vertex in graph.vertices}
    previous: Dict[Vertex, Vertex] = {}
    dist[start] = 0.0
    unvisited = set(graph.vertices)
    settled = 0

    while unvisited:
        current = None
        for vertex in graph.vertices:
            if vertex in unvisited and (current is None or dist[vertex] < dist[current]):
                current = vertex

        if current is None or math.isinf(dist[current]):
            break

        unvisited.remove(current)
        settled += 1
        if current == goal:
            break

        for neighbor in graph.neighbors(current):
            if neighbor not in unvisited:
                continue

            edge = graph.edge_between(current, neighbor)
            if edge is None:
                continue

            alt = dist[current] + edge.weight
            if alt < dist[neighbor]:
                dist[neighbor] = alt
                previous[neighbor] = current

    if not math.isinf(dist[goal]):
        result.exists = True
        result.total_weight = dist[goal]
        result.path = reconstruct_path(previous, start, goal)

    logger.debug(
        "shortest_path %s -> %s settled %d vertices, exists=%s", start, goal, settled, result.exists
    )

    if is_debug_enabled():
        assert_path_weight(graph, result)

    return result
