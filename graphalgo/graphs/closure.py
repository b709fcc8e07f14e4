"""
Transitive closure of a single vertex.

The direct closure holds every vertex reachable from the vertex; the inverse
closure holds every vertex that reaches it. On undirected graphs both follow
neighbor relations and are therefore equal.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..diagnostics import assert_closure_excludes_start, is_debug_enabled
from ..logging import get_logger
from .core import Graph, Vertex, VertexRef
from .descriptor import algorithm
from .utils import resolve_vertex

logger = get_logger(__name__)


@dataclass
class ClosureResult:
    """
    Forward and backward reachability from one vertex.

    Attributes:
        direct: Vertices reachable from the vertex, in discovery order.
        inverse: Vertices from which the vertex is reachable, in discovery order.
    """

    direct: List[Vertex] = field(default_factory=list)
    inverse: List[Vertex] = field(default_factory=list)


@algorithm("Transitive closure", "Find the direct and inverse transitive closure of a vertex")
def transitive_closure(graph: Graph, vertex: Optional[VertexRef]) -> ClosureResult:
    """
    Compute the direct and inverse transitive closure of a vertex.

    Args:
        graph: Graph to search.
        vertex: Vertex (or id) whose closures are computed.

    Returns:
        ClosureResult; neither list contains ``vertex`` itself. Empty if the
        graph is empty or ``vertex`` is missing.

    Complexity: O(V + E) per direction.
    """
    result = ClosureResult()
    start = resolve_vertex(graph, vertex)
    if start is None:
        return result

    if graph.directed:
        result.direct = _reachable(start, graph.successors)
        result.inverse = _reachable(start, graph.predecessors)
    else:
        result.direct = _reachable(start, graph.neighbors)
        result.inverse = _reachable(start, graph.neighbors)

    logger.debug(
        "transitive_closure of %s: %d direct, %d inverse",
        start,
        len(result.direct),
        len(result.inverse),
    )

    if is_debug_enabled():
        assert_closure_excludes_start(result, start)

    return result


def _reachable(start: Vertex, step: Callable[[Vertex], List[Vertex]]) -> List[Vertex]:
    """Explicit-stack DFS from start, excluding start from the result."""
    visited = set()
    order: List[Vertex] = []
    stack = [start]

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        visited.add(current)
        order.append(current)

        for neighbor in step(current):
            if neighbor not in visited:
                stack.append(neighbor)

    return [v for v in order if v != start]
