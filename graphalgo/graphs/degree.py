"""
Degree sequence.

Degrees count edge endpoints, so a self-loop adds two to its vertex and the
degrees always sum to twice the edge count. Directed graphs additionally
report in- and out-degrees; their plain degrees are taken over the
underlying undirected graph.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..diagnostics import assert_degree_sum, is_debug_enabled
from ..logging import get_logger
from .core import Graph, Vertex
from .descriptor import algorithm

logger = get_logger(__name__)


@dataclass
class DegreeResult:
    """
    Per-vertex degrees and the degree sequence.

    Attributes:
        degrees: Vertex -> degree (underlying graph for directed input).
        sequence: Degree values sorted in descending order.
        in_degrees: Vertex -> number of incoming edges (directed only).
        out_degrees: Vertex -> number of outgoing edges (directed only).
    """

    degrees: Dict[Vertex, int] = field(default_factory=dict)
    sequence: List[int] = field(default_factory=list)
    in_degrees: Dict[Vertex, int] = field(default_factory=dict)
    out_degrees: Dict[Vertex, int] = field(default_factory=dict)


def _endpoint_degrees(graph: Graph, vertices) -> Dict[Vertex, int]:
    degrees = {vertex: 0 for vertex in vertices}
    by_id = {vertex.id: vertex for vertex in vertices}
    for edge in graph.edges:
        degrees[by_id[edge.source]] += 1
        degrees[by_id[edge.target]] += 1
    return degrees


@algorithm(
    "Degree sequence",
    "Report the degree sequence of the graph (of the underlying graph for digraphs)",
)
def degree_sequence(graph: Graph) -> DegreeResult:
    """
    Compute per-vertex degrees and the sorted degree sequence.

    Args:
        graph: Graph to measure.

    Returns:
        DegreeResult keyed by the graph's own vertices. ``in_degrees`` and
        ``out_degrees`` are empty for undirected graphs.

    Example:
        >>> G = Graph()
        >>> for i in range(3):
        ...     _ = G.add_vertex(i)
        >>> _ = G.add_edge(0, 1)
        >>> _ = G.add_edge(0, 2)
        >>> degree_sequence(G).sequence
        [2, 1, 1]
    """
    result = DegreeResult()
    if graph.number_of_vertices() == 0:
        return result

    vertices = graph.vertices
    if graph.directed:
        for vertex in vertices:
            result.out_degrees[vertex] = len(graph.out_edges(vertex))
            result.in_degrees[vertex] = len(graph.in_edges(vertex))
        result.degrees = _endpoint_degrees(graph.underlying_graph(), vertices)
    else:
        result.degrees = _endpoint_degrees(graph, vertices)

    result.sequence = sorted(result.degrees.values(), reverse=True)

    logger.debug("degree_sequence: %s", result.sequence)

    if is_debug_enabled():
        assert_degree_sum(graph, result)

    return result
