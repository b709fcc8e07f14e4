"""
Utility functions for graph algorithms.

Provides helpers for vertex lookup, path reconstruction and path weights.
"""

from typing import Dict, List, Optional, Sequence

from .core import Graph, Vertex, VertexRef


def resolve_vertex(graph: Graph, vertex: Optional[VertexRef]) -> Optional[Vertex]:
    """
    Return the graph's own vertex for a Vertex or id, or None if absent.

    Example:
        >>> graph = Graph()
        >>> _ = graph.add_vertex(3, label="C")
        >>> resolve_vertex(graph, 3).label
        'C'
        >>> resolve_vertex(graph, 4) is None
        True
    """
    if vertex is None:
        return None
    vertex_id = vertex.id if isinstance(vertex, Vertex) else int(vertex)
    return graph.vertex(vertex_id)


def reconstruct_path(
    parent: Dict[Vertex, Optional[Vertex]], source: Vertex, target: Vertex
) -> List[Vertex]:
    """
    Reconstruct the path from source to target using a parent map.

    The walk is bounded by the size of the parent map, so a malformed map
    cannot loop forever.

    Args:
        parent: Mapping vertex -> previous vertex on the path.
        source: First vertex of the path.
        target: Last vertex of the path.

    Returns:
        List of vertices from source to target (inclusive), or an empty
        list if target cannot be traced back to source.

    Example:
        >>> a, b, c = Vertex(0, "A"), Vertex(1, "B"), Vertex(2, "C")
        >>> [v.label for v in reconstruct_path({b: a, c: b}, a, c)]
        ['A', 'B', 'C']
    """
    path = [target]
    current = target
    while current != source:
        current = parent.get(current)
        if current is None or len(path) > len(parent):
            return []
        path.append(current)

    path.reverse()
    return path


def path_weight(graph: Graph, path: Sequence[Vertex]) -> float:
    """
    Sum the weights along a path, using the first edge between each pair.

    Raises:
        ValueError: If two consecutive vertices are not joined by an edge.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        edge = graph.edge_between(u, v)
        if edge is None:
            raise ValueError(f"No edge between {u} and {v}")
        total += edge.weight
    return total


def format_path(path: Sequence[Vertex], separator: str = " -> ") -> str:
    """Join vertex labels, e.g. ``"A -> B -> C"``."""
    return separator.join(str(vertex) for vertex in path)
