"""
Core graph data structures.

Provides Vertex, Edge and Graph. The graph stores vertices and edges in dense
insertion-ordered lists and keeps per-vertex incidence lists of edge
positions, so edges only reference vertex ids and no vertex holds a
reference back to its edges.

An undirected connection is stored as a single oriented edge; every
neighbor and incidence query matches both orientations. Parallel edges are
allowed, and whenever a single edge between two vertices is needed the
first one by insertion order wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..logging import get_logger

logger = get_logger(__name__)

VertexRef = Union["Vertex", int]


@dataclass(eq=False)
class Vertex:
    """
    Graph vertex identified by an integer id.

    Equality and hashing use ``id`` only; ``label`` and ``position`` are
    display attributes.

    Attributes:
        id: Integer identity.
        label: Display label (defaults to ``str(id)``).
        position: Opaque 2-D position for presentation layers.
    """

    id: int
    label: Optional[str] = None
    position: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.label is None:
            self.label = str(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vertex):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.label


@dataclass(eq=False)
class Edge:
    """
    Edge between two vertex ids.

    Edges compare by identity so that parallel edges stay distinct.

    Attributes:
        source: Id of the tail vertex.
        target: Id of the head vertex.
        weight: Numeric weight (default 1.0).
        directed: Directedness of the owning graph when the edge was made.
    """

    source: int
    target: int
    weight: float = 1.0
    directed: bool = False

    def connects(self, u: int, v: int) -> bool:
        """Return True if the edge joins u to v (either way if undirected)."""
        if self.source == u and self.target == v:
            return True
        return not self.directed and self.source == v and self.target == u

    def other(self, vertex_id: int) -> int:
        """Return the endpoint opposite ``vertex_id``."""
        return self.target if self.source == vertex_id else self.source

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class Graph:
    """
    Directed or undirected, optionally weighted graph.

    Attributes:
        directed: If True, edges are ordered pairs.
        weighted: Informational flag for callers and the generator.

    Complexity:
        - add_vertex, add_edge: O(1) amortized
        - remove_vertex, remove_edge: O(V + E) (incidence lists are rebuilt)
        - out_edges, in_edges: O(deg(v))
        - neighbors: O(deg(v))
    """

    def __init__(self, directed: bool = False, weighted: bool = True):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            weighted: If True, edge weights are meaningful.
        """
        self.directed = directed
        self.weighted = weighted
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._by_id: Dict[int, Vertex] = {}
        # vertex id -> positions in self._edges
        self._out: Dict[int, List[int]] = {}
        self._in: Dict[int, List[int]] = {}

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self.directed}, weighted={self.weighted}, "
            f"vertices={len(self._vertices)}, edges={len(self._edges)})"
        )

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, Vertex):
            return vertex.id in self._by_id
        if isinstance(vertex, int):
            return vertex in self._by_id
        return False

    def __len__(self) -> int:
        return len(self._vertices)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(
        self,
        vertex: VertexRef,
        label: Optional[str] = None,
        position: Optional[Tuple[float, float]] = None,
    ) -> Vertex:
        """
        Add a vertex to the graph.

        Args:
            vertex: A Vertex, or an integer id to build one from.
            label: Label used when ``vertex`` is an id.
            position: Position used when ``vertex`` is an id.

        Returns:
            The stored vertex. If a vertex with the same id already exists,
            it is returned unchanged and nothing is added.
        """
        if not isinstance(vertex, Vertex):
            vertex = Vertex(int(vertex), label, position or (0.0, 0.0))

        existing = self._by_id.get(vertex.id)
        if existing is not None:
            return existing

        self._vertices.append(vertex)
        self._by_id[vertex.id] = vertex
        self._out[vertex.id] = []
        self._in[vertex.id] = []
        return vertex

    def add_edge(self, source: VertexRef, target: VertexRef, weight: float = 1.0) -> Optional[Edge]:
        """
        Add an edge from source to target.

        Both endpoints must already belong to the graph. Otherwise nothing
        is added, a warning is logged and None is returned.

        Args:
            source: Tail vertex or its id.
            target: Head vertex or its id.
            weight: Edge weight (default 1.0).

        Returns:
            The new edge, or None if an endpoint is not a member.
        """
        u = _vertex_id(source)
        v = _vertex_id(target)
        if u not in self._by_id or v not in self._by_id:
            logger.warning("Ignoring edge %s -> %s: endpoint not in graph", u, v)
            return None

        edge = Edge(u, v, float(weight), self.directed)
        position = len(self._edges)
        self._edges.append(edge)
        self._out[u].append(position)
        self._in[v].append(position)
        return edge

    def remove_vertex(self, vertex: VertexRef) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Returns:
            True if the vertex was present.
        """
        vid = _vertex_id(vertex)
        stored = self._by_id.pop(vid, None)
        if stored is None:
            return False

        self._vertices.remove(stored)
        self._edges = [e for e in self._edges if e.source != vid and e.target != vid]
        self._reindex()
        return True

    def remove_edge(self, edge: Edge) -> bool:
        """
        Remove one edge object.

        Returns:
            True if the edge was present.
        """
        for position, candidate in enumerate(self._edges):
            if candidate is edge:
                del self._edges[position]
                self._reindex()
                return True
        return False

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self._vertices.clear()
        self._edges.clear()
        self._by_id.clear()
        self._out.clear()
        self._in.clear()

    def _reindex(self) -> None:
        self._out = {vertex.id: [] for vertex in self._vertices}
        self._in = {vertex.id: [] for vertex in self._vertices}
        for position, edge in enumerate(self._edges):
            self._out[edge.source].append(position)
            self._in[edge.target].append(position)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Vertices in insertion order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in insertion order."""
        return tuple(self._edges)

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def vertex(self, vertex_id: int) -> Optional[Vertex]:
        """Return the vertex with the given id, or None."""
        return self._by_id.get(vertex_id)

    def find_vertex(self, label: str) -> Optional[Vertex]:
        """Return the first vertex carrying ``label``, or None."""
        for vertex in self._vertices:
            if vertex.label == label:
                return vertex
        return None

    def has_vertex(self, vertex: VertexRef) -> bool:
        return _vertex_id(vertex) in self._by_id

    def out_edges(self, vertex: VertexRef) -> List[Edge]:
        """Edges whose source is ``vertex``, in insertion order."""
        return [self._edges[p] for p in self._out.get(_vertex_id(vertex), ())]

    def in_edges(self, vertex: VertexRef) -> List[Edge]:
        """Edges whose target is ``vertex``, in insertion order."""
        return [self._edges[p] for p in self._in.get(_vertex_id(vertex), ())]

    def incident_edges(self, vertex: VertexRef) -> List[Edge]:
        """Edges touching ``vertex`` in either orientation, in insertion order."""
        vid = _vertex_id(vertex)
        positions = sorted(set(self._out.get(vid, ())) | set(self._in.get(vid, ())))
        return [self._edges[p] for p in positions]

    def neighbors(self, vertex: VertexRef) -> List[Vertex]:
        """
        Return distinct neighbors of a vertex in edge insertion order.

        Directed graphs follow out-edges only; undirected graphs follow
        edges in both orientations.
        """
        vid = _vertex_id(vertex)
        edges = self.out_edges(vid) if self.directed else self.incident_edges(vid)
        return self._distinct_endpoints(vid, edges)

    def successors(self, vertex: VertexRef) -> List[Vertex]:
        """Distinct heads of the out-edges of ``vertex``."""
        vid = _vertex_id(vertex)
        return self._distinct_endpoints(vid, self.out_edges(vid))

    def predecessors(self, vertex: VertexRef) -> List[Vertex]:
        """Distinct tails of the in-edges of ``vertex``."""
        vid = _vertex_id(vertex)
        return self._distinct_endpoints(vid, self.in_edges(vid))

    def _distinct_endpoints(self, vid: int, edges: Iterable[Edge]) -> List[Vertex]:
        seen: set = set()
        result: List[Vertex] = []
        for edge in edges:
            other = edge.other(vid)
            if other not in seen:
                seen.add(other)
                result.append(self._by_id[other])
        return result

    def edge_between(self, u: VertexRef, v: VertexRef) -> Optional[Edge]:
        """
        Return the first edge (by insertion order) joining u to v.

        On undirected graphs the reverse orientation also matches.
        """
        uid = _vertex_id(u)
        vid = _vertex_id(v)
        for position in sorted(set(self._out.get(uid, ())) | set(self._in.get(uid, ()))):
            edge = self._edges[position]
            if edge.connects(uid, vid):
                return edge
        return None

    def underlying_graph(self) -> "Graph":
        """
        Return the underlying undirected graph.

        One edge is kept per unordered vertex pair, carrying the weight of
        the first oriented edge found in edge order. Vertices are copied
        with the same id, label and position.
        """
        underlying = Graph(directed=False, weighted=self.weighted)
        for vertex in self._vertices:
            underlying.add_vertex(Vertex(vertex.id, vertex.label, vertex.position))

        seen: set = set()
        for edge in self._edges:
            key = (min(edge.source, edge.target), max(edge.source, edge.target))
            if key in seen:
                continue
            seen.add(key)
            underlying.add_edge(edge.source, edge.target, edge.weight)
        return underlying

    def describe_edge(self, edge: Edge) -> str:
        """Render an edge with vertex labels, e.g. ``"A -> B (2.5)"``."""
        return f"{self._by_id[edge.source].label} -> {self._by_id[edge.target].label} ({edge.weight})"


def _vertex_id(vertex: VertexRef) -> int:
    if isinstance(vertex, Vertex):
        return vertex.id
    return int(vertex)


@dataclass
class GraphBuilder:
    """
    Convenience builder for small graphs keyed by label.

    Vertices get consecutive ids in the order their labels first appear.

    Example:
        >>> graph = GraphBuilder(directed=False).edge("A", "B").edge("B", "C").build()
        >>> [v.label for v in graph.vertices]
        ['A', 'B', 'C']
    """

    directed: bool = False
    weighted: bool = True
    _graph: Optional[Graph] = field(default=None, init=False, repr=False)
    _ids: Dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._graph = Graph(directed=self.directed, weighted=self.weighted)

    def vertex(self, label: str) -> "GraphBuilder":
        if label not in self._ids:
            self._ids[label] = len(self._ids)
            self._graph.add_vertex(self._ids[label], label=label)
        return self

    def edge(self, source: str, target: str, weight: float = 1.0) -> "GraphBuilder":
        self.vertex(source).vertex(target)
        self._graph.add_edge(self._ids[source], self._ids[target], weight)
        return self

    def build(self) -> Graph:
        return self._graph
