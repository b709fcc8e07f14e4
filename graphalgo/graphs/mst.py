"""
Minimum spanning tree: Kruskal's algorithm.

Directed graphs are handled through their underlying undirected graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Kruskal).
"""

from typing import Dict, Hashable, Iterable, List

from ..diagnostics import assert_spanning_forest, is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph
from .descriptor import algorithm

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression.

    Union simply attaches the first root under the second; there is no rank
    or size heuristic.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        """
        Initialize union-find with every node in its own set.

        Args:
            nodes: Iterable of nodes.
        """
        self.parent: Dict[Hashable, Hashable] = {}

        for node in nodes:
            self.parent[node] = node

    def find(self, x: Hashable) -> Hashable:
        """
        Find root of x with path compression.

        Args:
            x: Node to find root for.

        Returns:
            Root node.

        Raises:
            KeyError: If x was not registered.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression: point every node on the path at the root
        while self.parent[x] != root:
            next_node = self.parent[x]
            self.parent[x] = root
            x = next_node

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the sets containing x and y.

        Args:
            x: First node.
            y: Second node.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        self.parent[root_x] = root_y
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def count_sets(self) -> int:
        """Return the number of disjoint sets."""
        return sum(1 for node in self.parent if self.find(node) == node)


@algorithm("Minimum spanning tree (Kruskal)", "Find a minimum spanning tree using Kruskal's algorithm")
def minimum_spanning_tree(graph: Graph) -> List[Edge]:
    """
    Kruskal's algorithm for a minimum spanning tree (or forest).

    Edges are sorted by weight with a stable sort, so equal weights keep
    their insertion order. For a directed graph the algorithm runs on
    ``graph.underlying_graph()`` and returns edges of that graph.

    Args:
        graph: Graph to span.

    Returns:
        Selected edges in acceptance order. For a graph with V vertices and
        C connected components the list holds V - C edges.

    Complexity: O(E log E) for sorting plus near-linear union-find work.

    Example:
        >>> G = Graph()
        >>> for i in range(3):
        ...     _ = G.add_vertex(i)
        >>> _ = G.add_edge(0, 1, 1.0)
        >>> _ = G.add_edge(1, 2, 2.0)
        >>> _ = G.add_edge(0, 2, 3.0)
        >>> sum(e.weight for e in minimum_spanning_tree(G))
        3.0
    """
    if graph.number_of_vertices() == 0:
        return []

    working = graph.underlying_graph() if graph.directed else graph

    sorted_edges = sorted(working.edges, key=lambda e: e.weight)
    uf = UnionFind(vertex.id for vertex in working.vertices)
    mst_edges: List[Edge] = []

    for edge in sorted_edges:
        if uf.union(edge.source, edge.target):
            mst_edges.append(edge)

    logger.debug(
        "minimum_spanning_tree selected %d of %d edges", len(mst_edges), len(sorted_edges)
    )

    if is_debug_enabled():
        assert_spanning_forest(graph, mst_edges)

    return mst_edges
