"""
Cycle detection and enumeration.

Directed graphs use a depth-first search that reports one cycle per
back-edge. Undirected graphs enumerate every simple cycle of length three or
more by backtracking from each vertex, which is exponential in the worst case
and meant for small graphs.

Both strategies deduplicate through ``canonical_cycle_key``, which gives the
same key to every rotation and to the reversal of a cycle.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.3 (DFS edge classification).
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Set, Tuple

from ..config import get_cycle_warning_threshold
from ..logging import get_logger
from .core import Graph, Vertex
from .descriptor import algorithm

logger = get_logger(__name__)

CYCLE_SEPARATOR = "->"


@dataclass
class CycleResult:
    """
    Result of cycle detection.

    Attributes:
        has_cycle: True if at least one cycle was found.
        cycles: Distinct cycles as closed vertex lists (the first vertex is
            repeated at the end), in the order they were found.
        first_cycle: ``cycles[0]``, or an empty list.
        keys: Canonical key of each entry of ``cycles``.
    """

    has_cycle: bool = False
    cycles: List[List[Vertex]] = field(default_factory=list)
    first_cycle: List[Vertex] = field(default_factory=list)
    keys: List[str] = field(default_factory=list)

    def _add(self, cycle: List[Vertex], seen: Set[str]) -> None:
        key = canonical_cycle_key(cycle)
        if key in seen:
            return
        seen.add(key)
        self.cycles.append(cycle)
        self.keys.append(key)

    def _finish(self) -> "CycleResult":
        self.has_cycle = bool(self.cycles)
        self.first_cycle = list(self.cycles[0]) if self.cycles else []
        return self


def canonical_cycle_key(cycle: Sequence[Vertex], separator: str = CYCLE_SEPARATOR) -> str:
    """
    Return a key identifying a cycle regardless of start and direction.

    The closing vertex is dropped if the sequence is closed. The sequence is
    rotated to start at the vertex with the smallest label (first occurrence
    on ties); the forward and the backward walk from there are joined with
    ``separator`` and the lexicographically smaller string is the key.

    Args:
        cycle: Vertex sequence, open or closed.
        separator: String placed between labels.

    Returns:
        Canonical key, or an empty string for an empty sequence.

    Example:
        >>> a, b, c = Vertex(0, "A"), Vertex(1, "B"), Vertex(2, "C")
        >>> canonical_cycle_key([b, c, a, b])
        'A->B->C'
        >>> canonical_cycle_key([a, c, b])
        'A->B->C'
    """
    vertices = list(cycle)
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        vertices.pop()
    if not vertices:
        return ""

    k = len(vertices)
    labels = [str(vertex) for vertex in vertices]
    start = min(range(k), key=lambda i: labels[i])

    forward = separator.join(labels[(start + i) % k] for i in range(k))
    backward = separator.join(labels[(start - i) % k] for i in range(k))
    return forward if forward <= backward else backward


@algorithm("Cycle detection", "Find the cycles of the graph")
def detect_cycles(graph: Graph) -> CycleResult:
    """
    Detect cycles, choosing the strategy by directedness.

    Directed graphs report one representative cycle per back-edge of a
    depth-first forest (self-loops and two-vertex cycles included).
    Undirected graphs report every simple cycle with at least three
    vertices.

    Args:
        graph: Graph to inspect.

    Returns:
        CycleResult with deduplicated cycles; empty for an empty graph.

    Example:
        >>> G = Graph()
        >>> for i in range(3):
        ...     _ = G.add_vertex(i)
        >>> for u, v in [(0, 1), (1, 2), (2, 0)]:
        ...     _ = G.add_edge(u, v)
        >>> detect_cycles(G).keys
        ['0->1->2']
    """
    if graph.number_of_vertices() == 0:
        return CycleResult()

    if graph.directed:
        result = _detect_directed(graph)
    else:
        result = _enumerate_undirected(graph)

    logger.debug("detect_cycles found %d distinct cycles", len(result.cycles))
    return result._finish()


def _detect_directed(graph: Graph) -> CycleResult:
    result = CycleResult()
    seen: Set[str] = set()
    visited: Set[Vertex] = set()
    on_stack: Set[Vertex] = set()
    parent: Dict[Vertex, Vertex] = {}
    limit = graph.number_of_vertices()

    for root in graph.vertices:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        stack: List[Tuple[Vertex, Iterator[Vertex]]] = [(root, iter(graph.successors(root)))]

        while stack:
            current, successors = stack[-1]
            for neighbor in successors:
                if neighbor not in visited:
                    parent[neighbor] = current
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    stack.append((neighbor, iter(graph.successors(neighbor))))
                    break
                if neighbor in on_stack:
                    cycle = _cycle_from_back_edge(current, neighbor, parent, limit)
                    if cycle:
                        result._add(cycle, seen)
            else:
                stack.pop()
                on_stack.discard(current)

    return result


def _cycle_from_back_edge(
    current: Vertex, ancestor: Vertex, parent: Dict[Vertex, Vertex], limit: int
) -> List[Vertex]:
    """
    Walk parent links from ``current`` up to ``ancestor``.

    Returns the closed cycle ``ancestor, ..., current, ancestor`` or an empty
    list if the chain breaks or exceeds ``limit`` steps.
    """
    path = [current]
    node = current
    while node != ancestor:
        node = parent.get(node)
        if node is None or len(path) > limit:
            return []
        path.append(node)

    path.reverse()
    path.append(ancestor)
    return path


def _enumerate_undirected(graph: Graph) -> CycleResult:
    result = CycleResult()
    seen: Set[str] = set()

    if graph.number_of_vertices() > get_cycle_warning_threshold():
        logger.warning(
            "Enumerating all cycles of an undirected graph with %d vertices; "
            "running time grows exponentially",
            graph.number_of_vertices(),
        )

    adjacency = {vertex: graph.neighbors(vertex) for vertex in graph.vertices}

    for start in sorted(graph.vertices, key=lambda v: str(v)):
        path: List[Vertex] = [start]
        on_path: Set[Vertex] = {start}
        stack: List[Iterator[Vertex]] = [iter(adjacency[start])]

        while stack:
            for neighbor in stack[-1]:
                if neighbor == start and len(path) >= 3:
                    result._add(path + [start], seen)
                elif neighbor not in on_path:
                    path.append(neighbor)
                    on_path.add(neighbor)
                    stack.append(iter(adjacency[neighbor]))
                    break
            else:
                stack.pop()
                on_path.discard(path.pop())

    return result
