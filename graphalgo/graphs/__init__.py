"""
Graph algorithms package for graphalgo.

This package provides:
- Graph data structures (Vertex, Edge, Graph)
- Traversal algorithms (BFS, DFS forest)
- Shortest path (Dijkstra between two vertices)
- Minimum spanning tree (Kruskal)
- Cycle detection with canonical deduplication
- Transitive closure of a vertex
- Degree sequence
- Random graph generation

Neighbors are visited in edge insertion order, and ties between parallel
edges go to the first edge inserted, so results are deterministic.
"""

from .closure import ClosureResult, transitive_closure
from .core import Edge, Graph, GraphBuilder, Vertex
from .cycles import CycleResult, canonical_cycle_key, detect_cycles
from .degree import DegreeResult, degree_sequence
from .descriptor import (
    AlgorithmInfo,
    DescribedAlgorithm,
    algorithm,
    get_algorithm_info,
    list_algorithms,
)
from .generator import generate_random_graph, max_edge_count
from .mst import UnionFind, minimum_spanning_tree
from .shortest import PathResult, shortest_path
from .traversal import BFSResult, DFSResult, bfs, dfs
from .utils import format_path, path_weight, reconstruct_path, resolve_vertex

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "GraphBuilder",
    "bfs",
    "dfs",
    "BFSResult",
    "DFSResult",
    "shortest_path",
    "PathResult",
    "minimum_spanning_tree",
    "UnionFind",
    "detect_cycles",
    "canonical_cycle_key",
    "CycleResult",
    "transitive_closure",
    "ClosureResult",
    "degree_sequence",
    "DegreeResult",
    "generate_random_graph",
    "max_edge_count",
    "AlgorithmInfo",
    "DescribedAlgorithm",
    "algorithm",
    "get_algorithm_info",
    "list_algorithms",
    "resolve_vertex",
    "reconstruct_path",
    "path_weight",
    "format_path",
]

# Example usage:
# from graphalgo.graphs import GraphBuilder, shortest_path, format_path
#
# G = GraphBuilder(directed=True).edge("A", "B", 1.0).edge("B", "C", 2.0).build()
# result = shortest_path(G, G.find_vertex("A"), G.find_vertex("C"))
# format_path(result.path)  # 'A -> B -> C'
