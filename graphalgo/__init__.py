"""graphalgo - a small in-memory graph algorithms engine."""

__version__ = "0.1.0"

# Configuration
from .config import (
    get_cycle_warning_threshold,
    get_default_seed,
    seed_context,
    set_cycle_warning_threshold,
    set_default_seed,
)

# Diagnostics
from .diagnostics import (
    assert_bfs_consistent,
    assert_closure_excludes_start,
    assert_degree_sum,
    assert_dfs_nested,
    assert_path_weight,
    assert_simple_graph,
    assert_spanning_forest,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph model and algorithms
from .graphs import (
    AlgorithmInfo,
    BFSResult,
    ClosureResult,
    CycleResult,
    DegreeResult,
    DescribedAlgorithm,
    DFSResult,
    Edge,
    Graph,
    GraphBuilder,
    PathResult,
    UnionFind,
    Vertex,
    algorithm,
    bfs,
    canonical_cycle_key,
    degree_sequence,
    detect_cycles,
    dfs,
    format_path,
    generate_random_graph,
    get_algorithm_info,
    list_algorithms,
    max_edge_count,
    minimum_spanning_tree,
    path_weight,
    reconstruct_path,
    resolve_vertex,
    shortest_path,
    transitive_closure,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Configuration
    "get_default_seed",
    "set_default_seed",
    "seed_context",
    "get_cycle_warning_threshold",
    "set_cycle_warning_threshold",
    # Diagnostics
    "assert_bfs_consistent",
    "assert_dfs_nested",
    "assert_path_weight",
    "assert_spanning_forest",
    "assert_degree_sum",
    "assert_closure_excludes_start",
    "assert_simple_graph",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Graphs
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
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
