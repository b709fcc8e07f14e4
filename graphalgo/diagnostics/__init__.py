"""Diagnostics and debugging utilities for graphalgo."""

from .core import (
    assert_bfs_consistent,
    assert_closure_excludes_start,
    assert_degree_sum,
    assert_dfs_nested,
    assert_path_weight,
    assert_simple_graph,
    assert_spanning_forest,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
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
]
