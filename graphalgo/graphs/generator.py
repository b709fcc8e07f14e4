"""
Random graph generator.

Builds graphs with ``n`` vertices labeled ``V0..Vn-1`` and a bounded number
of distinct, loop-free edges drawn uniformly at random.
"""

from __future__ import annotations

from typing import Optional, Set, Tuple

import numpy as np

from ..config import get_default_seed
from ..diagnostics import assert_simple_graph, is_debug_enabled
from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


def max_edge_count(n: int, directed: bool) -> int:
    """
    Maximum number of loop-free, duplicate-free edges on ``n`` vertices.

    Returns ``n * (n - 1)`` for directed graphs and half of that for
    undirected graphs.
    """
    if n < 2:
        return 0
    return n * (n - 1) if directed else n * (n - 1) // 2


def generate_random_graph(
    n: int,
    edges: int,
    directed: bool,
    weighted: bool,
    min_weight: float = 1.0,
    max_weight: float = 10.0,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> Graph:
    """
    Generate a random graph without self-loops or repeated edges.

    Ordered pairs of distinct vertices are drawn uniformly at random and
    accepted unless the pair was already used (in either order for
    undirected graphs). Generation stops once the edge target, capped at
    ``max_edge_count(n, directed)``, is reached.

    Args:
        n: Number of vertices.
        edges: Requested number of edges.
        directed: Whether the graph is directed.
        weighted: If False every weight is 1.0.
        min_weight: Lower weight bound for weighted graphs.
        max_weight: Upper weight bound for weighted graphs.
        rng: Random number generator. Takes precedence over ``seed``.
        seed: Seed for a fresh generator. If None, the configured default
            seed is used (GRAPHALGO_SEED), else fresh OS entropy.

    Returns:
        New Graph. Weights are uniform in ``[min_weight, max_weight]``
        rounded to two decimals.

    Raises:
        ValueError: If ``n`` is negative or ``min_weight > max_weight``.

    Example:
        >>> G = generate_random_graph(5, 4, directed=False, weighted=True, seed=0)
        >>> G.number_of_vertices(), G.number_of_edges()
        (5, 4)
    """
    if n < 0:
        raise ValueError(f"Number of vertices must be non-negative, got {n}")
    if weighted and min_weight > max_weight:
        raise ValueError(f"min_weight ({min_weight}) must not exceed max_weight ({max_weight})")

    if rng is None:
        rng = np.random.default_rng(seed if seed is not None else get_default_seed())

    graph = Graph(directed=directed, weighted=weighted)
    for i in range(n):
        graph.add_vertex(i, label=f"V{i}")

    target = min(max(edges, 0), max_edge_count(n, directed))
    used: Set[Tuple[int, int]] = set()
    draws = 0

    while len(used) < target:
        u = int(rng.integers(n))
        v = int(rng.integers(n))
        draws += 1
        if u == v:
            continue

        key = (u, v) if directed else (min(u, v), max(u, v))
        if key in used:
            continue

        weight = round(float(rng.uniform(min_weight, max_weight)), 2) if weighted else 1.0
        graph.add_edge(u, v, weight)
        used.add(key)

    logger.debug(
        "generate_random_graph: %d vertices, %d edges after %d draws", n, len(used), draws
    )

    if is_debug_enabled():
        assert_simple_graph(graph)

    return graph
