"""Pytest configuration and shared fixtures for graphalgo tests.

This module provides:
- A deterministic numpy RNG fixture
- Small reference graphs used across the graph test modules
- An autouse fixture restoring global configuration after each test
- A log capture helper for the non-propagating graphalgo loggers
"""

import logging
import os

import numpy as np
import pytest

from graphalgo import Graph, GraphBuilder
from graphalgo.config import (
    get_cycle_warning_threshold,
    get_default_seed,
    set_cycle_warning_threshold,
    set_default_seed,
)
from graphalgo.diagnostics import is_debug_enabled, set_debug_enabled
from graphalgo.logging import get_logger


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_global_state():
    """Auto-use fixture restoring debug mode, default seed and thresholds."""
    debug = is_debug_enabled()
    seed = get_default_seed()
    threshold = get_cycle_warning_threshold()
    yield
    set_debug_enabled(debug)
    set_default_seed(seed)
    set_cycle_warning_threshold(threshold)


@pytest.fixture
def square() -> Graph:
    """Undirected, unweighted 4-cycle A-B-C-D-A."""
    return (
        GraphBuilder(directed=False, weighted=False)
        .edge("A", "B")
        .edge("B", "C")
        .edge("C", "D")
        .edge("D", "A")
        .build()
    )


@pytest.fixture
def dag() -> Graph:
    """Directed acyclic graph: A->B, A->C, B->D, C->D, D->E, plus isolated F."""
    builder = (
        GraphBuilder(directed=True)
        .edge("A", "B")
        .edge("A", "C")
        .edge("B", "D")
        .edge("C", "D")
        .edge("D", "E")
    )
    return builder.vertex("F").build()


@pytest.fixture
def graphalgo_caplog(caplog):
    """Attach pytest's capture handler to a graphalgo module logger.

    graphalgo loggers do not propagate to the root logger, so the handler is
    added directly. Returns a callable taking the module name.
    """
    attached = []

    def attach(module: str, level: int = logging.WARNING):
        logger = get_logger(module)
        attached.append((logger, logger.level))
        logger.setLevel(level)
        logger.addHandler(caplog.handler)
        return caplog

    yield attach

    for logger, level in attached:
        logger.removeHandler(caplog.handler)
        logger.setLevel(level)
