"""Environment-driven defaults for graphalgo.

Values are read once at import time and can be overridden at runtime.

Environment variables:
    GRAPHALGO_SEED: default seed for the random graph generator.
    GRAPHALGO_CYCLE_WARN_VERTICES: vertex count above which undirected
        cycle enumeration logs a warning.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_SEED_ENV_VAR = "GRAPHALGO_SEED"
_CYCLE_WARN_ENV_VAR = "GRAPHALGO_CYCLE_WARN_VERTICES"
_DEFAULT_CYCLE_WARN_VERTICES = 12


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


_default_seed: Optional[int] = _int_from_env(_SEED_ENV_VAR, None)
_cycle_warning_threshold: int = _int_from_env(
    _CYCLE_WARN_ENV_VAR, _DEFAULT_CYCLE_WARN_VERTICES
)


def get_default_seed() -> Optional[int]:
    """Return the seed used when the generator is called without one."""
    return _default_seed


def set_default_seed(seed: Optional[int]) -> None:
    """Set the default generator seed (None means fresh OS entropy)."""
    global _default_seed
    _default_seed = None if seed is None else int(seed)


@contextmanager
def seed_context(seed: Optional[int]) -> Iterator[None]:
    """
    Temporarily override the default generator seed.

    Example:
        >>> with seed_context(7):
        ...     graph = generate_random_graph(5, 4, False, False)
    """
    global _default_seed
    prev = _default_seed
    set_default_seed(seed)
    try:
        yield
    finally:
        _default_seed = prev


def get_cycle_warning_threshold() -> int:
    """Return the vertex count above which cycle enumeration warns."""
    return _cycle_warning_threshold


def set_cycle_warning_threshold(vertices: int) -> None:
    """Set the cycle enumeration warning threshold."""
    if vertices < 0:
        raise ValueError(f"Threshold must be non-negative, got {vertices}.")
    global _cycle_warning_threshold
    _cycle_warning_threshold = int(vertices)
