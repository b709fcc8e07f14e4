"""
Algorithm descriptors.

Every algorithm in the package is a plain function tagged with an
``AlgorithmInfo`` (name and description) through the ``algorithm``
decorator. Tagged functions satisfy the ``DescribedAlgorithm`` protocol and
are recorded in a registry so a front end can list what is available.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    Name and description of an algorithm.

    Attributes:
        key: Short identifier (the function name).
        name: Human-readable name.
        description: One-line description of what the algorithm reports.
    """

    key: str
    name: str
    description: str


class DescribedAlgorithm(Protocol):
    """Protocol for callables carrying an ``info`` descriptor."""

    info: AlgorithmInfo

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        ...


_registry: Dict[str, AlgorithmInfo] = {}


def algorithm(name: str, description: str) -> Callable[[F], F]:
    """
    Attach an ``AlgorithmInfo`` to a function and register it.

    Example:
        >>> @algorithm("Breadth-first search", "Visit vertices level by level")
        ... def bfs(graph, start): ...
        >>> bfs.info.name
        'Breadth-first search'
    """

    def decorate(func: F) -> F:
        info = AlgorithmInfo(key=func.__name__, name=name, description=description)
        func.info = info  # type: ignore[attr-defined]
        _registry[info.key] = info
        return func

    return decorate


def get_algorithm_info(key: str) -> AlgorithmInfo:
    """
    Return the descriptor registered under ``key``.

    Raises:
        KeyError: If no algorithm is registered under ``key``.
    """
    if key not in _registry:
        raise KeyError(f"Algorithm {key} not registered")
    return _registry[key]


def list_algorithms() -> List[AlgorithmInfo]:
    """Return all registered descriptors in registration order."""
    return list(_registry.values())
