"""
Cost-to-go estimates for best-first search.

A heuristic is any callable ``estimate(node, destination) -> float`` that is
non-negative and never overestimates the remaining cost. The straight-line
estimates read ``x`` / ``y`` from PlanarNode; they are admissible only when
edge weights are at least the Euclidean (resp. Manhattan) distance between
their endpoints.
"""

from typing import Callable, Dict
import math

from errors import ConfigurationError
from nodes import Node

Heuristic = Callable[[Node, Node], float]


def zero_heuristic(node: Node, destination: Node) -> float:
    """Uniform-cost search (Dijkstra)."""
    return 0.0


def euclidean_distance(node: Node, destination: Node) -> float:
    return math.hypot(destination.x - node.x, destination.y - node.y)  # type: ignore[attr-defined]


def manhattan_distance(node: Node, destination: Node) -> float:
    return abs(destination.x - node.x) + abs(destination.y - node.y)  # type: ignore[attr-defined]


HEURISTICS: Dict[str, Heuristic] = {
    "zero": zero_heuristic,
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ConfigurationError(f"unknown heuristic {name!r} (known: {known})", field="heuristic") from None
