"""
Utilities to generate random planar graphs for searches and tests.
"""

from typing import List, Tuple

import numpy as np

from adjacency_list_graph import AdjacencyListGraph
from nodes import PlanarNode


def build_planar_graph(
    count: int,
    seed: int | None = None,
    degree: int = 3,
    extent: float = 100.0,
    stretch: Tuple[float, float] = (1.0, 1.5),
) -> tuple[AdjacencyListGraph, List[PlanarNode]]:
    """
    Sample points uniformly in a square and link each to its nearest neighbours.

    Args:
        count: number of nodes.
        seed: RNG seed for reproducibility.
        degree: number of nearest nodes each node is connected to (undirected).
        extent: side length of the square the points are drawn from.
        stretch: (low, high) range of the factor applied to the Euclidean
            distance to get an edge weight. low >= 1 keeps the straight-line
            heuristic admissible and consistent.

    Nodes are named n0 .. n{count-1}.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    low, high = stretch
    if low < 1.0 or high < low:
        raise ValueError("stretch must satisfy 1 <= low <= high")

    rng = np.random.default_rng(seed)
    points = rng.uniform(0.0, extent, size=(count, 2))
    nodes = [PlanarNode(f"n{i}", float(x), float(y)) for i, (x, y) in enumerate(points)]

    graph = AdjacencyListGraph()
    for node in nodes:
        graph.add_node(node)

    _connect_nearest(graph, nodes, points, degree, rng, low, high)
    return graph, nodes


def _connect_nearest(
    graph: AdjacencyListGraph,
    nodes: List[PlanarNode],
    points: np.ndarray,
    degree: int,
    rng: np.random.Generator,
    low: float,
    high: float,
) -> None:
    if degree <= 0 or len(nodes) < 2:
        return

    diff = points[:, None, :] - points[None, :, :]
    distances = np.hypot(diff[..., 0], diff[..., 1])
    np.fill_diagonal(distances, np.inf)

    k = min(degree, len(nodes) - 1)
    nearest = np.argsort(distances, axis=1, kind="stable")[:, :k]
    for i, row in enumerate(nearest):
        for j in row:
            weight = float(distances[i, j] * rng.uniform(low, high))
            graph.connect_undirected(nodes[i], nodes[int(j)], weight)
