"""
Concrete directed, weighted graph implementation for heapgraph.

Implements the Graph interface using a simple adjacency-list representation.
Weights are validated on the way in so the search loop never sees a negative
or non-finite edge.
"""

from typing import Dict, Iterable, Mapping
import logging
import math
import numbers

from errors import InvalidWeightError
from graph import Graph
from nodes import Node

logger = logging.getLogger(__name__)


def _validated_weight(src: Node, dst: Node, weight: object) -> float:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(src, dst, weight)
    value = float(weight)
    if not math.isfinite(value) or value < 0.0:
        raise InvalidWeightError(src, dst, weight)
    return value


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a node -> (neighbor -> weight) mapping.
    """

    def __init__(self) -> None:
        self._adj: Dict[Node, Dict[Node, float]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_node(self, node: Node) -> None:
        """Ensure node exists in the graph."""
        self._adj.setdefault(node, {})

    def connect(self, src: Node, dst: Node, weight: float) -> None:
        """
        Add or update a directed edge src -> dst with weight.
        Auto-adds nodes if they don't exist.

        Raises InvalidWeightError for negative, NaN or infinite weights; the
        graph is left unchanged in that case.
        """
        try:
            value = _validated_weight(src, dst, weight)
        except InvalidWeightError:
            logger.debug("rejecting edge %r -> %r with weight %r", src, dst, weight)
            raise
        self.add_node(src)
        self.add_node(dst)
        self._adj[src][dst] = value

    add_edge = connect

    def connect_undirected(self, a: Node, b: Node, weight: float) -> None:
        """Add or update a -> b and b -> a with the same weight."""
        _validated_weight(a, b, weight)
        self.connect(a, b, weight)
        self.connect(b, a, weight)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[Node]:
        return self._adj.keys()

    def outgoing(self, node: Node) -> Mapping[Node, float]:
        return dict(self._adj.get(node, {}))  # defensive copy

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        """Number of directed edges (an undirected link counts twice)."""
        return sum(len(neighbors) for neighbors in self._adj.values())
