"""
Node abstraction for heapgraph.

Graphs, queues and traversal tables key everything by node, so concrete nodes
must be hashable and compare by identity-defining fields.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Node(ABC):
    """Abstract graph node."""

    @property
    @abstractmethod
    def id(self) -> str:
        """
        Stable identifier within a graph.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class PlanarNode(Node):
    """
    Concrete node with fixed planar coordinates.

    The coordinates feed the straight-line heuristics; they play no part in
    edge weights unless the graph builder derives weights from them.
    """

    name: str
    x: float = 0.0
    y: float = 0.0

    @property
    def id(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"PlanarNode({self.name!r}, {self.x:g}, {self.y:g})"
