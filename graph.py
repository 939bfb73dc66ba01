"""
Weighted graph interface searched by heapgraph engines.

Edges are directed u -> v with a finite weight >= 0; an undirected link is two
directed edges. Engines only need ``outgoing`` and membership, so read-only
views over other graph stores can implement this interface directly.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Mapping, Tuple

from nodes import Node


class Graph(ABC):
    """Directed, non-negatively weighted graph over Node objects."""

    @abstractmethod
    def nodes(self) -> Iterable[Node]:
        """Return all nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: Node) -> Mapping[Node, float]:
        """
        Neighbours reachable from node in one hop, with edge weights.

        Unknown nodes have no neighbours.
        """
        raise NotImplementedError

    def edges(self) -> Iterator[Tuple[Node, Node, float]]:
        """Every directed edge as (src, dst, weight)."""
        for src in self.nodes():
            for dst, weight in self.outgoing(src).items():
                yield src, dst, weight

    def __contains__(self, node: object) -> bool:
        return any(node == candidate for candidate in self.nodes())
