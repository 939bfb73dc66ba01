"""
Algorithm interfaces for heapgraph.

Keeps graph algorithms separate from graph construction and the CLI.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from graph import Graph
from heuristics import Heuristic
from nodes import Node
from paths import Path


class PathSearchEngine(ABC):
    """
    Interface for single-pair shortest-path search.
    """

    @abstractmethod
    def search(
        self,
        graph: Graph,
        origin: Node,
        destination: Node,
        heuristic: Optional[Heuristic] = None,
    ) -> Optional[Path]:
        """
        Find a cheapest path from origin to destination.

        Returns:
            The Path, or None when destination is unreachable from origin.
        """
        raise NotImplementedError


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Node) -> Dict[Node, float]:
        """
        Compute shortest-path costs from source to all reachable nodes.

        Returns:
            Mapping dest_node -> path_cost(source -> dest_node).
        """
        raise NotImplementedError
