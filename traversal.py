"""
Per-search traversal state kept in a side table.

Nodes and graph topology are never mutated by a search. Each search owns a
TraversalState mapping node -> SearchState; a node missing from the table is
Unvisited with infinite cost and no predecessor.

    Unvisited --relax--> Frontier(cost, predecessor) --extract--> Visited

Predecessors are plain references into the table's key space, used only to
walk back from the destination.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
import math

from nodes import Node
from paths import Path


@dataclass
class SearchState:
    """Best-known cost, predecessor and visited flag for one node."""

    cost: Optional[float] = None
    predecessor: Optional[Node] = None
    visited: bool = False

    @property
    def finite_cost(self) -> float:
        return math.inf if self.cost is None else self.cost


class TraversalState:
    """Side table of SearchState keyed by node, scoped to one search."""

    def __init__(self) -> None:
        self._states: Dict[Node, SearchState] = {}

    def reset(self) -> None:
        """Forget every node; all become Unvisited again."""
        self._states.clear()

    def get(self, node: Node) -> SearchState:
        """State for node, or a detached Unvisited state if it was never reached."""
        return self._states.get(node) or SearchState()

    def cost(self, node: Node) -> Optional[float]:
        state = self._states.get(node)
        return None if state is None else state.cost

    def is_visited(self, node: Node) -> bool:
        state = self._states.get(node)
        return state is not None and state.visited

    def start(self, origin: Node) -> None:
        """Put origin on the frontier with cost 0 and no predecessor."""
        self._states[origin] = SearchState(cost=0.0)

    def relax(self, node: Node, cost: float, predecessor: Node) -> bool:
        """
        Record a cheaper route to node.

        Returns True when the cost was unset or strictly improved. Visited
        nodes are final and never change.
        """
        state = self._states.setdefault(node, SearchState())
        if state.visited:
            return False
        if state.cost is not None and cost >= state.cost:
            return False
        state.cost = cost
        state.predecessor = predecessor
        return True

    def mark_visited(self, node: Node) -> bool:
        """Finalise node; returns False if it already was."""
        state = self._states.setdefault(node, SearchState())
        if state.visited:
            return False
        state.visited = True
        return True

    def visited_nodes(self) -> List[Node]:
        return [node for node, state in self._states.items() if state.visited]

    def costs(self) -> Dict[Node, float]:
        """Costs of every node that received one."""
        return {node: state.cost for node, state in self._states.items() if state.cost is not None}

    def path_to(self, destination: Node) -> Path:
        """
        Walk predecessor links from destination back to the origin.

        The chain has strictly decreasing cost, so it is never longer than the
        table; a longer walk means the table was corrupted.
        """
        state = self._states.get(destination)
        if state is None or state.cost is None:
            raise KeyError(destination)

        reversed_nodes: List[Node] = []
        node: Optional[Node] = destination
        while node is not None:
            reversed_nodes.append(node)
            if len(reversed_nodes) > len(self._states):
                raise RuntimeError(f"predecessor cycle while rebuilding path to {destination!r}")
            node = self._states[node].predecessor
        reversed_nodes.reverse()
        return Path(state.cost, reversed_nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, node: object) -> bool:
        return node in self._states
