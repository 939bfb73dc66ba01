"""
Search results.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from nodes import Node


@dataclass(frozen=True)
class Path:
    """
    Ordered node sequence from origin to destination (inclusive) plus its cost.

    Two paths are equal iff they have the same cost and the same nodes in the
    same order.
    """

    cost: float
    nodes: Tuple[Node, ...]

    def __init__(self, cost: float, nodes: Sequence[Node]) -> None:
        if not nodes:
            raise ValueError("a path contains at least its origin")
        object.__setattr__(self, "cost", cost)
        object.__setattr__(self, "nodes", tuple(nodes))

    @property
    def origin(self) -> Node:
        return self.nodes[0]

    @property
    def destination(self) -> Node:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.nodes) - 1

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __str__(self) -> str:
        names = " -> ".join(node.id for node in self.nodes)
        return f"Path(cost={self.cost:g}: {names})"
