"""
Best-first (A* / uniform-cost) shortest-path search for heapgraph.

The frontier is a PriorityQueue from priority_queue.py, which in turn runs on
the in-place heap engine. Without a heuristic the search is Dijkstra's
algorithm; with a consistent heuristic it is A* with a closed set and stops as
soon as the destination is extracted.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
import logging
import math

from algorithms import DijkstraEngine, PathSearchEngine
from errors import InadmissibleHeuristicError, SearchCancelled, UnknownNodeError
from graph import Graph
from heuristics import Heuristic, zero_heuristic
from nodes import Node
from paths import Path
from priority_queue import make_priority_queue
from traversal import TraversalState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """
    Search options.

    strict_decrease_key:
        Use the indexed queue (one entry per node, O(V) queue) instead of
        lazy re-insertion (O(E) queue).
    check_heuristic:
        Validate every estimate: finite, non-negative, zero at the
        destination, and consistent on every examined edge. Violations raise
        InadmissibleHeuristicError instead of silently returning a
        suboptimal path.
    tolerance:
        Slack allowed in the consistency check for float rounding.
    """

    strict_decrease_key: bool = False
    check_heuristic: bool = False
    tolerance: float = 1e-9


class BestFirstSearchEngine(PathSearchEngine, DijkstraEngine):
    """
    Single-pair best-first search over any Graph.

    Traversal state for each call lives in a fresh TraversalState, exposed
    afterwards as ``last_state`` together with per-invocation counters.

    Complexity:
        O(E log V) with the indexed queue, O(E log E) with the lazy queue.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.should_stop = should_stop
        self.last_state = TraversalState()
        self._reset_counters()

    def _reset_counters(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_skipped = 0
        self.last_max_queue_size = 0

    def reset_traversal_state(self) -> None:
        """Drop the previous search's side table and counters."""
        self.last_state = TraversalState()
        self._reset_counters()

    def search(
        self,
        graph: Graph,
        origin: Node,
        destination: Node,
        heuristic: Optional[Heuristic] = None,
    ) -> Optional[Path]:
        """
        Cheapest path from origin to destination, or None if unreachable.

        Raises UnknownNodeError if either endpoint is not in the graph.
        """
        for endpoint in (origin, destination):
            if endpoint not in graph:
                raise UnknownNodeError(f"{endpoint!r} is not in the graph")

        estimate = heuristic or zero_heuristic
        if self.config.check_heuristic:
            at_goal = estimate(destination, destination)
            if at_goal != 0:
                raise InadmissibleHeuristicError(
                    f"heuristic must be 0 at the destination, got {at_goal!r} for {destination!r}"
                )

        path = self._run(graph, origin, destination, estimate)
        logger.debug(
            "search %r -> %r: %s (pops=%d pushes=%d relaxed=%d stale=%d)",
            origin,
            destination,
            path if path is not None else "no path",
            self.last_heap_pops,
            self.last_heap_pushes,
            self.last_relaxed,
            self.last_stale_skipped,
        )
        return path

    def shortest_path_costs(self, graph: Graph, source: Node) -> Dict[Node, float]:
        """
        Exhaust the frontier from source with no destination.

        Returns cost for every node reachable from source.
        """
        if source not in graph:
            raise UnknownNodeError(f"{source!r} is not in the graph")
        self._run(graph, source, None, zero_heuristic)
        return self.last_state.costs()

    def _estimate(self, estimate: Heuristic, node: Node, destination: Optional[Node]) -> float:
        if destination is None:
            return 0.0
        value = estimate(node, destination)
        if self.config.check_heuristic and not (math.isfinite(value) and value >= 0):
            raise InadmissibleHeuristicError(f"heuristic returned {value!r} for {node!r}")
        return value

    def _run(
        self,
        graph: Graph,
        origin: Node,
        destination: Optional[Node],
        estimate: Heuristic,
    ) -> Optional[Path]:
        self._reset_counters()
        state = TraversalState()
        self.last_state = state
        queue = make_priority_queue(self.config.strict_decrease_key)
        check = self.config.check_heuristic and destination is not None
        tolerance = self.config.tolerance

        state.start(origin)
        queue.insert(origin, self._estimate(estimate, origin, destination))
        try:
            while queue:
                if self.should_stop is not None and self.should_stop():
                    raise SearchCancelled(f"search from {origin!r} cancelled after {queue.pops} extractions")

                node = queue.extract_min().node
                if not state.mark_visited(node):
                    # Superseded lazy entry.
                    self.last_stale_skipped += 1
                    continue

                if node == destination:
                    return state.path_to(destination)

                cost = state.cost(node)
                h_node = self._estimate(estimate, node, destination) if check else 0.0
                for neighbor, weight in graph.outgoing(node).items():
                    self.last_edges_examined += 1
                    if state.is_visited(neighbor):
                        continue
                    h_neighbor = self._estimate(estimate, neighbor, destination)
                    if check and h_node > weight + h_neighbor + tolerance:
                        raise InadmissibleHeuristicError(
                            f"inconsistent heuristic on edge {node!r} -> {neighbor!r}: "
                            f"h={h_node} > w={weight} + h'={h_neighbor}"
                        )
                    candidate = cost + weight
                    if state.relax(neighbor, candidate, node):
                        self.last_relaxed += 1
                        queue.decrease_key(neighbor, candidate + h_neighbor)
            return None
        finally:
            self.last_heap_pops = queue.pops
            self.last_heap_pushes = queue.pushes
            self.last_max_queue_size = queue.max_size


def search(
    graph: Graph,
    origin: Node,
    destination: Node,
    heuristic: Optional[Heuristic] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """One-shot search with a throwaway engine."""
    return BestFirstSearchEngine(config).search(graph, origin, destination, heuristic)
