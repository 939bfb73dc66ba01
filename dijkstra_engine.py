"""
Reference DijkstraEngine implementation for heapgraph.

Uses Python's heapq, independently of heap.py and priority_queue.py, to
compute single-source shortest paths over any Graph. The search engine is
checked against it in tests and by ``search_runner --verify``.
"""

from typing import Dict, List, Optional
import heapq
import itertools
import math

from algorithms import DijkstraEngine
from graph import Graph
from nodes import Node
from paths import Path


class HeapqDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using the standard library binary heap.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def shortest_path_costs(self, graph: Graph, source: Node) -> Dict[Node, float]:
        """
        Compute only the cost map for all reachable nodes from source.
        """
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: Node
    ) -> tuple[Dict[Node, float], Dict[Node, Node]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Returns the distance map (dest -> cost from source) plus a predecessor
        map that lets you walk back from any reachable node to the source.
        The predecessor map omits the source itself because it has no parent.
        Nodes are never compared: a counter breaks ties between equal costs.
        """
        dist: Dict[Node, float] = {source: 0.0}
        prev: Dict[Node, Node] = {}
        tie = itertools.count()
        pq = [(0.0, next(tie), source)]

        while pq:
            d_u, _, u = heapq.heappop(pq)
            # Skip outdated entries
            if d_u != dist.get(u, math.inf):
                continue

            for v, w in graph.outgoing(u).items():
                alt = d_u + w
                if alt < dist.get(v, math.inf):
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, next(tie), v))

        return dist, prev

    def path_to(self, graph: Graph, source: Node, destination: Node) -> Optional[Path]:
        """Cheapest source -> destination path, or None if unreachable."""
        dist, prev = self.shortest_paths(graph, source)
        if destination not in dist:
            return None
        nodes: List[Node] = [destination]
        while nodes[-1] != source:
            nodes.append(prev[nodes[-1]])
        nodes.reverse()
        return Path(dist[destination], nodes)
