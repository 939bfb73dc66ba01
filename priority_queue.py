"""
Min-priority queues over graph nodes, backed by the in-place heap engine.

Two strategies share one interface:

LazyPriorityQueue
    decrease_key pushes a fresh entry and leaves the old one in place. The
    consumer must skip entries for nodes it has already finalised. Queue
    size is bounded by the number of relaxations, O(E).

IndexedPriorityQueue
    Tracks each node's heap index and lowers keys in place, so a node has at
    most one entry. Queue size is bounded by O(V).

Entries are ordered by (priority, sequence) where sequence is an insertion
counter, so equal priorities come out in insertion order. A decrease-key
counts as a new insertion in both strategies, which keeps their extraction
order identical.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List
import itertools

from errors import EmptyQueueError
from heap import extract_root, sift_up
from nodes import Node


@dataclass(frozen=True, order=True)
class QueueEntry:
    """Node plus the priority it was queued with."""

    priority: float
    sequence: int
    node: Node = field(compare=False)


class PriorityQueue(ABC):
    """
    Interface for the search frontier.

    Counters (pushes, pops, max_size) cover the lifetime of the queue.
    """

    def __init__(self) -> None:
        self._heap: List[QueueEntry] = self._new_heap()
        self._counter = itertools.count()
        self.pushes = 0
        self.pops = 0
        self.max_size = 0

    def _new_heap(self) -> List[QueueEntry]:
        return []

    def _push(self, node: Node, key: float) -> QueueEntry:
        entry = QueueEntry(key, next(self._counter), node)
        self._heap.append(entry)
        sift_up(self._heap, 0, len(self._heap) - 1, reverse=True)
        self.pushes += 1
        self.max_size = max(self.max_size, len(self._heap))
        return entry

    @abstractmethod
    def insert(self, node: Node, key: float) -> None:
        """Queue node with priority key."""
        raise NotImplementedError

    @abstractmethod
    def decrease_key(self, node: Node, key: float) -> None:
        """Lower node's priority to key, queueing it if it is not present."""
        raise NotImplementedError

    def extract_min(self) -> QueueEntry:
        """
        Remove and return the entry with the smallest priority.

        Raises EmptyQueueError when the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("extract_min on an empty priority queue")
        extract_root(self._heap, 0, len(self._heap), reverse=True)
        self.pops += 1
        return self._heap.pop()

    def peek(self) -> QueueEntry:
        if not self._heap:
            raise EmptyQueueError("peek on an empty priority queue")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    @abstractmethod
    def __contains__(self, node: object) -> bool:
        raise NotImplementedError


class LazyPriorityQueue(PriorityQueue):
    """Re-insertion on every decrease; stale entries stay until extracted."""

    def insert(self, node: Node, key: float) -> None:
        self._push(node, key)

    def decrease_key(self, node: Node, key: float) -> None:
        self._push(node, key)

    def __contains__(self, node: object) -> bool:
        """
        True while any entry for node remains, superseded ones included.

        A node whose live entry was already extracted still counts until its
        stale entries are drained. O(n) scan.
        """
        return any(entry.node == node for entry in self._heap)


class _PositionTrackingHeap(list):
    """List that records node -> index for every entry written into it."""

    def __init__(self) -> None:
        super().__init__()
        self.positions: Dict[Node, int] = {}

    def __setitem__(self, index, entry) -> None:
        super().__setitem__(index, entry)
        self.positions[entry.node] = index

    def append(self, entry) -> None:
        super().append(entry)
        self.positions[entry.node] = len(self) - 1

    def pop(self):
        entry = super().pop()
        del self.positions[entry.node]
        return entry


class IndexedPriorityQueue(PriorityQueue):
    """True decrease-key via a node -> heap index map."""

    def _new_heap(self) -> List[QueueEntry]:
        return _PositionTrackingHeap()

    def insert(self, node: Node, key: float) -> None:
        if node in self._heap.positions:
            raise ValueError(f"{node!r} is already queued; use decrease_key")
        self._push(node, key)

    def decrease_key(self, node: Node, key: float) -> None:
        index = self._heap.positions.get(node)
        if index is None:
            self._push(node, key)
            return
        current = self._heap[index]
        if key > current.priority:
            raise ValueError(
                f"decrease_key would raise priority of {node!r} from {current.priority} to {key}"
            )
        if key == current.priority:
            return
        self._heap[index] = QueueEntry(key, next(self._counter), node)
        sift_up(self._heap, 0, index, reverse=True)
        self.pushes += 1

    def priority_of(self, node: Node) -> float:
        """Current priority of a queued node (KeyError if absent)."""
        return self._heap[self._heap.positions[node]].priority

    def __contains__(self, node: object) -> bool:
        return node in self._heap.positions


def make_priority_queue(strict_decrease_key: bool = False) -> PriorityQueue:
    """Indexed queue when strict_decrease_key is set, lazy otherwise."""
    if strict_decrease_key:
        return IndexedPriorityQueue()
    return LazyPriorityQueue()
