"""
Error taxonomy for heapgraph.

Every error derives from HeapGraphError and from the closest built-in
exception, so callers catching ValueError / IndexError / KeyError keep working.
An unreachable destination is not an error: search returns None.
"""


class HeapGraphError(Exception):
    """Base class for all heapgraph errors."""


class InvalidRange(HeapGraphError, ValueError):
    """Heap operation requested over a range outside the sequence or with lo > hi."""

    def __init__(self, lo: int, hi: int, length: int) -> None:
        super().__init__(f"invalid range [{lo}, {hi}) for sequence of length {length}")
        self.lo = lo
        self.hi = hi
        self.length = length


class InvalidWeightError(HeapGraphError, ValueError):
    """Edge weight that is negative or not a finite number."""

    def __init__(self, src: object, dst: object, weight: object) -> None:
        super().__init__(f"edge {src!r} -> {dst!r} has invalid weight {weight!r}; weights must be finite and >= 0")
        self.src = src
        self.dst = dst
        self.weight = weight


class EmptyQueueError(HeapGraphError, IndexError):
    """
    Extraction attempted on an empty priority queue.

    The search loop checks for emptiness before extracting, so seeing this
    from a search means a logic error rather than a recoverable condition.
    """


class UnknownNodeError(HeapGraphError, KeyError):
    """Search endpoint that is not part of the graph."""


class InadmissibleHeuristicError(HeapGraphError, ValueError):
    """Heuristic estimate that breaks consistency (and therefore optimality)."""


class ConfigurationError(HeapGraphError, ValueError):
    """Malformed graph / query description."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(f"{field}: {message}" if field else message)
        self.field = field


class SearchCancelled(HeapGraphError, RuntimeError):
    """Search stopped early because the caller's should_stop callback fired."""
