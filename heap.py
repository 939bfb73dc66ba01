"""
In-place binary-heap operations over a mutable sequence.

All functions work on the half-open active range [lo, hi) of ``seq`` and
leave everything outside it untouched. Ordering is given by ``key`` (identity
by default) and ``reverse``:

    reverse=False  max-heap: key(seq[parent]) >= key(seq[child])
    reverse=True   min-heap: key(seq[parent]) <= key(seq[child])

Index arithmetic is relative to ``lo``:

    parent(i)      = lo + (i - lo - 1) // 2
    children(i)    = lo + 2 * (i - lo) + 1,  lo + 2 * (i - lo) + 2

heap_sort heapifies the range once, then repeatedly moves the root to the
shrinking right boundary. With the default max-heap ordering this yields an
ascending range.

The functions share no state; concurrent use on distinct sequences is safe.
"""

from typing import Any, Callable, MutableSequence, Optional, Sequence, TypeVar

from errors import InvalidRange

T = TypeVar("T")

KeyFn = Optional[Callable[[Any], Any]]


def _identity(value: Any) -> Any:
    return value


def _ranks_above(key: Callable[[Any], Any], reverse: bool) -> Callable[[Any, Any], bool]:
    """Return ``above(a, b)``: True when a belongs strictly closer to the root than b."""
    if reverse:
        return lambda a, b: key(a) < key(b)
    return lambda a, b: key(a) > key(b)


def check_range(seq: Sequence[Any], lo: int, hi: int) -> None:
    """Raise InvalidRange unless 0 <= lo <= hi <= len(seq)."""
    if lo < 0 or hi > len(seq) or lo > hi:
        raise InvalidRange(lo, hi, len(seq))


def _swap(seq: MutableSequence[Any], a: int, b: int) -> None:
    seq[a], seq[b] = seq[b], seq[a]


def parent_index(lo: int, i: int) -> int:
    """Parent of i within a heap rooted at lo; < lo when i is the root."""
    return lo + (i - lo - 1) // 2


def sift_up(
    seq: MutableSequence[T],
    lo: int,
    i: int,
    key: KeyFn = None,
    reverse: bool = False,
) -> int:
    """
    Move seq[i] toward lo while it ranks above its parent.

    Returns the index where the element came to rest.
    Raises InvalidRange unless 0 <= lo <= i < len(seq).
    """
    if lo < 0 or not lo <= i < len(seq):
        raise InvalidRange(lo, i + 1, len(seq))
    above = _ranks_above(key or _identity, reverse)
    while True:
        parent = parent_index(lo, i)
        if parent < lo:
            break
        if not above(seq[i], seq[parent]):
            break
        _swap(seq, parent, i)
        i = parent
    return i


def sift_down(
    seq: MutableSequence[T],
    lo: int,
    hi: int,
    i: Optional[int] = None,
    key: KeyFn = None,
    reverse: bool = False,
) -> int:
    """
    Move seq[i] (default: the root at lo) toward hi while a child ranks above it.

    When both children exist and rank equally the right child is chosen.
    Returns the index where the element came to rest.
    Raises InvalidRange for an invalid [lo, hi) or i outside it; an empty
    range is left untouched.
    """
    check_range(seq, lo, hi)
    if i is None:
        i = lo
    if lo == hi:
        return i
    if not lo <= i < hi:
        raise InvalidRange(lo, hi, len(seq))
    above = _ranks_above(key or _identity, reverse)
    while i < hi:
        left = lo + 2 * (i - lo) + 1
        if left >= hi:
            break
        right = left + 1
        if right < hi and not above(seq[left], seq[right]):
            child = right
        else:
            child = left
        if not above(seq[child], seq[i]):
            break
        _swap(seq, i, child)
        i = child
    return i


def heapify(
    seq: MutableSequence[T],
    lo: int = 0,
    hi: Optional[int] = None,
    key: KeyFn = None,
    reverse: bool = False,
) -> MutableSequence[T]:
    """Arrange seq[lo:hi] into heap order by sifting up lo+1 .. hi-1, left to right."""
    if hi is None:
        hi = len(seq)
    check_range(seq, lo, hi)
    for i in range(lo + 1, hi):
        sift_up(seq, lo, i, key=key, reverse=reverse)
    return seq


def extract_root(
    seq: MutableSequence[T],
    lo: int,
    hi: int,
    key: KeyFn = None,
    reverse: bool = False,
) -> T:
    """
    Move the root of the heap seq[lo:hi] to position hi-1 and repair [lo, hi-1).

    Returns the extracted root. The caller shrinks its active range by one.
    """
    check_range(seq, lo, hi)
    if hi == lo:
        raise InvalidRange(lo, hi, len(seq))
    last = hi - 1
    _swap(seq, lo, last)
    sift_down(seq, lo, last, lo, key=key, reverse=reverse)
    return seq[last]


def heap_sort(
    seq: MutableSequence[T],
    lo: int = 0,
    hi: Optional[int] = None,
    key: KeyFn = None,
    reverse: bool = False,
) -> MutableSequence[T]:
    """
    Sort seq[lo:hi] in place and return seq.

    Ascending by ``key`` unless ``reverse`` is set. Not stable.
    Raises InvalidRange for lo < 0, hi > len(seq) or lo > hi.
    """
    if hi is None:
        hi = len(seq)
    check_range(seq, lo, hi)
    if hi - lo < 2:
        return seq

    heapify(seq, lo, hi, key=key, reverse=reverse)
    for boundary in range(hi, lo + 1, -1):
        extract_root(seq, lo, boundary, key=key, reverse=reverse)
    return seq


def is_heap(
    seq: Sequence[T],
    lo: int = 0,
    hi: Optional[int] = None,
    key: KeyFn = None,
    reverse: bool = False,
) -> bool:
    """True when no element of seq[lo:hi] ranks above its parent."""
    if hi is None:
        hi = len(seq)
    check_range(seq, lo, hi)
    above = _ranks_above(key or _identity, reverse)
    for i in range(lo + 1, hi):
        if above(seq[i], seq[parent_index(lo, i)]):
            return False
    return True
