"""
Common queries and scalar reductions.

Empty input is not an error here: sum, mean and minmax answer 0, any answers False, all and
none answer True, and the find_* searches answer None.
"""
from typing import Callable, Optional, Sequence, Tuple

from seqops.util import T, U, check_callable, with_index


def any(seq: Sequence[T], f: Callable[..., object]) -> bool:
    """True if any element of seq matches f"""
    f = with_index(f)
    for i in range(len(seq)):
        if f(seq[i], i):
            return True
    return False


def none(seq: Sequence[T], f: Callable[..., object]) -> bool:
    """True if no element of seq matches f"""
    f = with_index(f)
    for i in range(len(seq)):
        if f(seq[i], i):
            return False
    return True


def all(seq: Sequence[T], f: Callable[..., object]) -> bool:
    """True if all elements of seq match f"""
    f = with_index(f)
    for i in range(len(seq)):
        if not f(seq[i], i):
            return False
    return True


def count(seq: Sequence[T], f: Callable[..., object]) -> int:
    f = with_index(f)
    c = 0
    for i in range(len(seq)):
        if f(seq[i], i):
            c += 1
    return c


def contains(seq: Sequence[T], value: T) -> bool:
    for i in range(len(seq)):
        if seq[i] == value:
            return True
    return False


def sum(seq):
    """
    Numeric sum of all elements of seq, 0 when seq is empty.

    >>> sum([1, 2, 3])
    6
    """
    c = 0
    for i in range(len(seq)):
        c = c + seq[i]
    return c


def mean(seq):
    """
    Numeric mean of all elements of seq. Returns 0 rather than nan for an empty seq.

    >>> mean([1, 2, 3])
    2.0
    """
    n = len(seq)
    if n == 0:
        return 0
    return sum(seq) / n


def minmax(seq):
    """
    The minimum and maximum of seq in one pass, or 0 for both if seq is empty. Infinities
    would be more correct for the empty case but are surprising to callers in practice.

    >>> minmax([3, 1, 2])
    (1, 3)

    :param seq: sequence of comparable values
    :return: (min, max)
    """
    n = len(seq)
    if n == 0:
        return 0, 0
    lo = hi = seq[0]
    for i in range(1, n):
        v = seq[i]
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    return lo, hi


def max(seq):
    """maximum element of seq, or 0 if seq is empty"""
    return minmax(seq)[1]


def min(seq):
    """minimum element of seq, or 0 if seq is empty"""
    return minmax(seq)[0]


def find_min(seq: Sequence[T], f: Callable[..., Optional[U]]) -> Optional[T]:
    """
    The element of seq with the lowest score f(element, index). Elements scoring None are
    skipped, and only a strictly lower score replaces the current best, so the first of
    several equal scores wins.

    >>> find_min([{"v": 5}, {"v": 1}, {"v": 3}], lambda e: e["v"])
    {'v': 1}

    :param seq: sequence to search
    :param f: score function
    :return: best element, or None if seq is empty or nothing scored
    """
    f = with_index(f)
    current = None
    current_min = None
    for i in range(len(seq)):
        e = seq[i]
        v = f(e, i)
        if v is not None and (current_min is None or v < current_min):
            current_min = v
            current = e
    return current


def find_max(seq: Sequence[T], f: Callable[..., Optional[U]]) -> Optional[T]:
    """
    The element of seq with the greatest score f(element, index), see find_min.
    """
    f = with_index(f)
    current = None
    current_max = None
    for i in range(len(seq)):
        e = seq[i]
        v = f(e, i)
        if v is not None and (current_max is None or v > current_max):
            current_max = v
            current = e
    return current


find_best = find_max


def find_nearest(seq: Sequence[T], f: Callable[[T], Optional[U]], target) -> Optional[T]:
    """
    The element of seq for which f(element) is nearest to target.

    >>> find_nearest([1, 5, 9], lambda x: x, 6)
    5
    """
    check_callable(f)

    def distance(e):
        v = f(e)
        if v is None:
            return None
        return abs(v - target)

    return find_min(seq, distance)


def find_match(seq: Sequence[T], f: Callable[..., object]) -> Optional[T]:
    """
    The first element of seq for which f(element, index) is truthy, or None. This is a linear
    search, seq does not need to be sorted.
    """
    f = with_index(f)
    for i in range(len(seq)):
        v = seq[i]
        if f(v, i):
            return v
    return None
