"""
Single pass traversal and transformation of ordered sequences.

Callbacks receive (element, index) with a 0-based index; callbacks that only take the element
are accepted as well. A callback result of None means "no value": the transforming operations
drop that element from their output, so map doubles as a simultaneous map and filter.
"""
import builtins
from typing import Callable, Dict, List, MutableSequence, Optional, Sequence, Tuple

from seqops.logger import get_logger
from seqops.util import K, T, U, check_mutable, with_index

logger = get_logger()


def foreach(seq: Sequence[T], f: Callable[..., Optional[U]]) -> Optional[U]:
    """
    Calls f(element, index) for every element in order. A non None return value from f stops
    the loop and is returned, which makes this usable as a find-and-stop primitive.

    >>> foreach([1, 2, 3, 4], lambda x: x * 10 if x > 2 else None)
    30

    :param seq: sequence to iterate
    :param f: callback, return non None to break
    :return: the first non None result of f, else None
    """
    f = with_index(f)
    for i in range(len(seq)):
        result = f(seq[i], i)
        if result is not None:
            return result
    return None


def reduce(seq: Sequence[T], seed: U, f: Callable[..., U]) -> U:
    """
    Left to right reduction of seq using f, with seed as the initial value.
    reduce([1, 2, 3], 0, f) -> f(f(f(0, 1), 2), 3), performed iteratively.

    :param seq: sequence to reduce
    :param seed: initial accumulator
    :param f: f(accumulator, element, index) -> accumulator
    :return: final accumulator
    """
    f = with_index(f, arity=2)
    for i in range(len(seq)):
        seed = f(seed, seq[i], i)
    return seed


def map(seq: Sequence[T], f: Callable[..., Optional[U]]) -> List[U]:
    """
    Maps a sequence [a, b, c] -> [f(a), f(b), f(c)] into a new list, dropping None results.

    f also receives the index when it can take a second positional argument, which includes
    builtins with an optional second parameter: map(data, round) passes the index as ndigits
    and map(data, str.split) as sep. Wrap those in a lambda taking only the element.

    >>> map([1, 2, 3, 4], lambda x: x * x if x % 2 else None)
    [1, 9]

    :param seq: sequence to map
    :param f: f(element, index) -> value or None
    :return: new list of the present results
    """
    f = with_index(f)
    result = []
    for i in range(len(seq)):
        v = f(seq[i], i)
        if v is not None:
            result.append(v)
    return result


def map_inplace(seq: MutableSequence, f: Callable[..., Optional[U]]) -> MutableSequence:
    """
    Maps a sequence in place, dropping None results. The list is compacted in the same pass:
    results are written at a write cursor that never runs ahead of the read cursor, and the
    slots left behind the last write are removed afterwards.

    >>> items = [1, 2, 3, 4]
    >>> map_inplace(items, lambda x: x * x if x % 2 else None) is items
    True
    >>> items
    [1, 9]

    :param seq: mutable sequence to rewrite
    :param f: f(element, index) -> value or None
    :return: seq
    """
    check_mutable(seq, "map_inplace")
    f = with_index(f)
    n = len(seq)
    write_i = 0
    for i in range(n):
        v = f(seq[i], i)
        if v is not None:
            seq[write_i] = v
            write_i += 1
    _truncate(seq, write_i, n)
    return seq


remap = map_inplace


def filter(seq: Sequence[T], f: Callable[..., object]) -> List[T]:
    """
    Filters a sequence, keeping the elements for which f(element, index) is truthy.

    :param seq: sequence to filter
    :param f: predicate
    :return: new list of the matching elements
    """
    f = with_index(f)
    result = []
    for i in range(len(seq)):
        v = seq[i]
        if f(v, i):
            result.append(v)
    return result


def filter_inplace(seq: MutableSequence, f: Callable[..., object]) -> MutableSequence:
    """
    Filters a sequence in place with the same compaction as map_inplace.

    :param seq: mutable sequence to filter
    :param f: predicate
    :return: seq
    """
    check_mutable(seq, "filter_inplace")
    f = with_index(f)
    n = len(seq)
    write_i = 0
    for i in range(n):
        v = seq[i]
        if f(v, i):
            if i != write_i:
                seq[write_i] = v
            write_i += 1
    _truncate(seq, write_i, n)
    return seq


def _truncate(seq, write_i, n):
    if write_i < n:
        del seq[write_i:]
        logger.d("compacted %d -> %d elements", n, write_i)


def remove_if(seq: Sequence[T], f: Callable[..., object]) -> List[T]:
    """
    Complement of filter: keeps the elements for which f(element, index) is falsy, None
    included, so filter(seq, f) and remove_if(seq, f) split seq exactly. Use partition
    if both halves are needed.

    :param seq: sequence to filter
    :param f: predicate
    :return: new list of the non matching elements
    """
    f = with_index(f)
    result = []
    for i in range(len(seq)):
        v = seq[i]
        if not f(v, i):
            result.append(v)
    return result


def partition(seq: Sequence[T], f: Callable[..., object]) -> Tuple[List[T], List[T]]:
    """
    Partitions a sequence in two in one pass, simultaneous filter and remove_if.

    >>> partition([1, 2, 3, 4, 5], lambda x: x % 2)
    ([1, 3, 5], [2, 4])

    :param seq: sequence to partition
    :param f: predicate
    :return: (matching, rest)
    """
    f = with_index(f)
    matching = []
    rest = []
    for i in range(len(seq)):
        v = seq[i]
        if f(v, i):
            matching.append(v)
        else:
            rest.append(v)
    return matching, rest


def group_by(seq: Sequence[T], f: Callable[..., K]) -> Dict[K, List[T]]:
    """
    Groups the elements of seq into lists keyed by f(element, index). Each group is created
    the first time its key is seen, and keeps the original relative order of its members.

    >>> group_by([1, 2, 3, 4], lambda x: x % 2)
    {1: [1, 3], 0: [2, 4]}

    :param seq: sequence to group
    :param f: key function, keys must be hashable
    :return: dict of key to list of elements
    """
    f = with_index(f)
    result = {}
    for i in range(len(seq)):
        v = seq[i]
        key = f(v, i)
        group = result.get(key)
        if group is None:
            group = result[key] = []
        group.append(v)
    return result


def zip(seq1: Sequence[T], seq2: Sequence[U], f: Callable[..., Optional[K]]) -> List[K]:
    """
    Zips two sequences together into a new list using f(e1, e2, index). Iteration is limited
    by the shorter sequence and None results are dropped.

    >>> zip([1, 2, 3], [10, 20], lambda a, b: a + b)
    [11, 22]

    :param seq1: first sequence
    :param seq2: second sequence
    :param f: combining function
    :return: new list of the present results
    """
    f = with_index(f, arity=2)
    result = []
    for i in range(builtins.min(len(seq1), len(seq2))):
        v = f(seq1[i], seq2[i], i)
        if v is not None:
            result.append(v)
    return result
