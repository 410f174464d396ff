"""
Fluent wrapper over the sequence operations, seq([1, 2, 3]).map(f).filter(g).to_list()
"""
import collections.abc

from seqops import generation, queries, traversal
from seqops.util import is_iterable


class Sequence(collections.abc.MutableSequence):
    """
    List backed sequence whose methods delegate to the free functions. Transformations return
    a new Sequence, the *_inplace variants return self, queries return plain values.
    """

    def __init__(self, items=None):
        if items is None:
            items = []
        elif isinstance(items, Sequence):
            items = list(items._items)
        elif is_iterable(items):
            items = list(items)
        elif not isinstance(items, list):
            raise TypeError(f"cannot build a Sequence from {type(items).__name__}")
        self._items = items

    # MutableSequence protocol

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sequence(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value):
        self._items[index] = value

    def __delitem__(self, index):
        del self._items[index]

    def __len__(self):
        return len(self._items)

    def insert(self, index, value):
        self._items.insert(index, value)

    def __eq__(self, other):
        if isinstance(other, Sequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self):
        return f"Sequence({self._items!r})"

    def to_list(self):
        return list(self._items)

    # transformations

    def map(self, f):
        return Sequence(traversal.map(self._items, f))

    def map_inplace(self, f):
        traversal.map_inplace(self._items, f)
        return self

    remap = map_inplace

    def filter(self, f):
        return Sequence(traversal.filter(self._items, f))

    def filter_inplace(self, f):
        traversal.filter_inplace(self._items, f)
        return self

    def remove_if(self, f):
        return Sequence(traversal.remove_if(self._items, f))

    def zip_with(self, other, f):
        if isinstance(other, Sequence):
            other = other._items
        return Sequence(traversal.zip(self._items, other, f))

    def partition(self, f):
        matching, rest = traversal.partition(self._items, f)
        return Sequence(matching), Sequence(rest)

    def group_by(self, f):
        return {
            key: Sequence(group)
            for key, group in traversal.group_by(self._items, f).items()
        }

    def foreach(self, f):
        return traversal.foreach(self._items, f)

    def reduce(self, seed, f):
        return traversal.reduce(self._items, seed, f)

    # queries

    def any(self, f):
        return queries.any(self._items, f)

    def all(self, f):
        return queries.all(self._items, f)

    def none(self, f):
        return queries.none(self._items, f)

    def count(self, f):
        """
        Number of elements matching the predicate f. A non callable argument is counted by
        equality, as list.count does.
        """
        if not callable(f):
            return self._items.count(f)
        return queries.count(self._items, f)

    def contains(self, value):
        return queries.contains(self._items, value)

    def sum(self):
        return queries.sum(self._items)

    def mean(self):
        return queries.mean(self._items)

    def minmax(self):
        return queries.minmax(self._items)

    def min(self):
        return queries.min(self._items)

    def max(self):
        return queries.max(self._items)

    def find_min(self, f):
        return queries.find_min(self._items, f)

    def find_max(self, f):
        return queries.find_max(self._items, f)

    find_best = find_max

    def find_nearest(self, f, target):
        return queries.find_nearest(self._items, f, target)

    def find_match(self, f):
        return queries.find_match(self._items, f)


class _SeqBuilder:
    def __call__(self, *args):
        """
        seq([1, 2, 3]), seq(range(3)) and seq(1, 2, 3) all build a Sequence. A list passed
        on its own is wrapped without copying.
        """
        if len(args) == 1 and (isinstance(args[0], list) or is_iterable(args[0])):
            return Sequence(args[0])
        return Sequence(list(args))

    def generate(self, count, f):
        return Sequence(generation.generate(count, f))

    def generate_2d(self, width, height, f):
        return Sequence(generation.generate_2d(width, height, f))


seq = _SeqBuilder()
