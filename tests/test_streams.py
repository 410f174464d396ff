import collections.abc

import pytest

import seqops
from seqops import Sequence, seq


def test_seq_construction():
    assert seq([1, 2, 3]) == [1, 2, 3]
    assert seq(1, 2, 3) == [1, 2, 3]
    assert seq(range(3)) == [0, 1, 2]
    assert seq() == []
    assert seq(seq([1, 2])) == seq([1, 2])
    assert isinstance(seq([1]), collections.abc.MutableSequence)


def test_seq_wraps_list_without_copy():
    data = [1, 2, 3, 4]
    s = seq(data)
    s.filter_inplace(lambda x: x % 2 == 0)
    assert data == [2, 4]


def test_sequence_rejects_scalars():
    with pytest.raises(TypeError):
        Sequence(5)


def test_chaining():
    result = (
        seq(1, 2, 3, 4, 5, 6)
        .map(lambda x: x * 10)
        .filter(lambda x, i: i % 2 == 0)
        .remove_if(lambda x: x == 30)
        .to_list()
    )
    assert result == [10, 50]


def test_inplace_returns_self():
    s = seq(1, 2, 3)
    assert s.map_inplace(lambda x: x + 1 if x > 1 else None) is s
    assert s == [3, 4]
    assert s.remap(lambda x: x) is s


def test_sequence_protocol():
    s = seq('a', 'b')
    s.append('c')
    s.insert(0, 'z')
    assert len(s) == 4
    assert s[0] == 'z'
    assert s[1:3] == seq('a', 'b')
    del s[0]
    s[0] = 'A'
    assert s.to_list() == ['A', 'b', 'c']
    assert repr(s) == "Sequence(['A', 'b', 'c'])"


def test_partition_group_by_zip():
    odd, even = seq(1, 2, 3, 4).partition(lambda x: x % 2)
    assert isinstance(odd, Sequence)
    assert (odd, even) == (seq(1, 3), seq(2, 4))
    groups = seq(1, 2, 3, 4).group_by(lambda x: x % 2)
    assert groups == {1: seq(1, 3), 0: seq(2, 4)}
    assert seq(1, 2, 3).zip_with(seq(10, 20), lambda a, b: a + b) == [11, 22]
    assert seq(1, 2, 3).zip_with([10, 20, 30], lambda a, b, i: a * i) == [0, 2, 6]


def test_queries():
    s = seq(3, 1, 2)
    assert s.sum() == 6
    assert s.mean() == 2
    assert s.minmax() == (1, 3)
    assert (s.min(), s.max()) == (1, 3)
    assert s.any(lambda x: x > 2)
    assert s.all(lambda x: x > 0)
    assert s.none(lambda x: x > 3)
    assert s.count(lambda x: x > 1) == 2
    assert s.contains(2)
    assert s.find_min(lambda x: x) == 1
    assert s.find_best(lambda x: x) == 3
    assert s.find_nearest(lambda x: x, 1.9) == 2
    assert s.find_match(lambda x: x < 3) == 1
    assert s.foreach(lambda x: 'stop' if x == 1 else None) == 'stop'
    assert s.reduce(0, lambda acc, x: acc + x) == 6


def test_empty_queries():
    s = seq()
    assert s.sum() == 0
    assert s.mean() == 0
    assert s.minmax() == (0, 0)
    assert s.find_max(lambda x: x) is None


def test_generate():
    assert seq.generate(3, lambda i: i * 2) == [2, 4, 6]
    assert seq.generate_2d(2, 2, lambda x, y: f'{x}-{y}') == ['1-1', '2-1', '1-2', '2-2']


def test_free_functions_accept_sequence():
    s = seq(1, 2, 3, 4)
    assert seqops.map(s, lambda x: x * 2) == [2, 4, 6, 8]
    assert seqops.filter_inplace(s, lambda x: x > 2) is s
    assert s == [3, 4]


def test_count_by_value_and_predicate():
    s = seq(1, 2, 2)
    assert s.count(2) == 2
    assert s.count(5) == 0
    assert s.count(lambda x: x > 1) == 2
    assert s.index(2) == 1


def test_map_inplace_on_sequence_object():
    s = seq(1, 2, 3, 4, 5)
    assert seqops.map_inplace(s, lambda x, i: x * 10 if i % 2 == 0 else None) is s
    assert s == [10, 30, 50]
    assert len(s) == 3
