import pytest

from seqops.generation import generate, generate_2d


def test_generate():
    assert generate(4, lambda i: i * i) == [1, 4, 9, 16]
    assert generate(5, lambda i: i if i % 2 else None) == [1, 3, 5]
    assert generate(3, lambda i: 0) == [0, 0, 0]


def test_generate_empty():
    assert generate(0, lambda i: i) == []
    assert generate(-2, lambda i: i) == []


def test_generate_2d_row_major():
    assert generate_2d(2, 2, lambda x, y: f'{x}-{y}') == ['1-1', '2-1', '1-2', '2-2']
    assert generate_2d(3, 1, lambda x, y: (x, y)) == [(1, 1), (2, 1), (3, 1)]


def test_generate_2d_drops_none():
    cells = generate_2d(3, 3, lambda x, y: (x, y) if x == y else None)
    assert cells == [(1, 1), (2, 2), (3, 3)]
    assert generate_2d(0, 5, lambda x, y: 1) == []


def test_nested_generate_builds_rows():
    grid = generate(2, lambda y: generate(3, lambda x: x * y))
    assert grid == [[1, 2, 3], [2, 4, 6]]


def test_generate_requires_callable():
    with pytest.raises(TypeError):
        generate(2, None)
