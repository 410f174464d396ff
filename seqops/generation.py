"""
Generating sequences from a function of the position. Generator callbacks get 1-based
positions, so generate(n, f) calls f(1) .. f(n).
"""
from typing import Callable, List, Optional

from seqops.util import U, check_callable


def generate(count: int, f: Callable[[int], Optional[U]]) -> List[U]:
    """
    Basically a map over the positions 1 to count. None results are omitted, as for map.

    >>> generate(5, lambda i: i * i if i != 3 else None)
    [1, 4, 16, 25]

    :param count: number of positions, nothing is generated when count < 1
    :param f: f(position) -> value or None
    :return: new list
    """
    check_callable(f)
    result = []
    for i in range(1, count + 1):
        v = f(i)
        if v is not None:
            result.append(v)
    return result


def generate_2d(width: int, height: int, f: Callable[[int, int], Optional[U]]) -> List[U]:
    """
    2d version of generate, row by row. Ends up with a flat list; nest generate calls to get
    a list of rows instead.

    >>> generate_2d(2, 2, lambda x, y: f"{x}-{y}")
    ['1-1', '2-1', '1-2', '2-2']

    :param width: number of columns, x in 1..width
    :param height: number of rows, y in 1..height
    :param f: f(x, y) -> value or None
    :return: new flat list in row-major order
    """
    check_callable(f)
    result = []
    for y in range(1, height + 1):
        for x in range(1, width + 1):
            v = f(x, y)
            if v is not None:
                result.append(v)
    return result
