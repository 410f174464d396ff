import collections.abc
import inspect
from typing import Callable, TypeVar

from seqops.logger import get_logger

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")

logger = get_logger()


def identity(arg):
    """
    Function which returns the argument. Used as a default lambda function.

    >>> obj = object()
    >>> obj is identity(obj)
    True

    :param arg: object to take identity of
    :return: return arg
    """
    return arg


def is_iterable(val):
    """
    Check if val is not a list, but is a collections.Iterable type. This is used to determine
    when list() should be called on val

    >>> l = [1, 2]
    >>> is_iterable(l)
    False
    >>> is_iterable(iter(l))
    True

    :param val: value to check
    :return: True if it is not a list, but is a collections.Iterable
    """
    if isinstance(val, list):
        return False
    return isinstance(val, collections.abc.Iterable)


def accepts_positional(func, count):
    """
    Checks whether func can be called with count positional arguments. Callables whose
    signature cannot be inspected (some builtins) are assumed to take a single argument.

    >>> accepts_positional(lambda x, i: x, 2)
    True
    >>> accepts_positional(lambda x: x, 2)
    False
    >>> accepts_positional(abs, 2)
    False

    :param func: callable to inspect
    :param count: number of positional arguments
    :return: True if func accepts count positional arguments
    """
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return count <= 1
    positional = 0
    for param in params:
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= count


def with_index(func: Callable, arity: int = 1) -> Callable:
    """
    Adapt a callback documented as receiving (*values, index) so that callbacks written
    without the trailing index parameter still work. Returns a callable which always takes
    (*values, index) and forwards the index only when func accepts it.

    :param func: caller supplied callback
    :param arity: number of values passed before the index
    :return: callable taking arity + 1 positional arguments
    """
    check_callable(func)
    if accepts_positional(func, arity + 1):
        return func
    if arity == 1:
        return lambda value, _index: func(value)
    return lambda *args: func(*args[:-1])


def check_callable(func, name="f"):
    if not callable(func):
        logger.err("%s must be callable, got %s", name, type(func).__name__)
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")


def check_mutable(seq, operation):
    """
    In-place operations rewrite their input, so it has to support item assignment and deletion.
    """
    if not isinstance(seq, collections.abc.MutableSequence):
        logger.err("%s requires a mutable sequence, got %s", operation, type(seq).__name__)
        raise TypeError(
            f"{operation} requires a mutable sequence, got {type(seq).__name__}"
        )
