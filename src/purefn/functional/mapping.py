"""Element-wise transforms over sequences.

``map`` is the eager, non-mutating counterpart of the builtin: it always
builds a new container, keeps the input order and length, and lets any error
raised by the transform escape immediately.

Examples:
    >>> from purefn.functional.mapping import map, sqrt_all
    >>> map(lambda x: x * 2, [1, 2, 3])
    [2, 4, 6]
    >>> sqrt_all((9, 64))
    (3.0, 8.0)
"""

import math
import typing as tp

from purefn.core.types import T, U, Unary

__all__ = ["map", "identity", "sqrt_all"]


def identity(x: T) -> T:
    """Return the argument unchanged."""
    return x


def map(
    fn: Unary[T, U], sequence: tp.Iterable[T]
) -> tp.Union[tp.List[U], tp.Tuple[U, ...]]:
    """Apply ``fn`` to every element of ``sequence``.

    Args:
        fn: Unary transform.
        sequence: Elements to transform. It is read once and never modified.

    Returns:
        A tuple when ``sequence`` is a tuple, otherwise a list, where element
        ``i`` is ``fn(sequence[i])``.

    Raises:
        Whatever ``fn`` raises. Elements after the failing one are not visited.
    """
    result = [fn(item) for item in sequence]
    if isinstance(sequence, tuple):
        return tuple(result)
    return result


def sqrt_all(
    sequence: tp.Iterable[float],
) -> tp.Union[tp.List[float], tp.Tuple[float, ...]]:
    """Square root of every element."""
    return map(math.sqrt, sequence)
