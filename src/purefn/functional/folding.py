"""Left folds.

Examples:
    >>> import operator
    >>> reduce(operator.add, [1, 2, 3])
    6
    >>> reduce(operator.add, [1, 2, 3], 10)
    16
"""

import operator
import typing as tp

from purefn.core.exceptions import EmptySequenceError
from purefn.core.types import A, Binary, T

__all__ = ["reduce", "sum_all"]


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _Missing()


def reduce(
    combine: Binary[A, T],
    sequence: tp.Iterable[T],
    initial: tp.Any = _MISSING,
) -> A:
    """Fold ``sequence`` left-to-right with ``combine``.

    Args:
        combine: Binary function ``combine(accumulator, element)`` returning the
            next accumulator. It should return a new value rather than update
            the accumulator in place.
        sequence: Elements to fold. Read once, never modified.
        initial: Starting accumulator. When omitted the first element is used
            and folding starts from the second.

    Returns:
        The final accumulator.

    Raises:
        EmptySequenceError: If ``sequence`` is empty and no ``initial`` is given.
    """
    items = iter(sequence)
    if initial is _MISSING:
        try:
            accumulator = next(items)
        except StopIteration:
            raise EmptySequenceError(
                "reduce() of empty sequence with no initial value"
            ) from None
    else:
        accumulator = initial

    for item in items:
        accumulator = combine(accumulator, item)
    return accumulator


def sum_all(sequence: tp.Iterable[T]) -> T:
    """Sum of the elements; ``0`` for an empty sequence."""
    return reduce(operator.add, sequence, 0)
