"""purefn: pure, composable functional primitives."""

from purefn.core.exceptions import ArityError, EmptySequenceError, PureFnError
from purefn.functional import (
    compose,
    curry,
    identity,
    map,
    pipe,
    reduce,
    reduce_events,
    sqrt_all,
    sum_all,
)

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "EmptySequenceError",
    "PureFnError",
    "compose",
    "curry",
    "identity",
    "map",
    "pipe",
    "reduce",
    "reduce_events",
    "sqrt_all",
    "sum_all",
]
