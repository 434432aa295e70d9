"""Functional primitives for purefn.

This package provides small, stateless utilities (map, curry, reduce and
compose) together with the helpers built from them. Every function returns a
new value and leaves its arguments untouched, so the pieces can be freely
combined into pipelines.
"""

from purefn.functional.arity import Arity, arity_of
from purefn.functional.composition import Composed, compose, pipe
from purefn.functional.currying import Curried, curry
from purefn.functional.events import order_events, reduce_events
from purefn.functional.folding import reduce, sum_all
from purefn.functional.mapping import identity, map, sqrt_all

__all__ = [
    "Arity",
    "arity_of",
    "Composed",
    "compose",
    "pipe",
    "Curried",
    "curry",
    "order_events",
    "reduce_events",
    "reduce",
    "sum_all",
    "identity",
    "map",
    "sqrt_all",
]
