"""Function composition.

``compose(f, g, h)(x)`` evaluates ``f(g(h(x)))``: stages run right-to-left,
the way the expression reads when written out by hand. ``pipe`` runs them in
the order written instead.

Examples:
    >>> from purefn.functional.folding import sum_all
    >>> from purefn.functional.mapping import sqrt_all
    >>> compose(sum_all, sqrt_all)([9, 64])
    11.0
    >>> pipe(sqrt_all, sum_all)([9, 64])
    11.0
"""

import typing as tp

from purefn.core import config
from purefn.core.enums import ComposeOrder
from purefn.core.exceptions import ArityError
from purefn.functional.arity import arity_of
from purefn.functional.mapping import identity

__all__ = ["Composed", "compose", "pipe"]


class Composed:
    """A chain of unary stages held in application order."""

    __slots__ = ("stages",)

    def __init__(self, stages: tp.Tuple[tp.Callable, ...]):
        self.stages = stages

    def __call__(self, value, /):
        for stage in self.stages:
            value = stage(value)
        return value

    def __repr__(self) -> str:
        return "<%s: %s>" % (
            self.__class__.__qualname__,
            " -> ".join(
                getattr(stage, "__name__", None) or repr(stage)
                for stage in self.stages
            ),
        )


def compose(
    *fns: tp.Callable, order: tp.Optional[ComposeOrder] = None
) -> tp.Callable[[tp.Any], tp.Any]:
    """Chain unary functions into a single unary function.

    Args:
        *fns: Stages. Each must accept exactly one positional argument.
        order: Application order. ``None`` uses ``settings.COMPOSE_ORDER``,
            which defaults to right-to-left.

    Returns:
        ``identity`` when no stage is given, otherwise a :class:`Composed`.

    Raises:
        ArityError: If a stage is not callable or cannot take one argument.
    """
    if order is None:
        order = config.settings.COMPOSE_ORDER

    for fn in fns:
        _check_unary(fn)
    if not fns:
        return identity
    return Composed(order.arrange(fns))


def pipe(*fns: tp.Callable) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose left-to-right: ``pipe(f, g)(x) == g(f(x))``."""
    return compose(*fns, order=ComposeOrder.LEFT_TO_RIGHT)


def _check_unary(fn: tp.Callable) -> None:
    if not callable(fn):
        raise ArityError(f"{fn!r} is not callable", fn)
    arity = arity_of(fn)
    if arity is not None and not arity.accepts(1):
        raise ArityError(
            f"{getattr(fn, '__name__', repr(fn))} is not unary "
            f"(requires {arity.required}, accepts at most {arity.maximum})",
            fn,
        )
