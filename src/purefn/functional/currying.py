"""Partial application with recursive currying.

A curried function collects positional arguments across calls until it has
as many as the wrapped function requires, then calls through::

    >>> add = lambda x, y: x + y
    >>> curry(add, 5)(2)
    7
    >>> curry(add)(5)(2)
    7

The number of arguments to wait for comes from the wrapped function's
signature. Functions with optional or variadic parameters call through as soon
as the required ones are present; pass ``arity=`` to wait for more.
"""

import inspect
import typing as tp

from purefn.core.exceptions import ArityError
from purefn.functional.arity import arity_of, positional_parameters

__all__ = ["Curried", "curry", "PENDING"]


class _Pending:
    def __repr__(self) -> str:
        return "<pending>"


# Default advertised for positional parameters a Curried can still collect later
PENDING = _Pending()


class Curried:
    """Callable that accumulates positional arguments for ``func``.

    Instances are immutable; every call returns either the result of ``func``
    or a new ``Curried`` holding the extended argument tuple. The advertised
    signature requires only the next positional argument, so an unsaturated
    ``Curried`` is a valid stage for ``compose``.
    """

    __slots__ = ("func", "args", "keywords", "arity", "_maximum", "__signature__")

    def __init__(
        self,
        func: tp.Callable,
        args: tuple,
        keywords: dict,
        arity: int,
        maximum: tp.Optional[int],
    ):
        if maximum is not None and len(args) > maximum:
            raise ArityError(
                f"{_name(func)} takes at most {maximum} positional arguments "
                f"but {len(args)} were given",
                func,
            )
        self.func = func
        self.args = args
        self.keywords = keywords
        self.arity = arity
        self._maximum = maximum
        self.__signature__ = _remaining_signature(func, len(args))

    @property
    def remaining(self) -> int:
        """Number of positional arguments still needed before calling through."""
        return max(self.arity - len(self.args), 0)

    def __call__(self, *args, **kwargs):
        collected = self.args + args
        keywords = {**self.keywords, **kwargs}
        if len(collected) < self.arity:
            return Curried(self.func, collected, keywords, self.arity, self._maximum)
        if self._maximum is not None and len(collected) > self._maximum:
            raise ArityError(
                f"{_name(self.func)} takes at most {self._maximum} positional "
                f"arguments but {len(collected)} were given",
                self.func,
            )
        return self.func(*collected, **keywords)

    def __repr__(self) -> str:
        return "<%s %s(%s) awaiting %d>" % (
            self.__class__.__qualname__,
            _name(self.func),
            ", ".join(repr(a) for a in self.args),
            self.remaining,
        )


def curry(
    fn: tp.Callable, *preset, arity: tp.Optional[int] = None, **keywords
) -> tp.Any:
    """Curry ``fn``, optionally fixing a prefix of its positional arguments.

    Args:
        fn: Function to wrap.
        *preset: Leading positional arguments to fix now.
        arity: Number of positional arguments to collect before calling
            ``fn``. Defaults to the number of required positional parameters.
        **keywords: Keyword arguments passed on every call-through. They do not
            count towards ``arity``.

    Returns:
        A :class:`Curried` awaiting the remaining arguments. If ``preset``
        already satisfies the arity, the ``Curried`` calls through the next
        time it is called, even with no arguments.

    Raises:
        ArityError: If the arity cannot be inspected and none was given, if
            ``arity`` is negative, or if too many arguments were preset.
    """
    inspected = arity_of(fn)
    if arity is None:
        if inspected is None:
            raise ArityError(
                f"cannot determine the arity of {_name(fn)}; pass arity= explicitly",
                fn,
            )
        arity = inspected.required
    elif arity < 0:
        raise ArityError(f"arity must be non-negative, got {arity}", fn)

    maximum = inspected.maximum if inspected is not None else None
    if maximum is not None and arity > maximum:
        raise ArityError(
            f"{_name(fn)} accepts at most {maximum} positional arguments, "
            f"cannot curry with arity {arity}",
            fn,
        )
    return Curried(fn, tuple(preset), dict(keywords), arity, maximum)


def _name(fn: tp.Callable) -> str:
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    return name or repr(fn)


def _remaining_signature(
    fn: tp.Callable, consumed: int
) -> tp.Optional[inspect.Signature]:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    positional = positional_parameters(sig)
    dropped = {p.name for p in positional[:consumed]}
    # only the next argument is needed for a valid call; later ones may come
    # in a following call
    deferred = {
        p.name
        for p in positional[consumed + 1 :]
        if p.default is inspect.Parameter.empty
    }
    return sig.replace(
        parameters=[
            p.replace(default=PENDING) if p.name in deferred else p
            for p in sig.parameters.values()
            if p.name not in dropped
        ]
    )
