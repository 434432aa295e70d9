"""Positional arity introspection for callables.

``curry`` needs to know how many arguments to collect before calling through,
and ``compose`` needs to reject stages that cannot take a single input. Both
rely on :func:`inspect.signature`; callables without an inspectable signature
(some C builtins) report ``None``.
"""

import inspect
import typing as tp

__all__ = ["Arity", "arity_of", "positional_parameters"]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Arity(tp.NamedTuple):
    """Positional arity of a callable.

    Attributes:
        required: Positional parameters without a default.
        maximum: Positional parameters in total, or ``None`` when the callable
            takes ``*args``.
    """

    required: int
    maximum: tp.Optional[int]

    def accepts(self, count: int) -> bool:
        """Whether ``count`` positional arguments form a valid call."""
        if count < self.required:
            return False
        return self.maximum is None or count <= self.maximum


def positional_parameters(sig: inspect.Signature) -> tp.List[inspect.Parameter]:
    return [p for p in sig.parameters.values() if p.kind in _POSITIONAL]


def arity_of(fn: tp.Callable) -> tp.Optional[Arity]:
    """Return the positional arity of ``fn``, or ``None`` if it cannot be inspected.

    Keyword-only parameters are ignored.

    Examples:
        >>> arity_of(lambda x, y=1: x)
        Arity(required=1, maximum=2)
        >>> arity_of(lambda *xs: xs).maximum is None
        True
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    positional = positional_parameters(sig)
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    variadic = any(
        p.kind is inspect.Parameter.VAR_POSITIONAL for p in sig.parameters.values()
    )
    return Arity(required=required, maximum=None if variadic else len(positional))
