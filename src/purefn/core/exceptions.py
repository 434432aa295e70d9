"""Exception hierarchy for purefn.

Errors raised by caller-supplied functions are never wrapped; only failures
detected by purefn itself use these classes.
"""

__all__ = ["PureFnError", "EmptySequenceError", "ArityError"]


class PureFnError(Exception):
    """Base class for all purefn errors."""


class EmptySequenceError(PureFnError, ValueError):
    """Raised when folding an empty sequence without an initial value."""


class ArityError(PureFnError, TypeError):
    """Raised when a callable's arity is unknown or does not fit its use.

    Args:
        message: Human readable description.
        func: The offending callable, if any.
    """

    def __init__(self, message: str, func=None):
        super().__init__(message)
        self.func = func
