"""Core data structures, configuration and errors."""

from purefn.core.data_models import Event
from purefn.core.enums import ComposeOrder
from purefn.core.exceptions import ArityError, EmptySequenceError, PureFnError

__all__ = [
    "Event",
    "ComposeOrder",
    "PureFnError",
    "EmptySequenceError",
    "ArityError",
]
