"""Reusable type definitions for the purefn package.

Type Aliases:
    Unary: A callable taking one argument.
    Binary: A callable taking an accumulator and an element.
    Limit: A strictly positive integer used to cap result sizes.
    EventList: A list of events, validated from models or plain mappings.
"""

from typing import Annotated, Callable, List, TypeVar

import annotated_types as at
from pydantic import TypeAdapter

from purefn.core.data_models import Event

__all__ = [
    "T",
    "U",
    "A",
    "Unary",
    "Binary",
    "Limit",
    "EventList",
    "limit_adapter",
    "event_list_adapter",
]

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

Unary = Callable[[T], U]
Binary = Callable[[A, T], A]

# A strictly positive cap on the number of results
Limit = Annotated[int, at.Gt(0)]

EventList = List[Event]

limit_adapter = TypeAdapter(Limit)
event_list_adapter = TypeAdapter(EventList)
