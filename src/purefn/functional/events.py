"""Event de-duplication built from the functional primitives.

A feed of user activity typically lists the same kind of event several times
for one day. :func:`reduce_events` keeps only the most recent event per
``(type, date)`` key and caps the feed, without touching the caller's list.

Examples:
    >>> events = [
    ...     {"type": "edit", "date": "2020-01-02"},
    ...     {"type": "edit", "date": "2020-01-02"},
    ...     {"type": "edit", "date": "2020-01-01"},
    ... ]
    >>> [e.date.isoformat() for e in reduce_events(events, limit=5)]
    ['2020-01-02', '2020-01-01']
"""

import typing as tp

from purefn.core import config
from purefn.core.data_models import Event
from purefn.core.types import event_list_adapter, limit_adapter
from purefn.functional.folding import reduce
from purefn.logger.logger import get_logger

__all__ = ["order_events", "reduce_events"]

logger = get_logger(__name__)

EventLike = tp.Union[Event, tp.Mapping[str, tp.Any]]


def order_events(events: tp.Iterable[EventLike]) -> tp.Tuple[Event, ...]:
    """Return the events most-recent-first; ties keep their input order."""
    validated = event_list_adapter.validate_python(list(events))
    return tuple(sorted(validated, key=lambda e: e.date, reverse=True))


def reduce_events(
    events: tp.Iterable[EventLike], limit: tp.Optional[int] = None
) -> tp.Tuple[Event, ...]:
    """Drop repeated events and cap the result.

    Args:
        events: Events ordered most-recent-first, as models or mappings with
            ``type`` and ``date`` keys.
        limit: Maximum number of events to return. Defaults to
            ``settings.EVENT_LIMIT``.

    Returns:
        At most ``limit`` events, one per ``(type, date)`` key, in input order.

    Raises:
        pydantic.ValidationError: If an event is malformed or ``limit`` is not
            a positive integer.
    """
    limit = limit_adapter.validate_python(
        config.settings.EVENT_LIMIT if limit is None else limit
    )
    validated = event_list_adapter.validate_python(list(events))

    def keep_first(kept: tp.Tuple[Event, ...], event: Event) -> tp.Tuple[Event, ...]:
        if len(kept) >= limit or any(e.key == event.key for e in kept):
            return kept
        return kept + (event,)

    result = reduce(keep_first, validated, ())
    logger.debug(f"Reduced {len(validated)} events to {len(result)} (limit {limit})")
    return result
