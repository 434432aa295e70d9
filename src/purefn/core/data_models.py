"""Data models used by the event examples."""

import datetime as dt
import typing as tp

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Event"]


class Event(BaseModel):
    """A single user activity event, e.g. an edit made on a given day.

    Attributes:
        type: Kind of event (``"edit"``, ``"comment"``, ...).
        date: Calendar day on which the event happened. ISO strings such as
            ``"2020-01-02"`` are accepted and parsed.
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1)
    date: dt.date

    @property
    def key(self) -> tp.Tuple[str, dt.date]:
        """Composite identity of the event: its type and its date."""
        return (self.type, self.date)
