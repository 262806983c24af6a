"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, Mode


@dataclass(frozen=True)
class EventDraft:
    """A validated, normalized event that has not been persisted yet.

    ``date`` is ``YYYY-MM-DD`` and ``time`` is 24-hour ``HH:MM``.
    """

    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: Mode
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: Mode
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime
