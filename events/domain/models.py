"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import BookingId, EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``date`` holds a canonical ISO-8601 instant and ``time`` a 24-hour
    ``HH:MM`` string. Timestamps are ``None`` until the store has saved
    the record.
    """

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
    mode: str
    audience: str
    organizer: str
    agenda: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
