"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Booking, BookingId, Event, EventId
from events.domain.errors import UniqueConstraintViolationError
from events.services import BookingService, EventService
from events.stores.interfaces import BookingStore, EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed event store that enforces slug uniqueness like the DB."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}

    def list_events(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def get_event_by_slug(self, slug: str) -> Event | None:
        return next((e for e in self.events.values() if e.slug == slug), None)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self.events

    def slug_exists(self, slug: str, exclude: EventId | None = None) -> bool:
        return any(e.slug == slug and e.id != exclude for e in self.events.values())

    def save_event(self, event: Event) -> Event:
        if any(e.slug == event.slug and e.id != event.id for e in self.events.values()):
            raise UniqueConstraintViolationError("slug")
        now = datetime.now(timezone.utc)
        saved = replace(event, created_at=event.created_at or now, updated_at=now)
        self.events[saved.id] = saved
        return saved

    def delete_event(self, event_id: EventId) -> None:
        self.events.pop(event_id, None)


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        return [b for b in self.bookings.values() if b.event_id == event_id]

    def save_booking(self, booking: Booking) -> Booking:
        now = datetime.now(timezone.utc)
        saved = replace(booking, created_at=booking.created_at or now, updated_at=now)
        self.bookings[saved.id] = saved
        return saved


def make_event_fields(**overrides) -> dict:
    fields = {
        "title": "Test Event",
        "description": "Test description",
        "overview": "Test overview",
        "image": "test.jpg",
        "venue": "Test Venue",
        "location": "Test Location",
        "date": "2024-06-15",
        "time": "10:00",
        "mode": "online",
        "audience": "developers",
        "agenda": ["test"],
        "organizer": "Test Org",
        "tags": ["test"],
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_fields() -> dict:
    return make_event_fields()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def event_service(event_store: InMemoryEventStore) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(
    event_store: InMemoryEventStore, booking_store: InMemoryBookingStore
) -> BookingService:
    return BookingService(event_store, booking_store)
