"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Booking, BookingId, Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def slug_exists(self, slug: str, exclude: EventId | None = None) -> bool:
        """Check if an event other than ``exclude`` already holds ``slug``."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> Event:
        """Insert or replace an event and return it with timestamps set.

        Raises:
            UniqueConstraintViolationError: If the slug is already taken.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Delete an event. Bookings that reference it are left in place."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return bookings for an event, ordered by created_at ascending."""
        ...

    @abstractmethod
    def save_booking(self, booking: Booking) -> Booking:
        """Insert or replace a booking and return it with timestamps set."""
        ...
