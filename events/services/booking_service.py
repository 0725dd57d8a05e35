"""Booking service.

A booking is re-validated on every save: the email is trimmed and checked,
and the referenced event must still exist. Deleting an event does not touch
its bookings, so an old booking can point at a missing event until it is
saved again.
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from events.domain.errors import (
    BookingNotFoundError,
    InvalidEmailFormatError,
    ReferencedEventNotFoundError,
    ValidationError,
)
from events.domain.models import Booking, Event
from events.domain.normalizers import is_valid_email, require_text
from events.domain.value_objects import BookingId, EventId
from events.services.event_service import lookup_event
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking operations."""

    def __init__(self, event_store: EventStore, booking_store: BookingStore) -> None:
        self._event_store = event_store
        self._booking_store = booking_store

    def book_event(self, slug: str, email: str) -> Booking:
        """Book the event stored under ``slug`` for ``email``.

        Raises:
            InvalidSlugError: If the slug is malformed.
            EventNotFoundError: If no event has that slug.
            ValidationError: If the email is blank.
            InvalidEmailFormatError: If the email is malformed.
        """
        event = lookup_event(self._event_store, slug)
        return self.create_booking(event.id, email)

    def create_booking(self, event_id: EventId | str, email: str) -> Booking:
        booking = self.persist(self.normalize({"event_id": event_id, "email": email}))
        logger.info("Created booking %s for event %s", booking.id, booking.event_id)
        return booking

    def update_booking(self, booking_id: str, changes: Mapping[str, Any]) -> Booking:
        """Apply ``changes`` to a booking, re-checking the event reference.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            ReferencedEventNotFoundError: If the event it points at is gone.
        """
        current = self.get_booking(booking_id)
        return self.persist(self.normalize(changes, current))

    def get_booking(self, booking_id: str) -> Booking:
        try:
            parsed = BookingId.from_string(booking_id)
        except (TypeError, ValueError, AttributeError):
            raise ValidationError("booking_id", "Invalid booking ID format")
        booking = self._booking_store.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def list_bookings_for_event(self, slug: str) -> tuple[Event, list[Booking]]:
        event = lookup_event(self._event_store, slug)
        return event, self._booking_store.list_bookings_for_event(event.id)

    def normalize(
        self,
        fields: Mapping[str, Any],
        current: Booking | None = None,
    ) -> Booking:
        """Build the canonical form of a booking from raw input.

        Raises:
            ValidationError: If the email or event ID is missing or malformed.
            InvalidEmailFormatError: If the email is not a valid address.
            ReferencedEventNotFoundError: If the event does not exist.
        """
        raw_email = fields.get("email", current.email if current else None)
        if raw_email is None:
            raise ValidationError("email", "email is required")
        email = require_text(raw_email, "email")
        if not is_valid_email(email):
            raise InvalidEmailFormatError()

        event_id = self._coerce_event_id(
            fields.get("event_id", current.event_id if current else None)
        )
        if not self._event_store.event_exists(event_id):
            raise ReferencedEventNotFoundError(str(event_id))

        return Booking(
            id=current.id if current else BookingId.generate(),
            event_id=event_id,
            email=email,
            created_at=current.created_at if current else None,
            updated_at=current.updated_at if current else None,
        )

    def persist(self, booking: Booking) -> Booking:
        """Hand a normalized booking to the store."""
        return self._booking_store.save_booking(booking)

    @staticmethod
    def _coerce_event_id(value: Any) -> EventId:
        if isinstance(value, EventId):
            return value
        if isinstance(value, UUID):
            return EventId(value)
        if value is None or value == "":
            raise ValidationError("event_id", "event_id is required")
        try:
            return EventId.from_string(value)
        except (TypeError, ValueError, AttributeError):
            raise ValidationError("event_id", "Invalid event ID format")
