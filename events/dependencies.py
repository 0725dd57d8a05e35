"""Service factories passed to the views through ``as_view()``."""

from django.apps import apps
from django.conf import settings

from events.services import BookingService, EventService
from events.stores.django_store import DjangoBookingStore, DjangoEventStore


def _acquire_database() -> None:
    apps.get_app_config("events").database.acquire()


def get_event_service() -> EventService:
    _acquire_database()
    return EventService(
        DjangoEventStore(),
        max_slug_attempts=settings.EVENTS_SLUG_MAX_ATTEMPTS,
    )


def get_booking_service() -> BookingService:
    _acquire_database()
    return BookingService(DjangoEventStore(), DjangoBookingStore())
