"""Django ORM implementation of the event and booking stores."""

from django.db import IntegrityError, transaction

from events import models
from events.domain import Booking, BookingId, Event, EventId
from events.domain.errors import UniqueConstraintViolationError
from events.stores.interfaces import BookingStore, EventStore


def _event_to_domain(record: models.Event) -> Event:
    return Event(
        id=EventId(record.id),
        title=record.title,
        slug=record.slug,
        description=record.description,
        overview=record.overview,
        image=record.image,
        venue=record.venue,
        location=record.location,
        date=record.date,
        time=record.time,
        mode=record.mode,
        audience=record.audience,
        organizer=record.organizer,
        agenda=tuple(record.agenda),
        tags=tuple(record.tags),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _booking_to_domain(record: models.Booking) -> Booking:
    return Booking(
        id=BookingId(record.id),
        event_id=EventId(record.event_id),
        email=record.email,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_event_to_domain(record) for record in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        record = models.Event.objects.filter(pk=event_id.value).first()
        return _event_to_domain(record) if record else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        record = models.Event.objects.filter(slug=slug).first()
        return _event_to_domain(record) if record else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def slug_exists(self, slug: str, exclude: EventId | None = None) -> bool:
        queryset = models.Event.objects.filter(slug=slug)
        if exclude is not None:
            queryset = queryset.exclude(pk=exclude.value)
        return queryset.exists()

    def save_event(self, event: Event) -> Event:
        record = models.Event.objects.filter(pk=event.id.value).first()
        if record is None:
            record = models.Event(id=event.id.value)

        record.title = event.title
        record.slug = event.slug
        record.description = event.description
        record.overview = event.overview
        record.image = event.image
        record.venue = event.venue
        record.location = event.location
        record.date = event.date
        record.time = event.time
        record.mode = event.mode
        record.audience = event.audience
        record.organizer = event.organizer
        record.agenda = list(event.agenda)
        record.tags = list(event.tags)

        try:
            with transaction.atomic():
                record.save()
        except IntegrityError as exc:
            if self.slug_exists(event.slug, exclude=event.id):
                raise UniqueConstraintViolationError("slug") from exc
            raise
        return _event_to_domain(record)

    def delete_event(self, event_id: EventId) -> None:
        models.Event.objects.filter(pk=event_id.value).delete()


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        record = models.Booking.objects.filter(pk=booking_id.value).first()
        return _booking_to_domain(record) if record else None

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        records = models.Booking.objects.filter(event_id=event_id.value)
        return [_booking_to_domain(record) for record in records]

    def save_booking(self, booking: Booking) -> Booking:
        record = models.Booking.objects.filter(pk=booking.id.value).first()
        if record is None:
            record = models.Booking(id=booking.id.value)

        record.event_id = booking.event_id.value
        record.email = booking.email

        with transaction.atomic():
            record.save()
        return _booking_to_domain(record)
