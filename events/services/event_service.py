"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Saving is split in two explicit steps. ``normalize`` turns raw input into a
canonical, not yet persisted ``Event`` (querying the store only to resolve
slug collisions) and ``persist`` hands it to the store.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from events.domain.errors import (
    EventNotFoundError,
    InvalidSlugError,
    UniqueConstraintViolationError,
    ValidationError,
)
from events.domain.models import Event
from events.domain.normalizers import (
    fit_slug,
    is_valid_slug,
    normalize_date,
    normalize_time,
    require_string_list,
    require_text,
    slugify,
)
from events.domain.value_objects import EventId
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
LIST_FIELDS = ("agenda", "tags")

DEFAULT_SLUG_MAX_ATTEMPTS = 3


def lookup_event(store: EventStore, slug: Any) -> Event:
    """Return the event stored under ``slug``.

    Raises:
        InvalidSlugError: If the slug is not lowercase words joined by hyphens.
        EventNotFoundError: If no event has that slug.
    """
    if not isinstance(slug, str) or not is_valid_slug(slug):
        raise InvalidSlugError()
    event = store.get_event_by_slug(slug)
    if event is None:
        raise EventNotFoundError(slug)
    return event


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        max_slug_attempts: int = DEFAULT_SLUG_MAX_ATTEMPTS,
    ) -> None:
        self._store = store
        self._max_slug_attempts = max(1, max_slug_attempts)

    def list_events(self) -> list[Event]:
        """Return all events, newest first."""
        return self._store.list_events()

    def get_event(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            InvalidSlugError: If the slug is malformed.
            EventNotFoundError: If the event does not exist.
        """
        return lookup_event(self._store, slug)

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Normalize and store a new event.

        Raises:
            ValidationError: If any field is missing or malformed.
            UniqueConstraintViolationError: If the slug kept colliding with
                concurrent writers after every retry.
        """
        event = self._save_with_retry(lambda: self.normalize(fields))
        logger.info("Created event %s with slug %r", event.id, event.slug)
        return event

    def update_event(self, slug: str, changes: Mapping[str, Any]) -> Event:
        """Apply ``changes`` to the event stored under ``slug``.

        Only changed fields are re-normalized; the slug is recomputed when
        the title changes.
        """
        current = self.get_event(slug)
        event = self._save_with_retry(lambda: self.normalize(changes, current))
        if event.slug != current.slug:
            logger.info("Event %s slug changed %r -> %r", event.id, current.slug, event.slug)
        return event

    def delete_event(self, slug: str) -> None:
        """Delete an event. Its bookings are kept."""
        event = self.get_event(slug)
        self._store.delete_event(event.id)
        logger.info("Deleted event %s (%s)", event.id, event.slug)

    def normalize(
        self,
        fields: Mapping[str, Any],
        current: Event | None = None,
    ) -> Event:
        """Build the canonical form of an event from raw input.

        With ``current`` set, ``fields`` is a partial update and any field
        left out keeps its stored value.

        Raises:
            ValidationError: If a required field is missing or blank, or the
                title yields an empty slug.
            InvalidDateFormatError: If a changed date cannot be parsed.
            InvalidTimeFormatError: If a changed time has the wrong shape.
            InvalidTimeValuesError: If a changed time is out of range.
        """
        values: dict[str, Any] = {}
        changed: set[str] = set()

        for name in TEXT_FIELDS:
            if name in fields:
                value = require_text(fields[name], name)
                if current is None or value != getattr(current, name):
                    changed.add(name)
                values[name] = value
            elif current is None:
                raise ValidationError(name, f"{name} is required")
            else:
                values[name] = getattr(current, name)

        for name in LIST_FIELDS:
            if name in fields:
                values[name] = require_string_list(fields[name], name)
            else:
                values[name] = getattr(current, name) if current else ()

        event_id = current.id if current else EventId.generate()

        slug = current.slug if current else ""
        requested_slug = fields.get("slug")
        if isinstance(requested_slug, str) and requested_slug.strip():
            base = slugify(requested_slug)
            if current is None or base != current.slug:
                slug = self.resolve_unique_slug(self._require_slug(base), event_id)
        elif "title" in changed:
            base = slugify(values["title"])
            slug = self.resolve_unique_slug(self._require_slug(base), event_id)

        if "date" in changed:
            values["date"] = normalize_date(values["date"])

        if "time" in changed:
            values["time"] = normalize_time(values["time"])

        return Event(
            id=event_id,
            slug=slug,
            created_at=current.created_at if current else None,
            updated_at=current.updated_at if current else None,
            **values,
        )

    def persist(self, event: Event) -> Event:
        """Hand a normalized event to the store."""
        return self._store.save_event(event)

    def resolve_unique_slug(self, base: str, exclude: EventId | None = None) -> str:
        """Return ``base`` or the first ``base-N`` no other event holds.

        ``base`` is shortened when needed so every candidate fits the slug
        column.
        """
        base = fit_slug(base)
        candidate = base
        counter = 1
        while self._store.slug_exists(candidate, exclude=exclude):
            candidate = fit_slug(base, f"-{counter}")
            counter += 1
        if candidate != base:
            logger.debug("Slug %r is taken, using %r", base, candidate)
        return candidate

    def _save_with_retry(self, build: Callable[[], Event]) -> Event:
        # The slug search is check-then-set; the unique index catches races.
        attempt = 1
        while True:
            event = build()
            try:
                return self.persist(event)
            except UniqueConstraintViolationError:
                logger.warning(
                    "Slug %r was taken by a concurrent write (attempt %d of %d)",
                    event.slug,
                    attempt,
                    self._max_slug_attempts,
                )
                if attempt >= self._max_slug_attempts:
                    raise
                attempt += 1

    @staticmethod
    def _require_slug(slug: str) -> str:
        if not slug:
            raise ValidationError(
                "slug", "title must contain at least one letter or digit"
            )
        return slug
