"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py
and the services.
"""

import uuid

from django.db import models

from events.domain.normalizers import SLUG_MAX_LENGTH


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    slug = models.SlugField(max_length=SLUG_MAX_LENGTH, unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.TextField()
    venue = models.TextField()
    location = models.TextField()
    date = models.CharField(max_length=32)
    time = models.CharField(max_length=5)
    mode = models.TextField()
    audience = models.TextField()
    organizer = models.TextField()
    agenda = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings.

    ``event_id`` is a plain indexed column rather than a foreign key:
    deleting an event leaves its bookings untouched.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_id = models.UUIDField(db_index=True)
    email = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
