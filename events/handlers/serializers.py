"""Serializers for request input and for domain models in API responses.

Input serializers only check shapes and types. Trimming, required-field
checks and normalization belong to the services.
"""

from rest_framework import serializers


def _raw_text(**kwargs) -> serializers.CharField:
    return serializers.CharField(trim_whitespace=False, allow_blank=True, **kwargs)


class EventInputSerializer(serializers.Serializer):
    """Shape of a create/update event request (JSON or multipart form)."""

    title = _raw_text()
    slug = _raw_text(required=False)
    description = _raw_text()
    overview = _raw_text()
    image = _raw_text()
    venue = _raw_text()
    location = _raw_text()
    date = _raw_text()
    time = _raw_text()
    mode = _raw_text()
    audience = _raw_text()
    organizer = _raw_text()
    agenda = serializers.ListField(child=_raw_text(), required=False)
    tags = serializers.ListField(child=_raw_text(), required=False)


class StrictCharField(serializers.CharField):
    """CharField that rejects numbers instead of converting them."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class BookingInputSerializer(serializers.Serializer):
    """Shape of a POST /bookings request."""

    slug = StrictCharField(trim_whitespace=False)
    email = _raw_text()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField()
    audience = serializers.CharField()
    organizer = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    tags = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField(allow_null=True)
    updated_at = serializers.DateTimeField(allow_null=True)


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    email = serializers.CharField()
    created_at = serializers.DateTimeField(allow_null=True)
    updated_at = serializers.DateTimeField(allow_null=True)
