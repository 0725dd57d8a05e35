from django.contrib import admin

from events.models import Booking, Event


class ReadOnlyAdmin(admin.ModelAdmin):
    """Records are written through the API so every save is normalized."""

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False


@admin.register(Event)
class EventAdmin(ReadOnlyAdmin):
    list_display = ["title", "slug", "date", "time", "location", "created_at"]
    search_fields = ["title", "slug", "location", "organizer"]
    list_filter = ["mode"]


@admin.register(Booking)
class BookingAdmin(ReadOnlyAdmin):
    list_display = ["email", "event_id", "created_at"]
    search_fields = ["email"]
