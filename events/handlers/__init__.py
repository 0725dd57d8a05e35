from events.handlers.views import (
    BookingCreateView,
    EventBookingListView,
    EventDetailView,
    EventListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventBookingListView",
    "BookingCreateView",
]
