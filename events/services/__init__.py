from events.services.booking_service import BookingService
from events.services.event_service import EventService

__all__ = ["EventService", "BookingService"]
