"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to events.handlers.exceptions
- Never contain business logic
- Never expose internal error details

Services come from factories set through ``as_view()``, so tests and other
deployments can wire different stores.
"""

from collections.abc import Callable

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.dependencies import get_booking_service, get_event_service
from events.handlers.serializers import (
    BookingInputSerializer,
    BookingSerializer,
    EventInputSerializer,
    EventSerializer,
)
from events.services import BookingService, EventService


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    service_factory: Callable[[], EventService] = staticmethod(get_event_service)

    def get(self, request: Request) -> Response:
        events = self.service_factory().list_events()
        return Response(
            {
                "message": "Events fetched successfully",
                "events": EventSerializer(events, many=True).data,
            }
        )

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.service_factory().create_event(serializer.validated_data)
        return Response(
            {
                "message": "Event created successfully",
                "event": EventSerializer(event).data,
            },
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/events/{slug}"""

    service_factory: Callable[[], EventService] = staticmethod(get_event_service)

    def get(self, request: Request, slug: str) -> Response:
        event = self.service_factory().get_event(slug)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, slug: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.service_factory().update_event(slug, serializer.validated_data)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, slug: str) -> Response:
        self.service_factory().delete_event(slug)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventBookingListView(APIView):
    """Handler for GET /api/events/{slug}/bookings"""

    service_factory: Callable[[], BookingService] = staticmethod(get_booking_service)

    def get(self, request: Request, slug: str) -> Response:
        _, bookings = self.service_factory().list_bookings_for_event(slug)
        return Response({"bookings": BookingSerializer(bookings, many=True).data})


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    service_factory: Callable[[], BookingService] = staticmethod(get_booking_service)

    def post(self, request: Request) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.service_factory().book_event(
            serializer.validated_data["slug"],
            serializer.validated_data["email"],
        )
        return Response(
            {"message": "Booking created", "booking_id": str(booking.id)},
            status=status.HTTP_201_CREATED,
        )
