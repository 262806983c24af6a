"""HTTP handlers (views) for the booking ledger - HTTP concerns only."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.handlers.serializers import BookingInputSerializer, BookingSerializer
from bookings.services import BookingService
from bookings.stores import DjangoBookingStore
from events.stores import DjangoEventStore


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore())


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_booking_service().create_booking(
            serializer.validated_data["eventId"],
            serializer.validated_data["email"],
        )
        return Response(
            {"message": "Booking created successfully", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )


class EventBookingListView(APIView):
    """Handler for GET /api/events/{event_id}/bookings"""

    def get(self, request: Request, event_id: str) -> Response:
        service = get_booking_service()
        bookings = service.list_bookings_for_event(event_id)
        return Response(
            {
                "bookings": BookingSerializer(bookings, many=True).data,
                "count": service.count_bookings_for_event(event_id),
            }
        )
