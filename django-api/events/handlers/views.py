"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors raised by services are turned into responses by
``events.handlers.errors.domain_exception_handler``.
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import EventInputSerializer, EventSerializer
from events.services import EventService
from events.stores import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(
        DjangoEventStore(),
        max_slug_attempts=settings.EVENTS_MAX_SLUG_ATTEMPTS,
        similar_limit=settings.EVENTS_SIMILAR_LIMIT,
    )


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events()
        return Response({"events": EventSerializer(events, many=True).data})

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(serializer.validated_data)
        return Response(
            {"message": "Event created successfully", "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET/PATCH /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        event = get_event_service().get_event_by_slug(slug)
        return Response({"event": EventSerializer(event).data})

    def patch(self, request: Request, slug: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(slug, serializer.validated_data)
        return Response({"event": EventSerializer(event).data})


class SimilarEventListView(APIView):
    """Handler for GET /api/events/{slug}/similar"""

    def get(self, request: Request, slug: str) -> Response:
        events = get_event_service().get_similar_events(slug)
        return Response({"events": EventSerializer(events, many=True).data})
