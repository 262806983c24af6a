"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from bookings.services import BookingService
from bookings.stores import DjangoBookingStore
from events.services import EventService
from events.stores import DjangoEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_fields():
    """Build a valid raw event submission, overriding any field."""

    def build(**overrides) -> dict:
        fields = {
            "title": "React Conf 2026!",
            "description": "The official React conference.",
            "overview": "Two days of talks and workshops.",
            "image": "https://res.cloudinary.com/devevent/image/upload/react.png",
            "venue": "Moscone Center",
            "location": "San Francisco, CA",
            "date": "March 15, 2026",
            "time": "9:00 AM",
            "mode": "hybrid",
            "audience": "Frontend developers",
            "agenda": ["Keynote", "Server components deep dive"],
            "organizer": "Meta Open Source",
            "tags": ["react", "frontend"],
        }
        fields.update(overrides)
        return fields

    return build


@pytest.fixture
def event_store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.fixture
def booking_store() -> DjangoBookingStore:
    return DjangoBookingStore()


@pytest.fixture
def event_service(event_store: DjangoEventStore) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(booking_store: DjangoBookingStore, event_store: DjangoEventStore) -> BookingService:
    return BookingService(booking_store, event_store)
