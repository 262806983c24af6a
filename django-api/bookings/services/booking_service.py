"""Booking service - the booking ledger's business rules.

A booking is accepted once per (event, email) pair and only for an event that
exists when the booking is made. The duplicate lookup is a fast path that
gives callers a clean answer; the store's unique constraint settles races.
"""

import logging

from bookings.domain import Booking, Email
from bookings.domain.errors import DuplicateBookingError, EventReferenceError
from bookings.stores.interfaces import BookingStore
from events.domain import EventId
from events.domain.errors import InvalidEventIdError, ValidationError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking ledger operations."""

    def __init__(self, store: BookingStore, events: EventStore) -> None:
        self._store = store
        self._events = events

    def create_booking(self, event_id: str, email: str) -> Booking:
        """Book an event for an email address.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            ValidationError: If the email is malformed.
            DuplicateBookingError: If the email already booked the event.
            EventReferenceError: If the event does not exist.
        """
        parsed_id = _parse_event_id(event_id)
        try:
            address = Email.from_string(email)
        except ValueError as exc:
            raise ValidationError("email", str(exc)) from exc

        if self._store.find_booking(parsed_id, address) is not None:
            logger.info(f"Rejected duplicate booking of event {parsed_id}")
            raise DuplicateBookingError(str(parsed_id), address.value)

        if not self._events.event_exists(parsed_id):
            logger.warning(f"Rejected booking of missing event {parsed_id}")
            raise EventReferenceError(str(parsed_id))

        booking = self._store.create_booking(parsed_id, address)
        logger.info(f"Created booking {booking.id} for event {parsed_id}")
        return booking

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return bookings for an event, oldest first.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        return self._store.list_bookings_for_event(_parse_event_id(event_id))

    def count_bookings_for_event(self, event_id: str) -> int:
        """Return how many bookings an event has.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        return self._store.count_bookings_for_event(_parse_event_id(event_id))


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(str(event_id).strip())
    except ValueError as exc:
        raise InvalidEventIdError() from exc
