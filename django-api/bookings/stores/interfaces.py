"""Store interfaces (repository pattern) for bookings."""

from abc import ABC, abstractmethod

from bookings.domain import Booking, Email
from events.domain import EventId


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def find_booking(self, event_id: EventId, email: Email) -> Booking | None:
        """Return the booking for this (event, email) pair, or None."""
        ...

    @abstractmethod
    def create_booking(self, event_id: EventId, email: Email) -> Booking:
        """Persist a booking.

        Raises:
            DuplicateBookingError: If the store already holds the pair.
        """
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return the event's bookings ordered by created_at ascending."""
        ...

    @abstractmethod
    def count_bookings_for_event(self, event_id: EventId) -> int:
        ...
