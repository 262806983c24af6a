"""Domain models representing persisted booking state."""

from dataclasses import dataclass
from datetime import datetime

from bookings.domain.value_objects import BookingId, Email
from events.domain.value_objects import EventId


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking. Immutable once created."""

    id: BookingId
    event_id: EventId
    email: Email
    created_at: datetime
    updated_at: datetime
