"""Domain errors raised by the booking ledger."""

from events.domain.errors import DomainError, ErrorCode


class DuplicateBookingError(DomainError):
    """Raised when the email already holds a booking for the event."""

    def __init__(self, event_id: str, email: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message="You have already booked this event",
        )
        self.event_id = event_id
        self.email = email


class EventReferenceError(DomainError):
    """Raised when a booking points at an event that does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_REFERENCE,
            message="Event does not exist",
        )
        self.event_id = event_id
