"""Domain error codes for the events and bookings modules."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    SLUG_CONFLICT = "SLUG_CONFLICT"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    EVENT_REFERENCE = "EVENT_REFERENCE"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a submitted field is missing or malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, lookup: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.lookup = lookup


class SlugConflictError(DomainError):
    """Raised when the store rejects a slug that is already taken."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.SLUG_CONFLICT,
            message="Another event was saved with the same slug, please retry",
        )
        self.slug = slug


class StoreUnavailableError(DomainError):
    """Raised when the record store cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Event store is unavailable",
        )
