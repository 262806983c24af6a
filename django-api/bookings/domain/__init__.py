from bookings.domain.models import Booking
from bookings.domain.value_objects import BookingId, Email

__all__ = [
    "Booking",
    "BookingId",
    "Email",
]
