from bookings.handlers.views import BookingCreateView, EventBookingListView

__all__ = [
    "BookingCreateView",
    "EventBookingListView",
]
