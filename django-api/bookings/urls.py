from django.urls import path

from bookings.handlers import BookingCreateView, EventBookingListView

urlpatterns = [
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
    path(
        "events/<str:event_id>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
]
