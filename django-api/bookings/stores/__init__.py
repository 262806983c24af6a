from bookings.stores.django_store import DjangoBookingStore
from bookings.stores.interfaces import BookingStore

__all__ = ["BookingStore", "DjangoBookingStore"]
