"""Django ORM implementation of the BookingStore."""

from django.db import IntegrityError, transaction

from bookings.domain import Booking, BookingId, Email
from bookings.domain.errors import DuplicateBookingError
from bookings.models import Booking as BookingModel
from bookings.stores.interfaces import BookingStore
from devevent.connection import StoreConnection, requires_store, store_connection
from events.domain import EventId


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM.

    The unique constraint on (event, email) rejects the losing writer of two
    concurrent bookings for the same pair.
    """

    def __init__(self, connection: StoreConnection | None = None) -> None:
        self._connection = connection or store_connection

    @requires_store
    def find_booking(self, event_id: EventId, email: Email) -> Booking | None:
        row = BookingModel.objects.filter(event_id=event_id.value, email=email.value).first()
        return self._to_domain(row) if row else None

    @requires_store
    def create_booking(self, event_id: EventId, email: Email) -> Booking:
        try:
            with transaction.atomic():
                row = BookingModel.objects.create(event_id=event_id.value, email=email.value)
        except IntegrityError as exc:
            raise DuplicateBookingError(str(event_id), email.value) from exc
        return self._to_domain(row)

    @requires_store
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        rows = BookingModel.objects.filter(event_id=event_id.value).order_by("created_at")
        return [self._to_domain(row) for row in rows]

    @requires_store
    def count_bookings_for_event(self, event_id: EventId) -> int:
        return BookingModel.objects.filter(event_id=event_id.value).count()

    @staticmethod
    def _to_domain(row: BookingModel) -> Booking:
        return Booking(
            id=BookingId(value=row.id),
            event_id=EventId(value=row.event_id),
            email=Email(value=row.email),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
