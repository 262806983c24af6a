"""Django ORM models (persistence layer) for bookings."""

import uuid

from django.db import models


class Booking(models.Model):
    """Persistence model for bookings.

    The event reference carries no database constraint; the ledger checks that
    the event exists before inserting.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        "events.Event",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="bookings",
    )
    email = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "email"], name="uniq_booking_event_email"
            ),
        ]
        indexes = [
            models.Index(fields=["event", "created_at"], name="bookings_event_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
