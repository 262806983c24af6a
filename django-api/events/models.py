"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

from events.domain.value_objects import Mode


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    slug = models.TextField(unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.TextField()
    venue = models.TextField()
    location = models.TextField()
    date = models.DateField()
    time = models.TimeField()
    mode = models.CharField(max_length=16, choices=Mode.choices())
    audience = models.TextField()
    agenda = models.JSONField(default=list)
    organizer = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_created_desc_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class EventTag(models.Model):
    """One tag of an event. Rows are the set-membership index for similarity."""

    id = models.BigAutoField(primary_key=True)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tags")
    name = models.TextField()
    position = models.PositiveSmallIntegerField()

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["event", "name"], name="uniq_event_tag"),
        ]
        indexes = [
            models.Index(fields=["name"], name="events_tag_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name
