from events.domain.models import Event, EventDraft
from events.domain.value_objects import EventId, Mode

__all__ = [
    "Event",
    "EventDraft",
    "EventId",
    "Mode",
]
