from events.services.canonicalizer import canonicalize_event
from events.services.event_service import EventService

__all__ = ["EventService", "canonicalize_event"]
