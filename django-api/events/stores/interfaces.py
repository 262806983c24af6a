"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventDraft, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return the event with exactly this slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def find_slugs(self, base: str, exclude: EventId | None = None) -> list[str]:
        """Return slugs equal to ``base`` or starting with ``base-``.

        The event given as ``exclude`` is left out of the result.
        """
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft, slug: str) -> Event:
        """Persist a new event under ``slug``.

        Raises:
            SlugConflictError: If the store already holds ``slug``.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, draft: EventDraft, slug: str) -> Event:
        """Overwrite an existing event with ``draft`` under ``slug``.

        Raises:
            SlugConflictError: If another event already holds ``slug``.
        """
        ...

    @abstractmethod
    def find_similar_events(self, event: Event, limit: int) -> list[Event]:
        """Return up to ``limit`` other events sharing at least one tag."""
        ...
