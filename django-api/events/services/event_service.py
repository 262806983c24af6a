"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Writes run as two phases: ``canonicalize_event`` validates and normalizes the
raw fields without touching the store, then the store persists the draft. The
slug lookup before a write is only a fast path; the store's unique index is
the real guard, and a rejected slug is retried with a fresh disambiguator.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from events.domain import Event, EventDraft, EventId
from events.domain.errors import EventNotFoundError, SlugConflictError, ValidationError
from events.domain.normalization import disambiguate_slug, slugify
from events.services.canonicalizer import canonicalize_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_SLUG_ATTEMPTS = 3
DEFAULT_SIMILAR_LIMIT = 3


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        max_slug_attempts: int = DEFAULT_MAX_SLUG_ATTEMPTS,
        similar_limit: int = DEFAULT_SIMILAR_LIMIT,
    ) -> None:
        self._store = store
        self._max_slug_attempts = max(1, max_slug_attempts)
        self._similar_limit = similar_limit

    def create_event(self, raw: Mapping[str, Any]) -> Event:
        """Validate, normalize and persist a new event.

        Raises:
            ValidationError: If a field is missing or malformed.
            SlugConflictError: If every slug attempt was rejected by the store.
        """
        draft = canonicalize_event(raw)
        base = _base_slug(draft)

        def write(slug: str) -> Event:
            return self._store.create_event(draft, slug)

        event = self._write_with_slug(base, None, write)
        logger.info(f"Created event {event.id} with slug '{event.slug}'")
        return event

    def update_event(self, slug: str, changes: Mapping[str, Any]) -> Event:
        """Apply changes to an existing event, re-normalizing what changed.

        Raises:
            ValidationError: If a field is missing or malformed.
            EventNotFoundError: If no event has this slug.
            SlugConflictError: If every slug attempt was rejected by the store.
        """
        current = self.get_event_by_slug(slug)
        draft = canonicalize_event(changes, current=current)

        if draft.title == current.title:
            return self._store.update_event(current.id, draft, current.slug)

        base = _base_slug(draft)

        def write(new_slug: str) -> Event:
            return self._store.update_event(current.id, draft, new_slug)

        event = self._write_with_slug(base, current.id, write)
        logger.info(f"Updated event {event.id}, slug '{current.slug}' -> '{event.slug}'")
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by its exact slug.

        Raises:
            ValidationError: If the slug is blank.
            EventNotFoundError: If the event does not exist.
        """
        if not isinstance(slug, str) or not slug.strip():
            raise ValidationError("slug", "Missing or invalid slug parameter")

        event = self._store.get_event_by_slug(slug.strip())
        if event is None:
            raise EventNotFoundError(slug)
        return event

    def list_events(self) -> list[Event]:
        """Return all events, newest first."""
        return self._store.list_events()

    def get_similar_events(self, slug: str) -> list[Event]:
        """Return a few other events sharing at least one tag with this one.

        An unknown slug has no similar events.
        """
        try:
            event = self.get_event_by_slug(slug)
        except EventNotFoundError:
            logger.debug(f"No similar events for unknown slug '{slug}'")
            return []
        return self._store.find_similar_events(event, self._similar_limit)

    def _write_with_slug(
        self, base: str, exclude: EventId | None, write: Callable[[str], Event]
    ) -> Event:
        conflict: SlugConflictError | None = None
        for attempt in range(1, self._max_slug_attempts + 1):
            slug = disambiguate_slug(base, self._store.find_slugs(base, exclude=exclude))
            if slug != base:
                logger.info(f"Slug '{base}' is taken, using '{slug}'")
            try:
                return write(slug)
            except SlugConflictError as exc:
                logger.warning(
                    f"Store rejected slug '{slug}' "
                    f"(attempt {attempt}/{self._max_slug_attempts})"
                )
                conflict = exc
        raise conflict


def _base_slug(draft: EventDraft) -> str:
    base = slugify(draft.title)
    if not base.strip("-"):
        raise ValidationError("title", "title must contain at least one letter or digit")
    return base
