"""Django ORM implementation of the EventStore."""

from datetime import date, time

from django.db import IntegrityError, transaction
from django.db.models import Q

from devevent.connection import StoreConnection, requires_store, store_connection
from events.domain import Event, EventDraft, EventId, Mode
from events.domain.errors import EventNotFoundError, SlugConflictError
from events.models import Event as EventModel
from events.models import EventTag
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM.

    The unique index on ``slug`` is what guarantees uniqueness; a violation
    surfaces as ``SlugConflictError`` and leaves nothing behind.
    """

    def __init__(self, connection: StoreConnection | None = None) -> None:
        self._connection = connection or store_connection

    @requires_store
    def list_events(self) -> list[Event]:
        rows = EventModel.objects.prefetch_related("tags").order_by("-created_at")
        return [self._to_domain(row) for row in rows]

    @requires_store
    def get_event(self, event_id: EventId) -> Event | None:
        row = EventModel.objects.prefetch_related("tags").filter(pk=event_id.value).first()
        return self._to_domain(row) if row else None

    @requires_store
    def get_event_by_slug(self, slug: str) -> Event | None:
        row = EventModel.objects.prefetch_related("tags").filter(slug=slug).first()
        return self._to_domain(row) if row else None

    @requires_store
    def event_exists(self, event_id: EventId) -> bool:
        return EventModel.objects.filter(pk=event_id.value).exists()

    @requires_store
    def find_slugs(self, base: str, exclude: EventId | None = None) -> list[str]:
        rows = EventModel.objects.filter(Q(slug=base) | Q(slug__startswith=f"{base}-"))
        if exclude is not None:
            rows = rows.exclude(pk=exclude.value)
        return list(rows.values_list("slug", flat=True))

    @requires_store
    def create_event(self, draft: EventDraft, slug: str) -> Event:
        try:
            with transaction.atomic():
                row = EventModel.objects.create(slug=slug, **self._fields(draft))
                self._save_tags(row, draft.tags)
        except IntegrityError as exc:
            raise SlugConflictError(slug) from exc
        return self._to_domain(row, draft.tags)

    @requires_store
    def update_event(self, event_id: EventId, draft: EventDraft, slug: str) -> Event:
        try:
            with transaction.atomic():
                row = EventModel.objects.select_for_update().get(pk=event_id.value)
                for name, value in self._fields(draft).items():
                    setattr(row, name, value)
                row.slug = slug
                row.save()
                row.tags.all().delete()
                self._save_tags(row, draft.tags)
        except EventModel.DoesNotExist as exc:
            raise EventNotFoundError(str(event_id)) from exc
        except IntegrityError as exc:
            raise SlugConflictError(slug) from exc
        return self._to_domain(row, draft.tags)

    @requires_store
    def find_similar_events(self, event: Event, limit: int) -> list[Event]:
        rows = (
            EventModel.objects.filter(tags__name__in=list(event.tags))
            .exclude(pk=event.id.value)
            .distinct()
            .prefetch_related("tags")[:limit]
        )
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _fields(draft: EventDraft) -> dict:
        return {
            "title": draft.title,
            "description": draft.description,
            "overview": draft.overview,
            "image": draft.image,
            "venue": draft.venue,
            "location": draft.location,
            "date": date.fromisoformat(draft.date),
            "time": time.fromisoformat(draft.time),
            "mode": draft.mode.value,
            "audience": draft.audience,
            "agenda": list(draft.agenda),
            "organizer": draft.organizer,
        }

    @staticmethod
    def _save_tags(row: EventModel, tags: tuple[str, ...]) -> None:
        EventTag.objects.bulk_create(
            EventTag(event=row, name=name, position=position)
            for position, name in enumerate(tags)
        )

    @staticmethod
    def _to_domain(row: EventModel, tags: tuple[str, ...] | None = None) -> Event:
        if tags is None:
            tags = tuple(tag.name for tag in row.tags.all())
        return Event(
            id=EventId(value=row.id),
            title=row.title,
            slug=row.slug,
            description=row.description,
            overview=row.overview,
            image=row.image,
            venue=row.venue,
            location=row.location,
            date=row.date.isoformat(),
            time=row.time.strftime("%H:%M"),
            mode=Mode(row.mode),
            audience=row.audience,
            agenda=tuple(row.agenda),
            organizer=row.organizer,
            tags=tags,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
