"""Integration tests for the event catalog.

These exercise EventService against the Django ORM store and the HTTP
handlers on top of it.
Run with: pytest tests/test_event_catalog.py -v
"""

import json
import re

import pytest
from rest_framework.test import APIClient

from events.domain.errors import EventNotFoundError, SlugConflictError, ValidationError
from events.models import Event as EventModel
from events.models import EventTag as EventTagModel

DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_SHAPE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@pytest.mark.django_db
class TestCreateEvent:
    """Tests for EventService.create_event with the ORM store."""

    def test_create_event_stores_canonical_record(self, event_service, event_fields):
        event = event_service.create_event(event_fields(time="2:30 PM"))

        stored = event_service.get_event_by_slug("react-conf-2026")
        assert stored.id == event.id
        assert stored.date == "2026-03-15"
        assert stored.time == "14:30"
        assert DATE_SHAPE.match(stored.date)
        assert TIME_SHAPE.match(stored.time)
        assert stored.agenda == ("Keynote", "Server components deep dive")
        assert stored.tags == ("react", "frontend")

    def test_duplicate_title_gets_disambiguated_slug(self, event_service, event_fields):
        first = event_service.create_event(event_fields())
        second = event_service.create_event(event_fields())
        third = event_service.create_event(event_fields())

        assert first.slug == "react-conf-2026"
        assert second.slug == "react-conf-2026-2"
        assert third.slug == "react-conf-2026-3"
        assert EventModel.objects.count() == 3

    def test_store_rejects_slug_when_precheck_is_bypassed(
        self, event_service, event_store, event_fields, monkeypatch
    ):
        """Two writers that both saw the slug as free: the unique index decides."""
        event_service.create_event(event_fields())
        monkeypatch.setattr(event_store, "find_slugs", lambda base, exclude=None: [])

        with pytest.raises(SlugConflictError):
            event_service.create_event(event_fields())

        assert EventModel.objects.count() == 1
        assert EventModel.objects.get().slug == "react-conf-2026"

    def test_failed_validation_writes_nothing(self, event_service, event_fields):
        with pytest.raises(ValidationError):
            event_service.create_event(event_fields(date="not-a-date"))

        assert EventModel.objects.count() == 0

    def test_long_free_text_is_stored_whole(self, event_service, event_fields):
        title = "Conf " * 80
        venue = "V" * 300
        tag = "t" * 150

        event = event_service.create_event(event_fields(title=title, venue=venue, tags=[tag]))

        stored = event_service.get_event_by_slug(event.slug)
        assert stored.title == title.strip()
        assert stored.venue == venue
        assert stored.tags == (tag,)
        assert len(stored.slug) > 255

    @pytest.mark.parametrize(
        "model, field",
        [
            (EventModel, "title"),
            (EventModel, "slug"),
            (EventModel, "image"),
            (EventModel, "venue"),
            (EventModel, "location"),
            (EventModel, "audience"),
            (EventModel, "organizer"),
            (EventTagModel, "name"),
        ],
    )
    def test_free_text_columns_are_unbounded(self, model, field):
        assert model._meta.get_field(field).max_length is None


@pytest.mark.django_db
class TestQueryEvents:
    """Tests for lookups, listing and similarity."""

    def test_list_events_newest_first(self, event_service, event_fields):
        event_service.create_event(event_fields(title="First"))
        event_service.create_event(event_fields(title="Second"))

        assert [event.slug for event in event_service.list_events()] == ["second", "first"]

    def test_list_events_empty_catalog(self, event_service):
        assert event_service.list_events() == []

    def test_slug_lookup_is_exact(self, event_service, event_fields):
        event_service.create_event(event_fields())

        with pytest.raises(EventNotFoundError):
            event_service.get_event_by_slug("React-Conf-2026")
        with pytest.raises(EventNotFoundError):
            event_service.get_event_by_slug("react-conf")

    def test_similar_events_share_a_tag(self, event_service, event_fields):
        source = event_service.create_event(event_fields(title="Source", tags=["ai", "cloud"]))
        for title, tags in [
            ("AI One", ["ai"]),
            ("Cloud Two", ["cloud", "devops"]),
            ("Both Three", ["ai", "cloud"]),
            ("AI Four", ["ai"]),
            ("Rust Five", ["rust"]),
        ]:
            event_service.create_event(event_fields(title=title, tags=tags))

        similar = event_service.get_similar_events("source")

        assert len(similar) == 3
        assert source.id not in {event.id for event in similar}
        for event in similar:
            assert set(event.tags) & {"ai", "cloud"}
        assert len({event.id for event in similar}) == 3

    def test_similar_events_none_when_no_overlap(self, event_service, event_fields):
        event_service.create_event(event_fields(title="Source", tags=["ai"]))
        event_service.create_event(event_fields(title="Other", tags=["rust"]))

        assert event_service.get_similar_events("source") == []


@pytest.mark.django_db
class TestUpdateEvent:
    """Tests for EventService.update_event with the ORM store."""

    def test_title_change_rederives_slug(self, event_service, event_fields):
        created = event_service.create_event(event_fields())

        updated = event_service.update_event("react-conf-2026", {"title": "React Summit 2026"})

        assert updated.id == created.id
        assert updated.slug == "react-summit-2026"
        with pytest.raises(EventNotFoundError):
            event_service.get_event_by_slug("react-conf-2026")

    def test_title_change_onto_taken_slug_is_disambiguated(self, event_service, event_fields):
        event_service.create_event(event_fields(title="React Summit"))
        event_service.create_event(event_fields())

        updated = event_service.update_event("react-conf-2026", {"title": "React Summit!"})

        assert updated.slug == "react-summit-2"

    def test_date_and_tags_change(self, event_service, event_fields):
        event_service.create_event(event_fields())

        updated = event_service.update_event(
            "react-conf-2026", {"date": "April 2, 2026", "tags": ["react", "ai"]}
        )

        assert updated.slug == "react-conf-2026"
        assert updated.date == "2026-04-02"
        assert event_service.get_event_by_slug("react-conf-2026").tags == ("react", "ai")

    def test_update_unknown_slug_raises_error(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.update_event("missing", {"title": "Anything"})


@pytest.mark.django_db
class TestEventApi:
    """Tests for the /api/events handlers."""

    def test_create_event_json(self, api_client: APIClient, event_fields):
        response = api_client.post("/api/events", event_fields(), format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["event"]["slug"] == "react-conf-2026"
        assert body["event"]["time"] == "09:00"
        assert body["event"]["mode"] == "hybrid"

    def test_create_event_form_with_json_lists(self, api_client: APIClient, event_fields):
        fields = event_fields()
        fields["agenda"] = json.dumps(fields["agenda"])
        fields["tags"] = 'tags: ["react", "frontend"]'

        response = api_client.post("/api/events", fields, format="multipart")

        assert response.status_code == 201
        body = response.json()["event"]
        assert body["agenda"] == ["Keynote", "Server components deep dive"]
        assert body["tags"] == ["react", "frontend"]

    def test_create_event_invalid_field(self, api_client: APIClient, event_fields):
        response = api_client.post("/api/events", event_fields(time="25:00"), format="json")

        assert response.status_code == 400
        assert response.json() == {
            "code": "VALIDATION_FAILED",
            "message": "invalid time",
            "field": "time",
        }

    def test_list_events(self, api_client: APIClient, event_fields):
        api_client.post("/api/events", event_fields(), format="json")

        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert [event["slug"] for event in response.json()["events"]] == ["react-conf-2026"]

    def test_get_event_returns_details(self, api_client: APIClient, event_fields):
        api_client.post("/api/events", event_fields(), format="json")

        response = api_client.get("/api/events/react-conf-2026")

        assert response.status_code == 200
        assert response.json()["event"]["title"] == "React Conf 2026!"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_patch_event(self, api_client: APIClient, event_fields):
        api_client.post("/api/events", event_fields(), format="json")

        response = api_client.patch(
            "/api/events/react-conf-2026", {"time": "6:00 PM"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["event"]["time"] == "18:00"

    def test_similar_events(self, api_client: APIClient, event_fields):
        api_client.post("/api/events", event_fields(title="Source"), format="json")
        api_client.post("/api/events", event_fields(title="Other"), format="json")

        response = api_client.get("/api/events/source/similar")

        assert response.status_code == 200
        assert [event["slug"] for event in response.json()["events"]] == ["other"]
