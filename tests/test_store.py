import uuid

import pytest

from events.errors import EventNotFoundError, MissingFieldsError
from events.schemas import CreateEventRequest, EventCategory, Location
from events.store import EventStore, missing_fields

from conftest import make_event


def valid_request(**overrides):
    data = {
        "title": "Board Game Night",
        "description": "Bring your favourite game.",
        "date": "2026-12-01T19:00:00Z",
        "max_participants": 16,
        "location": Location(name="Dublin Park", lat=53.3498, lng=-6.2603),
    }
    data.update(overrides)
    return CreateEventRequest(**data)


def test_create_assigns_id_and_zero_participants():
    store = EventStore()
    event = store.create(valid_request(category=EventCategory.OTHER, tags=["games"]))

    uuid.UUID(event.id)
    assert event.current_participants == 0
    assert event.category is EventCategory.OTHER
    assert event.tags == ["games"]
    assert store.get(event.id) == event
    assert store.count() == 1


def test_create_gives_unique_ids():
    store = EventStore()
    ids = {store.create(valid_request()).id for _ in range(20)}
    assert len(ids) == 20


@pytest.mark.parametrize(
    "field", ["title", "description", "date", "max_participants", "location"]
)
def test_missing_required_field_is_rejected(field):
    store = EventStore([make_event("existing", "Cork", 51.9, -8.47)])
    with pytest.raises(MissingFieldsError) as info:
        store.create(valid_request(**{field: None}))
    assert info.value.fields == [field]
    assert info.value.to_response() == {"error": "Missing required fields"}
    assert store.count() == 1


def test_empty_strings_and_zero_capacity_count_as_missing():
    request = valid_request(title="", max_participants=0)
    assert missing_fields(request) == ["title", "max_participants"]


def test_whitespace_title_is_present():
    store = EventStore()
    event = store.create(valid_request(title="   ", description=" ", date=" "))
    assert event.title == "   "
    assert store.count() == 1


def test_get_unknown_id_raises():
    store = EventStore()
    with pytest.raises(EventNotFoundError) as info:
        store.get("does-not-exist")
    assert info.value.http_status == 404
    assert info.value.to_response() == {"error": "Event not found"}


def test_list_is_a_snapshot(sample_events):
    store = EventStore(sample_events)
    snapshot = store.list()
    snapshot.clear()
    assert store.count() == len(sample_events)


def test_seed_skips_duplicate_ids(sample_events):
    store = EventStore(sample_events)
    added = store.seed([sample_events[0], make_event("new", "Kilkenny", 52.65, -7.25)])
    assert added == 1
    assert len(store) == len(sample_events) + 1
