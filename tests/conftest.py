import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure the project root is on the import path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from api.config import Settings
from api.main import create_app
from events.schemas import Event, Location
from events.store import EventStore


def make_event(event_id, name, lat, lng, **overrides):
    data = {
        "id": event_id,
        "title": f"Event {event_id}",
        "description": f"Something happening at {name}",
        "date": "2026-11-08T09:00:00Z",
        "max_participants": 50,
        "current_participants": 10,
        "location": Location(name=name, lat=lat, lng=lng),
    }
    data.update(overrides)
    return Event(**data)


@pytest.fixture
def sample_events():
    return [
        make_event("galway", "Galway Docks", 53.2707, -9.0568, category="Food"),
        make_event("dublin-park", "Dublin Park", 53.3498, -6.2603, category="Sports"),
        make_event("cork", "Cork City Gallery", 51.8985, -8.4756, category="Art"),
        make_event("temple-bar", "Temple Bar, Dublin", 53.3455, -6.2643, category="Music"),
    ]


@pytest.fixture
def store(sample_events):
    return EventStore(sample_events)


@pytest.fixture
def client(store):
    app = create_app(store=store, settings=Settings(seed_on_startup=False))
    return TestClient(app)
