"""In-memory, append-only event store."""
from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable, List

from .errors import EventNotFoundError, MissingFieldsError
from .schemas import CreateEventRequest, Event

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "date", "max_participants", "location")


def _is_missing(value) -> bool:
    if value is None:
        return True
    if value == "":
        return True
    # maxParticipants of 0 is not a usable capacity
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return True
    return False


def missing_fields(request: CreateEventRequest) -> List[str]:
    """Return the names of required fields absent from ``request``."""
    return [name for name in REQUIRED_FIELDS if _is_missing(getattr(request, name))]


class EventStore:
    """Holds the process-local collection of events.

    Events are only ever appended; there is no update or delete. Callers get
    snapshot lists, so filtering a listing never touches the store.
    """

    def __init__(self, events: Iterable[Event] | None = None):
        self._events: List[Event] = []
        self._lock = threading.Lock()
        if events:
            self.seed(events)

    def seed(self, events: Iterable[Event]) -> int:
        """Append pre-built events (e.g. sample data loaded at boot)."""
        added = 0
        with self._lock:
            known = {e.id for e in self._events}
            for event in events:
                if event.id in known:
                    logger.warning("Skipping seed event with duplicate id %s", event.id)
                    continue
                self._events.append(event)
                known.add(event.id)
                added += 1
        logger.info("Seeded %d event(s)", added)
        return added

    def create(self, request: CreateEventRequest) -> Event:
        """Validate ``request`` and append a new event with a fresh id."""
        missing = missing_fields(request)
        if missing:
            logger.warning("Rejected event creation, missing: %s", ", ".join(missing))
            raise MissingFieldsError(missing)

        event = Event(
            id=str(uuid.uuid4()),
            title=request.title,
            description=request.description,
            date=request.date,
            max_participants=request.max_participants,
            current_participants=0,
            location=request.location,
            category=request.category,
            tags=request.tags,
            image_url=request.image_url,
        )
        with self._lock:
            self._events.append(event)
        logger.info("Created event %s (%s)", event.id, event.title)
        return event

    def get(self, event_id: str) -> Event:
        """Return the event with ``event_id`` or raise ``EventNotFoundError``."""
        for event in self._events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)

    def list(self) -> List[Event]:
        """Snapshot of all events in insertion order."""
        with self._lock:
            return list(self._events)

    def count(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return self.count()
