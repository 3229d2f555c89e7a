"""Filtering and distance ranking of events for list requests."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .distance import distance_between, haversine_km
from .schemas import Event, EventCategory

SIMILAR_RADIUS_KM = 20.0
SIMILAR_LIMIT = 3


def parse_number(value: str | float | None) -> Optional[float]:
    """Parse a query-string number, returning ``None`` when it is unusable.

    Blank, malformed and non-finite values are all treated as absent.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_category(value: str | EventCategory | None) -> Optional[EventCategory]:
    """Match a category name case-insensitively, ``None`` if unknown."""
    if value is None or isinstance(value, EventCategory):
        return value
    wanted = value.strip().lower()
    for category in EventCategory:
        if category.value.lower() == wanted:
            return category
    return None


@dataclass(frozen=True)
class EventQuery:
    """Optional parameters of a list request."""

    location: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    radius: Optional[float] = None
    q: Optional[str] = None
    category: Optional[EventCategory] = None

    @classmethod
    def from_params(
        cls,
        location: str | None = None,
        lat: str | float | None = None,
        lng: str | float | None = None,
        radius: str | float | None = None,
        q: str | None = None,
        category: str | EventCategory | None = None,
    ) -> "EventQuery":
        """Build a query from raw query-string values.

        Unknown categories are ignored like malformed numbers.
        """
        return cls(
            location=location or None,
            lat=parse_number(lat),
            lng=parse_number(lng),
            radius=parse_number(radius),
            q=q or None,
            category=parse_category(category),
        )

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None


def _matches_text(event: Event, needle: str) -> bool:
    needle = needle.lower()
    return (
        needle in event.title.lower()
        or needle in event.description.lower()
        or needle in event.location.name.lower()
    )


def filter_events(events: Iterable[Event], query: EventQuery) -> List[Event]:
    """Return the events matching ``query``, nearest first when coordinates are given.

    The input collection and its events are never modified; events that get
    a ``distance_in_km`` are copies.
    """
    results = list(events)

    if query.location:
        needle = query.location.lower()
        results = [e for e in results if needle in e.location.name.lower()]

    if query.category is not None:
        results = [e for e in results if e.category == query.category]

    if query.q:
        results = [e for e in results if _matches_text(e, query.q)]

    if not query.has_coordinates:
        return results

    results = [
        e.model_copy(
            update={
                "distance_in_km": haversine_km(
                    query.lat, query.lng, e.location.lat, e.location.lng
                )
            }
        )
        for e in results
    ]

    if query.radius is not None:
        results = [
            e for e in results
            if e.distance_in_km is not None and e.distance_in_km <= query.radius
        ]

    # sorted() is stable; events without a distance go last
    return sorted(
        results,
        key=lambda e: (e.distance_in_km is None, e.distance_in_km or 0.0),
    )


def similar_events(
    target: Event,
    events: Iterable[Event],
    limit: int = SIMILAR_LIMIT,
    radius_km: float = SIMILAR_RADIUS_KM,
) -> List[Event]:
    """Events sharing ``target``'s category or lying within ``radius_km`` of it."""
    similar: List[Event] = []
    for event in events:
        if len(similar) >= limit:
            break
        if event.id == target.id:
            continue
        # two uncategorised events count as the same category
        same_category = event.category == target.category
        if same_category or distance_between(event.location, target.location) < radius_km:
            similar.append(event)
    return similar
