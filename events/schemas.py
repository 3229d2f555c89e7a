"""Data models shared by the event store, the query engine and the API."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EventCategory(str, Enum):
    """Fixed set of categories an event may be filed under."""

    SPORTS = "Sports"
    MUSIC = "Music"
    TECH = "Tech"
    FOOD = "Food"
    ART = "Art"
    NETWORKING = "Networking"
    EDUCATION = "Education"
    OTHER = "Other"


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(CamelModel):
    """Named place with coordinates in degrees."""

    name: str
    lat: float
    lng: float


class Event(CamelModel):
    """Event listing as held by the store and returned by the API."""

    id: str
    title: str
    description: str
    date: str  # ISO datetime string
    max_participants: int
    current_participants: int = 0
    location: Location
    category: Optional[EventCategory] = None
    tags: Optional[List[str]] = None
    image_url: Optional[str] = None
    # Only set on query results when coordinates were supplied
    distance_in_km: Optional[float] = None


class CreateEventRequest(CamelModel):
    """Body of ``POST /api/events``.

    Required fields are typed as optional here so that an absent field is
    reported by the store as "Missing required fields" rather than as a
    schema error.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    max_participants: Optional[int] = Field(default=None, ge=0)
    location: Optional[Location] = None
    category: Optional[EventCategory] = None
    tags: Optional[List[str]] = None
    image_url: Optional[str] = None


class Availability(CamelModel):
    """Capacity summary for a single event."""

    event_id: str
    available_spots: int
    is_full: bool
    is_almost_full: bool
    participation_percentage: int


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    timestamp: str
    version: str
