"""Great-circle distance between coordinates."""
from __future__ import annotations

import math

from .schemas import Location

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Return the haversine distance in kilometres between two points.

    Coordinates are in degrees. NaN inputs produce NaN.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(a: Location, b: Location) -> float:
    """Distance in kilometres between two locations."""
    return haversine_km(a.lat, a.lng, b.lat, b.lng)
