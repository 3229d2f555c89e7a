"""Capacity helpers for displaying how full an event is."""
from __future__ import annotations

from .schemas import Availability, Event

ALMOST_FULL_THRESHOLD = 5


def available_spots(current: int, maximum: int) -> int:
    return max(0, maximum - current)


def is_full(current: int, maximum: int) -> bool:
    return current >= maximum


def is_almost_full(current: int, maximum: int) -> bool:
    """True when between one and five spots remain."""
    remaining = maximum - current
    return 0 < remaining <= ALMOST_FULL_THRESHOLD


def participation_percentage(current: int, maximum: int) -> int:
    if maximum <= 0:
        return 0
    # round-half-up, not banker's rounding
    return int(current * 100 / maximum + 0.5)


def availability(event: Event) -> Availability:
    current, maximum = event.current_participants, event.max_participants
    return Availability(
        event_id=event.id,
        available_spots=available_spots(current, maximum),
        is_full=is_full(current, maximum),
        is_almost_full=is_almost_full(current, maximum),
        participation_percentage=participation_percentage(current, maximum),
    )
