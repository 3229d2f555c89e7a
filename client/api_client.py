"""Client for the Mini Event Finder REST API."""
from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("EVENT_FINDER_API_URL", "http://localhost:3000/api")

logger = logging.getLogger(__name__)
if os.getenv("EVENT_FINDER_DEBUG"):
    logging.basicConfig(level=logging.INFO, format="%(message)s")


class EventFinderClient:
    """Thin wrapper over the ``/events`` endpoints."""

    def __init__(self, api_url: Optional[str] = None, timeout: float = 30):
        self.api_url = (api_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.headers = {"Content-Type": "application/json"}

    def _log_request(self, method: str, url: str, payload: Any | None = None) -> None:
        logger.info("%s %s", method.upper(), url)
        if payload is not None:
            logger.info("Payload: %s", payload)

    def list_events(
        self,
        location: Optional[str] = None,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
        radius: Optional[float] = None,
        q: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Fetch events, nearest first when ``lat``/``lng`` are given."""
        params = {
            "location": location,
            "lat": lat,
            "lng": lng,
            "radius": radius,
            "q": q,
            "category": category,
        }
        params = {k: v for k, v in params.items() if v is not None}
        url = f"{self.api_url}/events"
        self._log_request("get", url, params or None)
        response = requests.get(url, params=params, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_event(self, event_id: str) -> Optional[dict[str, Any]]:
        """Fetch one event, or ``None`` if the API does not know it."""
        url = f"{self.api_url}/events/{event_id}"
        self._log_request("get", url)
        response = requests.get(url, headers=self.headers, timeout=self.timeout)
        if response.status_code == 404:
            logger.info("Event %s not found", event_id)
            return None
        response.raise_for_status()
        return response.json()

    def similar_events(self, event_id: str, limit: int = 3) -> list[dict[str, Any]]:
        url = f"{self.api_url}/events/{event_id}/similar"
        self._log_request("get", url)
        response = requests.get(
            url, params={"limit": limit}, headers=self.headers, timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def create_event(self, event: dict[str, Any]) -> dict[str, Any]:
        """Post a new event and return it as stored by the server."""
        url = f"{self.api_url}/events"
        self._log_request("post", url, event)
        response = requests.post(url, json=event, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()


# Convenience functions
def list_events(**filters: Any) -> list[dict[str, Any]]:
    """List events using the default client."""
    return EventFinderClient().list_events(**filters)


def get_event(event_id: str) -> Optional[dict[str, Any]]:
    """Get a single event using the default client."""
    return EventFinderClient().get_event(event_id)


def post_event(event: dict[str, Any]) -> dict[str, Any]:
    """Create an event using the default client."""
    return EventFinderClient().create_event(event)
