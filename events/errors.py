"""Exceptions raised by the store and query layer.

Each error carries the HTTP status it maps to; the API turns them into
``{"error": message}`` bodies.
"""
from __future__ import annotations


class EventFinderError(Exception):
    """Base exception for all event finder errors."""

    http_status = 500

    def __init__(self, message: str, http_status: int | None = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


class MissingFieldsError(EventFinderError):
    """A create request lacked one or more required fields."""

    http_status = 400

    def __init__(self, fields: list[str]):
        super().__init__("Missing required fields")
        self.fields = fields


class EventNotFoundError(EventFinderError):
    """No event exists with the requested id."""

    http_status = 404

    def __init__(self, event_id: str):
        super().__init__("Event not found")
        self.event_id = event_id


class InternalError(EventFinderError):
    """Unexpected failure; the message is deliberately generic."""

    http_status = 500
