"""Loading and exporting the sample event catalog."""
from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Iterable

from .schemas import Event

DATA_PATH = Path(__file__).resolve().parent / "data"
DEFAULT_CATALOG = DATA_PATH / "sample_events.json"


def load_sample_events(path: str | Path = DEFAULT_CATALOG) -> list[Event]:
    """Load events from a JSON catalog file.

    Catalog entries carry no ids; each loaded event gets a fresh one, as
    every boot of the API does.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    events = []
    for item in data:
        item = {k: v for k, v in item.items() if k not in ("id", "distanceInKm")}
        events.append(Event(id=str(uuid.uuid4()), **item))
    return events


def export_events(events: Iterable[Event], path: str | Path) -> None:
    """Write events to a JSON catalog, without ids or derived fields."""
    Path(path).write_text(
        json.dumps(
            [
                e.model_dump(
                    mode="json", by_alias=True, exclude_none=True,
                    exclude={"id", "distance_in_km"},
                )
                for e in events
            ],
            indent=2,
        ),
        encoding="utf-8",
    )
