"""Post every event in a catalog file to a running API."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from client.api_client import post_event
from events.catalog import DEFAULT_CATALOG, load_sample_events

logger = logging.getLogger(__name__)
if os.getenv("EVENT_FINDER_DEBUG"):
    logging.basicConfig(level=logging.INFO, format="%(message)s")


def run(path: str | Path = DEFAULT_CATALOG) -> int:
    """Create each catalog event through the API; return how many succeeded."""
    events = load_sample_events(path)
    logger.info("Loaded %d event(s) from %s", len(events), path)

    posted = 0
    for event in events:
        payload = event.model_dump(
            mode="json", by_alias=True, exclude_none=True,
            exclude={"id", "current_participants", "distance_in_km"},
        )
        try:
            result = post_event(payload)
        except Exception as exc:  # pragma: no cover - logging only
            print("❌ Failed to post event:", event.title, exc)
            continue
        posted += 1
        print("✅ Posted:", result.get("title", "<unknown>"), result.get("id"))
    return posted


if __name__ == "__main__":
    if len(sys.argv) > 2:
        print("Usage: python -m jobs.seed_events [catalog.json]")
        raise SystemExit(1)
    run(sys.argv[1] if len(sys.argv) == 2 else DEFAULT_CATALOG)
