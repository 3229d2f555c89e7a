"""FastAPI application for the Mini Event Finder API."""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import Settings, configure_logging
from events.capacity import availability
from events.catalog import DEFAULT_CATALOG, load_sample_events
from events.errors import EventFinderError, InternalError
from events.query import SIMILAR_LIMIT, EventQuery, filter_events, similar_events
from events.schemas import Availability, CreateEventRequest, Event, HealthResponse
from events.store import EventStore

logger = logging.getLogger(__name__)

SERVICE_NAME = "Mini Event Finder API"
RUNNING_MESSAGE = f"{SERVICE_NAME} is running"

router = APIRouter()


def get_store(request: Request) -> EventStore:
    """Store instance attached to the running app."""
    return request.app.state.store


def _health(request: Request, status_text: str) -> HealthResponse:
    return HealthResponse(
        status=status_text,
        message=RUNNING_MESSAGE,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=request.app.state.settings.version,
    )


@router.get("/api/health", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Health check endpoint."""
    return _health(request, "ok")


@router.get("/live", response_model=HealthResponse)
async def liveness_check(request: Request):
    """Liveness check endpoint for container orchestration."""
    return _health(request, "alive")


@router.get("/ready", response_model=HealthResponse)
async def readiness_check(request: Request):
    """Readiness check endpoint for container orchestration."""
    return _health(request, "ready")


@router.get("/")
async def root(request: Request):
    """Root endpoint with API information."""
    return {
        "status": "ok",
        "message": RUNNING_MESSAGE,
        "version": request.app.state.settings.version,
        "docs": "/docs",
        "endpoints": {
            "health": "/api/health",
            "events": "/api/events",
        },
    }


@router.get(
    "/api/events",
    response_model=List[Event],
    response_model_exclude_none=True,
)
async def list_events(
    location: Optional[str] = None,
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    radius: Optional[str] = None,
    q: Optional[str] = None,
    category: Optional[str] = None,
    store: EventStore = Depends(get_store),
):
    """
    List events, optionally filtered by place name, text and category.

    With ``lat`` and ``lng`` every result carries ``distanceInKm`` and the
    list is ordered nearest first; ``radius`` then limits it to events
    within that many kilometres. Malformed numbers are ignored.
    """
    try:
        query = EventQuery.from_params(
            location=location, lat=lat, lng=lng, radius=radius, q=q, category=category,
        )
        return filter_events(store.list(), query)
    except Exception as exc:
        logger.exception("Listing events failed: %s", exc)
        raise InternalError("Failed to fetch events") from exc


@router.get(
    "/api/events/{event_id}",
    response_model=Event,
    response_model_exclude_none=True,
)
async def get_event(event_id: str, store: EventStore = Depends(get_store)):
    """Return a single event by id."""
    return store.get(event_id)


@router.get(
    "/api/events/{event_id}/similar",
    response_model=List[Event],
    response_model_exclude_none=True,
)
async def get_similar_events(
    event_id: str,
    limit: int = Query(SIMILAR_LIMIT, ge=0, le=50),
    store: EventStore = Depends(get_store),
):
    """Events in the same category or nearby (within 20 km)."""
    target = store.get(event_id)
    return similar_events(target, store.list(), limit=limit)


@router.get("/api/events/{event_id}/availability", response_model=Availability)
async def get_availability(event_id: str, store: EventStore = Depends(get_store)):
    """Spots left and how full the event is."""
    return availability(store.get(event_id))


@router.post(
    "/api/events",
    response_model=Event,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    payload: Optional[CreateEventRequest] = None,
    store: EventStore = Depends(get_store),
):
    """Create an event; the server assigns the id and zero participants."""
    try:
        return store.create(payload or CreateEventRequest())
    except EventFinderError:
        raise
    except Exception as exc:
        logger.exception("Creating event failed: %s", exc)
        raise InternalError("Failed to create event") from exc


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and validation errors onto ``{"error": ...}`` bodies."""

    @app.exception_handler(EventFinderError)
    async def event_finder_error_handler(request: Request, exc: EventFinderError):
        if exc.http_status >= 500:
            logger.error("%s on %s", exc.message, request.url.path)
        else:
            logger.warning("%s on %s", exc.message, request.url.path)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request data",
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def create_app(
    store: Optional[EventStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the API around ``store``.

    Without a store, a new one is created and, unless disabled in settings,
    seeded with the sample catalog.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if store is None:
        store = EventStore()
        if settings.seed_on_startup:
            store.seed(load_sample_events(settings.seed_events_path or DEFAULT_CATALOG))

    app = FastAPI(
        title=SERVICE_NAME,
        description="API for listing, searching and creating events near a location",
        version=settings.version,
    )
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = app.state.settings
    uvicorn.run(app, host=_settings.host, port=_settings.port)
