"""
FastAPI service for the calendar.

This service exposes the calendar shell over HTTP. The three page routes
(`/`, `/add`, `/event/{event_id}`) return page data for the list, create, and
detail views; the mutation endpoints call the views' callbacks. All events are
held in memory by the shell stored on the application state.
"""
from __future__ import annotations

import logging
import os
import typing as t
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from calendar_server.formatting import format_calendar_events
from calendar_server.router import CREATE_ROUTE, LIST_ROUTE, detail_route
from calendar_server.shell import CalendarShell, Page
from calendar_server.store import SEQUENTIAL_IDS, Snapshot
from calendar_server.views import MissingFieldsError
from services.shared.models import (
    Event,
    EventFields,
    NavLink,
    PageResponse,
    SetFilterRequest,
    ShowCalendarEventsResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

# Store settings - configurable via environment variables
ID_STRATEGY = os.getenv("CALENDAR_ID_STRATEGY", SEQUENTIAL_IDS)
SEED_EVENTS = os.getenv("CALENDAR_SEED", "1").lower() not in ("0", "false", "no")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the calendar itself lives only in memory."""
    store = app.state.shell.store
    logger.info("Calendar service started with %d event(s), id strategy '%s'",
                len(store), store.id_strategy)
    yield
    logger.info("Calendar service stopped, in-memory events discarded")


def create_app(shell: t.Optional[CalendarShell] = None) -> FastAPI:
    """Build the calendar app around ``shell`` (a fresh one if omitted)."""
    app = FastAPI(
        title="Calendar Service",
        description="REST API for viewing, filtering, adding, editing and deleting calendar events",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.shell = shell or CalendarShell(seed=SEED_EVENTS, id_strategy=ID_STRATEGY)
    app.include_router(router)
    return app


def get_shell(request: Request) -> CalendarShell:
    shell: t.Optional[CalendarShell] = getattr(request.app.state, "shell", None)
    if shell is None:
        raise HTTPException(status_code=500, detail="Calendar shell not initialized")
    return shell


def _page_response(page: Page) -> PageResponse:
    return PageResponse(
        header=page.header,
        nav=[NavLink(label=link.label, href=link.href) for link in page.nav],
        path=page.route.path,
        view=asdict(page.view),
    )


def _events(snapshot: Snapshot) -> list[Event]:
    return [Event(**asdict(event)) for event in snapshot]


@router.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "calendar-service"}


@router.get("/", response_model=PageResponse)
async def list_page(shell: CalendarShell = Depends(get_shell)) -> PageResponse:
    """List view: events under the active filter."""
    return _page_response(shell.render(LIST_ROUTE))


@router.post("/filter", response_model=PageResponse)
async def change_filter(
        request: SetFilterRequest,
        shell: CalendarShell = Depends(get_shell),
) -> PageResponse:
    """Change the category filter and return the re-derived list view."""
    shell.list_view().change_filter(request.category)
    return _page_response(shell.render(LIST_ROUTE))


@router.get("/add", response_model=PageResponse)
async def create_page(shell: CalendarShell = Depends(get_shell)) -> PageResponse:
    """Create view with an empty draft."""
    return _page_response(shell.render(CREATE_ROUTE))


@router.post("/add", response_model=list[Event], status_code=201)
async def add_event(
        request: EventFields,
        shell: CalendarShell = Depends(get_shell),
) -> list[Event]:
    """Add an event; the store assigns its id."""
    form = shell.add_form()
    form.title, form.date, form.category = request.title, request.date, request.category
    try:
        snapshot = form.submit()
    except MissingFieldsError as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info("Added event '%s' on %s", request.title, request.date)
    return _events(snapshot)


@router.get("/event/{event_id}", response_model=PageResponse)
async def detail_page(event_id: int, shell: CalendarShell = Depends(get_shell)):
    """Detail view for one event; 404 carries the not-found page."""
    page = _page_response(shell.render(detail_route(event_id)))
    if page.view.kind == "not_found":
        return JSONResponse(status_code=404, content=page.model_dump())
    return page


@router.put("/event/{event_id}", response_model=list[Event])
async def edit_event(
        event_id: int,
        request: EventFields,
        shell: CalendarShell = Depends(get_shell),
) -> list[Event]:
    """Replace an event's fields. Unknown ids leave the calendar unchanged."""
    details = shell.details(event_id)
    details.title, details.date, details.category = request.title, request.date, request.category
    snapshot = details.save()
    if details.found:
        logger.info("Edited event %d", event_id)
    return _events(snapshot)


@router.delete("/event/{event_id}", response_model=list[Event])
async def delete_event(event_id: int, shell: CalendarShell = Depends(get_shell)) -> list[Event]:
    """Delete an event. Unknown ids leave the calendar unchanged."""
    details = shell.details(event_id)
    existed = details.found
    snapshot = details.delete()
    if existed:
        logger.info("Deleted event %d", event_id)
    return _events(snapshot)


@router.get("/events", response_model=list[Event])
async def list_events(
        include_filtered: bool = Query(default=False, alias="all"),
        shell: CalendarShell = Depends(get_shell),
) -> list[Event]:
    """
    List calendar events.

    Returns the filtered events, or every event when ``all`` is set.
    """
    store = shell.store
    return _events(store.all() if include_filtered else store.list())


@router.get("/show-calendar-events", response_model=ShowCalendarEventsResponse)
async def show_calendar_events(shell: CalendarShell = Depends(get_shell)) -> ShowCalendarEventsResponse:
    """Show the filtered calendar events as a formatted table."""
    return ShowCalendarEventsResponse(formatted_events=format_calendar_events(shell.store.list()))


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=os.getenv("CALENDAR_SERVICE_HOST", "0.0.0.0"),
        port=int(os.getenv("CALENDAR_SERVICE_PORT", "8004")),
    )
