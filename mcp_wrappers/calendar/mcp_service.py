"""
MCP wrapper for the calendar service.

This module exposes the calendar operations as MCP tools that make HTTP calls
to the calendar service. It handles serialization/deserialization between the
Pydantic models used on the wire and the dataclass models of the calendar core.
"""
from __future__ import annotations

import os
import typing as t

import httpx
from fastmcp import FastMCP

# Import core dataclass models for the MCP interface
from calendar_server.models import Event
from calendar_server.router import resolve
# Import Pydantic models for HTTP serialization
from services.shared.models import (
    Event as PydanticEvent,
    EventFields,
    PageResponse,
    SetFilterRequest,
    ShowCalendarEventsResponse,
)


mcp = FastMCP("CalendarMCPWrapper")

# Service URL - configurable via environment variable
CALENDAR_SERVICE_URL = os.getenv("CALENDAR_SERVICE_URL", "http://localhost:8004")

# Timeout settings for fast operations (in seconds)
STANDARD_TIMEOUT = 30.0  # 30 seconds for standard CRUD operations


def _client() -> httpx.Client:
    return httpx.Client(base_url=CALENDAR_SERVICE_URL, timeout=STANDARD_TIMEOUT)


def _request(action: str, method: str, path: str, *, allow_not_found: bool = False, **kwargs) -> httpx.Response:
    """
    Send one request to the calendar service.

    Transport and HTTP failures are raised as RuntimeError naming ``action``.
    A 404 is returned as-is when ``allow_not_found`` is set.
    """
    try:
        with _client() as client:
            response = client.request(method, path, **kwargs)
            if not (allow_not_found and response.status_code == 404):
                response.raise_for_status()
        return response

    except httpx.TimeoutException:
        raise RuntimeError(f"{action} timed out after {STANDARD_TIMEOUT} seconds")
    except httpx.HTTPStatusError as e:
        raise RuntimeError(f"HTTP error from calendar service: {e.response.status_code} {e.response.text}")
    except Exception as e:
        raise RuntimeError(f"Error calling calendar service: {str(e)}")


def _list_calendar_events(include_filtered: bool = False) -> list[Event]:
    """
    List calendar events under the active filter, or all of them.
    """
    params = {"all": "true"} if include_filtered else {}
    response = _request("List calendar events", "GET", "/events", params=params)
    return _to_dataclass_events(response.json())


def _get_calendar_event(event_id: int) -> t.Optional[Event]:
    """
    Look up one event by id through its detail page.

    Returns None when the service reports the event as not found.
    """
    response = _request("Get calendar event", "GET", f"/event/{event_id}", allow_not_found=True)
    page = PageResponse(**response.json())
    if page.view.kind != "detail":
        return None
    return Event(
        id=page.view.event_id,
        date=page.view.date,
        title=page.view.title,
        category=page.view.category,
    )


def _add_calendar_event(title: str, date: str, category: str) -> list[Event]:
    """
    Add a calendar event and return the filtered events afterwards.
    """
    request = EventFields(title=title, date=date, category=category)
    response = _request("Calendar event creation", "POST", "/add", json=request.model_dump())
    return _to_dataclass_events(response.json())


def _edit_calendar_event(event_id: int, title: str, date: str, category: str) -> list[Event]:
    """
    Replace every editable field of an event.
    """
    request = EventFields(title=title, date=date, category=category)
    response = _request("Calendar event update", "PUT", f"/event/{event_id}", json=request.model_dump())
    return _to_dataclass_events(response.json())


def _delete_calendar_event(event_id: int) -> list[Event]:
    response = _request("Calendar event deletion", "DELETE", f"/event/{event_id}")
    return _to_dataclass_events(response.json())


def _set_category_filter(category: str) -> list[Event]:
    """
    Set the category filter and return the events it selects.
    """
    request = SetFilterRequest(category=category)
    _request("Set category filter", "POST", "/filter", json=request.model_dump())
    return _list_calendar_events()


def _open_page(path: str) -> dict[str, t.Any]:
    """
    Fetch the page data for a navigational path.

    The path is resolved locally first, so unmatched paths open the list view.
    """
    response = _request("Open page", "GET", resolve(path).path, allow_not_found=True)
    return PageResponse(**response.json()).model_dump()


def _show_calendar_events() -> str:
    response = _request("Show calendar events", "GET", "/show-calendar-events")
    return ShowCalendarEventsResponse(**response.json()).formatted_events


def _to_dataclass_events(response_data: list[dict[str, t.Any]]) -> list[Event]:
    """Convert a JSON list of events to dataclass Events."""
    return [_pydantic_to_dataclass_event(PydanticEvent(**item)) for item in response_data]


def _pydantic_to_dataclass_event(pydantic_event: PydanticEvent) -> Event:
    """Convert Pydantic Event to dataclass Event."""
    return Event(
        id=pydantic_event.id,
        date=pydantic_event.date,
        title=pydantic_event.title,
        category=pydantic_event.category,
    )


# MCP tool wrappers that call the raw functions
@mcp.tool()
def list_calendar_events(include_filtered: bool = False) -> list[Event]:
    """Lists calendar events under the active category filter."""
    return _list_calendar_events(include_filtered)


@mcp.tool()
def get_calendar_event(event_id: int) -> t.Optional[Event]:
    """Looks up one calendar event by id."""
    return _get_calendar_event(event_id)


@mcp.tool()
def add_calendar_event(title: str, date: str, category: str) -> list[Event]:
    """Adds a calendar event."""
    return _add_calendar_event(title, date, category)


@mcp.tool()
def edit_calendar_event(event_id: int, title: str, date: str, category: str) -> list[Event]:
    """Replaces the fields of a calendar event."""
    return _edit_calendar_event(event_id, title, date, category)


@mcp.tool()
def delete_calendar_event(event_id: int) -> list[Event]:
    """Deletes a calendar event."""
    return _delete_calendar_event(event_id)


@mcp.tool()
def set_category_filter(category: str) -> list[Event]:
    """Sets the category filter; 'All' shows every event."""
    return _set_category_filter(category)


@mcp.tool()
def open_page(path: str) -> dict[str, t.Any]:
    """Renders the page for '/', '/add' or '/event/{id}'."""
    return _open_page(path)


@mcp.tool()
def show_calendar_events() -> str:
    """Displays calendar events in a nicely formatted view."""
    return _show_calendar_events()


if __name__ == "__main__":
    mcp.run()
