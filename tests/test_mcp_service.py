# -*- coding: utf-8 -*-
"""Tests for the HTTP-backed calendar MCP wrapper.

The wrapper's HTTP client is pointed at an in-process calendar service, so
the wrapper, the Pydantic wire models and the service are exercised together.
"""
import typing as t

import httpx
import pytest
from fastapi.testclient import TestClient

from calendar_server.models import Event
from calendar_server.shell import CalendarShell
from mcp_wrappers.calendar import mcp_service
from services.calendar_service.app import create_app


@pytest.fixture
def service(monkeypatch: pytest.MonkeyPatch) -> CalendarShell:
    """Route wrapper calls to a fresh in-process service and return its shell."""
    shell = CalendarShell()
    app = create_app(shell)
    monkeypatch.setattr(mcp_service, "_client", lambda: TestClient(app))
    return shell


def _failing_client(handler: t.Callable[[httpx.Request], httpx.Response]) -> t.Callable[[], httpx.Client]:
    return lambda: httpx.Client(base_url="http://calendar.test", transport=httpx.MockTransport(handler))


def test_list_calendar_events_returns_dataclasses(service: CalendarShell) -> None:
    events = mcp_service._list_calendar_events()

    assert events == [
        Event(id=1, date="2024-08-20", title="Meeting", category="Work"),
        Event(id=2, date="2024-08-21", title="Birthday Party", category="Personal"),
    ]


def test_add_calendar_event(service: CalendarShell) -> None:
    events = mcp_service._add_calendar_event("T", "2024-08-22", "Work")

    assert events[-1] == Event(id=3, date="2024-08-22", title="T", category="Work")
    assert service.store.get(3).title == "T"


def test_get_calendar_event_found_and_missing(service: CalendarShell) -> None:
    assert mcp_service._get_calendar_event(2) == Event(
        id=2, date="2024-08-21", title="Birthday Party", category="Personal",
    )
    assert mcp_service._get_calendar_event(77) is None


def test_edit_and_delete_calendar_event(service: CalendarShell) -> None:
    mcp_service._edit_calendar_event(1, title="Meeting v2", date="2024-08-20", category="Work")
    assert service.store.get(1).title == "Meeting v2"

    events = mcp_service._delete_calendar_event(1)
    assert [event.id for event in events] == [2]


def test_set_category_filter_returns_filtered_events(service: CalendarShell) -> None:
    events = mcp_service._set_category_filter("Personal")

    assert [event.title for event in events] == ["Birthday Party"]
    assert service.store.filter == "Personal"
    assert len(mcp_service._list_calendar_events(include_filtered=True)) == 2


def test_open_page_resolves_unknown_paths_to_list(service: CalendarShell) -> None:
    page = mcp_service._open_page("/nowhere")

    assert page["path"] == "/"
    assert page["view"]["kind"] == "list"


def test_open_page_missing_event(service: CalendarShell) -> None:
    page = mcp_service._open_page("/event/12")

    assert page["view"]["kind"] == "not_found"


def test_show_calendar_events(service: CalendarShell) -> None:
    assert "Total: 2 event(s)" in mcp_service._show_calendar_events()


def test_http_errors_become_runtime_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        mcp_service, "_client", _failing_client(lambda request: httpx.Response(500, text="boom")),
    )

    with pytest.raises(RuntimeError, match="HTTP error from calendar service: 500 boom"):
        mcp_service._list_calendar_events()


def test_timeouts_become_runtime_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    monkeypatch.setattr(mcp_service, "_client", _failing_client(handler))

    with pytest.raises(RuntimeError, match="List calendar events timed out"):
        mcp_service._list_calendar_events()


def test_connection_errors_become_runtime_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(mcp_service, "_client", _failing_client(handler))

    with pytest.raises(RuntimeError, match="Error calling calendar service: connection refused"):
        mcp_service._delete_calendar_event(1)


@pytest.mark.asyncio
async def test_wrapper_registers_calendar_tools() -> None:
    tools = await mcp_service.mcp.get_tools()

    assert {
        "list_calendar_events",
        "get_calendar_event",
        "add_calendar_event",
        "edit_calendar_event",
        "delete_calendar_event",
        "set_category_filter",
        "open_page",
        "show_calendar_events",
    } <= set(tools)
