# -*- coding: utf-8 -*-
"""Tests for the in-process calendar MCP server and event formatting."""
import pytest

from calendar_server import server
from calendar_server.formatting import event_label, format_calendar_events
from calendar_server.models import Event
from calendar_server.shell import CalendarShell
from calendar_server.views import MissingFieldsError


@pytest.fixture(autouse=True)
def fresh_shell(monkeypatch: pytest.MonkeyPatch) -> CalendarShell:
    """Give every test its own seeded calendar."""
    shell = CalendarShell()
    monkeypatch.setattr(server, "shell", shell)
    return shell


def test_add_then_list() -> None:
    server._add_calendar_event("Dentist", "2024-08-23", "Personal")

    events = server._list_calendar_events()
    assert events[-1] == Event(id=3, date="2024-08-23", title="Dentist", category="Personal")


def test_add_requires_all_fields() -> None:
    with pytest.raises(MissingFieldsError):
        server._add_calendar_event("Dentist", "", "Personal")


def test_filter_and_unfiltered_listing() -> None:
    filtered = server._set_category_filter("Work")

    assert [event.id for event in filtered] == [1]
    assert [event.id for event in server._list_calendar_events(include_filtered=True)] == [1, 2]
    assert server._get_calendar_event(2).title == "Birthday Party"


def test_edit_and_delete() -> None:
    server._edit_calendar_event(2, "Birthday Dinner", "2024-08-21", "Personal")
    assert server._get_calendar_event(2).title == "Birthday Dinner"

    remaining = server._delete_calendar_event(2)
    assert [event.id for event in remaining] == [1]
    assert server._get_calendar_event(2) is None


def test_open_page_returns_plain_data() -> None:
    page = server._open_page("/event/1")

    assert page["header"] == "August"
    assert page["route"] == {"view": "detail", "event_id": 1}
    assert page["view"]["title"] == "Meeting"


def test_show_calendar_events_uses_active_filter() -> None:
    server._set_category_filter("Personal")

    formatted = server._show_calendar_events()

    assert "Birthday Party" in formatted
    assert "Meeting" not in formatted


def test_event_label() -> None:
    event = Event(id=1, date="2024-08-20", title="Meeting", category="Work")

    assert event_label(event) == "2024-08-20 - Meeting"


def test_format_calendar_events_empty() -> None:
    assert format_calendar_events([]) == "No calendar events found."


def test_format_calendar_events_truncates_long_titles() -> None:
    event = Event(id=4, date="2024-08-24", title="x" * 60, category="Work")

    formatted = format_calendar_events([event])

    assert "x" * 34 in formatted
    assert "x" * 35 not in formatted
    assert formatted.splitlines()[-1] == "Total: 1 event(s)"


@pytest.mark.asyncio
async def test_server_registers_calendar_tools() -> None:
    tools = await server.mcp.get_tools()

    assert {"add_calendar_event", "list_calendar_events", "open_page"} <= set(tools)
