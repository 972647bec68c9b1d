# -*- coding: utf-8 -*-
"""
In-process MCP server for the calendar.

Tools operate on a module-level shell, which owns the store for the lifetime
of the server process.
"""
from __future__ import annotations

import typing as t
from dataclasses import asdict

from fastmcp import FastMCP

from calendar_server.formatting import format_calendar_events
from calendar_server.models import Event
from calendar_server.shell import CalendarShell

mcp = FastMCP("CalendarServer")

# In-memory calendar shared by every tool call; contents are lost on restart
shell = CalendarShell()


def _list_calendar_events(include_filtered: bool = False) -> list[Event]:
    store = shell.store
    return list(store.all() if include_filtered else store.list())


def _get_calendar_event(event_id: int) -> t.Optional[Event]:
    return shell.store.get(event_id)


def _add_calendar_event(title: str, date: str, category: str) -> list[Event]:
    form = shell.add_form()
    form.title, form.date, form.category = title, date, category
    return list(form.submit())


def _edit_calendar_event(event_id: int, title: str, date: str, category: str) -> list[Event]:
    return list(shell.store.edit(Event(id=event_id, date=date, title=title, category=category)))


def _delete_calendar_event(event_id: int) -> list[Event]:
    return list(shell.store.delete(event_id))


def _set_category_filter(category: str) -> list[Event]:
    return list(shell.store.set_filter(category))


def _open_page(path: str) -> dict[str, t.Any]:
    return asdict(shell.navigate(path))


def _show_calendar_events() -> str:
    return format_calendar_events(shell.store.list())


@mcp.tool()
def list_calendar_events(include_filtered: bool = False) -> list[Event]:
    """Lists calendar events under the active category filter.

    :param include_filtered: Return every event, ignoring the filter.
    :return: Events in insertion order.
    """
    return _list_calendar_events(include_filtered)


@mcp.tool()
def get_calendar_event(event_id: int) -> t.Optional[Event]:
    """Looks up one event by id, regardless of the active filter.

    :param event_id: Identifier of the event.
    :return: The event, or None when no event has that id.
    """
    return _get_calendar_event(event_id)


@mcp.tool()
def add_calendar_event(title: str, date: str, category: str) -> list[Event]:
    """Adds a calendar event. All three fields are required.

    :param title: Title of the event.
    :param date: Date of the event, e.g. 2024-08-22.
    :param category: Category used for filtering, e.g. Work.
    :return: The filtered list of events after the add.
    """
    return _add_calendar_event(title, date, category)


@mcp.tool()
def edit_calendar_event(event_id: int, title: str, date: str, category: str) -> list[Event]:
    """Replaces every field of an existing event. Unknown ids are ignored."""
    return _edit_calendar_event(event_id, title, date, category)


@mcp.tool()
def delete_calendar_event(event_id: int) -> list[Event]:
    """Deletes an event by id. Unknown ids are ignored."""
    return _delete_calendar_event(event_id)


@mcp.tool()
def set_category_filter(category: str) -> list[Event]:
    """Sets the category filter; use 'All' to show every event."""
    return _set_category_filter(category)


@mcp.tool()
def open_page(path: str) -> dict[str, t.Any]:
    """Renders the page for a path: '/', '/add' or '/event/{id}'."""
    return _open_page(path)


@mcp.tool()
def show_calendar_events() -> str:
    """Displays the filtered calendar events as a formatted table."""
    return _show_calendar_events()


if __name__ == "__main__":
    mcp.run()
