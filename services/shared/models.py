"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the dataclass models used by the
calendar core, ensuring consistent JSON serialization between the service and
its HTTP clients.
"""
from __future__ import annotations

import typing as t
from pydantic import BaseModel, Field


class Event(BaseModel):
    """A stored calendar event."""
    id: int
    date: str
    title: str
    category: str


class EventFields(BaseModel):
    """
    Editable event fields. Every field is required and must be non-empty,
    which is the only validation the calendar performs.
    """
    title: str = Field(min_length=1)
    date: str = Field(min_length=1)       # opaque, e.g. "2024-08-22"
    category: str = Field(min_length=1)


class SetFilterRequest(BaseModel):
    """Request model for changing the category filter."""
    category: str = Field(min_length=1)


class EventLink(BaseModel):
    event_id: int
    label: str  # "<date> - <title>"
    href: str


class ListPage(BaseModel):
    kind: t.Literal["list"] = "list"
    heading: str
    filter: str
    categories: list[str] = Field(default_factory=list)
    entries: list[EventLink] = Field(default_factory=list)


class CreatePage(BaseModel):
    kind: t.Literal["create"] = "create"
    heading: str
    title: str = ""
    date: str = ""
    category: str = ""


class DetailPage(BaseModel):
    kind: t.Literal["detail"] = "detail"
    heading: str
    event_id: int
    title: str
    date: str
    category: str


class NotFoundPage(BaseModel):
    kind: t.Literal["not_found"] = "not_found"
    heading: str
    event_id: int
    message: str


class NavLink(BaseModel):
    label: str
    href: str


class PageResponse(BaseModel):
    """A full calendar page: header, navigation, and the active view."""
    header: str
    nav: list[NavLink] = Field(default_factory=list)
    path: str
    view: t.Union[ListPage, CreatePage, DetailPage, NotFoundPage] = Field(discriminator="kind")


class ShowCalendarEventsResponse(BaseModel):
    """Response model for formatted calendar events display."""
    formatted_events: str
