"""
Data models for the calendar server events.

This module contains the dataclasses used to represent stored events and
the drafts a user fills in before an event is added to the store.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Represents a stored calendar event with id, date, title, and category."""
    id: int
    date: str
    title: str
    category: str


@dataclass(frozen=True)
class EventDraft:
    """Represents user-entered event fields not yet stored."""
    title: str
    date: str
    category: str

    def to_event(self, event_id: int) -> Event:
        """Build the stored event for this draft under the given id."""
        return Event(id=event_id, date=self.date, title=self.title, category=self.category)


# Seed events present when a new calendar is opened
INITIAL_EVENTS: tuple[Event, ...] = (
    Event(id=1, date="2024-08-20", title="Meeting", category="Work"),
    Event(id=2, date="2024-08-21", title="Birthday Party", category="Personal"),
)

ALL_CATEGORIES = "All"

# Categories offered by the list view's filter selector
DEFAULT_CATEGORIES: tuple[str, ...] = (ALL_CATEGORIES, "Work", "Personal")
