"""
View models for the three calendar pages.

Each view receives the store explicitly and produces plain page data plus
callbacks (filter change, submit, save, delete). Rendering and layout belong
to whichever surface consumes these pages.
"""
from __future__ import annotations

import typing as t
from dataclasses import dataclass, field

from .formatting import event_label
from .models import DEFAULT_CATEGORIES, Event, EventDraft
from .router import detail_route
from .store import EventStore, Snapshot


@dataclass(frozen=True)
class EventLink:
    """A navigable list entry pointing at an event's detail view."""
    event_id: int
    label: str
    href: str


@dataclass(frozen=True)
class ListPage:
    """Data for the list view."""
    heading: str
    filter: str
    categories: tuple[str, ...]
    entries: tuple[EventLink, ...]
    kind: str = "list"


@dataclass(frozen=True)
class CreatePage:
    """Data for the new event form."""
    heading: str
    title: str
    date: str
    category: str
    kind: str = "create"


@dataclass(frozen=True)
class DetailPage:
    """Data for the detail/edit view of a single event."""
    heading: str
    event_id: int
    title: str
    date: str
    category: str
    kind: str = "detail"


@dataclass(frozen=True)
class NotFoundPage:
    """Shown when a detail view has no event to display."""
    heading: str
    event_id: int
    message: str
    kind: str = "not_found"


ViewPage = t.Union[ListPage, CreatePage, DetailPage, NotFoundPage]


class MissingFieldsError(ValueError):
    """Raised when a form is submitted with required fields left empty."""

    def __init__(self, fields: t.Sequence[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class CalendarView:
    """List of events under the active filter, with a category selector."""

    heading = "Tasks"

    def __init__(self, store: EventStore, categories: t.Sequence[str] = DEFAULT_CATEGORIES) -> None:
        self._store = store
        self.categories = tuple(categories)
        self._events = store.list()
        self._unsubscribe = store.subscribe(self._refresh)

    def _refresh(self, snapshot: Snapshot) -> None:
        self._events = snapshot

    @property
    def events(self) -> Snapshot:
        return self._events

    def change_filter(self, category: str) -> ListPage:
        """Apply a new category filter and return the re-derived page."""
        self._store.set_filter(category)
        return self.render()

    def render(self) -> ListPage:
        entries = []
        for event in self._events:
            entries.append(EventLink(
                event_id=event.id,
                label=event_label(event),
                href=detail_route(event.id).path,
            ))
        return ListPage(
            heading=self.heading,
            filter=self._store.filter,
            categories=self.categories,
            entries=tuple(entries),
        )

    def close(self) -> None:
        """Stop following store updates."""
        self._unsubscribe()


@dataclass
class AddEventForm:
    """Form collecting a new event's title, date and category."""
    store: EventStore
    title: str = ""
    date: str = ""
    category: str = ""
    heading: t.ClassVar[str] = "Add Event"
    required: t.ClassVar[tuple[str, ...]] = ("title", "date", "category")

    def missing_fields(self) -> list[str]:
        return [name for name in self.required if not getattr(self, name).strip()]

    def submit(self) -> Snapshot:
        """Add the drafted event to the store.

        :raises MissingFieldsError: If any required field is empty.
        :return: The store's filtered snapshot after the add.
        """
        missing = self.missing_fields()
        if missing:
            raise MissingFieldsError(missing)
        return self.store.add(EventDraft(title=self.title, date=self.date, category=self.category))

    def render(self) -> CreatePage:
        return CreatePage(heading=self.heading, title=self.title, date=self.date, category=self.category)


@dataclass
class EventDetails:
    """Detail/edit view for a single event.

    Fields are seeded from the store on construction. The lookup ignores the
    active filter so a direct link always reaches an existing event.
    """
    store: EventStore
    event_id: int
    title: str = field(default="", init=False)
    date: str = field(default="", init=False)
    category: str = field(default="", init=False)
    found: bool = field(default=False, init=False)
    heading: t.ClassVar[str] = "Event Details"
    not_found_message: t.ClassVar[str] = "Event not found"

    def __post_init__(self) -> None:
        event = self.store.get(self.event_id)
        if event is not None:
            self.title = event.title
            self.date = event.date
            self.category = event.category
            self.found = True

    def save(self) -> Snapshot:
        """Write the local fields back to the store."""
        if not self.found:
            return self.store.list()
        return self.store.edit(Event(id=self.event_id, date=self.date, title=self.title, category=self.category))

    def delete(self) -> Snapshot:
        """Remove this event from the store."""
        if not self.found:
            return self.store.list()
        snapshot = self.store.delete(self.event_id)
        self.found = False
        return snapshot

    def render(self) -> t.Union[DetailPage, NotFoundPage]:
        if not self.found:
            return NotFoundPage(heading=self.heading, event_id=self.event_id, message=self.not_found_message)
        return DetailPage(
            heading=self.heading,
            event_id=self.event_id,
            title=self.title,
            date=self.date,
            category=self.category,
        )
