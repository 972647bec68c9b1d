"""
Calendar shell: header, navigation and the active view.

The shell owns the single store instance and hands it to each view it
creates, so every page reads and writes the same collection.
"""
from __future__ import annotations

import typing as t
from dataclasses import dataclass

from .router import LIST_ROUTE, Route, ViewKind, resolve
from .store import SEQUENTIAL_IDS, EventStore
from .views import AddEventForm, CalendarView, EventDetails, ViewPage


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class Page:
    """A full page: header, navigation links, and the active view's data."""
    header: str
    nav: tuple[NavLink, ...]
    route: Route
    view: ViewPage


HEADER = "August"
NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(label="Calendar", href="/"),
    NavLink(label="Add Event", href="/add"),
)


class CalendarShell:
    """Composes the calendar pages around one shared event store."""

    def __init__(
            self,
            store: t.Optional[EventStore] = None,
            *,
            seed: bool = True,
            id_strategy: str = SEQUENTIAL_IDS,
    ) -> None:
        if store is None:
            store = EventStore.seeded(id_strategy) if seed else EventStore(id_strategy=id_strategy)
        self.store = store
        self.current: Route = LIST_ROUTE
        self._list_view = CalendarView(store)

    def list_view(self) -> CalendarView:
        return self._list_view

    def add_form(self) -> AddEventForm:
        return AddEventForm(self.store)

    def details(self, event_id: int) -> EventDetails:
        return EventDetails(self.store, event_id)

    def navigate(self, path: str) -> Page:
        """Resolve ``path`` and render the page it selects."""
        return self.render(resolve(path))

    def render(self, route: Route) -> Page:
        """Render the page for an already resolved route."""
        self.current = route
        if route.view is ViewKind.CREATE:
            view: ViewPage = self.add_form().render()
        elif route.view is ViewKind.DETAIL:
            view = self.details(route.event_id).render()
        else:
            view = self._list_view.render()
        return Page(header=HEADER, nav=NAV_LINKS, route=route, view=view)
