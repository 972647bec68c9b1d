"""
View selection for the calendar pages.

Maps a navigational path to one of three views:

- ``/``            -> list of events
- ``/add``         -> new event form
- ``/event/{id}``  -> detail/edit view for one event, ``id`` a decimal integer

Paths that match none of these resolve to the list view, which is also the
initial view.
"""
from __future__ import annotations

import re
import typing as t
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit


class ViewKind(str, Enum):
    """The views a path can select."""
    LIST = "list"
    CREATE = "create"
    DETAIL = "detail"


@dataclass(frozen=True)
class Route:
    """A resolved path: the selected view and, for details, the event id."""
    view: ViewKind
    event_id: t.Optional[int] = None

    @property
    def path(self) -> str:
        return href_for(self)


LIST_ROUTE = Route(ViewKind.LIST)
CREATE_ROUTE = Route(ViewKind.CREATE)

_DETAIL_PATH = re.compile(r"^/event/(?P<event_id>[0-9]+)$")


def detail_route(event_id: int) -> Route:
    """Route for the detail view of ``event_id``."""
    return Route(ViewKind.DETAIL, event_id)


def resolve(path: str) -> Route:
    """Resolve a path (optionally with query string or fragment) to a route."""
    route_path = urlsplit(path or "/").path
    if len(route_path) > 1:
        route_path = route_path.rstrip("/")

    if route_path in ("", "/"):
        return LIST_ROUTE
    if route_path == "/add":
        return CREATE_ROUTE

    match = _DETAIL_PATH.match(route_path)
    if match:
        return detail_route(int(match.group("event_id")))

    return LIST_ROUTE


def href_for(route: Route) -> str:
    """Render the canonical path for a route."""
    if route.view is ViewKind.CREATE:
        return "/add"
    if route.view is ViewKind.DETAIL:
        return f"/event/{route.event_id}"
    return "/"
