# -*- coding: utf-8 -*-
"""
In-memory event store.

The store owns the canonical collection of events and the active category
filter. It is created once by the shell and passed explicitly to every view
that reads or writes events. Every mutation returns the new filtered snapshot
and notifies subscribers with the same value.
"""
from __future__ import annotations

import logging
import threading
import typing as t

from .models import ALL_CATEGORIES, INITIAL_EVENTS, Event, EventDraft

logger = logging.getLogger(__name__)

Snapshot = tuple[Event, ...]
Observer = t.Callable[[Snapshot], None]

SEQUENTIAL_IDS = "sequential"
COUNT_IDS = "count"
ID_STRATEGIES = (SEQUENTIAL_IDS, COUNT_IDS)


class EventStore:
    """Owner of the event collection and the active category filter.

    :param events: Initial events, kept in the given order.
    :param id_strategy: ``"sequential"`` assigns ids from a counter that never
        goes backwards. ``"count"`` assigns ``len(events) + 1``, which can hand
        out an id that is still in use after a deletion.
    """

    def __init__(
            self,
            events: t.Iterable[Event] = (),
            id_strategy: str = SEQUENTIAL_IDS,
    ) -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy '{id_strategy}', expected one of {', '.join(ID_STRATEGIES)}"
            )
        self._events: Snapshot = tuple(events)
        self._filter = ALL_CATEGORIES
        self._id_strategy = id_strategy
        self._last_id = max((event.id for event in self._events), default=0)
        self._observers: list[Observer] = []
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls, id_strategy: str = SEQUENTIAL_IDS) -> EventStore:
        """Create a store holding the default seed events."""
        return cls(INITIAL_EVENTS, id_strategy=id_strategy)

    @property
    def filter(self) -> str:
        return self._filter

    @property
    def id_strategy(self) -> str:
        return self._id_strategy

    def list(self) -> Snapshot:
        """Return events matching the active filter, in insertion order."""
        return self._filtered(self._events, self._filter)

    def all(self) -> Snapshot:
        """Return every event regardless of the active filter."""
        return self._events

    def get(self, event_id: int) -> t.Optional[Event]:
        """Look up an event by id in the unfiltered collection."""
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def add(self, draft: EventDraft) -> Snapshot:
        """Assign an id to the draft and append the resulting event."""
        with self._lock:
            event = draft.to_event(self._next_id())
            self._last_id = max(self._last_id, event.id)
            self._events = self._events + (event,)
        logger.debug("Added event %s (%s)", event.id, event.title)
        return self._publish()

    def edit(self, updated: Event) -> Snapshot:
        """Replace the event sharing ``updated.id``. Missing ids are ignored."""
        with self._lock:
            if self.get(updated.id) is None:
                logger.debug("Edit ignored, no event with id %s", updated.id)
                return self.list()
            self._events = tuple(
                updated if event.id == updated.id else event for event in self._events
            )
        logger.debug("Edited event %s", updated.id)
        return self._publish()

    def delete(self, event_id: int) -> Snapshot:
        """Remove the event with ``event_id``. Missing ids are ignored."""
        with self._lock:
            remaining = tuple(event for event in self._events if event.id != event_id)
            if len(remaining) == len(self._events):
                logger.debug("Delete ignored, no event with id %s", event_id)
                return self.list()
            self._events = remaining
        logger.debug("Deleted event %s", event_id)
        return self._publish()

    def set_filter(self, category: str) -> Snapshot:
        """Replace the active category filter. ``"All"`` disables filtering."""
        with self._lock:
            self._filter = category
        logger.debug("Filter set to %r", category)
        return self._publish()

    def subscribe(self, observer: Observer) -> t.Callable[[], None]:
        """Register an observer of filtered snapshots.

        Returns a callable that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _next_id(self) -> int:
        if self._id_strategy == COUNT_IDS:
            return len(self._events) + 1
        return self._last_id + 1

    def _publish(self) -> Snapshot:
        snapshot = self.list()
        for observer in list(self._observers):
            observer(snapshot)
        return snapshot

    @staticmethod
    def _filtered(events: Snapshot, category: str) -> Snapshot:
        if category == ALL_CATEGORIES:
            return events
        return tuple(event for event in events if event.category == category)

    def __len__(self) -> int:
        return len(self._events)
