"""Text rendering helpers for calendar events."""
from __future__ import annotations

import typing as t

from .models import Event


def event_label(event: Event) -> str:
    """Label shown for an event in the list view: '<date> - <title>'."""
    return f"{event.date} - {event.title}"


def _truncate(text: str, width: int) -> str:
    return text[:width - 1] if len(text) > width - 1 else text


def format_calendar_events(events: t.Sequence[Event]) -> str:
    """Format calendar events as a clean table.

    :param events: Events to display, in display order.
    :return: Formatted table string, or a message if there are no events.
    """
    if not events:
        return "No calendar events found."

    lines = []
    lines.append("CALENDAR EVENTS")
    lines.append("=" * 80)
    lines.append(f"{'#':<6} {'Title':<35} {'Date':<14} {'Category':<20}")
    lines.append("-" * 80)

    for event in events:
        category = _truncate(event.category, 20) or "—"
        lines.append(
            f"{event.id:<6} {_truncate(event.title, 35):<35} {event.date:<14} {category:<20}"
        )

    lines.append("=" * 80)
    lines.append(f"Total: {len(events)} event(s)")
    return "\n".join(lines)
