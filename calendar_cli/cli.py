# -*- coding: utf-8 -*-
"""Terminal client for the calendar service."""
import json
import typing as t

import click
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table

from calendar_server.formatting import event_label
from calendar_server.models import Event
from mcp_wrappers.calendar import mcp_service

console = Console()
err_console = Console(stderr=True)


def truncate_title(title: str, max_length: int = 45) -> str:
    """Truncate title to max_length characters, adding ellipsis if needed."""
    if len(title) <= max_length:
        return title
    return title[:max_length-3] + "..."


def create_events_table(events: t.Sequence[Event], category: str) -> Table:
    """Create a table of events under the given filter."""
    table = Table(title=f"📅 Tasks ({category})", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="white")
    table.add_column("Date", style="yellow")
    table.add_column("Category", style="green")

    for event in events:
        table.add_row(str(event.id), truncate_title(event.title), event.date, event.category)

    return table


def fail(message: str) -> t.NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--url", envvar="CALENDAR_SERVICE_URL", default=None, help="Base URL of the calendar service.")
def main(url: t.Optional[str]) -> None:
    """View, filter, add, edit and delete calendar events."""
    if url:
        mcp_service.CALENDAR_SERVICE_URL = url


@main.command("list")
@click.option("--category", "-c", default=None, help="Filter by category ('All' clears the filter).")
def list_events(category: t.Optional[str]) -> None:
    """List events under the active category filter."""
    try:
        if category is not None:
            events = mcp_service._set_category_filter(category)
        else:
            events = mcp_service._list_calendar_events()
    except (RuntimeError, ValueError) as e:
        fail(str(e))

    if not events:
        console.print("[dim]No events.[/dim]")
        return
    console.print(create_events_table(events, category or "current filter"))


@main.command("add")
@click.option("--title", required=True, help="Event title.")
@click.option("--date", required=True, help="Event date, e.g. 2024-08-22.")
@click.option("--category", required=True, help="Event category, e.g. Work.")
def add_event(title: str, date: str, category: str) -> None:
    """Add a new event."""
    try:
        events = mcp_service._add_calendar_event(title, date, category)
    except (RuntimeError, ValueError) as e:
        fail(str(e))
    console.print(f"[bold green]✓[/bold green] Added {title} ({len(events)} event(s) shown)")


@main.command("edit")
@click.argument("event_id", type=int)
@click.option("--title", default=None, help="New title.")
@click.option("--date", default=None, help="New date.")
@click.option("--category", default=None, help="New category.")
def edit_event(event_id: int, title: t.Optional[str], date: t.Optional[str], category: t.Optional[str]) -> None:
    """Edit an event; options left out keep their current values."""
    try:
        current = mcp_service._get_calendar_event(event_id)
        if current is None:
            fail(f"Event {event_id} not found.")
        mcp_service._edit_calendar_event(
            event_id,
            title=title if title is not None else current.title,
            date=date if date is not None else current.date,
            category=category if category is not None else current.category,
        )
        updated = mcp_service._get_calendar_event(event_id)
    except (RuntimeError, ValueError) as e:
        fail(str(e))
    console.print(f"[bold green]✓[/bold green] Saved {event_label(updated or current)}")


@main.command("delete")
@click.argument("event_id", type=int)
def delete_event(event_id: int) -> None:
    """Delete an event."""
    try:
        events = mcp_service._delete_calendar_event(event_id)
    except (RuntimeError, ValueError) as e:
        fail(str(e))
    console.print(f"[bold green]✓[/bold green] Deleted event {event_id} ({len(events)} event(s) shown)")


@main.command("show")
@click.argument("path", default="/")
def show_page(path: str) -> None:
    """Show the page for PATH: '/', '/add' or '/event/<id>'."""
    try:
        page = mcp_service._open_page(path)
    except (RuntimeError, ValueError) as e:
        fail(str(e))

    view = page["view"]
    nav = "  ".join(f"[link={link['href']}]{link['label']}[/link]" for link in page["nav"])
    console.print(Panel.fit(f"[bold]{page['header']}[/bold]\n{nav}", border_style="blue"))

    if view["kind"] == "list":
        console.print(f"[bold]{view['heading']}[/bold]  (filter: {view['filter']})")
        for entry in view["entries"]:
            console.print(f"  • {entry['label']}  [dim]{entry['href']}[/dim]")
    elif view["kind"] == "not_found":
        console.print(f"[yellow]{view['message']}[/yellow] (id {view['event_id']})")
    else:
        console.print(Panel(JSON(json.dumps(view, indent=2)), title=view["heading"], expand=False))


if __name__ == "__main__":
    main()
